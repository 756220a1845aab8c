"""
Base Extractor Interface

Abstract base class that all language extractors must implement, plus the
extension-keyed registry the extraction engine dispatches through.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from tree_sitter import Node, Tree

from codecondense.ast.models import DeclarationKind, ExtractionRequest, Summarizer
from codecondense.configs.logging import get_logger
from codecondense.exceptions import SummaryServiceError

logger = get_logger("ast.extractors")


class LanguageExtractor(ABC):
    """
    Abstract base class for language-specific declaration extractors.

    Each language implements the three classifiers. A classifier makes one
    linear pass over the top-level nodes of an already-parsed tree and returns
    one rendered line (or block) per matching declaration, in source order.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language name (e.g., 'go', 'python')."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> tuple[str, ...]:
        """File extensions (lower-case, with dot) handled by this extractor."""
        pass

    @abstractmethod
    def classify(self, node: Node) -> DeclarationKind:
        """
        Map a top-level node to its declaration kind.

        Must be total: every node type gets an explicit kind, with
        DeclarationKind.OTHER for nodes that declare nothing.
        """
        pass

    @abstractmethod
    def extract_imports(self, tree: Tree, source: bytes) -> list[str]:
        """
        Extract import declarations.

        Args:
            tree: Parsed syntax tree
            source: Original source bytes

        Returns:
            One rendered line per imported path
        """
        pass

    @abstractmethod
    def extract_globals(self, tree: Tree, source: bytes) -> list[str]:
        """
        Extract top-level variable declarations.

        Args:
            tree: Parsed syntax tree
            source: Original source bytes

        Returns:
            One rendered line per variable spec
        """
        pass

    @abstractmethod
    def extract_functions(
        self,
        tree: Tree,
        source: bytes,
        request: ExtractionRequest,
        summarizer: Optional[Summarizer] = None,
        failures: Optional[list[str]] = None,
    ) -> list[str]:
        """
        Extract function headers with a placeholder body.

        The summarizer is only consulted when request.generate_comments is set.

        Args:
            tree: Parsed syntax tree
            source: Original source bytes
            request: Extraction options
            summarizer: Optional comment generator
            failures: Collects names of functions whose comment could not be generated

        Returns:
            One multi-line block per function
        """
        pass

    # Helper methods for tree traversal

    def declarations(self, tree: Tree, *kinds: DeclarationKind) -> Iterator[Node]:
        """Top-level nodes whose kind is one of `kinds`, in source order."""
        for node in tree.root_node.children:
            if self.classify(node) in kinds:
                yield node

    def get_node_text(self, node: Node, source: bytes) -> str:
        """Extract the text content of an AST node."""
        return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def get_normalized_text(self, node: Node, source: bytes) -> str:
        """Node text with every run of whitespace collapsed to one space."""
        return " ".join(self.get_node_text(node, source).split())

    def find_children(self, node: Node, type_name: str) -> list[Node]:
        """Find all direct children of a specific type."""
        return [child for child in node.children if child.type == type_name]

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def summarize(
        self,
        summarizer: Summarizer,
        signature: str,
        function_name: str,
        failures: Optional[list[str]] = None,
    ) -> Optional[str]:
        """
        Ask the summarizer for a comment, degrading to None on failure.

        Returns:
            Comment text, or None when the summary service failed
        """
        try:
            comment = summarizer(signature, self.language)
        except SummaryServiceError as e:
            logger.warning(f"Error generating comment for function {function_name}: {e}")
            if failures is not None:
                failures.append(function_name)
            return None
        return comment.strip() or None


# Registry of extractors by file extension
_extractors: dict[str, LanguageExtractor] = {}


def register_extractor(extractor: LanguageExtractor) -> None:
    """Register an extractor for every extension it handles."""
    for extension in extractor.extensions:
        _extractors[extension.lower()] = extractor


def get_extractor_for_extension(extension: str) -> Optional[LanguageExtractor]:
    """
    Get the extractor for a file extension.

    Args:
        extension: File extension including the dot (e.g. '.go')

    Returns:
        LanguageExtractor or None if unsupported
    """
    return _extractors.get(extension.lower())
