"""
Tree-sitter Parser Wrapper

Handles tree-sitter parsing for every language an extractor is registered for.
A tree containing ERROR or MISSING nodes is treated as a parse failure.
"""

import threading
from typing import Optional

import tree_sitter_go
import tree_sitter_python
from tree_sitter import Language, Node, Parser, Tree

from codecondense.configs.logging import get_logger
from codecondense.exceptions import ExtractionError, ParseError

logger = get_logger("ast.parser")


# Supported languages and their tree-sitter modules
LANGUAGE_MODULES = {
    "go": tree_sitter_go,
    "python": tree_sitter_python,
}


def find_first_error(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node under `node`."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = find_first_error(child)
        if found is not None:
            return found
    return None


def describe_error(node: Node) -> str:
    """Human-readable diagnostic for an ERROR/MISSING node."""
    line, column = node.start_point[0] + 1, node.start_point[1] + 1
    if node.is_missing:
        return f"missing {node.type!r} at line {line}, column {column}"
    return f"syntax error at line {line}, column {column}"


class ASTParser:
    """
    Tree-sitter based parser for multiple languages.

    Language objects are shared; Parser objects are created lazily per thread,
    so one ASTParser can serve a pool of extraction workers.
    """

    def __init__(self):
        self._languages: dict[str, Language] = {}
        self._languages_lock = threading.Lock()
        self._local = threading.local()

    def _get_language(self, lang_name: str) -> Language:
        """Get or create Language object for a language."""
        with self._languages_lock:
            language = self._languages.get(lang_name)
            if language is not None:
                return language

            module = LANGUAGE_MODULES.get(lang_name)
            if module is None:
                raise ExtractionError(f"No tree-sitter grammar for language: {lang_name}")

            language = Language(module.language())
            self._languages[lang_name] = language
            return language

    def _get_parser(self, lang_name: str) -> Parser:
        """Get or create this thread's Parser for a language."""
        parsers = getattr(self._local, "parsers", None)
        if parsers is None:
            parsers = self._local.parsers = {}

        parser = parsers.get(lang_name)
        if parser is None:
            parser = Parser(self._get_language(lang_name))
            parsers[lang_name] = parser
        return parser

    def parse(self, source: bytes, language: str, file_path: str = "<source>") -> Tree:
        """
        Parse source code into a syntax tree.

        Args:
            source: Source code as UTF-8 bytes
            language: Language name (go, python)
            file_path: Path used in error messages

        Returns:
            Tree-sitter Tree with no error nodes

        Raises:
            ParseError: If the source is not valid for the language
        """
        tree = self._get_parser(language).parse(source)

        if tree.root_node.has_error:
            error_node = find_first_error(tree.root_node)
            diagnostic = describe_error(error_node) if error_node else "syntax error"
            logger.debug(f"Parse failed for {file_path}: {diagnostic}")
            raise ParseError(file_path, diagnostic, language=language)

        return tree


# Global parser instance (lazy singleton)
_parser: Optional[ASTParser] = None


def get_parser() -> ASTParser:
    """Get the global ASTParser instance."""
    global _parser
    if _parser is None:
        _parser = ASTParser()
    return _parser
