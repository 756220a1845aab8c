"""
Python AST Extractor

Extracts imports, module-level assignments and top-level function headers
from Python source files using tree-sitter.
"""

from typing import Optional

from tree_sitter import Node, Tree

from codecondense.ast.extractors.base import LanguageExtractor, register_extractor
from codecondense.ast.models import DeclarationKind, ExtractionRequest, Summarizer

_IMPORT_TYPES = {"import_statement", "import_from_statement", "future_import_statement"}


class PythonExtractor(LanguageExtractor):
    """Extracts declarations from Python source files."""

    @property
    def language(self) -> str:
        return "python"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".py", ".pyw")

    def classify(self, node: Node) -> DeclarationKind:
        if node.type in _IMPORT_TYPES:
            return DeclarationKind.IMPORT
        if node.type == "expression_statement" and self.find_child(node, "assignment"):
            return DeclarationKind.VAR
        if node.type == "function_definition":
            return DeclarationKind.FUNC
        if node.type == "decorated_definition":
            inner = node.child_by_field_name("definition")
            if inner is not None and inner.type == "function_definition":
                return DeclarationKind.FUNC
            return DeclarationKind.TYPE
        if node.type == "class_definition":
            return DeclarationKind.TYPE
        return DeclarationKind.OTHER

    def extract_imports(self, tree: Tree, source: bytes) -> list[str]:
        """Each import statement, whitespace-normalized onto one line."""
        return [
            self.get_normalized_text(node, source)
            for node in self.declarations(tree, DeclarationKind.IMPORT)
        ]

    def extract_globals(self, tree: Tree, source: bytes) -> list[str]:
        """
        Module-level assignments.

        Annotated targets keep their annotation (`TIMEOUT: int`); plain ones
        render the target only (`a, b`). Values are dropped.
        """
        lines = []
        for node in self.declarations(tree, DeclarationKind.VAR):
            assignment = self.find_child(node, "assignment")
            left = assignment.child_by_field_name("left")
            if left is None:
                continue
            target = self.get_normalized_text(left, source)
            type_node = assignment.child_by_field_name("type")
            if type_node is not None:
                target = f"{target}: {self.get_normalized_text(type_node, source)}"
            lines.append(target)
        return lines

    def extract_functions(
        self,
        tree: Tree,
        source: bytes,
        request: ExtractionRequest,
        summarizer: Optional[Summarizer] = None,
        failures: Optional[list[str]] = None,
    ) -> list[str]:
        """Top-level (not class) function headers with an ellipsis body."""
        blocks = []
        for node in self.declarations(tree, DeclarationKind.FUNC):
            func_node = node
            if node.type == "decorated_definition":
                func_node = node.child_by_field_name("definition")

            name_node = func_node.child_by_field_name("name")
            if name_node is None:
                continue
            name = self.get_node_text(name_node, source)
            header = self._function_header(func_node, name, source)
            lines = [header + ":"]

            if request.generate_comments and summarizer is not None:
                comment = self.summarize(summarizer, header, name, failures)
                if comment:
                    lines.extend(f"    # {line.strip()}" for line in comment.splitlines() if line.strip())

            lines.append("    ...")
            blocks.append("\n".join(lines))
        return blocks

    def _function_header(self, node: Node, name: str, source: bytes) -> str:
        """`async def name(params) -> ret` without the trailing colon."""
        params_node = node.child_by_field_name("parameters")
        params = self.get_normalized_text(params_node, source) if params_node else "()"

        header = f"def {name}{params}"
        if self.find_child(node, "async"):
            header = "async " + header

        return_type = node.child_by_field_name("return_type")
        if return_type is not None:
            header += f" -> {self.get_normalized_text(return_type, source)}"
        return header


# Register the extractor
register_extractor(PythonExtractor())
