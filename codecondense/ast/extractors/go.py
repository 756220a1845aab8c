"""
Go AST Extractor

Reduces a Go source file to its imports, top-level `var` specs and function
headers using tree-sitter-go.
"""

from typing import Iterator, Optional

from tree_sitter import Node, Tree

from codecondense.ast.extractors.base import LanguageExtractor, register_extractor
from codecondense.ast.extractors.go_types import (
    parameter_groups,
    render_type,
    result_groups,
)
from codecondense.ast.models import (
    DeclarationKind,
    ExtractionRequest,
    FunctionDecl,
    ImportDecl,
    Summarizer,
    VarSpec,
)
from codecondense.ast.signature import format_function_header

_NODE_KINDS = {
    "import_declaration": DeclarationKind.IMPORT,
    "var_declaration": DeclarationKind.VAR,
    "const_declaration": DeclarationKind.CONST,
    "type_declaration": DeclarationKind.TYPE,
    "function_declaration": DeclarationKind.FUNC,
    "method_declaration": DeclarationKind.METHOD,
}


class GoExtractor(LanguageExtractor):
    """Extracts declarations from Go source files."""

    @property
    def language(self) -> str:
        return "go"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".go",)

    def classify(self, node: Node) -> DeclarationKind:
        return _NODE_KINDS.get(node.type, DeclarationKind.OTHER)

    # =========================================================================
    # Imports
    # =========================================================================

    def extract_imports(self, tree: Tree, source: bytes) -> list[str]:
        """`import "fmt"` per imported path, single and grouped forms alike."""
        return [f"import {decl.path}" for decl in self.import_decls(tree, source)]

    def import_decls(self, tree: Tree, source: bytes) -> list[ImportDecl]:
        decls = []
        for node in self.declarations(tree, DeclarationKind.IMPORT):
            for spec in self._specs(node, "import_spec", "import_spec_list"):
                path = spec.child_by_field_name("path")
                if path is None:
                    continue
                alias = spec.child_by_field_name("name")
                decls.append(ImportDecl(
                    path=self.get_node_text(path, source),
                    alias=self.get_node_text(alias, source) if alias else None,
                ))
        return decls

    # =========================================================================
    # Globals
    # =========================================================================

    def extract_globals(self, tree: Tree, source: bytes) -> list[str]:
        """One `var a b T` line per var spec; constants and types are ignored."""
        lines = []
        for spec in self.var_specs(tree, source):
            parts = ["var", *spec.names]
            if spec.type_text:
                parts.append(spec.type_text)
            lines.append(" ".join(parts))
        return lines

    def var_specs(self, tree: Tree, source: bytes) -> list[VarSpec]:
        specs = []
        for node in self.declarations(tree, DeclarationKind.VAR):
            for spec in self._specs(node, "var_spec", "var_spec_list"):
                names = tuple(
                    self.get_node_text(name, source)
                    for name in spec.children_by_field_name("name")
                )
                specs.append(VarSpec(
                    names=names,
                    type_text=render_type(spec.child_by_field_name("type"), source),
                ))
        return specs

    def _specs(self, node: Node, spec_type: str, list_type: str) -> Iterator[Node]:
        """Specs of a declaration, whether written bare or in a `( ... )` group."""
        for child in node.named_children:
            if child.type == spec_type:
                yield child
            elif child.type == list_type:
                yield from self.find_children(child, spec_type)

    # =========================================================================
    # Functions
    # =========================================================================

    def extract_functions(
        self,
        tree: Tree,
        source: bytes,
        request: ExtractionRequest,
        summarizer: Optional[Summarizer] = None,
        failures: Optional[list[str]] = None,
    ) -> list[str]:
        """Function headers with an empty body, optionally holding a generated comment."""
        blocks = []
        for decl in self.function_decls(tree, source, request.include_methods):
            header = format_function_header(decl)
            lines = [header + " {"]

            if request.generate_comments and summarizer is not None:
                comment = self.summarize(summarizer, header, decl.name, failures)
                if comment:
                    lines.extend(f"// {line.strip()}" for line in comment.splitlines() if line.strip())

            lines.append("}")
            blocks.append("\n".join(lines))
        return blocks

    def function_decls(
        self, tree: Tree, source: bytes, include_methods: bool = True
    ) -> list[FunctionDecl]:
        kinds = [DeclarationKind.FUNC]
        if include_methods:
            kinds.append(DeclarationKind.METHOD)

        decls = []
        for node in self.declarations(tree, *kinds):
            decl = self._function_decl(node, source)
            if decl:
                decls.append(decl)
        return decls

    def _function_decl(self, node: Node, source: bytes) -> Optional[FunctionDecl]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        receiver = None
        if node.type == "method_declaration":
            groups = parameter_groups(node.child_by_field_name("receiver"), source)
            receiver = groups[0] if groups else None

        return FunctionDecl(
            name=self.get_node_text(name_node, source),
            params=parameter_groups(node.child_by_field_name("parameters"), source),
            results=result_groups(node.child_by_field_name("result"), source),
            receiver=receiver,
            type_params=parameter_groups(node.child_by_field_name("type_parameters"), source),
        )


# Register the extractor
register_extractor(GoExtractor())
