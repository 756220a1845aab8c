"""
Signature Formatting

Turns parameter and result groups into the canonical `(params) (results)`
text used in extracted function headers. Every function here is pure and
total: empty or missing groups never raise.
"""

from typing import Optional, Sequence

from codecondense.ast.models import FieldGroup, FunctionDecl


def format_group(group: FieldGroup) -> str:
    """`a, b int` for named groups, the bare type for unnamed ones."""
    if not group.names:
        return group.type_text
    names = ", ".join(group.names)
    if not group.type_text:
        return names
    return f"{names} {group.type_text}"


def format_params(params: Optional[Sequence[FieldGroup]]) -> str:
    """Render a parameter list, always parenthesized: `()`, `(a, b int, s string)`."""
    if not params:
        return "()"
    return "(" + ", ".join(format_group(group) for group in params) + ")"


def format_results(results: Optional[Sequence[FieldGroup]]) -> str:
    """
    Render a result list with a leading space: ` (int)`, ` (int, error)`.

    No results renders as the empty string. Named results render their type
    only, once per group, so `(q, r int, err error)` becomes ` (int, error)`.
    """
    if not results:
        return ""
    return " (" + ", ".join(group.type_text for group in results) + ")"


def format_type_params(type_params: Optional[Sequence[FieldGroup]]) -> str:
    """Render generic type parameters: `[K comparable, V any]`, or nothing."""
    if not type_params:
        return ""
    return "[" + ", ".join(format_group(group) for group in type_params) + "]"


def format_signature(
    params: Optional[Sequence[FieldGroup]],
    results: Optional[Sequence[FieldGroup]],
) -> str:
    """`Add(a, b int) int` -> `(a, b int) (int)`; `F()` -> `()`."""
    return format_params(params) + format_results(results)


def format_function_header(decl: FunctionDecl) -> str:
    """
    Full Go-style header without the trailing brace.

    e.g. `func (s *Server) Start(ctx context.Context) (error)`
    """
    receiver = f"({format_group(decl.receiver)}) " if decl.receiver else ""
    return (
        f"func {receiver}{decl.name}"
        f"{format_type_params(decl.type_params)}"
        f"{format_signature(decl.params, decl.results)}"
    )
