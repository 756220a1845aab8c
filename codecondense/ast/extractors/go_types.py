"""
Go Type Rendering

Re-serializes Go type expressions from a tree-sitter-go syntax tree into
canonical source text (`[]*Node`, `map[string][]int`, `func(int) error`).
Whitespace between tokens is normalized; everything else is kept as written.
Node kinds without a dedicated renderer fall back to their source text with
whitespace collapsed, so rendering never raises.
"""

from typing import Callable, Optional

from tree_sitter import Node

from codecondense.ast.models import FieldGroup

_IDENTIFIER_TYPES = {
    "type_identifier",
    "identifier",
    "field_identifier",
    "package_identifier",
}

_PARAMETER_TYPES = {"parameter_declaration", "variadic_parameter_declaration"}


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def fallback_text(node: Node, source: bytes) -> str:
    """Generic unparse: the node's own text, whitespace runs collapsed."""
    return " ".join(node_text(node, source).split())


def _named(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _has_token(node: Node, token: str) -> bool:
    return any(not child.is_named and child.type == token for child in node.children)


# =============================================================================
# Individual renderers
# =============================================================================


def _render_pointer(node: Node, source: bytes) -> str:
    inner = _named(node)
    return "*" + render_type(inner[-1], source) if inner else fallback_text(node, source)


def _render_slice(node: Node, source: bytes) -> str:
    return "[]" + render_type(node.child_by_field_name("element"), source)


def _render_array(node: Node, source: bytes) -> str:
    length = node.child_by_field_name("length")
    element = node.child_by_field_name("element")
    return f"[{fallback_text(length, source)}]{render_type(element, source)}"


def _render_implicit_array(node: Node, source: bytes) -> str:
    return "[...]" + render_type(node.child_by_field_name("element"), source)


def _render_map(node: Node, source: bytes) -> str:
    key = render_type(node.child_by_field_name("key"), source)
    value = render_type(node.child_by_field_name("value"), source)
    return f"map[{key}]{value}"


def _render_qualified(node: Node, source: bytes) -> str:
    package = node.child_by_field_name("package")
    name = node.child_by_field_name("name")
    if package is None or name is None:
        return fallback_text(node, source)
    return f"{node_text(package, source)}.{node_text(name, source)}"


def _render_generic(node: Node, source: bytes) -> str:
    base = render_type(node.child_by_field_name("type"), source)
    arguments = node.child_by_field_name("type_arguments")
    if arguments is None:
        return base
    rendered = [render_type(argument, source) for argument in _named(arguments)]
    return f"{base}[{', '.join(rendered)}]"


def _render_union(node: Node, source: bytes) -> str:
    # type_elem / type_constraint: one or more types separated by '|'
    return " | ".join(render_type(member, source) for member in _named(node))


def _render_negated(node: Node, source: bytes) -> str:
    inner = _named(node)
    return "~" + render_type(inner[-1], source) if inner else fallback_text(node, source)


def _render_parenthesized(node: Node, source: bytes) -> str:
    inner = _named(node)
    return f"({render_type(inner[0], source)})" if inner else fallback_text(node, source)


def _render_channel(node: Node, source: bytes) -> str:
    value = render_type(node.child_by_field_name("value"), source)
    first = node.children[0] if node.children else None
    if first is not None and first.type == "<-":
        return f"<-chan {value}"
    if _has_token(node, "<-"):
        return f"chan<- {value}"
    return f"chan {value}"


def _render_function(node: Node, source: bytes) -> str:
    params = render_parameter_list(node.child_by_field_name("parameters"), source)
    return "func" + params + render_result(node.child_by_field_name("result"), source)


def _render_struct(node: Node, source: bytes) -> str:
    field_list = node.child_by_field_name("body") or _first_of(node, "field_declaration_list")
    fields = []
    if field_list is not None:
        fields = [
            _render_field_declaration(field, source)
            for field in _named(field_list)
            if field.type == "field_declaration"
        ]
    if not fields:
        return "struct{}"
    return "struct{ " + "; ".join(fields) + " }"


def _render_field_declaration(node: Node, source: bytes) -> str:
    names = [node_text(name, source) for name in node.children_by_field_name("name")]
    type_node = node.child_by_field_name("type")
    type_text = render_type(type_node, source) if type_node is not None else ""

    if names:
        rendered = f"{', '.join(names)} {type_text}"
    else:
        # Embedded field, optionally by pointer
        rendered = ("*" if _has_token(node, "*") else "") + type_text

    tag = node.child_by_field_name("tag")
    if tag is not None:
        rendered += " " + node_text(tag, source)
    return rendered


def _render_interface(node: Node, source: bytes) -> str:
    elements = []
    for element in _named(node):
        if element.type in ("method_elem", "method_spec"):
            name = element.child_by_field_name("name")
            params = render_parameter_list(element.child_by_field_name("parameters"), source)
            result = render_result(element.child_by_field_name("result"), source)
            elements.append(f"{node_text(name, source)}{params}{result}")
        elif element.type in ("type_elem", "constraint_elem"):
            elements.append(_render_union(element, source))
        else:
            elements.append(fallback_text(element, source))
    if not elements:
        return "interface{}"
    return "interface{ " + "; ".join(elements) + " }"


def _first_of(node: Node, type_name: str) -> Optional[Node]:
    for child in node.children:
        if child.type == type_name:
            return child
    return None


_RENDERERS: dict[str, Callable[[Node, bytes], str]] = {
    "pointer_type": _render_pointer,
    "slice_type": _render_slice,
    "array_type": _render_array,
    "implicit_length_array_type": _render_implicit_array,
    "map_type": _render_map,
    "qualified_type": _render_qualified,
    "generic_type": _render_generic,
    "type_elem": _render_union,
    "type_constraint": _render_union,
    "negated_type": _render_negated,
    "parenthesized_type": _render_parenthesized,
    "channel_type": _render_channel,
    "function_type": _render_function,
    "struct_type": _render_struct,
    "interface_type": _render_interface,
}


# =============================================================================
# Public API
# =============================================================================


def render_type(node: Optional[Node], source: bytes) -> str:
    """
    Render a Go type expression node to canonical text.

    Args:
        node: Type node from a tree-sitter-go tree (None renders as "")
        source: Source bytes the tree was parsed from

    Returns:
        Canonical type text
    """
    if node is None:
        return ""
    if node.type in _IDENTIFIER_TYPES:
        return node_text(node, source)
    renderer = _RENDERERS.get(node.type)
    if renderer is None:
        return fallback_text(node, source)
    return renderer(node, source)


def parameter_groups(param_list: Optional[Node], source: bytes) -> tuple[FieldGroup, ...]:
    """
    Split a parameter_list (or type_parameter_list) into name/type groups.

    `(a, b int, opts ...Option)` -> (FieldGroup(("a", "b"), "int"), FieldGroup(("opts",), "...Option"))
    """
    if param_list is None:
        return ()

    groups = []
    for declaration in _named(param_list):
        if declaration.type not in _PARAMETER_TYPES and declaration.type != "type_parameter_declaration":
            continue
        names = tuple(node_text(name, source) for name in declaration.children_by_field_name("name"))
        type_text = render_type(declaration.child_by_field_name("type"), source)
        if declaration.type == "variadic_parameter_declaration":
            type_text = "..." + type_text
        groups.append(FieldGroup(names=names, type_text=type_text))
    return tuple(groups)


def result_groups(result: Optional[Node], source: bytes) -> Optional[tuple[FieldGroup, ...]]:
    """
    Result groups of a function: None without a result, one unnamed group
    for a bare type, or the groups of a parenthesized result list.
    """
    if result is None:
        return None
    if result.type == "parameter_list":
        return parameter_groups(result, source)
    return (FieldGroup(names=(), type_text=render_type(result, source)),)


def render_parameter_list(param_list: Optional[Node], source: bytes) -> str:
    """Render a parameter list keeping parameter names: `(a, b int, s string)`."""
    groups = parameter_groups(param_list, source)
    rendered = []
    for group in groups:
        if group.names:
            rendered.append(f"{', '.join(group.names)} {group.type_text}")
        else:
            rendered.append(group.type_text)
    return "(" + ", ".join(rendered) + ")"


def render_result(result: Optional[Node], source: bytes) -> str:
    """Render a function-type result with a leading space, keeping names."""
    if result is None:
        return ""
    if result.type == "parameter_list":
        return " " + render_parameter_list(result, source)
    return " " + render_type(result, source)
