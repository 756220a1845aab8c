"""
Tests for Signature Formatting

Pure formatting of parameter/result groups into header text.
"""

from codecondense.ast.models import FieldGroup, FunctionDecl
from codecondense.ast.signature import (
    format_function_header,
    format_group,
    format_params,
    format_results,
    format_signature,
    format_type_params,
)


class TestFormatParams:
    """Test parameter list rendering."""

    def test_empty(self):
        assert format_params(()) == "()"

    def test_none(self):
        assert format_params(None) == "()"

    def test_shared_type_group(self):
        assert format_params((FieldGroup(("a", "b"), "int"),)) == "(a, b int)"

    def test_multiple_groups(self):
        params = (FieldGroup(("a", "b"), "int"), FieldGroup(("s",), "string"))
        assert format_params(params) == "(a, b int, s string)"

    def test_unnamed_parameters_render_type_only(self):
        params = (FieldGroup((), "int"), FieldGroup((), "*http.Request"))
        assert format_params(params) == "(int, *http.Request)"

    def test_group_without_type(self):
        assert format_group(FieldGroup(("x",), "")) == "x"


class TestFormatResults:
    """Test result list rendering."""

    def test_no_results(self):
        assert format_results(None) == ""
        assert format_results(()) == ""

    def test_single_unnamed(self):
        assert format_results((FieldGroup((), "int"),)) == " (int)"

    def test_multiple_unnamed(self):
        results = (FieldGroup((), "int"), FieldGroup((), "error"))
        assert format_results(results) == " (int, error)"

    def test_named_results_render_type_once_per_group(self):
        results = (FieldGroup(("q", "r"), "int"), FieldGroup(("err",), "error"))
        assert format_results(results) == " (int, error)"


class TestFormatSignature:
    """Test combined signatures and headers."""

    def test_add(self):
        params = (FieldGroup(("a", "b"), "int"),)
        results = (FieldGroup((), "int"),)
        assert format_signature(params, results) == "(a, b int) (int)"

    def test_no_params_no_results(self):
        assert format_signature((), None) == "()"

    def test_type_params(self):
        groups = (FieldGroup(("K",), "comparable"), FieldGroup(("V",), "any"))
        assert format_type_params(groups) == "[K comparable, V any]"
        assert format_type_params(()) == ""

    def test_function_header(self):
        decl = FunctionDecl(
            name="Add",
            params=(FieldGroup(("a", "b"), "int"),),
            results=(FieldGroup((), "int"),),
        )
        assert format_function_header(decl) == "func Add(a, b int) (int)"
        assert not decl.is_method

    def test_method_header(self):
        decl = FunctionDecl(
            name="Start",
            receiver=FieldGroup(("s",), "*Server"),
            results=(FieldGroup((), "error"),),
        )
        assert format_function_header(decl) == "func (s *Server) Start() (error)"
        assert decl.is_method

    def test_generic_header(self):
        decl = FunctionDecl(
            name="Keys",
            type_params=(FieldGroup(("K",), "comparable"), FieldGroup(("V",), "any")),
            params=(FieldGroup(("m",), "map[K]V"),),
            results=(FieldGroup((), "[]K"),),
        )
        assert format_function_header(decl) == "func Keys[K comparable, V any](m map[K]V) ([]K)"
