"""
Tests for Python Declaration Extraction
"""

import pytest

from codecondense.ast.engine import extract_file, extract_source
from codecondense.ast.extractors import PythonExtractor, get_extractor_for_extension
from codecondense.ast.models import DeclarationKind, ExtractionRequest
from codecondense.ast.parser import get_parser
from codecondense.exceptions import ParseError

FUNCS_ONLY = ExtractionRequest(extract_imports=False, extract_globals=False, extract_functions=True)


class TestPythonDispatch:
    """Test registration of the Python backend."""

    def test_extensions(self):
        assert isinstance(get_extractor_for_extension(".py"), PythonExtractor)
        assert isinstance(get_extractor_for_extension(".pyw"), PythonExtractor)

    def test_classification(self):
        source = b'"""Doc."""\nimport os\nx = 1\ndef f():\n    pass\nclass C:\n    pass\n'
        tree = get_parser().parse(source, "python")
        extractor = PythonExtractor()
        kinds = [extractor.classify(node) for node in tree.root_node.children]
        assert kinds == [
            DeclarationKind.OTHER,
            DeclarationKind.IMPORT,
            DeclarationKind.VAR,
            DeclarationKind.FUNC,
            DeclarationKind.TYPE,
        ]


class TestPythonExtraction:
    """Test Python imports, globals and function headers."""

    def test_sample_file(self, sample_python_file):
        result = extract_file(sample_python_file, ExtractionRequest())
        assert result.language == "python"
        assert result.text == (
            "import os\n"
            "from pathlib import Path\n"
            "TIMEOUT: int\n"
            "registry\n"
            "def hello_world():\n"
            "    ...\n"
            "async def fetch(url: str, retries: int = 3) -> bytes:\n"
            "    ...\n"
        )

    def test_methods_are_not_extracted(self, sample_python_file):
        result = extract_file(sample_python_file, FUNCS_ONLY)
        assert "add" not in result.text

    def test_multiline_import_normalized(self):
        source = "from typing import (\n    Optional,\n    Union,\n)\n"
        request = ExtractionRequest(extract_globals=False, extract_functions=False)
        assert extract_source(source, ".py", request).text == "from typing import ( Optional, Union, )\n"

    def test_tuple_assignment_target(self):
        request = ExtractionRequest(extract_imports=False, extract_functions=False)
        assert extract_source("a, b = 1, 2\n", ".py", request).text == "a, b\n"

    def test_comment_lines(self, stub_summarizer):
        request = ExtractionRequest(generate_comments=True)
        result = extract_source("def f(x):\n    return x\n", ".py", request, summarizer=stub_summarizer)
        assert result.text == "def f(x):\n    # Does something useful.\n    ...\n"
        assert stub_summarizer.calls == [("def f(x)", "python")]

    def test_parse_error(self):
        with pytest.raises(ParseError):
            extract_source("def broken(:\n", ".py", ExtractionRequest(), file_path="broken.py")
