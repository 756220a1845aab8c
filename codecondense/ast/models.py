"""
Data Models for Declaration Extraction

Structured representations of the top-level declarations of a source file,
plus the request/result types exchanged with the extraction engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional


class DeclarationKind(Enum):
    """Closed set of top-level declaration kinds a classifier can see."""

    IMPORT = "import"
    VAR = "var"
    CONST = "const"
    TYPE = "type"
    FUNC = "func"
    METHOD = "method"
    OTHER = "other"  # package clause, comments, anything without a declaration


@dataclass(frozen=True)
class FieldGroup:
    """Names sharing one declared type, e.g. `a, b int` or an unnamed `error`."""

    names: tuple[str, ...]
    type_text: str


@dataclass(frozen=True)
class ImportDecl:
    """One imported path. `path` keeps the literal as written (quotes included)."""

    path: str
    alias: Optional[str] = None


@dataclass(frozen=True)
class VarSpec:
    """One spec of a top-level `var` declaration."""

    names: tuple[str, ...]
    type_text: str = ""  # Empty when the type is inferred from the value


@dataclass(frozen=True)
class FunctionDecl:
    """A function or method header. Bodies are never kept."""

    name: str
    params: tuple[FieldGroup, ...] = ()
    results: Optional[tuple[FieldGroup, ...]] = None  # None = no result list at all
    receiver: Optional[FieldGroup] = None
    type_params: tuple[FieldGroup, ...] = ()

    @property
    def is_method(self) -> bool:
        return self.receiver is not None


@dataclass(frozen=True)
class ExtractionRequest:
    """Which declaration categories to extract from a file."""

    extract_imports: bool = True
    extract_globals: bool = True
    extract_functions: bool = True
    generate_comments: bool = False
    include_methods: bool = True

    @property
    def extracts_anything(self) -> bool:
        return self.extract_imports or self.extract_globals or self.extract_functions


@dataclass
class FileExtraction:
    """Result of extracting one file."""

    file_path: str
    language: Optional[str] = None
    text: str = ""
    skipped: bool = False  # True when no extractor handles the file's extension
    comment_failures: list[str] = field(default_factory=list)  # Functions left without a comment


# (signature, language) -> comment text; raises SummaryServiceError on failure
Summarizer = Callable[[str, str], str]
