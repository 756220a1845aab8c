"""
Declaration Extraction

Tree-sitter based reduction of source files to their imports, globals and
function signatures.
"""

from codecondense.ast.comments import CommentGenerator, create_comment_generator
from codecondense.ast.engine import extract_file, extract_source
from codecondense.ast.models import (
    DeclarationKind,
    ExtractionRequest,
    FieldGroup,
    FileExtraction,
    FunctionDecl,
    ImportDecl,
    Summarizer,
    VarSpec,
)
from codecondense.ast.parser import ASTParser, get_parser
from codecondense.ast.signature import (
    format_function_header,
    format_params,
    format_results,
    format_signature,
)

__all__ = [
    # Models
    "DeclarationKind",
    "ExtractionRequest",
    "FieldGroup",
    "FileExtraction",
    "FunctionDecl",
    "ImportDecl",
    "Summarizer",
    "VarSpec",
    # Parser
    "ASTParser",
    "get_parser",
    # Signatures
    "format_function_header",
    "format_params",
    "format_results",
    "format_signature",
    # Engine
    "extract_file",
    "extract_source",
    # Comments
    "CommentGenerator",
    "create_comment_generator",
]
