"""
Language-Specific Extractors

Each extractor implements the LanguageExtractor interface for a specific language.
"""

from codecondense.ast.extractors.base import (
    LanguageExtractor,
    get_extractor_for_extension,
    register_extractor,
)

# Import extractors to trigger registration
from codecondense.ast.extractors.go import GoExtractor
from codecondense.ast.extractors.python import PythonExtractor

__all__ = [
    "LanguageExtractor",
    "get_extractor_for_extension",
    "register_extractor",
    "GoExtractor",
    "PythonExtractor",
]
