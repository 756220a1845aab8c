"""
codecondense Ingestion

Directory walking, per-file extraction and combined output writing.
"""

from codecondense.ingest.engine import (
    CondenseOptions,
    CondenseReport,
    FileProcessor,
    condense_directory,
)
from codecondense.ingest.output import format_block, write_output
from codecondense.ingest.walker import parse_modified_since, walk_file_system

__all__ = [
    # Walker
    "walk_file_system",
    "parse_modified_since",
    # Output
    "format_block",
    "write_output",
    # Engine
    "CondenseOptions",
    "CondenseReport",
    "FileProcessor",
    "condense_directory",
]
