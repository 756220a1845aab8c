"""
Combined Output Writer

Serializes per-file extraction results into one text file, each file wrapped
in a delimiter block:

    '''path/to/file.go
    <extracted text>
    '''
"""

from pathlib import Path
from typing import Iterable

from codecondense.ast.models import FileExtraction
from codecondense.configs.constants import BLOCK_DELIMITER
from codecondense.configs.logging import get_logger
from codecondense.exceptions import OutputError

logger = get_logger("ingest.output")


def format_block(file_name: str, text: str) -> str:
    """Render one file's delimiter block, trailing newline included."""
    return f"{BLOCK_DELIMITER}{file_name}\n{text}\n{BLOCK_DELIMITER}\n"


def write_output(extractions: Iterable[FileExtraction], out_file: str | Path) -> int:
    """
    Write every non-skipped extraction to out_file, in the order given.

    Args:
        extractions: Per-file results
        out_file: Destination path (overwritten)

    Returns:
        Number of blocks written

    Raises:
        OutputError: If the file cannot be written
    """
    out_path = Path(out_file)
    written = 0
    try:
        with open(out_path, "w", encoding="utf-8") as f:
            for extraction in extractions:
                if extraction.skipped:
                    continue
                f.write(format_block(extraction.file_path, extraction.text))
                written += 1
    except OSError as e:
        raise OutputError(f"Cannot write output file {out_path}", {"error": str(e)}) from e

    logger.info(f"Wrote {written} file blocks to {out_path}")
    return written
