"""
Condense Engine

Walks a directory, extracts each file's declarations and writes the combined
output. Read and parse failures are isolated to the file they occur in.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from codecondense.ast.engine import extract_file
from codecondense.ast.models import ExtractionRequest, FileExtraction, Summarizer
from codecondense.configs.constants import DEFAULT_OUTPUT_FILE
from codecondense.configs.ignore_patterns import load_ignore_patterns
from codecondense.configs.logging import get_logger
from codecondense.exceptions import CodeCondenseError
from codecondense.ingest.output import write_output
from codecondense.ingest.walker import walk_file_system

logger = get_logger("ingest.engine")


@dataclass
class CondenseOptions:
    """Everything one condense run needs besides the summarizer."""

    root_path: str = "."
    sub_dirs: bool = False
    min_size: int = 0
    file_type: str = ""
    modified_since: str | datetime | None = None
    request: ExtractionRequest = field(default_factory=ExtractionRequest)
    out_file: str = DEFAULT_OUTPUT_FILE
    workers: int = 1
    use_ignore_file: bool = True


@dataclass
class CondenseReport:
    """Outcome of a condense run."""

    out_file: str
    files_scanned: int = 0
    files_processed: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    blocks_written: int = 0
    errors: list[dict[str, str]] = field(default_factory=list)
    comment_failures: list[dict[str, str]] = field(default_factory=list)
    duration_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "out_file": self.out_file,
            "files_scanned": self.files_scanned,
            "files_processed": self.files_processed,
            "files_skipped": self.files_skipped,
            "files_failed": self.files_failed,
            "blocks_written": self.blocks_written,
            "errors": self.errors,
            "comment_failures": self.comment_failures,
            "duration_seconds": self.duration_seconds,
        }


class FileProcessor:
    """Extracts files one at a time, turning per-file failures into report entries."""

    def __init__(self, request: ExtractionRequest, summarizer: Optional[Summarizer] = None):
        self.request = request
        self.summarizer = summarizer

    def process(self, file_path: Path) -> tuple[Optional[FileExtraction], Optional[str]]:
        """
        Returns:
            (extraction, None) on success, (None, error message) on failure
        """
        try:
            return extract_file(file_path, self.request, self.summarizer), None
        except (OSError, CodeCondenseError) as e:
            logger.warning(f"Error processing {file_path}: {e}")
            return None, str(e)

    def process_files(
        self, files: list[Path], workers: int = 1
    ) -> list[tuple[Optional[FileExtraction], Optional[str]]]:
        """Process files, returning results in the order the files were given."""
        if workers <= 1 or len(files) <= 1:
            return [self.process(path) for path in files]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.process, path) for path in files]
            return [future.result() for future in futures]


def _is_output_file(path: Path, out_path: Path) -> bool:
    try:
        return path.resolve() == out_path.resolve()
    except OSError:
        return False


def condense_directory(
    options: CondenseOptions,
    summarizer: Optional[Summarizer] = None,
) -> CondenseReport:
    """
    Condense a directory into a single output file.

    Args:
        options: Walk filters, extraction request, output path
        summarizer: Comment generator, used only when options.request.generate_comments

    Returns:
        CondenseReport with per-file counts and errors

    Raises:
        WalkError: If the root is not a directory or the time filter is invalid
        OutputError: If the output file cannot be written
    """
    start_time = time.time()
    out_path = Path(options.out_file)
    report = CondenseReport(out_file=str(out_path))

    logger.info(f"Condensing {options.root_path} (sub_dirs={options.sub_dirs}) into {out_path}")

    ignore = load_ignore_patterns(str(options.root_path), options.use_ignore_file)
    files = [
        path
        for path in walk_file_system(
            options.root_path,
            sub_dirs=options.sub_dirs,
            min_size=options.min_size,
            file_type=options.file_type,
            modified_since=options.modified_since,
            ignore_patterns=ignore,
        )
        if not _is_output_file(path, out_path)
    ]
    report.files_scanned = len(files)

    processor = FileProcessor(options.request, summarizer)
    extractions: list[FileExtraction] = []
    for path, (extraction, error) in zip(files, processor.process_files(files, options.workers)):
        if extraction is None:
            report.files_failed += 1
            report.errors.append({"file": str(path), "error": error or "unknown error"})
            continue
        if extraction.skipped:
            report.files_skipped += 1
            continue
        report.files_processed += 1
        report.comment_failures.extend(
            {"file": extraction.file_path, "function": name}
            for name in extraction.comment_failures
        )
        extractions.append(extraction)

    report.blocks_written = write_output(extractions, out_path)
    report.duration_seconds = round(time.time() - start_time, 3)

    logger.info(
        f"Condensed {report.files_processed} files "
        f"({report.files_skipped} skipped, {report.files_failed} failed) "
        f"in {report.duration_seconds}s"
    )
    return report
