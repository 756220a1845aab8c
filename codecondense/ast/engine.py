"""
Declaration Extraction Engine

Dispatches a source file to the extractor registered for its extension, parses
it once and runs the requested classifiers in a fixed order: imports, then
globals, then functions.
"""

from pathlib import Path
from typing import Optional

from codecondense.ast.extractors import get_extractor_for_extension
from codecondense.ast.models import ExtractionRequest, FileExtraction, Summarizer
from codecondense.ast.parser import get_parser
from codecondense.configs.logging import get_logger

logger = get_logger("ast.engine")


def extract_source(
    source: str | bytes,
    extension: str,
    request: ExtractionRequest,
    summarizer: Optional[Summarizer] = None,
    file_path: str = "<source>",
) -> FileExtraction:
    """
    Reduce source text to its declarations.

    Args:
        source: File contents (str is encoded as UTF-8)
        extension: File extension including the dot, e.g. '.go'
        request: Which declaration categories to emit
        summarizer: Comment generator, used only when request.generate_comments
        file_path: Path used for logging and errors

    Returns:
        FileExtraction; skipped=True when no extractor handles the extension

    Raises:
        ParseError: If the source does not parse
    """
    extractor = get_extractor_for_extension(extension)
    if extractor is None:
        logger.info(f"No extraction function for file type {extension or '(none)'}, skipping {file_path}")
        return FileExtraction(file_path=file_path, skipped=True)

    result = FileExtraction(file_path=file_path, language=extractor.language)
    if not request.extracts_anything:
        return result

    if isinstance(source, str):
        source = source.encode("utf-8")

    tree = get_parser().parse(source, extractor.language, file_path=file_path)

    lines: list[str] = []
    if request.extract_imports:
        lines.extend(extractor.extract_imports(tree, source))
    if request.extract_globals:
        lines.extend(extractor.extract_globals(tree, source))
    if request.extract_functions:
        lines.extend(extractor.extract_functions(
            tree,
            source,
            request,
            summarizer=summarizer if request.generate_comments else None,
            failures=result.comment_failures,
        ))

    result.text = "\n".join(lines) + "\n" if lines else ""
    logger.debug(f"Extracted {len(lines)} declarations from {file_path}")
    return result


def extract_file(
    path: str | Path,
    request: ExtractionRequest,
    summarizer: Optional[Summarizer] = None,
) -> FileExtraction:
    """Read a file (undecodable bytes replaced) and extract its declarations."""
    path = Path(path)
    content = path.read_text(encoding="utf-8", errors="replace")
    return extract_source(content, path.suffix, request, summarizer=summarizer, file_path=str(path))
