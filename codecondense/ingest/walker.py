"""
Directory Walker

File system traversal with the size, extension and modification-time filters
of the condense command.
"""

import fnmatch
import os
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator, Optional

from codecondense.configs.ignore_patterns import DEFAULT_IGNORE_PATTERNS
from codecondense.configs.logging import get_logger
from codecondense.exceptions import WalkError

logger = get_logger("ingest.walker")

_FRACTION = re.compile(r"\.(\d+)")


def parse_modified_since(value: str | datetime | None) -> Optional[datetime]:
    """
    Parse an RFC 3339 timestamp (e.g. 2024-01-02T15:04:05Z).

    Fractional seconds of any precision are accepted; digits beyond
    microseconds (Go's RFC3339Nano) are truncated.

    Raises:
        WalkError: If the value is not a valid timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise WalkError(f"Invalid modified time {value!r}, expected RFC 3339", {"error": str(e)}) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_ignored(name: str, rel_path: str, ignore: set[str]) -> bool:
    return any(fnmatch.fnmatch(name, p) or fnmatch.fnmatch(rel_path, p) for p in ignore)


def walk_file_system(
    root_path: str | Path,
    sub_dirs: bool = False,
    min_size: int = 0,
    file_type: str = "",
    modified_since: str | datetime | None = None,
    ignore_patterns: Optional[set[str]] = None,
) -> Generator[Path, None, None]:
    """
    Walk a directory yielding the files that pass every filter.

    Args:
        root_path: Directory to start from
        sub_dirs: Descend into subdirectories
        min_size: Skip files smaller than this many bytes
        file_type: Only keep files with exactly this extension (e.g. '.go')
        modified_since: Skip files last modified before this RFC 3339 time
        ignore_patterns: Directory/file name patterns to skip
            (defaults to DEFAULT_IGNORE_PATTERNS)

    Yields:
        Paths in sorted order, a directory's files before its subdirectories

    Raises:
        WalkError: If root_path is not a directory or modified_since is invalid
    """
    since = parse_modified_since(modified_since)
    since_ts = since.timestamp() if since else None
    ignore = DEFAULT_IGNORE_PATTERNS if ignore_patterns is None else ignore_patterns

    root = Path(root_path)
    if not root.is_dir():
        raise WalkError(f"Not a directory: {root}")

    def _on_error(error: OSError) -> None:
        logger.warning(f"Cannot read {error.filename}: {error.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        if sub_dirs:
            # Filter and sort in place so os.walk descends deterministically
            dirnames[:] = sorted(
                d for d in dirnames
                if not _is_ignored(d, os.path.relpath(os.path.join(dirpath, d), root), ignore)
            )
        else:
            dirnames[:] = []

        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename

            if file_type and file_path.suffix != file_type:
                continue

            rel_path = str(file_path.relative_to(root))
            if _is_ignored(filename, rel_path, ignore):
                continue

            try:
                stat = file_path.stat()
            except OSError as e:
                logger.warning(f"Cannot stat {file_path}: {e}")
                continue

            if stat.st_size < min_size:
                continue

            if since_ts is not None and stat.st_mtime < since_ts:
                continue

            yield file_path
