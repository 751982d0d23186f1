"""Reader and writer for the plain text MIME database format.

Each data line holds a MIME type followed by its extensions::

    text/html    html htm shtml
    image/jpeg   jpeg jpg

Comment lines (``#``), blank lines and lines with braces are skipped, and
semicolons are dropped, so an nginx ``mime.types`` file loads as is.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path

from src.logging import get_logger

logger = get_logger(__name__)

COMMENT_MARKER = "#"


def parse_lines(lines: Iterable[str]) -> Iterator[tuple[str, list[str]]]:
    """
    Parse data lines of a MIME source.

    Args:
        lines: Raw text lines

    Yields:
        (mime, extensions) for every line with at least one extension
    """
    for line in lines:
        line = line.replace(";", "").lstrip()
        if not line or line.startswith(COMMENT_MARKER):
            continue
        if "{" in line or "}" in line:
            continue

        fields = line.split()
        if len(fields) < 2:
            continue
        yield fields[0], fields[1:]


def read_source(path: str | Path) -> list[tuple[str, list[str]]] | None:
    """
    Read a MIME source file.

    Args:
        path: Path to the source file

    Returns:
        Parsed (mime, extensions) rows in file order, or None if the file
        could not be read
    """
    try:
        # Undecodable bytes only spoil the line they appear on
        with open(path, encoding="utf-8", errors="replace") as f:
            rows = list(parse_lines(f))
    except OSError as e:
        logger.warning(f"Could not read MIME source {path}: {e}")
        return None

    logger.debug(f"Read {len(rows)} rows from {path}")
    return rows


def format_source(data: Mapping[str, Sequence[str]]) -> str:
    """Render a MIME mapping as source text, sorted by MIME type."""
    return "".join(f"{mime} {' '.join(data[mime])}\n" for mime in sorted(data))


def write_source(path: str | Path, data: Mapping[str, Sequence[str]]) -> bool:
    """
    Write a MIME mapping to a source file.

    Args:
        path: Destination path; parent directories are created
        data: MIME type to extensions mapping

    Returns:
        True on success, False if the file could not be written
    """
    path = Path(path)
    output = format_source(data)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(output)
    except OSError as e:
        logger.warning(f"Could not write MIME source {path}: {e}")
        return False

    logger.debug(f"Wrote {len(data)} MIME types to {path}")
    return True
