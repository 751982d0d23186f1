"""Command line lookups against the MIME database.

Usage:
    python -m src.main txt .png image/jpeg
    python -m src.main --save mime.types

Set MIME_DB_PATH to look up against a text source instead of the built-in
table, and LOG_LEVEL to change verbosity.
"""

import argparse
import os
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from src.logging import configure_logging, get_logger
from src.mimedb import MimeIndex, MimeStore

logger = get_logger(__name__)


def load_store() -> MimeStore:
    """Load the store configured by MIME_DB_PATH, or the built-in one."""
    path = os.getenv("MIME_DB_PATH")
    if path:
        logger.info(f"Loading MIME database from {path}")
        return MimeStore.from_file(path)
    return MimeStore.with_defaults()


def lookup(index: MimeIndex, query: str) -> str | None:
    """
    Resolve a single query.

    Queries like "image/png" are MIME types. Anything else, including
    paths starting with "." or "/", is an extension or file name.

    Returns:
        The space separated extensions or the MIME type, None if unknown
    """
    if "/" in query and not query.startswith((".", "/")):
        exts = index.extensions_for(query)
        return " ".join(exts) if exts else None
    mime = index.mime_type_for(query, default="")
    return mime or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mimedb", description="Look up MIME types and file extensions."
    )
    parser.add_argument("queries", nargs="*", help="extensions, file names or MIME types")
    parser.add_argument("--save", metavar="PATH", help="write the database to PATH")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    args = build_parser().parse_args(argv)
    store = load_store()
    console = Console()

    if args.save:
        if not store.save(args.save):
            return 1
        console.print(f"Saved {len(store)} MIME types to {args.save}")

    index = store.index()
    table = Table(title="MIME lookups")
    table.add_column("Query", style="cyan")
    table.add_column("Result")

    status = 0
    for query in args.queries:
        result = lookup(index, query)
        if result is None:
            status = 1
            table.add_row(query, "[red]unknown[/red]")
        else:
            table.add_row(query, result)

    if args.queries:
        console.print(table)
    return status


if __name__ == "__main__":
    sys.exit(main())
