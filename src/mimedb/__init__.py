"""
MIMEDB - bidirectional file extension and MIME type lookups.

Build a store, mutate it as needed, then index it::

    store = MimeStore.with_defaults({"foo": "mime/bar"})
    forward, backward = store.index()
    forward["txt"]          # "text/plain"
    backward["image/jpeg"]  # ["jpeg", "jpg"]
"""

from .defaults import DEFAULT_MIME_TYPES
from .exceptions import InvalidMappingError, MimeError
from .index import MimeIndex, build_index
from .source import format_source, parse_lines, read_source, write_source
from .store import MimeStore

__version__ = "0.1.0"
__all__ = [
    # Store
    "MimeStore",
    "DEFAULT_MIME_TYPES",
    # Index
    "MimeIndex",
    "build_index",
    # Source format
    "parse_lines",
    "read_source",
    "format_source",
    "write_source",
    # Errors
    "MimeError",
    "InvalidMappingError",
]
