"""Forward and backward lookup tables derived from a MIME store."""

import os
from collections.abc import Mapping, Sequence
from typing import NamedTuple

from .defaults import DEFAULT_EXTENSION, DEFAULT_MIME_TYPE


class MimeIndex(NamedTuple):
    """
    Lookup tables built by MimeStore.index().

    Unpacks as ``forward, backward = store.index()``.

    Attributes:
        forward: Extension to MIME type.
        backward: MIME type to its extensions, in stored order.
    """

    forward: dict[str, str]
    backward: dict[str, list[str]]

    def mime_type_for(self, name: str, default: str = DEFAULT_MIME_TYPE) -> str:
        """
        Get the MIME type for an extension or file name.

        Accepts ``"txt"``, ``".txt"`` or ``"notes/readme.txt"``. An exact
        match wins; otherwise the lower-cased extension is tried.

        Args:
            name: Extension, dotted extension or file path
            default: Returned when nothing matches

        Returns:
            The MIME type
        """
        ext = _extension_of(name)
        if ext in self.forward:
            return self.forward[ext]
        return self.forward.get(ext.lower(), default)

    def extensions_for(self, mime: str) -> tuple[str, ...]:
        """Get all extensions registered for a MIME type."""
        return tuple(self.backward.get(mime, ()))

    def extension_for(self, mime: str, default: str = DEFAULT_EXTENSION) -> str:
        """Get the preferred (first) extension for a MIME type."""
        exts = self.backward.get(mime)
        return exts[0] if exts else default


def _extension_of(name: str) -> str:
    base = os.path.basename(name)
    if "." not in base:
        return base
    return base.rsplit(".", 1)[1]


def build_index(data: Mapping[str, Sequence[str]]) -> MimeIndex:
    """
    Derive lookup tables from a MIME type to extensions mapping.

    When two MIME types claim the same extension, the one iterated last
    wins the forward entry.
    """
    forward: dict[str, str] = {}
    backward: dict[str, list[str]] = {}
    for mime, exts in data.items():
        for ext in exts:
            forward[ext] = mime
        backward[mime] = list(exts)
    return MimeIndex(forward, backward)
