"""Mutable MIME type to file extension database."""

from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

from src.logging import get_logger

from .defaults import DEFAULT_MIME_TYPES
from .exceptions import InvalidMappingError
from .index import MimeIndex, build_index
from .source import read_source, write_source

logger = get_logger(__name__)


class MimeStore:
    """
    MIME type to extension database.

    Each store owns its data; stores built from the defaults never share
    state. Call index() after mutating to get fresh lookup tables.
    """

    def __init__(self, initial_data: Mapping[str, Sequence[str] | str] | None = None):
        """
        Initialize the store.

        Args:
            initial_data: Optional MIME type to extensions mapping. Values
                may be sequences or space separated strings.
        """
        self._data: dict[str, list[str]] = {}
        if initial_data:
            for mime, exts in initial_data.items():
                if isinstance(exts, str):
                    exts = exts.split()
                for ext in exts:
                    self.add(ext, mime)

    @classmethod
    def with_defaults(cls, extra: Mapping[str, str] | None = None) -> "MimeStore":
        """
        Create a store seeded with the built-in table.

        Args:
            extra: Extension to MIME type mappings added on top

        Returns:
            A new store

        Raises:
            InvalidMappingError: If an extra mapping is empty or contains
                whitespace. Unlike from_file, caller supplied mappings are
                not skipped.
        """
        store = cls(DEFAULT_MIME_TYPES)
        store._add_all(extra)
        return store

    @classmethod
    def empty(cls, extra: Mapping[str, str] | None = None) -> "MimeStore":
        """
        Create a store with no built-in mappings.

        Args:
            extra: Extension to MIME type mappings to add

        Returns:
            A new store

        Raises:
            InvalidMappingError: If an extra mapping is empty or contains
                whitespace. Unlike from_file, caller supplied mappings are
                not skipped.
        """
        store = cls()
        store._add_all(extra)
        return store

    @classmethod
    def from_file(cls, path: str | Path) -> "MimeStore":
        """
        Create a store from a text source file.

        An unreadable file yields an empty store and a logged warning.
        Tokens that cannot be stored, such as a lone ".", are skipped.

        Args:
            path: Path to the source file

        Returns:
            A new store
        """
        store = cls()
        rows = read_source(path)
        if rows is None:
            return store
        for mime, exts in rows:
            for ext in exts:
                try:
                    store.add(ext, mime)
                except InvalidMappingError as e:
                    logger.debug(f"Skipped {ext!r} -> {mime!r} from {path}: {e}")
        return store

    def _add_all(self, extra: Mapping[str, str] | None) -> None:
        if not extra:
            return
        for ext, mime in extra.items():
            self.add(ext, mime)

    def add(self, ext: str, mime: str) -> "MimeStore":
        """
        Map an extension to a MIME type.

        Adding a mapping that already exists does nothing.

        Args:
            ext: File extension, with or without a leading dot
            mime: MIME type

        Returns:
            The store, for chaining

        Raises:
            InvalidMappingError: If either value is empty or contains whitespace
        """
        ext = ext.removeprefix(".")
        _validate(ext, mime)

        exts = self._data.setdefault(mime, [])
        if ext not in exts:
            exts.append(ext)
            logger.debug(f"Added {ext} -> {mime}")
        return self

    def remove(self, ext: str, mime: str) -> "MimeStore":
        """
        Remove an extension from a MIME type.

        The MIME type is dropped once its last extension is removed.
        Removing an unknown mapping does nothing.

        Args:
            ext: File extension, with or without a leading dot
            mime: MIME type

        Returns:
            The store, for chaining
        """
        ext = ext.removeprefix(".")
        exts = self._data.get(mime)
        if exts is None or ext not in exts:
            return self

        exts.remove(ext)
        logger.debug(f"Removed {ext} -> {mime}")
        if not exts:
            del self._data[mime]
            logger.debug(f"Dropped empty MIME type {mime}")
        return self

    def index(self) -> MimeIndex:
        """
        Build forward (extension to MIME) and backward (MIME to extensions) tables.

        Returns:
            A MimeIndex snapshot of the current data
        """
        return build_index(self._data)

    def save(self, path: str | Path) -> bool:
        """
        Write the store to a text source file, sorted by MIME type.

        Args:
            path: Destination path

        Returns:
            True on success, False if the file could not be written
        """
        return write_source(path, self._data)

    def extensions(self, mime: str) -> tuple[str, ...]:
        """Get the extensions of one MIME type."""
        return tuple(self._data.get(mime, ()))

    def get_all(self) -> dict[str, list[str]]:
        """
        Get all stored data.

        Returns:
            A copy of all stored data
        """
        return {mime: list(exts) for mime, exts in self._data.items()}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, mime: object) -> bool:
        return mime in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MimeStore):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"MimeStore({len(self._data)} MIME types)"


def _validate(ext: str, mime: str) -> None:
    if not ext:
        raise InvalidMappingError(ext, mime, "Extension must not be empty")
    if not mime:
        raise InvalidMappingError(ext, mime, "MIME type must not be empty")
    if any(c.isspace() for c in ext + mime):
        raise InvalidMappingError(ext, mime, "Mapping must not contain whitespace")
