"""Exception classes for the MIME database."""

from typing import Any


class MimeError(Exception):
    """Base exception for MIME database errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def __str__(self) -> str:
        if self.data:
            return f"{self.message}: {self.data}"
        return self.message


class InvalidMappingError(MimeError, ValueError):
    """An extension or MIME type that cannot be stored."""

    def __init__(self, ext: str, mime: str, reason: str):
        super().__init__(reason, {"ext": ext, "mime": mime})
        self.ext = ext
        self.mime = mime
