"""Exceptions raised by the filesystem extensions.

Each error also derives from the matching builtin exception, so callers may
catch either ``NotFoundError`` or ``FileNotFoundError`` and so on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

__all__ = [
    "AlreadyExistsError",
    "FileSystemExtensionsError",
    "InvalidArgumentError",
    "NotFoundError",
]


class FileSystemExtensionsError(Exception):
    """Base class for errors raised by this package."""

    pass


class NotFoundError(FileSystemExtensionsError, FileNotFoundError):
    """A required file or directory does not exist."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class AlreadyExistsError(FileSystemExtensionsError, FileExistsError):
    """Something already exists where a new object was to be written.

    Attributes:
        path: The colliding path.
        data: Structured context for the failure. Holds the colliding path
            under ``"path"`` so callers can log it deliberately instead of
            finding it in the message.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path
        self.data: dict[str, Any] = {"path": path}


class InvalidArgumentError(FileSystemExtensionsError, ValueError):
    """An argument is missing or inconsistent with the others."""

    pass
