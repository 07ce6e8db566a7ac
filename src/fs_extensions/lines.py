"""Line-oriented and whole-file text helpers for file handles."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from fs_extensions.errors import AlreadyExistsError, NotFoundError
from fs_extensions.handles import FileHandle

logger = logging.getLogger(__name__)

__all__ = [
    "append_lines",
    "append_text",
    "ensure_exists",
    "enumerate_lines",
    "read_bytes",
    "read_lines",
    "read_text",
    "truncate",
    "write_bytes",
    "write_lines",
    "write_text",
]


def ensure_exists(file: FileHandle) -> None:
    """Raise if ``file`` does not exist.

    Raises:
        NotFoundError: Naming the missing file.
    """
    file.refresh()
    if not file.exists:
        raise NotFoundError(f"Could not find file '{file.path}'.", file.path)


def enumerate_lines(file: FileHandle, encoding: str | None = None) -> Iterator[str]:
    """Lazily yield the lines of ``file`` without their line terminators.

    The file is opened when iteration starts and closed when it finishes or
    the iterator is closed.

    Args:
        file: File to read.
        encoding: Text encoding, or None for the provider default.

    Yields:
        One line at a time.
    """
    with file.open("r", encoding=encoding) as stream:
        for line in stream:
            yield line.rstrip("\n")


def read_lines(file: FileHandle, encoding: str | None = None) -> list[str]:
    """Read every line of ``file`` into a list."""
    return list(enumerate_lines(file, encoding))


def read_text(file: FileHandle, encoding: str | None = None) -> str:
    """Read the whole file as text."""
    return file.filesystem.read_text(file.path, encoding=encoding)


def read_bytes(file: FileHandle) -> bytes:
    """Read the whole file as bytes."""
    with file.open("rb") as stream:
        return stream.read()


def write_text(file: FileHandle, content: str, encoding: str | None = None) -> None:
    """Replace the file's content with ``content``."""
    file.filesystem.write_text(file.path, content, encoding=encoding)
    file.refresh()


def write_bytes(file: FileHandle, content: bytes) -> None:
    """Replace the file's content with raw bytes."""
    with file.open("wb") as stream:
        stream.write(content)
    file.refresh()


def write_lines(
    file: FileHandle,
    lines: Iterable[str],
    encoding: str | None = None,
    overwrite: bool = False,
) -> None:
    """Write ``lines`` to ``file``, each followed by a newline.

    Args:
        file: File to write.
        lines: Lines to write, without terminators.
        encoding: Text encoding, or None for the provider default.
        overwrite: Truncate the file if it already exists.

    Raises:
        AlreadyExistsError: If the file exists and overwrite is False.
    """
    file.refresh()
    if file.exists and not overwrite:
        raise AlreadyExistsError(f"Cannot overwrite existing file: '{file.path}'", file.path)

    with file.open("w", encoding=encoding) as stream:
        for line in lines:
            stream.write(f"{line}\n")
    file.refresh()


def append_lines(file: FileHandle, lines: Iterable[str], encoding: str | None = None) -> None:
    """Append ``lines`` to ``file``, creating it if missing."""
    with file.open("a", encoding=encoding) as stream:
        for line in lines:
            stream.write(f"{line}\n")
    file.refresh()


def append_text(file: FileHandle, content: str, encoding: str | None = None) -> None:
    """Append ``content`` to ``file``, creating it if missing."""
    with file.open("a", encoding=encoding) as stream:
        stream.write(content)
    file.refresh()


def truncate(file: FileHandle) -> FileHandle:
    """Create ``file`` empty, or empty it if it already exists.

    Returns:
        The same handle, so calls can be chained.
    """
    with file.open("wb"):
        pass
    logger.debug("Truncated %s", file.path)
    file.refresh()
    return file
