"""Async variants of the text helpers.

Each blocking call runs in a worker thread via ``asyncio.to_thread``. The
coroutines suspend only at those calls, so ordering and errors match the
synchronous helpers in ``fs_extensions.lines``. Cancellation takes effect at
the next awaited read or write; nothing already written is undone.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable

from fs_extensions import lines
from fs_extensions.handles import FileHandle

__all__ = [
    "append_lines_async",
    "append_text_async",
    "enumerate_lines_async",
    "read_bytes_async",
    "read_lines_async",
    "read_text_async",
    "write_bytes_async",
    "write_lines_async",
    "write_text_async",
]


async def enumerate_lines_async(file: FileHandle, encoding: str | None = None) -> AsyncIterator[str]:
    """Yield the lines of ``file`` without terminators, reading one at a time.

    Args:
        file: File to read.
        encoding: Text encoding, or None for the provider default.

    Yields:
        One line at a time.
    """
    stream = await asyncio.to_thread(file.open, "r", encoding=encoding)
    try:
        while True:
            line = await asyncio.to_thread(stream.readline)
            if not line:
                break
            yield line.rstrip("\n")
    finally:
        stream.close()


async def read_lines_async(file: FileHandle, encoding: str | None = None) -> list[str]:
    """Read every line of ``file`` into a list."""
    return [line async for line in enumerate_lines_async(file, encoding)]


async def read_text_async(file: FileHandle, encoding: str | None = None) -> str:
    """Read the whole file as text."""
    return await asyncio.to_thread(lines.read_text, file, encoding)


async def read_bytes_async(file: FileHandle) -> bytes:
    """Read the whole file as bytes."""
    return await asyncio.to_thread(lines.read_bytes, file)


async def write_text_async(file: FileHandle, content: str, encoding: str | None = None) -> None:
    """Replace the file's content with ``content``."""
    await asyncio.to_thread(lines.write_text, file, content, encoding)


async def write_bytes_async(file: FileHandle, content: bytes) -> None:
    """Replace the file's content with raw bytes."""
    await asyncio.to_thread(lines.write_bytes, file, content)


async def write_lines_async(
    file: FileHandle,
    content: Iterable[str],
    encoding: str | None = None,
    overwrite: bool = False,
) -> None:
    """Write lines to ``file``; see ``lines.write_lines``."""
    await asyncio.to_thread(lines.write_lines, file, list(content), encoding, overwrite)


async def append_lines_async(file: FileHandle, content: Iterable[str], encoding: str | None = None) -> None:
    """Append lines to ``file``, creating it if missing."""
    await asyncio.to_thread(lines.append_lines, file, list(content), encoding)


async def append_text_async(file: FileHandle, content: str, encoding: str | None = None) -> None:
    """Append text to ``file``, creating it if missing."""
    await asyncio.to_thread(lines.append_text, file, content, encoding)
