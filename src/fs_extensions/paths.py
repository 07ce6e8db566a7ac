"""Path combination helpers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from fs_extensions.handles import FileHandle

__all__ = ["combine", "combine_all", "stem", "with_extension"]


def combine(root: Path | str, *segments: str) -> Path:
    """Join ``segments`` onto ``root`` in order.

    An absolute segment replaces everything before it, as with ``Path``.
    """
    result = Path(root)
    for segment in segments:
        result = result / segment
    return result


def combine_all(segments: Iterable[Path | str]) -> Path | None:
    """Join an iterable of segments, the first acting as the root.

    Returns:
        The combined path, or None if segments is empty.
    """
    iterator = iter(segments)
    first = next(iterator, None)
    if first is None:
        return None
    return combine(first, *(str(segment) for segment in iterator))


def stem(file: FileHandle) -> str:
    """File name without its final extension."""
    return file.path.stem


def with_extension(file: FileHandle, extension: str | None) -> Path:
    """Path of ``file`` with its extension replaced.

    Args:
        file: File whose path to change. The file itself is not renamed.
        extension: New extension, with or without the leading dot. None or
            an empty string removes the extension.

    Returns:
        The changed path.
    """
    if not extension:
        return file.path.with_suffix("")
    if not extension.startswith("."):
        extension = f".{extension}"
    return file.path.with_suffix(extension)
