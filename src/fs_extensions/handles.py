"""File and directory handles bound to a filesystem provider.

A handle pairs a path with the provider that owns it and caches whether the
object existed the last time it was looked at. Call ``refresh()`` to update
the cached state after the filesystem changes underneath it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from fs_extensions.errors import AlreadyExistsError

if TYPE_CHECKING:
    from fs_extensions.protocols import FileSystem

logger = logging.getLogger(__name__)

__all__ = ["DirectoryHandle", "FileHandle", "current_directory"]


class _Handle:
    """State shared by file and directory handles."""

    __slots__ = ("exists", "filesystem", "path")

    def __init__(self, filesystem: FileSystem, path: Path | str) -> None:
        """Initialize the handle and read its current existence state.

        Args:
            filesystem: Provider the path belongs to.
            path: Location of the object.
        """
        self.filesystem = filesystem
        self.path = Path(path)
        self.exists = self._check_exists()

    def _check_exists(self) -> bool:
        raise NotImplementedError

    @property
    def name(self) -> str:
        """Final path component."""
        return self.path.name

    def refresh(self) -> None:
        """Re-read the cached existence state from the provider."""
        self.exists = self._check_exists()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.filesystem.path_key(self.path) == other.filesystem.path_key(other.path)

    def __hash__(self) -> int:
        return hash((type(self), self.filesystem.path_key(self.path)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    def __fspath__(self) -> str:
        return str(self.path)


class FileHandle(_Handle):
    """Handle to a single file."""

    __slots__ = ()

    def _check_exists(self) -> bool:
        return self.filesystem.is_file(self.path)

    @property
    def directory(self) -> DirectoryHandle:
        """Handle to the directory containing this file."""
        return DirectoryHandle(self.filesystem, self.path.parent)

    def create(self) -> FileHandle:
        """Create the file empty, failing if it already exists.

        The stream used for creation is closed before returning so that the
        file can be reopened or deleted straight away.

        Returns:
            This handle, refreshed.
        """
        self.filesystem.touch(self.path)
        self.refresh()
        return self

    def delete(self) -> None:
        """Delete the file."""
        self.filesystem.unlink(self.path)
        self.refresh()

    def open(self, mode: str = "r", encoding: str | None = None, newline: str | None = None) -> IO[Any]:
        """Open a stream on the file.

        Args:
            mode: Mode string as accepted by the builtin ``open``.
            encoding: Text encoding, or None for the provider default.
            newline: Newline translation for text modes.

        Returns:
            An open file object; close it when done.
        """
        return self.filesystem.open(self.path, mode, encoding=encoding, newline=newline)

    def copy_to(self, destination: FileHandle | Path | str, overwrite: bool = False) -> FileHandle:
        """Copy the file to another location on the same provider.

        Args:
            destination: Target file.
            overwrite: Replace the target if it exists.

        Returns:
            Handle to the copy.

        Raises:
            AlreadyExistsError: If anything exists at the target and
                overwrite is False.
            IsADirectoryError: If the target is a directory, whatever the
                value of overwrite.
        """
        target = destination if isinstance(destination, FileHandle) else FileHandle(self.filesystem, destination)
        if self.filesystem.exists(target.path) and not overwrite:
            raise AlreadyExistsError(f"Cannot overwrite existing file: '{target.path}'", target.path)
        if self.filesystem.is_dir(target.path):
            raise IsADirectoryError(f"Cannot replace directory with a file: '{target.path}'")

        self.filesystem.copy_file(self.path, target.path)
        logger.debug("Copied %s to %s", self.path, target.path)
        target.refresh()
        return target


class DirectoryHandle(_Handle):
    """Handle to a directory."""

    __slots__ = ()

    def _check_exists(self) -> bool:
        return self.filesystem.is_dir(self.path)

    @property
    def parent(self) -> DirectoryHandle:
        """Handle to the parent directory."""
        return DirectoryHandle(self.filesystem, self.path.parent)

    def file(self, name: str) -> FileHandle:
        """Get a handle for a file inside this directory.

        Args:
            name: File name (e.g. "test.txt").

        Returns:
            FileHandle for the file. The file need not exist.
        """
        return FileHandle(self.filesystem, self.path / name)

    def subdirectory(self, name: str) -> DirectoryHandle:
        """Get a handle for a subdirectory of this directory.

        Args:
            name: Subdirectory name (e.g. "test").

        Returns:
            DirectoryHandle for the subdirectory. It need not exist.
        """
        return DirectoryHandle(self.filesystem, self.path / name)

    def iter_files(self) -> Iterator[FileHandle]:
        """Iterate over the files directly inside this directory."""
        for path in self.filesystem.iter_files(self.path):
            yield FileHandle(self.filesystem, path)

    def iter_directories(self) -> Iterator[DirectoryHandle]:
        """Iterate over the immediate subdirectories."""
        for path in self.filesystem.iter_directories(self.path):
            yield DirectoryHandle(self.filesystem, path)

    def create(self) -> DirectoryHandle:
        """Create the directory and any missing parents.

        Existing directories are left alone.

        Returns:
            This handle, refreshed.
        """
        self.filesystem.mkdir(self.path, parents=True, exist_ok=True)
        self.refresh()
        return self

    def delete(self, recursive: bool = False) -> None:
        """Delete the directory.

        Args:
            recursive: Delete contents too. Without it the directory must
                be empty.
        """
        if recursive:
            self.filesystem.rmtree(self.path)
        else:
            self.filesystem.rmdir(self.path)
        self.refresh()

    def copy_to(
        self,
        destination: DirectoryHandle | Path | str,
        recursive: bool = False,
        overwrite: bool = False,
    ) -> DirectoryHandle:
        """Copy this directory's contents into ``destination``.

        See ``fs_extensions.tree.copy_tree``.
        """
        from fs_extensions.tree import copy_tree

        return copy_tree(self, destination, recursive=recursive, overwrite=overwrite)


def current_directory(filesystem: FileSystem) -> DirectoryHandle:
    """Get a handle to the provider's current working directory.

    Args:
        filesystem: Provider in use.

    Returns:
        DirectoryHandle for the current directory.
    """
    return DirectoryHandle(filesystem, filesystem.cwd())
