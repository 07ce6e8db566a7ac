"""Scoped temporary files and directories.

A ``ScopedResource`` owns one file or directory and deletes it when released.
Use it as a context manager so the release runs on every exit path::

    resource, directory = create_scoped_directory(RealFileSystem())
    with resource:
        directory.file("data.txt").create()
    # directory and its contents are gone here
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Generic, TypeVar

from fs_extensions.errors import AlreadyExistsError
from fs_extensions.handles import DirectoryHandle, FileHandle
from fs_extensions.validation import require

if TYPE_CHECKING:
    from fs_extensions.protocols import FileSystem

logger = logging.getLogger(__name__)

__all__ = [
    "ScopedResource",
    "create_scoped_directory",
    "create_scoped_file",
    "delete_directory",
    "delete_file",
    "scoped_directory",
    "scoped_file",
]

H = TypeVar("H", DirectoryHandle, FileHandle)


def delete_directory(handle: DirectoryHandle) -> None:
    """Delete a directory and everything inside it."""
    handle.filesystem.rmtree(handle.path)


def delete_file(handle: FileHandle) -> None:
    """Delete a single file."""
    handle.filesystem.unlink(handle.path)


class ScopedResource(Generic[H]):
    """Owns a file or directory and deletes it exactly once on release.

    The deletion step is a strategy callable, so file and directory
    resources share this one type. Subclasses may override ``delete``
    instead of passing a strategy.
    """

    def __init__(self, handle: H, deleter: Callable[[H], None] | None = None) -> None:
        """Take ownership of ``handle``.

        Args:
            handle: The file or directory to delete on release.
            deleter: Deletion strategy. Defaults to a recursive delete for
                directories and a plain delete for files.

        Raises:
            InvalidArgumentError: If handle is None.
        """
        self.handle: H = require(handle, "handle")
        if deleter is None:
            deleter = delete_directory if isinstance(handle, DirectoryHandle) else delete_file
        self._deleter = deleter
        self._released = False

        # Callers see up-to-date state (like exists) on the handle they get back
        self.handle.refresh()

    @property
    def released(self) -> bool:
        """True once the owned object has been deleted."""
        return self._released

    def delete(self) -> None:
        """Delete the owned object using the configured strategy."""
        self._deleter(self.handle)

    def release(self) -> None:
        """Delete the owned object and refresh its handle.

        Calling this again after a successful release does nothing. An
        object that was already removed by someone else is not an error.
        """
        if self._released:
            return

        self.handle.refresh()
        if self.handle.exists:
            self.delete()
            logger.debug("Released scoped resource %s", self.handle.path)
        else:
            logger.debug("Scoped resource %s was already removed", self.handle.path)

        self.handle.refresh()
        self._released = True

    def __enter__(self) -> H:
        return self.handle

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"{type(self).__name__}({self.handle!r}, {state})"


def _resolve_path(filesystem: FileSystem, path: Path | str | None) -> Path:
    if path is None:
        return filesystem.temp_root() / filesystem.random_name()
    return Path(path)


def create_scoped_directory(
    filesystem: FileSystem,
    path: Path | str | None = None,
    factory: Callable[[DirectoryHandle], ScopedResource[DirectoryHandle]] | None = None,
) -> tuple[ScopedResource[DirectoryHandle], DirectoryHandle]:
    """Create a directory whose lifetime is bound to a ScopedResource.

    Args:
        filesystem: Provider to create the directory on.
        path: Where to create it. Defaults to a random name under the
            provider's temp root.
        factory: Builds the resource from the created handle. Defaults to
            ``ScopedResource``.

    Returns:
        Tuple of (resource, directory handle).

    Raises:
        AlreadyExistsError: If anything exists at the path. The path is in
            ``error.data["path"]``, not in the message.
    """
    resolved = _resolve_path(filesystem, path)
    directory = DirectoryHandle(filesystem, resolved)

    if filesystem.exists(resolved):
        raise AlreadyExistsError("Directory already exists", resolved)

    try:
        filesystem.mkdir(resolved, parents=True, exist_ok=False)
    except FileExistsError as e:
        # Lost a race with another creator between the check and the mkdir
        raise AlreadyExistsError("Directory already exists", resolved) from e
    directory.refresh()
    logger.debug("Created scoped directory %s", resolved)

    resource = (factory or ScopedResource)(directory)
    return resource, directory


def create_scoped_file(
    filesystem: FileSystem,
    path: Path | str | None = None,
    factory: Callable[[FileHandle], ScopedResource[FileHandle]] | None = None,
) -> tuple[ScopedResource[FileHandle], FileHandle]:
    """Create an empty file whose lifetime is bound to a ScopedResource.

    The stream used to create the file is closed before returning, so the
    file can be reopened or deleted right away.

    Args:
        filesystem: Provider to create the file on.
        path: Where to create it. Defaults to a random name under the
            provider's temp root.
        factory: Builds the resource from the created handle. Defaults to
            ``ScopedResource``.

    Returns:
        Tuple of (resource, file handle).

    Raises:
        AlreadyExistsError: If anything exists at the path. The path is in
            ``error.data["path"]``, not in the message.
    """
    resolved = _resolve_path(filesystem, path)
    file = FileHandle(filesystem, resolved)

    if filesystem.exists(resolved):
        raise AlreadyExistsError("File already exists", resolved)

    try:
        file.create()
    except FileExistsError as e:
        raise AlreadyExistsError("File already exists", resolved) from e
    logger.debug("Created scoped file %s", resolved)

    resource = (factory or ScopedResource)(file)
    return resource, file


@contextmanager
def scoped_directory(filesystem: FileSystem, path: Path | str | None = None) -> Iterator[DirectoryHandle]:
    """Context manager yielding a directory that is deleted on exit."""
    resource, directory = create_scoped_directory(filesystem, path)
    with resource:
        yield directory


@contextmanager
def scoped_file(filesystem: FileSystem, path: Path | str | None = None) -> Iterator[FileHandle]:
    """Context manager yielding an empty file that is deleted on exit."""
    resource, file = create_scoped_file(filesystem, path)
    with resource:
        yield file
