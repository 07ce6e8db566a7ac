"""Directory tree copying.

The copy walks the source tree depth-first. Each visited directory is mapped
onto the destination by taking the path segments between the source root and
the directory being visited and joining them onto the destination root.
Destination directories are created when missing and merged into when
present; only file collisions are subject to the ``overwrite`` flag.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fs_extensions.errors import InvalidArgumentError, NotFoundError
from fs_extensions.handles import DirectoryHandle

logger = logging.getLogger(__name__)

__all__ = ["copy_tree", "diff_segments", "is_ancestor_of", "translate_path"]


def is_ancestor_of(candidate: DirectoryHandle, other: DirectoryHandle) -> bool:
    """Check whether ``candidate`` strictly contains ``other``.

    Paths are compared component by component using the provider's path
    key, so "/a/b" is not an ancestor of "/a/bc". A directory is never its
    own ancestor.

    Args:
        candidate: Possible ancestor.
        other: Possible descendant.

    Returns:
        True if other lies strictly below candidate.
    """
    ancestor_key = candidate.filesystem.path_key(candidate.path)
    other_key = other.filesystem.path_key(other.path)
    return len(other_key) > len(ancestor_key) and other_key[: len(ancestor_key)] == ancestor_key


def diff_segments(ancestor: DirectoryHandle, descendant: DirectoryHandle) -> list[str]:
    """Get the path segments leading from ``ancestor`` down to ``descendant``.

    Args:
        ancestor: The containing directory.
        descendant: A directory strictly below ancestor.

    Returns:
        Segment names in root-to-leaf order, spelled as in descendant's
            normalized path ("." and ".." resolved).

    Raises:
        InvalidArgumentError: If ancestor is not an ancestor of descendant.
    """
    if not is_ancestor_of(ancestor, descendant):
        raise InvalidArgumentError(f"'{ancestor.path}' is not an ancestor of '{descendant.path}'")

    depth = len(descendant.filesystem.path_key(descendant.path)) - len(
        ancestor.filesystem.path_key(ancestor.path)
    )
    normalized = Path(os.path.normpath(os.path.abspath(descendant.path)))
    return list(normalized.parts[-depth:])


def translate_path(
    ancestor1: DirectoryHandle,
    descendant: DirectoryHandle,
    ancestor2: DirectoryHandle,
    create_if_missing: bool = False,
) -> DirectoryHandle:
    """Map a directory below one root onto the same place below another.

    Args:
        ancestor1: Root the descendant currently lives under.
        descendant: Directory to map. May equal ancestor1.
        ancestor2: Root to map onto.
        create_if_missing: Create the resulting directory and any missing
            parents.

    Returns:
        Handle for the mapped directory.

    Raises:
        InvalidArgumentError: If descendant is neither ancestor1 nor below it.
    """
    if descendant == ancestor1:
        result = ancestor2
    else:
        result = ancestor2.subdirectory(str(Path(*diff_segments(ancestor1, descendant))))

    if create_if_missing:
        result.create()
    return result


def copy_tree(
    source: DirectoryHandle,
    destination: DirectoryHandle | Path | str,
    recursive: bool = False,
    overwrite: bool = False,
) -> DirectoryHandle:
    """Copy the contents of ``source`` into ``destination``.

    Args:
        source: Directory to copy from. Must exist.
        destination: Directory to copy into, created if missing. A path is
            resolved on the source's provider.
        recursive: Copy subdirectories and their files too.
        overwrite: Replace destination files that already exist.

    Returns:
        Handle for the destination directory, refreshed.

    Raises:
        NotFoundError: If source does not exist. Nothing is created.
        AlreadyExistsError: If a destination file exists and overwrite is
            False. Files copied before the collision are kept.
        InvalidArgumentError: If destination is the source itself, or a
            recursive copy targets a directory inside the source tree.
    """
    source.refresh()
    if not source.exists:
        raise NotFoundError(f"Source directory not found: '{source.path}'", source.path)

    if isinstance(destination, DirectoryHandle):
        target = destination
    else:
        target = DirectoryHandle(source.filesystem, destination)

    if target == source:
        raise InvalidArgumentError(f"Cannot copy '{source.path}' onto itself")
    if recursive and is_ancestor_of(source, target):
        raise InvalidArgumentError(f"Cannot copy '{source.path}' into its own subtree '{target.path}'")

    logger.debug(
        "Copying %s to %s (recursive=%s, overwrite=%s)", source.path, target.path, recursive, overwrite
    )
    _copy_directory(source, source, target, recursive, overwrite)

    target.refresh()
    return target


def _copy_directory(
    root: DirectoryHandle,
    current: DirectoryHandle,
    destination: DirectoryHandle,
    recursive: bool,
    overwrite: bool,
) -> None:
    """Copy one directory level, recursing into subdirectories first."""
    target = translate_path(root, current, destination, create_if_missing=True)

    if recursive:
        for subdirectory in current.iter_directories():
            _copy_directory(root, subdirectory, destination, recursive, overwrite)

    for file in current.iter_files():
        file.copy_to(target.file(file.name), overwrite=overwrite)
