"""Convenience operations layered over a filesystem provider."""

__version__ = "0.1.0"

# Export the provider interface, handles and core operations
from fs_extensions.config import ExtensionsConfig
from fs_extensions.errors import (
    AlreadyExistsError,
    FileSystemExtensionsError,
    InvalidArgumentError,
    NotFoundError,
)
from fs_extensions.filesystem import RealFileSystem
from fs_extensions.handles import DirectoryHandle, FileHandle, current_directory
from fs_extensions.protocols import FileSystem
from fs_extensions.scoped import (
    ScopedResource,
    create_scoped_directory,
    create_scoped_file,
    scoped_directory,
    scoped_file,
)
from fs_extensions.tree import copy_tree, diff_segments, is_ancestor_of, translate_path

__all__ = [
    "__version__",
    "AlreadyExistsError",
    "DirectoryHandle",
    "ExtensionsConfig",
    "FileHandle",
    "FileSystem",
    "FileSystemExtensionsError",
    "InvalidArgumentError",
    "NotFoundError",
    "RealFileSystem",
    "ScopedResource",
    "copy_tree",
    "create_scoped_directory",
    "create_scoped_file",
    "current_directory",
    "diff_segments",
    "is_ancestor_of",
    "scoped_directory",
    "scoped_file",
    "translate_path",
]
