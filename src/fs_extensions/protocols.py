"""Protocol definitions for the filesystem provider.

This module defines the abstract interface every filesystem provider
satisfies. Designing to an interface enables:
- Running the extensions against the real disk or a test double
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import IO, Any, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts the primitive calls (existence checks, creation, deletion,
    enumeration, streams) the extensions are layered on.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a file, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def touch(self, path: Path) -> None:
        """Create an empty file, failing if anything exists at the path.

        Args:
            path: Path of the file to create.

        Raises:
            FileExistsError: If the path already exists.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory.

        Args:
            path: Path to remove.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
        """
        ...

    def iter_files(self, path: Path) -> Iterator[Path]:
        """Iterate over the files directly inside a directory.

        Args:
            path: Directory to enumerate.

        Returns:
            Iterator of file paths, not recursing into subdirectories.
        """
        ...

    def iter_directories(self, path: Path) -> Iterator[Path]:
        """Iterate over the immediate subdirectories of a directory.

        Args:
            path: Directory to enumerate.

        Returns:
            Iterator of subdirectory paths.
        """
        ...

    def open(
        self,
        path: Path,
        mode: str = "r",
        encoding: str | None = None,
        newline: str | None = None,
    ) -> IO[Any]:
        """Open a stream on a file.

        Args:
            path: File to open.
            mode: Mode string as accepted by the builtin ``open``.
            encoding: Text encoding (text modes only).
            newline: Newline translation (text modes only).

        Returns:
            An open file object. The caller closes it.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a single file, replacing the destination if present.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def read_text(self, path: Path, encoding: str | None = None) -> str:
        """Read text content from a file.

        Args:
            path: Path to the file.
            encoding: Text encoding.

        Returns:
            File content as string.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_text(self, path: Path, content: str, encoding: str | None = None) -> None:
        """Write text content to a file.

        Args:
            path: Path to the file.
            content: Content to write.
            encoding: Text encoding.
        """
        ...

    def temp_root(self) -> Path:
        """Return the directory temporary objects are created under."""
        ...

    def random_name(self) -> str:
        """Return a random file name suitable for a temporary object."""
        ...

    def cwd(self) -> Path:
        """Return the current working directory."""
        ...

    def path_key(self, path: Path) -> tuple[str, ...]:
        """Return the components used to compare two paths for equality.

        Args:
            path: Path to normalize.

        Returns:
            Tuple of normalized path components.
        """
        ...
