"""Filesystem provider backed by the local disk.

This module provides the production implementation of the FileSystem
protocol. RealFileSystem wraps standard library pathlib, os, shutil and
tempfile operations.
"""

from __future__ import annotations

import os
import secrets
import shutil
import string
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import IO, Any

from fs_extensions.config import ExtensionsConfig

# Characters used for generated temp names
RANDOM_NAME_ALPHABET = string.ascii_lowercase + string.digits


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, config: ExtensionsConfig | None = None) -> None:
        """Initialize the provider.

        Args:
            config: Provider settings. Defaults to ExtensionsConfig().

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config = config or ExtensionsConfig()

    @classmethod
    def create(cls, config: ExtensionsConfig) -> RealFileSystem:
        """Create a provider with explicit settings.

        Args:
            config: Provider settings.

        Returns:
            Configured RealFileSystem instance.
        """
        return cls(config=config)

    @classmethod
    def create_default(cls) -> RealFileSystem:
        """Create a provider configured from the environment.

        Returns:
            RealFileSystem using ExtensionsConfig.from_env().
        """
        return cls(config=ExtensionsConfig.from_env())

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def touch(self, path: Path) -> None:
        """Create an empty file; the descriptor is closed before returning."""
        path.touch(exist_ok=False)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        path.rmdir()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def iter_files(self, path: Path) -> Iterator[Path]:
        """Iterate over files directly inside a directory, sorted by name."""
        return iter(sorted(child for child in path.iterdir() if child.is_file()))

    def iter_directories(self, path: Path) -> Iterator[Path]:
        """Iterate over immediate subdirectories, sorted by name.

        Symlinks to directories are skipped so tree walks cannot loop.
        """
        return iter(sorted(child for child in path.iterdir() if child.is_dir() and not child.is_symlink()))

    def open(
        self,
        path: Path,
        mode: str = "r",
        encoding: str | None = None,
        newline: str | None = None,
    ) -> IO[Any]:
        """Open a stream on a file."""
        if "b" in mode:
            return path.open(mode)
        return path.open(mode, encoding=encoding or self.config.encoding, newline=newline)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file with its metadata, replacing the destination file.

        A directory at ``dst`` is an error, never a place to copy into.
        """
        shutil.copyfile(src, dst)
        shutil.copystat(src, dst)

    def read_text(self, path: Path, encoding: str | None = None) -> str:
        """Read text content from a file."""
        return path.read_text(encoding=encoding or self.config.encoding)

    def write_text(self, path: Path, content: str, encoding: str | None = None) -> None:
        """Write text content to a file."""
        path.write_text(content, encoding=encoding or self.config.encoding)

    def temp_root(self) -> Path:
        """Return the configured temp root or the platform temp directory."""
        return self.config.temp_root or Path(tempfile.gettempdir())

    def random_name(self) -> str:
        """Return a random lowercase alphanumeric name."""
        length = self.config.random_name_length
        return "".join(secrets.choice(RANDOM_NAME_ALPHABET) for _ in range(length))

    def cwd(self) -> Path:
        """Return the current working directory."""
        return Path.cwd()

    def path_key(self, path: Path) -> tuple[str, ...]:
        """Return absolute, case-normalized path components."""
        return Path(os.path.normcase(os.path.abspath(path))).parts
