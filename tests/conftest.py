"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fs_extensions.config import ExtensionsConfig
from fs_extensions.filesystem import RealFileSystem
from fs_extensions.handles import DirectoryHandle


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    """Create a directory used as the provider's temp root."""
    root = tmp_path / "temp-root"
    root.mkdir()
    return root


@pytest.fixture
def fs(temp_root: Path) -> RealFileSystem:
    """Create a real provider whose temp objects land under tmp_path."""
    return RealFileSystem.create(ExtensionsConfig(temp_root=temp_root))


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path, fs: RealFileSystem) -> DirectoryHandle:
    """Create a source directory with one file and one non-empty subdirectory.

    Layout:
        source/file.txt
        source/SubDir/file.txt
    """
    source = tmp_path / "source"
    (source / "SubDir").mkdir(parents=True)
    (source / "file.txt").write_text("top")
    (source / "SubDir" / "file.txt").write_text("nested")
    return DirectoryHandle(fs, source)


@pytest.fixture
def deep_source_tree(tmp_path: Path, fs: RealFileSystem) -> DirectoryHandle:
    """Create a source directory three levels deep.

    Layout:
        deep/a.txt
        deep/one/b.txt
        deep/one/two/c.txt
        deep/one/two/three/ (empty)
        deep/other/d.txt
    """
    source = tmp_path / "deep"
    (source / "one" / "two" / "three").mkdir(parents=True)
    (source / "other").mkdir()
    (source / "a.txt").write_text("a")
    (source / "one" / "b.txt").write_text("b")
    (source / "one" / "two" / "c.txt").write_text("c")
    (source / "other" / "d.txt").write_text("d")
    return DirectoryHandle(fs, source)


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    Paths compare by their components.
    """
    mock_fs = MagicMock()
    mock_fs.exists.return_value = False
    mock_fs.is_dir.return_value = False
    mock_fs.is_file.return_value = False
    mock_fs.read_text.return_value = ""
    mock_fs.path_key.side_effect = lambda path: Path(path).parts
    mock_fs.temp_root.return_value = Path("/tmp/fake")
    mock_fs.random_name.return_value = "abc123"
    return mock_fs
