"""Tests for scoped temporary files and directories."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fs_extensions.errors import AlreadyExistsError, InvalidArgumentError
from fs_extensions.filesystem import RealFileSystem
from fs_extensions.handles import DirectoryHandle, FileHandle
from fs_extensions.scoped import (
    ScopedResource,
    create_scoped_directory,
    create_scoped_file,
    delete_directory,
    scoped_directory,
    scoped_file,
)


class TestCreateScopedDirectory:
    """Tests for create_scoped_directory."""

    def test_random_directory_under_temp_root(self, fs: RealFileSystem, temp_root: Path) -> None:
        """Without a path, a fresh directory appears under the temp root."""
        resource, directory = create_scoped_directory(fs)

        assert directory.exists is True
        assert directory.path.parent == temp_root
        assert directory.path.is_dir()
        assert resource.handle is directory

        resource.release()

        assert directory.exists is False
        assert not directory.path.exists()

    def test_explicit_path(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """An explicit path is used as given, including missing parents."""
        target = tmp_path / "outer" / "scoped"

        resource, directory = create_scoped_directory(fs, target)

        assert directory.path == target
        assert target.is_dir()
        resource.release()
        assert not target.exists()

    def test_release_deletes_recursively(self, fs: RealFileSystem) -> None:
        """Contents added during the scope are removed with the directory."""
        resource, directory = create_scoped_directory(fs)
        (directory.path / "sub").mkdir()
        (directory.path / "sub" / "file.txt").write_text("x")

        resource.release()

        assert not directory.path.exists()

    def test_release_twice_is_noop(self, fs: RealFileSystem) -> None:
        """A second release neither raises nor deletes again."""
        resource, directory = create_scoped_directory(fs)

        resource.release()
        directory.path.mkdir()
        resource.release()

        assert resource.released is True
        assert directory.path.is_dir()

    def test_existing_path_raises_with_structured_data(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """A collision carries the path as data, not in the message."""
        target = tmp_path / "taken"
        target.mkdir()

        with pytest.raises(AlreadyExistsError) as exc_info:
            create_scoped_directory(fs, target)

        assert exc_info.value.data["path"] == target
        assert exc_info.value.path == target
        assert str(target) not in str(exc_info.value)
        assert target.is_dir()

    def test_existing_file_at_path_raises(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """A file at the requested path also counts as a collision."""
        target = tmp_path / "file"
        target.write_text("x")

        with pytest.raises(AlreadyExistsError):
            create_scoped_directory(fs, target)

    def test_lost_creation_race_raises(self, mock_filesystem: MagicMock) -> None:
        """If the directory appears between check and create, the loser fails."""
        mock_filesystem.mkdir.side_effect = FileExistsError("raced")

        with pytest.raises(AlreadyExistsError) as exc_info:
            create_scoped_directory(mock_filesystem)

        assert exc_info.value.path == Path("/tmp/fake/abc123")

    def test_context_manager(self, fs: RealFileSystem) -> None:
        """Leaving the with block releases the directory."""
        resource, directory = create_scoped_directory(fs)

        with resource as handle:
            assert handle is directory
            assert directory.path.is_dir()

        assert not directory.path.exists()
        assert resource.released is True

    def test_context_manager_releases_on_error(self, fs: RealFileSystem) -> None:
        """An exception inside the scope still deletes the directory."""
        resource, directory = create_scoped_directory(fs)

        with pytest.raises(RuntimeError):
            with resource:
                raise RuntimeError("boom")

        assert not directory.path.exists()

    def test_custom_factory(self, fs: RealFileSystem) -> None:
        """A factory controls how the handle is wrapped and deleted."""
        deleted: list[DirectoryHandle] = []

        def factory(handle: DirectoryHandle) -> ScopedResource[DirectoryHandle]:
            return ScopedResource(handle, deleter=deleted.append)

        resource, directory = create_scoped_directory(fs, factory=factory)
        resource.release()

        assert deleted == [directory]
        assert directory.path.is_dir()

    def test_subclass_overriding_delete(self, fs: RealFileSystem) -> None:
        """Subclasses may replace the deletion step."""

        class ArchivingResource(ScopedResource[DirectoryHandle]):
            archived = False

            def delete(self) -> None:
                self.archived = True
                delete_directory(self.handle)

        resource, directory = create_scoped_directory(fs, factory=ArchivingResource)
        resource.release()

        assert isinstance(resource, ArchivingResource)
        assert resource.archived is True
        assert not directory.path.exists()


class TestCreateScopedFile:
    """Tests for create_scoped_file."""

    def test_random_file_under_temp_root(self, fs: RealFileSystem, temp_root: Path) -> None:
        """Without a path, an empty file appears under the temp root."""
        resource, file = create_scoped_file(fs)

        assert file.exists is True
        assert file.path.parent == temp_root
        assert file.path.read_bytes() == b""

        resource.release()

        assert file.exists is False
        assert not file.path.exists()

    def test_file_can_be_reopened_immediately(self, fs: RealFileSystem) -> None:
        """The creation stream is closed, so the file is writable at once."""
        resource, file = create_scoped_file(fs)

        with resource:
            with file.open("w") as stream:
                stream.write("data")
            assert file.path.read_text() == "data"

        assert not file.path.exists()

    def test_existing_path_raises_with_structured_data(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """A collision carries that exact path in the error data."""
        target = tmp_path / "taken.txt"
        target.write_text("keep")

        with pytest.raises(AlreadyExistsError) as exc_info:
            create_scoped_file(fs, target)

        assert exc_info.value.data == {"path": target}
        assert str(target) not in str(exc_info.value)
        assert target.read_text() == "keep"

    def test_release_twice_is_noop(self, fs: RealFileSystem) -> None:
        """Double release never raises."""
        resource, _ = create_scoped_file(fs)

        resource.release()
        resource.release()

        assert resource.released is True

    def test_missing_parent_propagates(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """Files are not given parent directories implicitly."""
        with pytest.raises(FileNotFoundError):
            create_scoped_file(fs, tmp_path / "missing" / "file.txt")


class TestScopedResource:
    """Tests for ScopedResource itself."""

    def test_none_handle_rejected(self) -> None:
        """A resource must own something."""
        with pytest.raises(InvalidArgumentError, match="handle must not be None"):
            ScopedResource(None)  # type: ignore[arg-type]

    def test_refreshes_on_construction(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """Wrapping an existing object refreshes the handle."""
        file = FileHandle(fs, tmp_path / "late.txt")
        (tmp_path / "late.txt").touch()

        resource = ScopedResource(file)

        assert file.exists is True
        resource.release()
        assert not (tmp_path / "late.txt").exists()

    def test_already_removed_is_not_an_error(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """Release tolerates an object deleted behind its back."""
        (tmp_path / "gone").mkdir()
        resource = ScopedResource(DirectoryHandle(fs, tmp_path / "gone"))
        (tmp_path / "gone").rmdir()

        resource.release()

        assert resource.released is True

    def test_failed_delete_can_be_retried(self, tmp_path: Path, fs: RealFileSystem) -> None:
        """A release that raised did not happen, so it may be called again."""
        (tmp_path / "dir").mkdir()
        attempts: list[int] = []

        def flaky(handle: DirectoryHandle) -> None:
            attempts.append(1)
            if len(attempts) == 1:
                raise PermissionError("locked")
            delete_directory(handle)

        resource = ScopedResource(DirectoryHandle(fs, tmp_path / "dir"), deleter=flaky)

        with pytest.raises(PermissionError):
            resource.release()
        assert resource.released is False

        resource.release()
        assert resource.released is True
        assert not (tmp_path / "dir").exists()

    def test_default_deleter_for_file(self, mock_filesystem: MagicMock) -> None:
        """File resources unlink, directory resources delete the tree."""
        mock_filesystem.is_file.return_value = True
        mock_filesystem.is_dir.return_value = True

        ScopedResource(FileHandle(mock_filesystem, "/v/f")).release()
        ScopedResource(DirectoryHandle(mock_filesystem, "/v/d")).release()

        mock_filesystem.unlink.assert_called_once_with(Path("/v/f"))
        mock_filesystem.rmtree.assert_called_once_with(Path("/v/d"))

    def test_repr(self, fs: RealFileSystem) -> None:
        """repr shows the state."""
        resource, _ = create_scoped_directory(fs)
        assert "active" in repr(resource)
        resource.release()
        assert "released" in repr(resource)


class TestScopedContextManagers:
    """Tests for the scoped_directory and scoped_file helpers."""

    def test_scoped_directory(self, fs: RealFileSystem) -> None:
        """The yielded directory is gone after the block."""
        with scoped_directory(fs) as directory:
            assert directory.path.is_dir()
            path = directory.path

        assert not path.exists()

    def test_scoped_file_releases_on_error(self, fs: RealFileSystem) -> None:
        """The file is deleted even when the block raises."""
        with pytest.raises(KeyError):
            with scoped_file(fs) as file:
                path = file.path
                raise KeyError("boom")

        assert not path.exists()
