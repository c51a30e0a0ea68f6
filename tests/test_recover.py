"""Tests for conflict recovery on blocking entities."""

from __future__ import annotations

import errno

import pytest

from entityfs import Directory, File, recover
from entityfs.exceptions import ConflictError, PathNotFoundError
from entityfs.types import TransferStatus


def _conflict(call, *args) -> ConflictError:
    with pytest.raises(ConflictError) as exc_info:
        call(*args)
    return exc_info.value


class TestPassthrough:
    def test_non_conflict_reraised(self):
        err = PathNotFoundError("gone")
        with pytest.raises(PathNotFoundError):
            recover(err)

    def test_arbitrary_exception_reraised(self):
        with pytest.raises(RuntimeError, match="boom"):
            recover(RuntimeError("boom"))

    def test_unrecoverable_conflict_reraised(self, tmp_path):
        err = ConflictError(
            File.open_unchecked(tmp_path / "a"), tmp_path / "b", TransferStatus.COPY_FILE
        )
        err.errno = errno.EACCES
        with pytest.raises(ConflictError):
            recover(err)


class TestFileRecovery:
    def test_copy_file(self, tmp_path):
        (tmp_path / "a.txt").write_text("new")
        (tmp_path / "b.txt").write_text("old")
        f = File.open(tmp_path / "a.txt")

        err = _conflict(f.copy_new, tmp_path / "b.txt")
        assert err.status is TransferStatus.COPY_FILE
        result = recover(err)

        assert result is f
        assert f.as_path() == tmp_path / "a.txt"
        assert (tmp_path / "a.txt").read_text() == "new"
        assert (tmp_path / "b.txt").read_text() == "new"

    def test_move_file_repoints(self, tmp_path):
        (tmp_path / "a.txt").write_text("new")
        (tmp_path / "b.txt").write_text("old")
        f = File.open(tmp_path / "a.txt")

        err = _conflict(f.move_new, tmp_path / "b.txt")
        recover(err)

        assert f.as_path() == tmp_path / "b.txt"
        assert (tmp_path / "b.txt").read_text() == "new"
        assert not (tmp_path / "a.txt").exists()

    def test_move_file_cross_device_repoints(self, tmp_path, cross_device):
        (tmp_path / "a.txt").write_text("new")
        (tmp_path / "b.txt").write_text("old")
        f = File.open(tmp_path / "a.txt")

        recover(_conflict(f.move_new, tmp_path / "b.txt"))

        assert cross_device
        assert f.as_path() == tmp_path / "b.txt"
        assert (tmp_path / "b.txt").read_text() == "new"
        assert not (tmp_path / "a.txt").exists()

    def test_file_over_directory(self, tmp_path, make_tree):
        (tmp_path / "a.txt").write_text("new")
        make_tree(tmp_path / "b", {"inner.txt": "x"})
        f = File.open(tmp_path / "a.txt")

        recover(_conflict(f.copy_new, tmp_path / "b"))

        assert (tmp_path / "b").is_file()
        assert (tmp_path / "b").read_text() == "new"

    def test_dangling_symlink_is_a_conflict(self, tmp_path):
        (tmp_path / "a.txt").write_text("new")
        (tmp_path / "link").symlink_to(tmp_path / "missing")
        f = File.open(tmp_path / "a.txt")

        recover(_conflict(f.copy_new, tmp_path / "link"))

        assert not (tmp_path / "link").is_symlink()
        assert (tmp_path / "link").read_text() == "new"
        assert not (tmp_path / "missing").exists()


class TestDirectoryRecovery:
    def test_copy_directory_merges(self, tmp_path, make_tree, read_tree):
        src = make_tree(tmp_path / "s", {"a.txt": "A", "x/b.txt": "B"})
        dst = make_tree(tmp_path / "d", {"a.txt": "old", "only.txt": "kept"})
        d = Directory.open(src)

        err = _conflict(d.copy_new, dst)
        assert err.status is TransferStatus.COPY_DIRECTORY
        result = recover(err)

        assert result is d
        assert d.as_path() == src
        assert read_tree(dst) == {
            "a.txt": b"A",
            "only.txt": b"kept",
            "x/b.txt": b"B",
        }
        assert read_tree(src) == {"a.txt": b"A", "x/b.txt": b"B"}

    def test_move_directory_merges_and_repoints(self, tmp_path, make_tree, read_tree):
        src = make_tree(tmp_path / "s", {"a.txt": "A", "x/b.txt": "B"})
        dst = make_tree(tmp_path / "d", {"x/b.txt": "old"})
        d = Directory.open(src)

        err = _conflict(d.move_new, dst)
        assert err.status is TransferStatus.MOVE_DIRECTORY
        recover(err)

        assert d.as_path() == dst
        assert read_tree(dst) == {"a.txt": b"A", "x/b.txt": b"B"}
        assert not src.exists()

    def test_move_directory_onto_empty_uses_rename(self, tmp_path, make_tree):
        src = make_tree(tmp_path / "s", {"a.txt": "A"})
        dst = tmp_path / "d"
        dst.mkdir()
        d = Directory.open(src)

        recover(_conflict(d.move_new, dst))

        assert d.as_path() == dst
        assert (dst / "a.txt").read_text() == "A"
        assert not src.exists()

    def test_move_directory_cross_device_is_a_move(
        self, tmp_path, make_tree, read_tree, cross_device
    ):
        src = make_tree(tmp_path / "s", {"a.txt": "A", "x/b.txt": "B"})
        dst = make_tree(tmp_path / "d", {"x/b.txt": "old"})
        d = Directory.open(src)

        recover(_conflict(d.move_new, dst))

        assert cross_device
        assert d.as_path() == dst
        assert read_tree(dst) == {"a.txt": b"A", "x/b.txt": b"B"}
        assert not src.exists()
