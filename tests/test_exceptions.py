"""Tests for the exception hierarchy and conflict context."""

from __future__ import annotations

import errno
import pickle
from pathlib import Path

import pytest

from entityfs import File
from entityfs.exceptions import (
    ConflictError,
    EntityError,
    InvalidPathError,
    PathNotFoundError,
)
from entityfs.types import TransferStatus


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_cls", [PathNotFoundError, InvalidPathError, ConflictError]
    )
    def test_subclass_of_entity_error(self, exc_cls):
        assert issubclass(exc_cls, EntityError)
        assert issubclass(exc_cls, OSError)

    def test_not_found_is_file_not_found(self):
        err = PathNotFoundError("gone")
        assert isinstance(err, FileNotFoundError)
        assert err.errno == errno.ENOENT
        assert "gone" in str(err)

    def test_invalid_path_is_value_error(self):
        err = InvalidPathError()
        assert isinstance(err, ValueError)
        assert err.errno == errno.EINVAL
        assert "Invalid path" in str(err)


class TestConflictError:
    def test_carries_context(self, tmp_path):
        f = File.open_unchecked(tmp_path / "a.txt")
        dest = tmp_path / "b.txt"
        err = ConflictError(f, dest, TransferStatus.MOVE_FILE)

        assert err.entity is f
        assert err.destination == dest
        assert err.status is TransferStatus.MOVE_FILE
        assert err.errno == errno.EEXIST
        assert isinstance(err, FileExistsError)
        assert err.recoverable is True
        assert "already exists" in str(err)

    def test_repr(self):
        err = ConflictError(
            File.open_unchecked("/a"), Path("/b"), TransferStatus.COPY_FILE
        )
        assert "copy_file" in repr(err)
        assert "'/b'" in repr(err)

    def test_pickle_round_trip(self, tmp_path):
        f = File.open_unchecked(tmp_path / "a.txt")
        err = ConflictError(f, tmp_path / "b.txt", TransferStatus.MOVE_DIRECTORY)

        restored = pickle.loads(pickle.dumps(err))

        assert type(restored) is ConflictError
        assert restored.entity == f
        assert restored.destination == tmp_path / "b.txt"
        assert restored.status is TransferStatus.MOVE_DIRECTORY
        assert restored.errno == errno.EEXIST
        assert str(restored) == str(err)

    def test_not_recoverable_with_other_errno(self, tmp_path):
        err = ConflictError(
            File.open_unchecked(tmp_path / "a"),
            tmp_path / "b",
            TransferStatus.COPY_FILE,
        )
        err.errno = errno.EACCES
        assert err.recoverable is False


class TestTransferStatus:
    def test_flags(self):
        assert TransferStatus.COPY_FILE.is_copy
        assert not TransferStatus.MOVE_DIRECTORY.is_copy
        assert TransferStatus.MOVE_DIRECTORY.is_directory
        assert not TransferStatus.COPY_FILE.is_directory
