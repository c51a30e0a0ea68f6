"""File: blocking file entity."""

from __future__ import annotations

import os
from typing import IO, Any, Self

from .. import _io
from ..exceptions import ConflictError, InvalidPathError, PathNotFoundError
from ..paths import (
    display_name,
    guess_mime_type,
    normalize_path,
    set_extension,
    sibling,
)
from ..types import TransferStatus
from .base import EntityBase


class File(EntityBase):
    """A regular file on the local filesystem.

    Usage::

        f = File.open("notes/today.txt")
        f.copy_to("/backup")           # raises ConflictError if taken
        f.move("/archive/today.txt")   # replaces whatever is there
    """

    __slots__ = ()

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Self:
        """Open an existing file.

        Raises:
            PathNotFoundError: if *path* does not exist or is not a file.
        """
        resolved = normalize_path(path)
        if not _io.check_file(resolved):
            raise PathNotFoundError(
                f"The path '{resolved}' is not a file or does not exist"
            )
        return cls(resolved)

    @classmethod
    def create(cls, path: str | os.PathLike[str]) -> Self:
        """Create (or truncate) a file, creating missing parent directories."""
        resolved = normalize_path(path)
        if resolved.parent == resolved:
            raise InvalidPathError(f"Cannot create a file at root '{resolved}'")
        _io.create_file(resolved)
        return cls(resolved)

    @classmethod
    def from_handle(cls, handle: IO[Any]) -> Self:
        """Bind to the file behind an open file object."""
        name = getattr(handle, "name", None)
        if not isinstance(name, (str, bytes, os.PathLike)):
            raise InvalidPathError(f"File object {handle!r} has no path")
        return cls(normalize_path(os.fsdecode(name)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return _io.file_size(self._path)

    def read_bytes(self) -> bytes:
        return self._path.read_bytes()

    def display_name(self) -> str:
        return display_name(self._path)

    def mime_type(self) -> str:
        return guess_mime_type(self.display_name())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def rename(self, name: str) -> None:
        """Rename in place, keeping the parent directory and extension.

        ``File("/a/b.txt").rename("c")`` lands on ``/a/c.txt``.
        """
        new_path = set_extension(sibling(self._path, name), self._path.suffix)
        os.rename(self._path, new_path)
        self._path = new_path

    def copy_new(self, destination: str | os.PathLike[str]) -> None:
        """Copy to exactly *destination*.

        Raises:
            ConflictError: if *destination* already exists.
        """
        target = normalize_path(destination)
        if os.path.lexists(target):
            raise ConflictError(self, target, TransferStatus.COPY_FILE)
        _io.copy_file(self._path, target)

    def move_new(self, destination: str | os.PathLike[str]) -> None:
        """Move to exactly *destination* and repoint this entity there.

        Raises:
            ConflictError: if *destination* already exists.
        """
        target = normalize_path(destination)
        if os.path.lexists(target):
            raise ConflictError(self, target, TransferStatus.MOVE_FILE)
        if target.parent == target:
            raise InvalidPathError()
        target.parent.mkdir(parents=True, exist_ok=True)
        _io.relocate_file(self._path, target)
        self._path = target
