"""Shared behavior for blocking entities: queries, permissions, delete."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Self

from .. import _io
from ..exceptions import ConflictError
from ..paths import file_name_of, push_file_name

if TYPE_CHECKING:
    from .dir import Directory

logger = logging.getLogger(__name__)


class EntityBase:
    """A file or directory bound to an absolute path.

    Subclasses provide ``open``, ``rename``, ``copy_new``, ``move_new`` and
    ``size``; everything else is derived from the path.
    """

    __slots__ = ("_path",)

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def open_unchecked(cls, path: str | os.PathLike[str]) -> Self:
        """Bind to *path* without normalizing it or checking it exists.

        The caller guarantees *path* is absolute, normalized and of the
        right kind, e.g. because it was just returned by a directory listing.
        """
        return cls(Path(path))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    def as_path(self) -> Path:
        return self._path

    def file_name(self) -> str | None:
        return file_name_of(self._path)

    def metadata(self) -> os.stat_result:
        return os.stat(self._path)

    def permissions(self) -> int:
        return _io.permissions(self._path)

    def read_only(self) -> bool:
        return _io.is_read_only(self._path)

    def parent(self) -> Directory | None:
        """Return None if the path is a root directory."""
        from .dir import Directory

        parent = self._path.parent
        if parent == self._path:
            return None
        try:
            return Directory.open(parent)
        except OSError:
            logger.debug("parent() of %s unavailable", self._path, exc_info=True)
            return None

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_readonly(self, readonly: bool) -> None:
        _io.set_read_only(self._path, readonly)

    def set_permissions(self, mode: int) -> None:
        os.chmod(self._path, mode)

    def delete(self) -> None:
        """Remove the backing object.  Do not use the entity afterwards."""
        if self.read_only():
            self.set_readonly(False)
        _io.remove_any(self._path)

    def copy_to(self, directory: str | os.PathLike[str]) -> None:
        """Copy into *directory*, keeping the current file name."""
        self.copy_new(push_file_name(self.file_name(), directory))

    def move_to(self, directory: str | os.PathLike[str]) -> None:
        """Move into *directory*, keeping the current file name."""
        self.move_new(push_file_name(self.file_name(), directory))

    def copy(self, destination: str | os.PathLike[str]) -> None:
        """Copy to *destination*, replacing whatever is already there."""
        from .recover import recover

        try:
            self.copy_new(destination)
        except ConflictError as e:
            recover(e)

    def move(self, destination: str | os.PathLike[str]) -> None:
        """Move to *destination*, replacing whatever is already there."""
        from .recover import recover

        try:
            self.move_new(destination)
        except ConflictError as e:
            recover(e)

    def copy_new(self, destination: str | os.PathLike[str]) -> None:
        raise NotImplementedError

    def move_new(self, destination: str | os.PathLike[str]) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __fspath__(self) -> str:
        return str(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._path == other._path  # type: ignore[attr-defined]
