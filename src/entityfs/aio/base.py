"""Shared behavior for asyncio entities.

Every blocking primitive runs through ``asyncio.to_thread`` so the event
loop stays free while the filesystem works.  Semantics match
``entityfs.sync`` exactly.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Self

from .. import _io
from ..exceptions import ConflictError
from ..paths import file_name_of, push_file_name

if TYPE_CHECKING:
    from .dir import AsyncDirectory

logger = logging.getLogger(__name__)


class AsyncEntityBase:
    """A file or directory bound to an absolute path (asyncio)."""

    __slots__ = ("_path",)

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def open_unchecked(cls, path: str | os.PathLike[str]) -> Self:
        """Bind to *path* without normalizing it or checking it exists.

        The caller guarantees *path* is absolute, normalized and of the
        right kind.
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

    async def metadata(self) -> os.stat_result:
        return await asyncio.to_thread(os.stat, self._path)

    async def permissions(self) -> int:
        return await asyncio.to_thread(_io.permissions, self._path)

    async def read_only(self) -> bool:
        return await asyncio.to_thread(_io.is_read_only, self._path)

    async def parent(self) -> AsyncDirectory | None:
        """Return None if the path is a root directory."""
        from .dir import AsyncDirectory

        parent = self._path.parent
        if parent == self._path:
            return None
        try:
            return await AsyncDirectory.open(parent)
        except OSError:
            logger.debug("parent() of %s unavailable", self._path, exc_info=True)
            return None

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def set_readonly(self, readonly: bool) -> None:
        await asyncio.to_thread(_io.set_read_only, self._path, readonly)

    async def set_permissions(self, mode: int) -> None:
        await asyncio.to_thread(os.chmod, self._path, mode)

    async def delete(self) -> None:
        """Remove the backing object.  Do not use the entity afterwards."""
        if await self.read_only():
            await self.set_readonly(False)
        await asyncio.to_thread(_io.remove_any, self._path)

    async def copy_to(self, directory: str | os.PathLike[str]) -> None:
        await self.copy_new(push_file_name(self.file_name(), directory))

    async def move_to(self, directory: str | os.PathLike[str]) -> None:
        await self.move_new(push_file_name(self.file_name(), directory))

    async def copy(self, destination: str | os.PathLike[str]) -> None:
        """Copy to *destination*, replacing whatever is already there."""
        from .recover import recover

        try:
            await self.copy_new(destination)
        except ConflictError as e:
            await recover(e)

    async def move(self, destination: str | os.PathLike[str]) -> None:
        """Move to *destination*, replacing whatever is already there."""
        from .recover import recover

        try:
            await self.move_new(destination)
        except ConflictError as e:
            await recover(e)

    async def copy_new(self, destination: str | os.PathLike[str]) -> None:
        raise NotImplementedError

    async def move_new(self, destination: str | os.PathLike[str]) -> None:
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
