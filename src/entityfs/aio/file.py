"""AsyncFile: asyncio file entity."""

from __future__ import annotations

import asyncio
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
from .base import AsyncEntityBase


class AsyncFile(AsyncEntityBase):
    """A regular file on the local filesystem (asyncio)."""

    __slots__ = ()

    @classmethod
    async def open(cls, path: str | os.PathLike[str]) -> Self:
        """Open an existing file.

        Raises:
            PathNotFoundError: if *path* does not exist or is not a file.
        """
        resolved = normalize_path(path)
        if not await asyncio.to_thread(_io.check_file, resolved):
            raise PathNotFoundError(
                f"The path '{resolved}' is not a file or does not exist"
            )
        return cls(resolved)

    @classmethod
    async def create(cls, path: str | os.PathLike[str]) -> Self:
        resolved = normalize_path(path)
        if resolved.parent == resolved:
            raise InvalidPathError(f"Cannot create a file at root '{resolved}'")
        await asyncio.to_thread(_io.create_file, resolved)
        return cls(resolved)

    @classmethod
    def from_handle(cls, handle: IO[Any]) -> Self:
        name = getattr(handle, "name", None)
        if not isinstance(name, (str, bytes, os.PathLike)):
            raise InvalidPathError(f"File object {handle!r} has no path")
        return cls(normalize_path(os.fsdecode(name)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def size(self) -> int:
        return await asyncio.to_thread(_io.file_size, self._path)

    async def read_bytes(self) -> bytes:
        return await asyncio.to_thread(self._path.read_bytes)

    def display_name(self) -> str:
        return display_name(self._path)

    def mime_type(self) -> str:
        return guess_mime_type(self.display_name())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def rename(self, name: str) -> None:
        new_path = set_extension(sibling(self._path, name), self._path.suffix)
        await asyncio.to_thread(os.rename, self._path, new_path)
        self._path = new_path

    async def copy_new(self, destination: str | os.PathLike[str]) -> None:
        target = normalize_path(destination)
        if await asyncio.to_thread(os.path.lexists, target):
            raise ConflictError(self, target, TransferStatus.COPY_FILE)
        await asyncio.to_thread(_io.copy_file, self._path, target)

    async def move_new(self, destination: str | os.PathLike[str]) -> None:
        target = normalize_path(destination)
        if await asyncio.to_thread(os.path.lexists, target):
            raise ConflictError(self, target, TransferStatus.MOVE_FILE)
        if target.parent == target:
            raise InvalidPathError()
        await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(_io.relocate_file, self._path, target)
        self._path = target
