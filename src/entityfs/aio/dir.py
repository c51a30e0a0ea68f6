"""AsyncDirectory: asyncio directory entity and the tree transfer engine."""

from __future__ import annotations

import asyncio
import logging
import os
from collections import deque
from typing import TYPE_CHECKING, Self

from .. import _io
from ..exceptions import ConflictError, InvalidPathError, PathNotFoundError
from ..paths import normalize_path, rebase, sibling
from ..types import TransferStatus
from .base import AsyncEntityBase
from .file import AsyncFile

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class AsyncDirectory(AsyncEntityBase):
    """A directory on the local filesystem (asyncio)."""

    __slots__ = ()

    @classmethod
    async def open(cls, path: str | os.PathLike[str]) -> Self:
        """Open an existing directory.

        Raises:
            PathNotFoundError: if *path* does not exist or is not a directory.
        """
        resolved = normalize_path(path)
        if not await asyncio.to_thread(resolved.is_dir):
            raise PathNotFoundError(
                f"The path '{resolved}' is not a directory or does not exist"
            )
        return cls(resolved)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def children(self) -> list[Path]:
        return await asyncio.to_thread(_io.read_dir, self._path)

    async def files(self) -> list[AsyncFile]:
        paths = await asyncio.to_thread(_io.read_dir, self._path, "file")
        return [AsyncFile.open_unchecked(p) for p in paths]

    async def directories(self) -> list[AsyncDirectory]:
        paths = await asyncio.to_thread(_io.read_dir, self._path, "directory")
        return [AsyncDirectory.open_unchecked(p) for p in paths]

    async def size(self) -> int:
        return await asyncio.to_thread(_io.tree_size, self._path)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def rename(self, name: str) -> None:
        new_path = sibling(self._path, name)
        await asyncio.to_thread(os.rename, self._path, new_path)
        self._path = new_path

    async def copy_new(self, destination: str | os.PathLike[str]) -> None:
        target = normalize_path(destination)
        if await asyncio.to_thread(os.path.lexists, target):
            raise ConflictError(self, target, TransferStatus.COPY_DIRECTORY)
        await transfer(self, target, is_copy=True)

    async def move_new(self, destination: str | os.PathLike[str]) -> None:
        target = normalize_path(destination)
        if await asyncio.to_thread(os.path.lexists, target):
            raise ConflictError(self, target, TransferStatus.MOVE_DIRECTORY)
        if not await asyncio.to_thread(_io.rename_tree, self._path, target):
            await transfer(self, target, is_copy=False)
        self._path = target


async def transfer(source: AsyncDirectory, destination: Path, *, is_copy: bool) -> None:
    """Mirror *source*'s tree onto *destination*, breadth first.

    Directories and files are handled strictly one at a time; the walk
    yields to the event loop at every filesystem call but never runs two
    transfers concurrently.
    """
    from .recover import recover

    root = source.as_path()
    if destination.is_relative_to(root):
        raise InvalidPathError(f"Cannot transfer '{root}' into itself")
    queue: deque[AsyncDirectory] = deque([AsyncDirectory.open_unchecked(root)])
    while queue:
        current = queue.popleft()
        queue.extend(await current.directories())

        target = rebase(current.as_path(), root, destination)
        if await asyncio.to_thread(_io.ensure_dir, target):
            logger.debug("Created directory %s", target)

        for file in await current.files():
            try:
                if is_copy:
                    await file.copy_to(target)
                else:
                    await file.move_to(target)
            except ConflictError as e:
                logger.debug("Replacing %s", e.destination)
                await recover(e)

        links = await asyncio.to_thread(_io.read_dir, current.as_path(), "link")
        for link in links:
            logger.debug("Carrying link %s", link)
            await asyncio.to_thread(
                _io.transfer_link, link, target / link.name, is_copy=is_copy
            )

    if not is_copy:
        await AsyncDirectory.open_unchecked(root).delete()
