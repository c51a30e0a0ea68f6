"""Directory: blocking directory entity and the tree transfer engine."""

from __future__ import annotations

import logging
import os
from collections import deque
from typing import TYPE_CHECKING, Self

from .. import _io
from ..exceptions import ConflictError, InvalidPathError, PathNotFoundError
from ..paths import normalize_path, rebase, sibling
from ..types import TransferStatus
from .base import EntityBase
from .file import File

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class Directory(EntityBase):
    """A directory on the local filesystem.

    Copies and moves mirror the whole subtree.  Files that collide with
    existing files at the destination are replaced as the walk reaches them.
    """

    __slots__ = ()

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Self:
        """Open an existing directory.

        Raises:
            PathNotFoundError: if *path* does not exist or is not a directory.
        """
        resolved = normalize_path(path)
        if not resolved.is_dir():
            raise PathNotFoundError(
                f"The path '{resolved}' is not a directory or does not exist"
            )
        return cls(resolved)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def children(self) -> list[Path]:
        """Every immediate child path, files and directories alike."""
        return _io.read_dir(self._path)

    def files(self) -> list[File]:
        return [File.open_unchecked(p) for p in _io.read_dir(self._path, "file")]

    def directories(self) -> list[Directory]:
        return [
            Directory.open_unchecked(p)
            for p in _io.read_dir(self._path, "directory")
        ]

    def size(self) -> int:
        """Total bytes of all files in the tree.  Never raises."""
        return _io.tree_size(self._path)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def rename(self, name: str) -> None:
        new_path = sibling(self._path, name)
        os.rename(self._path, new_path)
        self._path = new_path

    def copy_new(self, destination: str | os.PathLike[str]) -> None:
        """Copy the whole tree to exactly *destination*.

        Raises:
            ConflictError: if *destination* already exists.
        """
        target = normalize_path(destination)
        if os.path.lexists(target):
            raise ConflictError(self, target, TransferStatus.COPY_DIRECTORY)
        transfer(self, target, is_copy=True)

    def move_new(self, destination: str | os.PathLike[str]) -> None:
        """Move the whole tree to exactly *destination*.

        Tries a single rename first and falls back to a file-by-file move.

        Raises:
            ConflictError: if *destination* already exists.
        """
        target = normalize_path(destination)
        if os.path.lexists(target):
            raise ConflictError(self, target, TransferStatus.MOVE_DIRECTORY)
        if not _io.rename_tree(self._path, target):
            transfer(self, target, is_copy=False)
        self._path = target


def transfer(source: Directory, destination: Path, *, is_copy: bool) -> None:
    """Mirror *source*'s tree onto *destination*, breadth first.

    Each directory is recreated (or reused if it already exists) before its
    files are copied or moved into it.  File conflicts are recovered one at
    a time as they occur.  Links that are not files (links to
    directories, dangling links) are recreated as links, not followed.
    After a move the emptied source tree is deleted.
    """
    from .recover import recover

    root = source.as_path()
    if destination.is_relative_to(root):
        raise InvalidPathError(f"Cannot transfer '{root}' into itself")
    queue: deque[Directory] = deque([Directory.open_unchecked(root)])
    while queue:
        current = queue.popleft()
        queue.extend(current.directories())

        target = rebase(current.as_path(), root, destination)
        if _io.ensure_dir(target):
            logger.debug("Created directory %s", target)

        for file in current.files():
            try:
                if is_copy:
                    file.copy_to(target)
                else:
                    file.move_to(target)
            except ConflictError as e:
                logger.debug("Replacing %s", e.destination)
                recover(e)

        for link in _io.read_dir(current.as_path(), "link"):
            logger.debug("Carrying link %s", link)
            _io.transfer_link(link, target / link.name, is_copy=is_copy)

    if not is_copy:
        Directory.open_unchecked(root).delete()
