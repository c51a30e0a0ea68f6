"""Capability protocols: runtime-checkable interfaces.

Split into a queryable protocol (introspection only) and an actionable
protocol (mutation and transfer) so that callers can accept "anything with
a path and metadata" without requiring the full operation set.  Each has a
blocking and an ``asyncio`` twin with the same method names.

``File``/``Directory`` and ``AsyncFile``/``AsyncDirectory`` satisfy these
protocols structurally; nothing inherits from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    import os
    from pathlib import Path

    from .aio.dir import AsyncDirectory
    from .sync.dir import Directory


@runtime_checkable
class Queryable(Protocol):
    """Read-only view of a filesystem entity (blocking)."""

    @property
    def path(self) -> Path: ...

    def as_path(self) -> Path: ...

    def file_name(self) -> str | None: ...

    def metadata(self) -> os.stat_result: ...

    def size(self) -> int:
        """Size in bytes.  Returns 0 instead of raising."""
        ...

    def permissions(self) -> int: ...

    def read_only(self) -> bool: ...

    def parent(self) -> Directory | None:
        """Containing directory, or None for a root.  Never raises."""
        ...


@runtime_checkable
class Actionable(Queryable, Protocol):
    """Mutating and transfer operations on a filesystem entity (blocking)."""

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Self: ...

    @classmethod
    def open_unchecked(cls, path: str | os.PathLike[str]) -> Self: ...

    def rename(self, name: str) -> None: ...

    def set_readonly(self, readonly: bool) -> None: ...

    def set_permissions(self, mode: int) -> None: ...

    def delete(self) -> None: ...

    def copy_to(self, directory: str | os.PathLike[str]) -> None: ...

    def copy_new(self, destination: str | os.PathLike[str]) -> None: ...

    def move_to(self, directory: str | os.PathLike[str]) -> None: ...

    def move_new(self, destination: str | os.PathLike[str]) -> None: ...

    def copy(self, destination: str | os.PathLike[str]) -> None: ...

    def move(self, destination: str | os.PathLike[str]) -> None: ...


@runtime_checkable
class AsyncQueryable(Protocol):
    """Read-only view of a filesystem entity (asyncio)."""

    @property
    def path(self) -> Path: ...

    def as_path(self) -> Path: ...

    def file_name(self) -> str | None: ...

    async def metadata(self) -> os.stat_result: ...

    async def size(self) -> int: ...

    async def permissions(self) -> int: ...

    async def read_only(self) -> bool: ...

    async def parent(self) -> AsyncDirectory | None: ...


@runtime_checkable
class AsyncActionable(AsyncQueryable, Protocol):
    """Mutating and transfer operations on a filesystem entity (asyncio)."""

    @classmethod
    async def open(cls, path: str | os.PathLike[str]) -> Self: ...

    @classmethod
    def open_unchecked(cls, path: str | os.PathLike[str]) -> Self: ...

    async def rename(self, name: str) -> None: ...

    async def set_readonly(self, readonly: bool) -> None: ...

    async def set_permissions(self, mode: int) -> None: ...

    async def delete(self) -> None: ...

    async def copy_to(self, directory: str | os.PathLike[str]) -> None: ...

    async def copy_new(self, destination: str | os.PathLike[str]) -> None: ...

    async def move_to(self, directory: str | os.PathLike[str]) -> None: ...

    async def move_new(self, destination: str | os.PathLike[str]) -> None: ...

    async def copy(self, destination: str | os.PathLike[str]) -> None: ...

    async def move(self, destination: str | os.PathLike[str]) -> None: ...
