"""Asyncio entities: suspend at every filesystem call, same semantics as sync."""

from entityfs.aio.base import AsyncEntityBase
from entityfs.aio.dir import AsyncDirectory, transfer
from entityfs.aio.file import AsyncFile
from entityfs.aio.recover import recover

__all__ = [
    "AsyncDirectory",
    "AsyncEntityBase",
    "AsyncFile",
    "recover",
    "transfer",
]
