"""Blocking entities: every operation runs to completion on the calling thread."""

from entityfs.sync.base import EntityBase
from entityfs.sync.dir import Directory, transfer
from entityfs.sync.file import File
from entityfs.sync.recover import recover

__all__ = [
    "Directory",
    "EntityBase",
    "File",
    "recover",
    "transfer",
]
