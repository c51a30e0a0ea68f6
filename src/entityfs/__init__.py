"""entityfs: files and directories as entities.

Copy, move, rename and delete with automatic recovery when the destination
is already taken, in blocking and asyncio flavors.
"""

__version__ = "0.1.0"

from entityfs.aio import AsyncDirectory, AsyncFile
from entityfs.aio import recover as recover_async
from entityfs.exceptions import (
    ConflictError,
    EntityError,
    InvalidPathError,
    PathNotFoundError,
)
from entityfs.paths import normalize_path, rebase
from entityfs.protocol import (
    Actionable,
    AsyncActionable,
    AsyncQueryable,
    Queryable,
)
from entityfs.sync import Directory, File, recover
from entityfs.types import TransferStatus

Entity = File | Directory
AsyncEntity = AsyncFile | AsyncDirectory

__all__ = [
    "Actionable",
    "AsyncActionable",
    "AsyncDirectory",
    "AsyncEntity",
    "AsyncFile",
    "AsyncQueryable",
    "ConflictError",
    "Directory",
    "Entity",
    "EntityError",
    "File",
    "InvalidPathError",
    "PathNotFoundError",
    "Queryable",
    "TransferStatus",
    "__version__",
    "normalize_path",
    "rebase",
    "recover",
    "recover_async",
]
