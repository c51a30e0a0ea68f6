"""Conflict recovery for asyncio entities.

Same protocol as ``entityfs.sync.recover``; each filesystem step is
awaited in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from .. import _io
from ..exceptions import ConflictError
from ..types import TransferStatus
from .dir import transfer

if TYPE_CHECKING:
    from .dir import AsyncDirectory
    from .file import AsyncFile

logger = logging.getLogger(__name__)


async def recover(error: BaseException) -> AsyncFile | AsyncDirectory:
    """Turn a conflict into a replace-or-merge transfer.

    Returns the entity carried by the error, repointed to the destination
    for moves.  Anything other than a recoverable conflict is re-raised.
    """
    if not isinstance(error, ConflictError) or not error.recoverable:
        raise error

    entity = error.entity
    destination = error.destination
    source = entity.as_path()
    logger.debug(
        "Recovering %s: %s -> %s", error.status.value, source, destination
    )
    if await asyncio.to_thread(_io.same_entry, source, destination):
        logger.debug("%s is already at its destination", source)
        if not error.status.is_copy:
            entity._path = destination
        return entity

    match error.status:
        case TransferStatus.COPY_FILE:
            await asyncio.to_thread(_io.remove_any, destination)
            await asyncio.to_thread(_io.copy_file, source, destination)
        case TransferStatus.MOVE_FILE:
            await asyncio.to_thread(_io.remove_any, destination)
            await asyncio.to_thread(_io.relocate_file, source, destination)
            entity._path = destination
        case TransferStatus.COPY_DIRECTORY:
            await transfer(entity, destination, is_copy=True)
        case TransferStatus.MOVE_DIRECTORY:
            if not await asyncio.to_thread(_io.rename_tree, source, destination):
                await transfer(entity, destination, is_copy=False)
            entity._path = destination

    return entity
