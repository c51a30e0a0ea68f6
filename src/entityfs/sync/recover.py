"""Conflict recovery for blocking entities.

A ``ConflictError`` raised by ``copy_new``/``move_new`` already knows the
entity and the colliding destination, so recovery is a single corrective
transfer:

- copy file: delete the destination, copy again
- move file: delete the destination, rename (or copy + delete), repoint
- copy directory: merge the tree into the existing destination
- move directory: rename onto the destination (or merge-move), repoint

A destination that already names the entity is left untouched.

Recovery moves forward only.  A failure part-way leaves whatever the
partial transfer produced and raises the underlying OS error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .. import _io
from ..exceptions import ConflictError
from ..types import TransferStatus
from .dir import transfer

if TYPE_CHECKING:
    from .dir import Directory
    from .file import File

logger = logging.getLogger(__name__)


def recover(error: BaseException) -> File | Directory:
    """Turn a conflict into a replace-or-merge transfer.

    Returns the entity carried by the error, repointed to the destination
    for moves.

    Raises:
        The original *error* if it is not a recoverable conflict, or the OS
        error from the corrective transfer.
    """
    if not isinstance(error, ConflictError) or not error.recoverable:
        raise error

    entity = error.entity
    destination = error.destination
    source = entity.as_path()
    logger.debug(
        "Recovering %s: %s -> %s", error.status.value, source, destination
    )
    if _io.same_entry(source, destination):
        logger.debug("%s is already at its destination", source)
        if not error.status.is_copy:
            entity._path = destination
        return entity

    match error.status:
        case TransferStatus.COPY_FILE:
            _io.remove_any(destination)
            _io.copy_file(source, destination)
        case TransferStatus.MOVE_FILE:
            _io.remove_any(destination)
            _io.relocate_file(source, destination)
            entity._path = destination
        case TransferStatus.COPY_DIRECTORY:
            transfer(entity, destination, is_copy=True)
        case TransferStatus.MOVE_DIRECTORY:
            if not _io.rename_tree(source, destination):
                transfer(entity, destination, is_copy=False)
            entity._path = destination

    return entity

