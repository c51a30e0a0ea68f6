"""Custom exception hierarchy for the entityfs layer.

Every error is an ``OSError`` so callers can catch one type for the whole
package.  Opaque OS failures (permission denied, device errors, ...) are
never wrapped; they propagate as the raw ``OSError`` subclass.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from .types import TransferStatus


class EntityError(OSError):
    """Base exception for all entityfs errors."""


class PathNotFoundError(EntityError, FileNotFoundError):
    """Raised when a path does not exist or is the wrong kind of entity."""

    def __init__(self, message: str) -> None:
        super().__init__(errno.ENOENT, message)


class InvalidPathError(EntityError, ValueError):
    """Raised when a path has no parent or file name where one is required,
    or when it cannot be normalized."""

    def __init__(self, message: str = "Invalid path") -> None:
        super().__init__(errno.EINVAL, message)


class ConflictError(EntityError, FileExistsError):
    """Raised when the destination of an exact-path copy or move already exists.

    Carries what the recovery step needs to turn the failure into a
    corrective transfer without re-deriving any context.

    Attributes:
        entity: The file or directory being transferred.  Recovery of a
            move repoints it to ``destination`` in place.
        destination: The normalized destination path that collided.
        status: Which of the four transfers was attempted.
    """

    def __init__(
        self,
        entity: Any,
        destination: Path,
        status: TransferStatus,
    ) -> None:
        super().__init__(
            errno.EEXIST, f"The path '{destination}' already exists!"
        )
        self.entity = entity
        self.destination = destination
        self.status = status

    @property
    def recoverable(self) -> bool:
        """True when the error kind still permits recovery."""
        return self.errno == errno.EEXIST

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.entity, self.destination, self.status))

    def __repr__(self) -> str:
        return (
            f"ConflictError(status={self.status.value!r}, "
            f"entity={self.entity!r}, destination={str(self.destination)!r})"
        )
