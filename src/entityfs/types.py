"""Transfer status tags carried by conflict errors."""

from __future__ import annotations

from enum import Enum


class TransferStatus(Enum):
    """The transfer that was in flight when a conflict was raised."""

    COPY_FILE = "copy_file"
    MOVE_FILE = "move_file"
    COPY_DIRECTORY = "copy_directory"
    MOVE_DIRECTORY = "move_directory"

    @property
    def is_copy(self) -> bool:
        return self in (TransferStatus.COPY_FILE, TransferStatus.COPY_DIRECTORY)

    @property
    def is_directory(self) -> bool:
        return self in (
            TransferStatus.COPY_DIRECTORY,
            TransferStatus.MOVE_DIRECTORY,
        )
