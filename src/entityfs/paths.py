"""Path utilities: normalization, rebasing, display names, MIME types."""

from __future__ import annotations

import mimetypes
import os
import posixpath
from pathlib import Path

from .exceptions import InvalidPathError

DEFAULT_MIME_TYPE = "text/plain"
UNKNOWN_NAME = "unknown_name"
MAX_PATH_LENGTH = 4096


# =============================================================================
# Normalization
# =============================================================================


def validate_path(path: str) -> tuple[bool, str]:
    """Validate a path string the OS could actually open.

    Besides the length cap only NUL is refused; every other character, control characters included, is
    legal in a POSIX file name.

    Returns:
        (is_valid, error_message) - error_message is empty if valid
    """
    if "\x00" in path:
        return False, "Path contains null bytes"
    if len(path) > MAX_PATH_LENGTH:
        return False, f"Path too long (max {MAX_PATH_LENGTH} characters)"

    return True, ""


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Normalize a path to an absolute, lexically clean ``Path``.

    - Expands a leading ``~`` to the home directory
    - Makes relative paths absolute against the current directory
    - Resolves ``.`` and ``..`` without following symlinks
    - Removes double and trailing separators

    Examples:
        normalize_path("/foo//bar.txt") -> Path("/foo/bar.txt")
        normalize_path("/foo/../bar.txt") -> Path("/bar.txt")
        normalize_path("~/notes") -> Path("/home/me/notes")

    Raises:
        InvalidPathError: if the path is empty, contains characters the OS
            cannot represent, or the home directory cannot be determined.
    """
    raw = os.fspath(path)
    if not raw:
        raise InvalidPathError("Invalid path: empty path")

    valid, error = validate_path(raw)
    if not valid:
        raise InvalidPathError(f"Invalid path '{raw}': {error}")

    expanded = os.path.expanduser(raw)
    if expanded.startswith("~"):
        raise InvalidPathError(
            f"Invalid path '{raw}': home directory is not available"
        )

    try:
        absolute = os.path.abspath(expanded)
    except (OSError, ValueError) as e:
        raise InvalidPathError(f"Invalid path '{raw}': {e}") from e

    return Path(absolute)


# =============================================================================
# Path Arithmetic
# =============================================================================


def rebase(path: Path, source_root: Path, destination_root: Path) -> Path:
    """Move *path* from under *source_root* to under *destination_root*.

    The longest common component prefix of *path* and *source_root* is
    stripped and the remainder appended to *destination_root*.  A path that
    does not live under *source_root* never raises; whatever follows the
    shared prefix is appended.

    Examples:
        rebase(Path("/src/a/b"), Path("/src"), Path("/dst")) -> Path("/dst/a/b")
        rebase(Path("/src"), Path("/src"), Path("/dst")) -> Path("/dst")
    """
    path_parts = path.parts
    root_parts = source_root.parts
    i = 0
    while i < len(root_parts) and i < len(path_parts) and path_parts[i] == root_parts[i]:
        i += 1
    return destination_root.joinpath(*path_parts[i:])


def push_file_name(file_name: str | None, directory: str | os.PathLike[str]) -> Path:
    """Append *file_name* to *directory*.

    Raises:
        InvalidPathError: if *file_name* is empty (the entity is a root).
    """
    if not file_name:
        raise InvalidPathError()
    return Path(directory) / file_name


def file_name_of(path: Path) -> str | None:
    """Final component of *path*, or None for a filesystem root."""
    return path.name or None


def is_same_root(path: Path, destination: Path) -> bool:
    """Check whether *path* and *destination* share a root and a device.

    *destination*'s parent must already exist for the device comparison.
    """
    if path.anchor != destination.anchor:
        return False
    try:
        return os.stat(path).st_dev == os.stat(destination.parent).st_dev
    except OSError:
        return False


def sibling(path: Path, name: str) -> Path:
    """Path next to *path* with its final component replaced by *name*.

    Raises:
        InvalidPathError: if *path* is a root or *name* is not a bare name.
    """
    try:
        return path.with_name(name)
    except ValueError as e:
        raise InvalidPathError(f"Invalid name '{name}' for '{path}'") from e


def set_extension(path: Path, suffix: str) -> Path:
    """Replace or add the final extension of *path* (``suffix`` includes the dot)."""
    if not suffix:
        return path
    stem, _ = posixpath.splitext(path.name)
    return path.with_name(stem + suffix)


# =============================================================================
# Content Helpers
# =============================================================================


def display_name(path: Path) -> str:
    """Name to show for *path* in a download or listing."""
    return path.name or UNKNOWN_NAME


def guess_mime_type(filename: str) -> str:
    """Guess the MIME type of a file based on its name."""
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or DEFAULT_MIME_TYPE
