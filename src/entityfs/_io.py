"""Blocking filesystem primitives shared by the sync and async entities.

The async entities run each of these through ``asyncio.to_thread`` so the
two execution modes share one implementation of every I/O step.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from collections import deque
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from .paths import is_same_root

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH

ChildKind = Literal["file", "directory", "link"]


# =========================================================================
# Permissions
# =========================================================================


def permissions(path: Path) -> int:
    """Permission bits of *path*."""
    return stat.S_IMODE(os.stat(path).st_mode)


def is_read_only(path: Path) -> bool:
    """True when no write bit is set on *path*."""
    return not permissions(path) & WRITE_BITS


def set_read_only(path: Path, readonly: bool) -> None:
    """Clear every write bit, or restore the owner write bit."""
    mode = permissions(path)
    if readonly:
        mode &= ~WRITE_BITS
    else:
        mode |= stat.S_IWUSR
    os.chmod(path, mode)


def _make_writable(path: str | Path) -> None:
    st = os.lstat(path)
    if not stat.S_ISLNK(st.st_mode):
        os.chmod(path, stat.S_IMODE(st.st_mode) | stat.S_IWUSR)


def _retry_writable(function: Callable[..., Any], path: str, exc: BaseException) -> None:
    """``shutil.rmtree`` error hook that relaxes read-only entries once."""
    if not isinstance(exc, PermissionError) or function not in (
        os.unlink,
        os.remove,
        os.rmdir,
    ):
        raise exc
    _make_writable(os.path.dirname(path))
    _make_writable(path)
    function(path)


# =========================================================================
# Removal
# =========================================================================


def remove_any(path: Path) -> None:
    """Delete a file, symlink or whole directory tree, read-only or not."""
    st = os.lstat(path)
    if stat.S_ISDIR(st.st_mode):
        if not stat.S_IMODE(st.st_mode) & stat.S_IWUSR:
            _make_writable(path)
        shutil.rmtree(path, onexc=_retry_writable)
        return
    if not stat.S_ISLNK(st.st_mode) and not stat.S_IMODE(st.st_mode) & WRITE_BITS:
        _make_writable(path)
    os.remove(path)


# =========================================================================
# Copy / Rename
# =========================================================================


def same_entry(src: Path, dst: Path) -> bool:
    """True when *dst* already names *src*, directly or through a parent link.

    A *dst* that is itself a symlink is a separate entry and never matches.
    """
    if src == dst:
        return True
    try:
        return not os.path.islink(dst) and os.path.samefile(src, dst)
    except OSError:
        return False


def copy_file(src: Path, dst: Path) -> None:
    """Copy the bytes and permission bits of *src* to *dst*."""
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def relocate_file(src: Path, dst: Path) -> None:
    """Move a file, renaming when possible and copying otherwise.

    Any rename failure falls back to copy-then-delete; the source is only
    removed once the copy has landed.
    """
    if is_same_root(src, dst):
        try:
            os.rename(src, dst)
            return
        except OSError as e:
            logger.debug("Rename %s -> %s failed (%s); copying instead", src, dst, e)
    copy_file(src, dst)
    remove_any(src)


def transfer_link(src: Path, dst: Path, *, is_copy: bool) -> None:
    """Recreate the symlink *src* at *dst*, replacing whatever is there.

    The link itself is carried, never its target.  A move renames the link
    when possible and otherwise recreates it and removes *src*.
    """
    if os.path.lexists(dst):
        remove_any(dst)
    if not is_copy and is_same_root(src, dst):
        try:
            os.rename(src, dst)
            return
        except OSError as e:
            logger.debug(
                "Rename %s -> %s failed (%s); relinking instead", src, dst, e
            )
    os.symlink(os.readlink(src), dst, target_is_directory=os.path.isdir(src))
    if not is_copy:
        os.remove(src)


def rename_tree(src: Path, dst: Path) -> bool:
    """Atomically rename a directory tree.  Return False when the OS refuses."""
    try:
        os.rename(src, dst)
    except OSError as e:
        logger.debug("Tree rename %s -> %s failed (%s)", src, dst, e)
        return False
    return True


def ensure_dir(path: Path) -> bool:
    """Create *path* and missing ancestors unless it is already a directory.

    Returns True if anything was created.
    """
    if path.is_dir():
        return False
    os.makedirs(path, exist_ok=True)
    return True


def create_file(path: Path) -> None:
    """Create (or truncate) *path*, creating its parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb"):
        pass


def check_file(path: Path) -> bool:
    """Open *path* for reading to prove it is an existing, readable file.

    Returns False when the path is missing or is a directory.  Other OS
    errors propagate.
    """
    try:
        with open(path, "rb"):
            pass
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        return False
    return path.is_file()


# =========================================================================
# Listing / Size
# =========================================================================


def read_dir(path: Path, kind: ChildKind | None = None) -> list[Path]:
    """Immediate children of *path*, optionally only files or directories.

    Symbolic links to directories are never reported as directories;
    ``"link"`` selects them, together with dangling links.
    Entries that vanish or cannot be inspected mid-scan are skipped.
    """
    children: list[Path] = []
    with os.scandir(path) as it:
        for entry in it:
            try:
                if kind == "file" and not entry.is_file():
                    continue
                if kind == "directory" and not entry.is_dir(follow_symlinks=False):
                    continue
                if kind == "link" and (not entry.is_symlink() or entry.is_file()):
                    continue
            except OSError:
                continue
            children.append(Path(entry.path))
    return children


def tree_size(path: Path) -> int:
    """Total size of every regular file under *path*.  Never raises."""
    total = 0
    queue: deque[Path] = deque([path])
    while queue:
        current = queue.popleft()
        try:
            it = os.scandir(current)
        except OSError:
            continue
        with it:
            for entry in it:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        queue.append(Path(entry.path))
                    elif entry.is_file(follow_symlinks=False):
                        total += entry.stat(follow_symlinks=False).st_size
                except OSError:
                    continue
    return total


def file_size(path: Path) -> int:
    """Size of *path* in bytes, 0 if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        logger.debug("size() of %s unavailable", path, exc_info=True)
        return 0
