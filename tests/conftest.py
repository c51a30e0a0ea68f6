"""Shared fixtures for entityfs tests."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def write_tree(root: Path, files: dict[str, bytes | str]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            target.write_text(content)
        else:
            target.write_bytes(content)
    return root


def snapshot(root: Path) -> dict[str, bytes]:
    """Relative path -> bytes for every file under *root*."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, bytes | str]], Path]:
    return write_tree


@pytest.fixture
def read_tree() -> Callable[[Path], dict[str, bytes]]:
    return snapshot


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A small tree with nested and empty directories."""
    root = write_tree(
        tmp_path / "src",
        {
            "a.txt": "alpha",
            "b.bin": b"\x00\x01\x02",
            "x/1.txt": "one",
            "x/2.txt": "two",
            "x/y/deep.md": "# deep",
        },
    )
    (root / "empty").mkdir()
    return root


@pytest.fixture
def cross_device(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    """Make every ``os.rename`` fail as if crossing filesystems.

    Returns the list of attempted renames.
    """
    attempts: list[tuple[str, str]] = []

    def _rename(src: object, dst: object, *args: object, **kwargs: object) -> None:
        attempts.append((os.fspath(src), os.fspath(dst)))  # type: ignore[arg-type]
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(os, "rename", _rename)
    return attempts


@pytest.fixture
def linked_tree(tmp_path: Path) -> Path:
    """``s/`` holding files, a link to an outside directory and a dangling link."""
    write_tree(tmp_path / "target", {"inside.txt": "kept"})
    root = write_tree(tmp_path / "s", {"a.txt": "A", "x/b.txt": "B"})
    (root / "link").symlink_to(tmp_path / "target", target_is_directory=True)
    (root / "x" / "dangling").symlink_to(tmp_path / "missing")
    return root
