"""Filesystem helpers for replacing installed skill entries."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def child_path(root: Path, name: str) -> Path:
    """Return ``root/name`` when *name* denotes a direct child of *root*.

    Raises:
        ValueError: *name* is empty, contains a separator or walks out of *root*.
    """
    base = root.resolve()
    candidate = Path(os.path.normpath(base / name))
    if candidate.parent != base:
        raise ValueError(f"'{name}' is not a direct child of {base}")
    return candidate


def remove_entry(path: Path) -> None:
    """Remove a symlink, file or directory tree at *path* if present."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def replace_with_symlink(link: Path, target: Path) -> None:
    """Point *link* at *target*, removing whatever occupied *link* first."""
    link.parent.mkdir(parents=True, exist_ok=True)
    remove_entry(link)
    os.symlink(target, link, target_is_directory=True)
