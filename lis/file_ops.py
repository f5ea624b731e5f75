"""Filesystem mutation primitives used by the command set.

Every function raises ``OSError`` on failure; its text is what the status
line shows. Move, copy, rename and file creation never overwrite an existing path.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def _refuse_existing(dest: Path) -> None:
    if os.path.lexists(dest):
        raise FileExistsError(17, "File exists", str(dest))


def move_path(src: Path, dest: Path) -> None:
    """Move ``src`` to ``dest`` (a full target path), across devices if needed."""
    _refuse_existing(dest)
    shutil.move(os.fspath(src), os.fspath(dest))


def copy_path(src: Path, dest: Path) -> None:
    """Copy ``src`` to ``dest``, recursing into directories."""
    _refuse_existing(dest)
    if src.is_dir():
        shutil.copytree(src, dest, symlinks=True)
    else:
        shutil.copy2(src, dest)


def remove_path(path: Path) -> None:
    """Remove ``path`` recursively; a missing path is not an error."""
    if path.is_symlink() or not path.is_dir():
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        return
    shutil.rmtree(path)


def rename_path(src: Path, new_name: str) -> Path:
    """Rename ``src`` within its directory and return the new path."""
    dest = src.parent / new_name
    _refuse_existing(dest)
    os.rename(src, dest)
    return dest


def create_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def create_file(path: Path) -> None:
    with open(path, "x", encoding="utf-8"):
        pass
