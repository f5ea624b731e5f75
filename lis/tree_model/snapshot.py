"""Directory listing with per-entry metadata and sort orders."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path

from ..git_status import GitKind
from ..icons import (
    ICON_FILE_DEFAULT,
    ICON_FILE_SYMLINK,
    ICON_FOLDER_CLOSED,
    ICON_FOLDER_SYMLINK,
    file_icon_for,
)
from .types import Entry, EntryKind, SortKind, canonical_path

logger = logging.getLogger(__name__)

_SORT_KEYS: dict[SortKind, tuple[Callable[[Entry], object], bool]] = {
    SortKind.NAME: (lambda entry: entry.name, False),
    SortKind.NAME_REV: (lambda entry: entry.name, True),
    SortKind.EXTENSION: (lambda entry: entry.extension, False),
    SortKind.EXTENSION_REV: (lambda entry: entry.extension, True),
    SortKind.SIZE: (lambda entry: entry.size, False),
    SortKind.SIZE_REV: (lambda entry: entry.size, True),
    SortKind.TIME: (lambda entry: entry.mtime, False),
    SortKind.TIME_REV: (lambda entry: entry.mtime, True),
}


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def extension_of(name: str) -> str:
    """Return the text after the last dot, or ``""`` when there is none."""
    dot = name.rfind(".")
    return name[dot + 1 :] if dot >= 0 else ""


def sort_entries(entries: list[Entry], sort: SortKind) -> list[Entry]:
    """Sort one sibling group; ties keep ascending name order."""
    key, reverse = _SORT_KEYS[sort]
    by_name = sorted(entries, key=lambda entry: entry.name)
    # sorted() keeps equal items in their existing order even with reverse=True.
    return sorted(by_name, key=key, reverse=reverse)


def _read_metadata(entry: Entry) -> None:
    """Fill readonly/size/mtime from ``stat``; failures leave defaults."""
    try:
        st = os.stat(entry.path)
    except OSError:
        return
    entry.is_readonly = not bool(st.st_mode & stat.S_IWUSR)
    if stat.S_ISREG(st.st_mode):
        entry.size = int(st.st_size)
    entry.mtime = int(st.st_mtime)


def _classify(child: os.DirEntry[str], entry: Entry, generic_icons: bool) -> None:
    """Set kind and icon, resolving symlinks through their targets."""
    try:
        is_link = child.is_symlink()
    except OSError:
        is_link = False

    if is_link:
        entry.is_symlink = True
        try:
            target_is_dir = child.is_dir()
            target_exists = target_is_dir or os.path.exists(child.path)
        except OSError:
            target_is_dir = False
            target_exists = False
        if target_is_dir:
            entry.kind = EntryKind.DIRECTORY
            entry.icon = ICON_FOLDER_SYMLINK
        elif target_exists:
            entry.kind = EntryKind.FILE
            entry.icon = ICON_FILE_DEFAULT if generic_icons else file_icon_for(entry.name, True)
        else:
            entry.kind = EntryKind.SYMLINK
            entry.icon = ICON_FILE_DEFAULT if generic_icons else ICON_FILE_SYMLINK
        return

    try:
        is_dir = child.is_dir(follow_symlinks=False)
    except OSError:
        is_dir = False
    if is_dir:
        entry.kind = EntryKind.DIRECTORY
        entry.icon = ICON_FOLDER_CLOSED
    else:
        entry.kind = EntryKind.FILE
        entry.icon = ICON_FILE_DEFAULT if generic_icons else file_icon_for(entry.name)


def list_dir_entries(
    directory: Path,
    depth: int,
    *,
    show_hidden: bool = False,
    sort: SortKind = SortKind.NAME,
    generic_icons: bool = False,
    selected: set[Path] | frozenset[Path] = frozenset(),
    git_status: dict[Path, GitKind] | None = None,
) -> tuple[list[Entry], OSError | None]:
    """List the immediate children of ``directory`` as sorted entries.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the
    directory itself cannot be iterated; ``entries`` is then empty and the
    caller treats the subtree as empty. Directories always precede files.
    """
    dirs: list[Entry] = []
    files: list[Entry] = []
    statuses = git_status or {}

    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                hidden = is_hidden_name(name)
                if hidden and not show_hidden:
                    continue

                child_path = Path(child.path)
                canon = canonical_path(child_path)
                entry = Entry(
                    name=name,
                    path=child_path,
                    kind=EntryKind.FILE,
                    depth=depth,
                    canonical=canon,
                    git=statuses.get(canon, GitKind.NONE),
                    is_hidden=hidden,
                    is_selected=canon in selected,
                    extension=extension_of(name),
                )
                _read_metadata(entry)
                _classify(child, entry, generic_icons)
                if entry.kind is EntryKind.DIRECTORY:
                    dirs.append(entry)
                else:
                    files.append(entry)
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return [], exc

    return sort_entries(dirs, sort) + sort_entries(files, sort), None
