"""Rebuild the flat Visible List from disk while keeping expansion state.

The walk is a single left-to-right pass over a growing list: whenever an
expanded directory is reached its snapshot is spliced in right after it, so
its children are visited next. Row indices are only valid until the next
rebuild; callers re-find entries by canonical path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..git_status import GitKind
from ..icons import ICON_FOLDER_OPEN, ICON_FOLDER_SYMLINK, folder_icon
from .snapshot import list_dir_entries
from .types import Entry, EntryKind, canonical_path

if TYPE_CHECKING:
    from ..state import TreeState

logger = logging.getLogger(__name__)


def directory_icon(entry: Entry) -> str:
    if entry.is_symlink and not entry.is_expanded:
        return ICON_FOLDER_SYMLINK
    return folder_icon(entry.is_expanded)


def root_display_name(root: Path) -> str:
    """Final path component of ``root``, or the whole path for ``/``."""
    return root.name or str(root)


def make_root_entry(state: TreeState) -> Entry:
    canon = canonical_path(state.root)
    return Entry(
        name=root_display_name(state.root),
        path=state.root,
        kind=EntryKind.DIRECTORY,
        depth=0,
        canonical=canon,
        git=GitKind.NONE,
        is_selected=canon in state.selected,
        is_last=True,
        is_expanded=True,
        icon=ICON_FOLDER_OPEN,
    )


def expanded_paths(visible: list[Entry]) -> set[Path]:
    """Canonical paths of every expanded directory in ``visible``."""
    return {entry.canonical for entry in visible if entry.is_dir and entry.is_expanded}


def rebuild_visible(state: TreeState) -> None:
    """Replace ``state.visible`` with a fresh walk of all expanded subtrees.

    Expansion is carried over by canonical path from the previous list; the
    root is always expanded. The cursor is clamped into the new list. A
    directory that cannot be listed stays expanded with no children and its
    error becomes the status message.
    """
    expanded = expanded_paths(state.visible)
    visible: list[Entry] = [make_root_entry(state)]

    index = 0
    while index < len(visible):
        parent = visible[index]
        index += 1
        if not parent.is_dir or not parent.is_expanded:
            continue

        children, scan_error = list_dir_entries(
            parent.path,
            parent.depth + 1,
            show_hidden=state.show_hidden,
            sort=state.sort,
            generic_icons=state.generic_icons,
            selected=state.selected,
            git_status=state.git_status,
        )
        if scan_error is not None:
            state.message = f"Error: {scan_error}"
            continue

        lineage = parent.ancestors + (parent.canonical,)
        last = len(children) - 1
        for position, child in enumerate(children):
            child.is_last = position == last
            child.ancestor_has_more = list(parent.ancestor_has_more)
            if parent.depth > 0:
                child.ancestor_has_more.append(not parent.is_last)
            child.ancestors = lineage
            if child.is_dir:
                # A symlink back into its own lineage would recurse forever.
                child.is_expanded = child.canonical in expanded and child.canonical not in lineage
                child.icon = directory_icon(child)

        visible[index:index] = children

    state.visible = visible
    state.clamp_cursor()
    logger.debug("rebuilt %d rows under %s", len(visible), state.root)


def find_entry_index(state: TreeState, path: Path) -> int:
    """Return the row of ``path`` (compared canonically), or ``-1``."""
    target = canonical_path(path)
    for index, entry in enumerate(state.visible):
        if entry.canonical == target:
            return index
    return -1


def set_expanded(state: TreeState, index: int, expanded: bool) -> int:
    """Expand or collapse the directory at ``index`` and rebuild.

    Returns the directory's row after the rebuild and moves the cursor there.
    Non-directories are left untouched.
    """
    entry = state.visible[index]
    if not entry.is_dir:
        return index
    subject = entry.path
    entry.is_expanded = expanded
    entry.icon = directory_icon(entry)
    rebuild_visible(state)
    found = find_entry_index(state, subject)
    if found >= 0:
        state.cursor = found
    return state.cursor


def reveal_path(state: TreeState, target: Path) -> bool:
    """Expand every directory between the root and ``target`` and select it.

    Returns ``False`` when ``target`` is outside the root or is not listed
    (for example a hidden file while hidden files are off).
    """
    target_canon = canonical_path(target)
    root_canon = canonical_path(state.root)
    try:
        relative = target_canon.relative_to(root_canon)
    except ValueError:
        return False

    current = root_canon
    for part in relative.parts[:-1]:
        current = current / part
        index = find_entry_index(state, current)
        if index < 0:
            break
        entry = state.visible[index]
        if entry.is_dir and not entry.is_expanded:
            set_expanded(state, index, True)

    index = find_entry_index(state, target_canon)
    if index < 0:
        return False
    state.cursor = index
    return True
