"""Tree model: entry types, directory snapshots, and Visible List reconciliation.

``list_dir_entries`` lists one directory; ``rebuild_visible`` flattens every
expanded subtree into the list the renderer draws.
"""

from __future__ import annotations

from .reconcile import (
    expanded_paths,
    find_entry_index,
    rebuild_visible,
    reveal_path,
    root_display_name,
    set_expanded,
)
from .snapshot import extension_of, list_dir_entries, sort_entries
from .types import Clipboard, Entry, EntryKind, SortKind, canonical_path

__all__ = [
    "Clipboard",
    "Entry",
    "EntryKind",
    "SortKind",
    "canonical_path",
    "extension_of",
    "list_dir_entries",
    "sort_entries",
    "expanded_paths",
    "find_entry_index",
    "rebuild_visible",
    "reveal_path",
    "root_display_name",
    "set_expanded",
]
