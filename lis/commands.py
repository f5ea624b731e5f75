"""User-triggered operations on ``TreeState``.

Commands mutate state, call into ``file_ops``/``shell`` for side effects,
and report the outcome through ``state.message``. Filesystem failures are
caught here and never propagate to the event loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from . import file_ops, shell
from .git_status import collect_git_status, find_git_root
from .state import TreeState
from .tree_model import find_entry_index, rebuild_visible

logger = logging.getLogger(__name__)

PromptFn = Callable[[str], str]


def refresh_git_status(state: TreeState) -> None:
    """Re-query git for the current root; clears the overlay when git is off."""
    state.git_status = {}
    state.git_root = None
    if not state.show_git:
        return
    git_root = find_git_root(state.root)
    if git_root is None:
        return
    state.git_root = git_root
    state.git_status = collect_git_status(git_root)


def _refresh(state: TreeState) -> None:
    """Re-read git status and rebuild the Visible List."""
    refresh_git_status(state)
    rebuild_visible(state)


def _error_message(exc: OSError) -> str:
    return f"Error: {exc}"


def _batch_message(success: int, total: int, verb: str, last_error: OSError | None) -> str:
    if last_error is None:
        return f"{success} file(s) {verb}"
    return f"{success} of {total} file(s) {verb}; {_error_message(last_error)}"


def _target_directory(state: TreeState) -> Path:
    """Directory under the cursor, else the cursor entry's parent, else root."""
    entry = state.current_entry()
    if entry is None:
        return state.root
    if entry.is_dir:
        return entry.path
    return entry.path.parent


def _operands(state: TreeState) -> list[Path]:
    """Selected paths in sorted order, or the cursor entry when none."""
    if state.selected:
        return sorted(state.selected)
    entry = state.current_entry()
    return [] if entry is None else [entry.path]


# Navigation


def move_cursor(state: TreeState, delta: int) -> None:
    """Move the cursor by ``delta`` rows, clamped to the list."""
    if not state.visible:
        return
    state.cursor = max(0, min(len(state.visible) - 1, state.cursor + delta))


def cursor_to_top(state: TreeState) -> None:
    """Put the cursor on the root row."""
    state.cursor = 0


def cursor_to_bottom(state: TreeState) -> None:
    """Put the cursor on the last visible row."""
    state.cursor = max(0, len(state.visible) - 1)


def toggle_hidden(state: TreeState) -> None:
    """Show or hide dot-files, keeping the cursor on the same entry when it survives."""
    state.show_hidden = not state.show_hidden
    subject = state.current_entry()
    rebuild_visible(state)
    if subject is not None:
        index = find_entry_index(state, subject.path)
        if index >= 0:
            state.cursor = index


def set_root(state: TreeState, root: Path, *, focus: Path | None = None) -> None:
    """Re-root the tree and place the cursor.

    Expansion carries over for directories still under the new root. With
    ``focus`` the cursor lands on that path when it is visible; otherwise it
    goes to the top.
    """
    state.root = root
    state.cursor = 0
    _refresh(state)
    if focus is not None:
        index = find_entry_index(state, focus)
        if index >= 0:
            state.cursor = index


def root_to_parent(state: TreeState) -> bool:
    """Move the root up one level; ``False`` at the filesystem root."""
    parent = state.root.parent
    if parent == state.root:
        return False
    set_root(state, parent, focus=state.root)
    return True


def root_to_cursor_directory(state: TreeState) -> bool:
    """Make the directory under the cursor the new root.

    Returns ``False`` when the cursor is not on a directory.
    """
    entry = state.current_entry()
    if entry is None or not entry.is_dir or entry.depth == 0:
        return False
    set_root(state, entry.path)
    return True


# Selection


def toggle_select(state: TreeState) -> None:
    """Add the cursor entry to the selection, or remove it."""
    entry = state.current_entry()
    if entry is None:
        return
    if entry.canonical in state.selected:
        state.selected.discard(entry.canonical)
        entry.is_selected = False
    else:
        state.selected.add(entry.canonical)
        entry.is_selected = True


def select_all(state: TreeState) -> None:
    """Select every visible entry."""
    for entry in state.visible:
        state.selected.add(entry.canonical)
        entry.is_selected = True


def clear_selection(state: TreeState) -> None:
    """Drop the whole selection."""
    state.selected.clear()
    for entry in state.visible:
        entry.is_selected = False


# Clipboard


def copy_selected(state: TreeState) -> None:
    """Put the selection (or the cursor entry) on the clipboard for copying."""
    state.clipboard.replace(_operands(state), is_cut=False)
    state.message = f"{len(state.clipboard.paths)} file(s) copied"


def cut_selected(state: TreeState) -> None:
    """Put the selection (or the cursor entry) on the clipboard for moving."""
    state.clipboard.replace(_operands(state), is_cut=True)
    state.message = f"{len(state.clipboard.paths)} file(s) cut"


def paste_clipboard(state: TreeState) -> None:
    """Move or copy every clipboard path into the target directory.

    Each path is attempted independently. After a cut, successfully moved
    paths leave the clipboard and the selection is cleared.
    """
    clipboard = state.clipboard
    if not clipboard.paths:
        state.message = "Nothing to paste"
        return

    dest_dir = _target_directory(state)
    success = 0
    last_error: OSError | None = None
    remaining: list[Path] = []
    for src in clipboard.paths:
        dest = dest_dir / src.name
        try:
            if clipboard.is_cut:
                file_ops.move_path(src, dest)
            else:
                file_ops.copy_path(src, dest)
        except OSError as exc:
            logger.warning("paste %s -> %s failed: %s", src, dest, exc)
            last_error = exc
            remaining.append(src)
            continue
        success += 1

    total = len(clipboard.paths)
    if clipboard.is_cut:
        if remaining:
            clipboard.paths = remaining
        else:
            clipboard.clear()
        clear_selection(state)

    state.message = _batch_message(success, total, "pasted", last_error)
    _refresh(state)


def delete_selected(state: TreeState) -> bool:
    """Recursively remove the selection (or the cursor entry).

    Returns ``False`` when there was nothing to delete.
    """
    targets = _operands(state)
    if not targets:
        return False

    success = 0
    last_error: OSError | None = None
    for path in targets:
        try:
            file_ops.remove_path(path)
        except OSError as exc:
            logger.warning("delete %s failed: %s", path, exc)
            last_error = exc
            continue
        success += 1

    clear_selection(state)
    state.message = _batch_message(success, len(targets), "deleted", last_error)
    _refresh(state)
    return True


# Prompted mutations


def rename_entry(state: TreeState, prompt: PromptFn) -> None:
    """Prompt for a new name and rename the cursor entry in place."""
    entry = state.current_entry()
    if entry is None:
        return
    if entry.depth == 0:
        state.message = "Cannot rename root"
        return

    new_name = prompt("Rename to: ")
    if not new_name:
        state.message = "Rename cancelled"
        return

    try:
        new_path = file_ops.rename_path(entry.path, new_name)
    except OSError as exc:
        logger.warning("rename %s failed: %s", entry.path, exc)
        state.message = _error_message(exc)
        return
    state.message = f"Renamed to: {new_name}"
    _refresh(state)
    index = find_entry_index(state, new_path)
    if index >= 0:
        state.cursor = index


def create_new(state: TreeState, prompt: PromptFn, *, is_dir: bool) -> None:
    """Prompt for a name and create a file or directory in the target directory."""
    parent_dir = _target_directory(state)
    name = prompt("New directory: " if is_dir else "New file: ")
    if not name:
        state.message = "Create cancelled"
        return

    new_path = parent_dir / name
    try:
        if is_dir:
            file_ops.create_directory(new_path)
        else:
            file_ops.create_file(new_path)
    except OSError as exc:
        logger.warning("create %s failed: %s", new_path, exc)
        state.message = _error_message(exc)
        return
    state.message = f"Created {'directory' if is_dir else 'file'}: {name}"
    _refresh(state)


# View options


def cycle_sort(state: TreeState) -> None:
    """Advance to the next sort mode and rebuild."""
    state.sort = state.sort.next()
    rebuild_visible(state)


def toggle_size_column(state: TreeState) -> None:
    """Show or hide the size column."""
    state.show_size = not state.show_size


def toggle_time_column(state: TreeState) -> None:
    """Show or hide the modification time column."""
    state.show_time = not state.show_time


def refresh(state: TreeState) -> None:
    """Re-read git status and the filesystem."""
    state.message = ""
    _refresh(state)
    if not state.message:
        state.message = "Refreshed"


# Desktop integration


def open_system(state: TreeState) -> None:
    """Open the cursor entry with the platform's default handler."""
    entry = state.current_entry()
    if entry is None:
        return
    if shell.open_with_system(entry.path):
        state.message = f"Opened: {entry.path}"
    else:
        state.message = f"Could not open: {entry.path}"


def yank_path(state: TreeState) -> None:
    """Copy the cursor entry's path to the system clipboard."""
    entry = state.current_entry()
    if entry is None:
        return
    if shell.copy_text_to_clipboard(str(entry.path)):
        state.message = f"Yanked: {entry.path}"
    else:
        state.message = "No clipboard tool available"
