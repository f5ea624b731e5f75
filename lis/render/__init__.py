"""Rendering engine for the tree view.

Builds a complete frame (header, status message, one row per visible entry)
from ``TreeState`` and writes it to the terminal in one call.
"""

from __future__ import annotations

import os
import time
from typing import TYPE_CHECKING

from ..ansi import CLEAR_SCREEN, apply_persistent_bg, bg_256, pad_with_background, style
from ..git_status import GitKind, git_glyph
from ..icons import file_icon_color
from ..theme import DEFAULT_THEME, UITheme
from ..tree_model.types import Entry, EntryKind
from .help import header_lines

if TYPE_CHECKING:
    from ..state import TreeState

INDENT_PIPE = "│ "
INDENT_BRANCH = "├ "
INDENT_LAST = "└ "
INDENT_SPACE = "  "
MARK_SELECTED = "✓"
MARK_READONLY = "✗"
CURSOR_MARKER = "> "
DEFAULT_TERMINAL_WIDTH = 80
_SIZE_UNITS = ("B", "K", "M", "G", "T")


def format_size(size: int) -> str:
    """Human-readable size: plain bytes, else one decimal with a unit."""
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{size}B"
    return f"{value:.1f}{_SIZE_UNITS[unit]}"


def format_time(mtime: int) -> str:
    return time.strftime("%b %d %H:%M", time.localtime(mtime))


def indent_for(entry: Entry, max_depth: int = -1) -> str:
    """Tree-drawing prefix for ``entry``.

    One glyph pair per ancestor level (pipe when that ancestor has later
    siblings), then a branch or corner. With ``max_depth >= 0`` only the
    nearest ``max_depth`` ancestor levels are drawn.
    """
    if entry.depth == 0:
        return ""
    flags = entry.ancestor_has_more
    start = 0
    if max_depth >= 0 and len(flags) > max_depth:
        start = len(flags) - max_depth
    columns = [INDENT_PIPE if has_more else INDENT_SPACE for has_more in flags[start:]]
    columns.append(INDENT_LAST if entry.is_last else INDENT_BRANCH)
    return "".join(columns)


def git_color(kind: GitKind, theme: UITheme) -> str | None:
    if kind in {GitKind.MODIFIED, GitKind.RENAMED}:
        return theme.git_changed
    if kind is GitKind.STAGED:
        return theme.git_staged
    if kind in {GitKind.UNMERGED, GitKind.DELETED}:
        return theme.git_conflict
    if kind in {GitKind.UNTRACKED, GitKind.IGNORED, GitKind.UNKNOWN}:
        return theme.git_dim
    return None


def name_color(entry: Entry, theme: UITheme) -> str:
    if entry.kind is EntryKind.DIRECTORY:
        return theme.name_directory
    if entry.is_selected:
        return theme.name_selected
    return theme.name_default


def icon_color(entry: Entry, theme: UITheme) -> str:
    if entry.kind is EntryKind.DIRECTORY:
        return theme.icon_directory
    return file_icon_color(entry.name)


def build_row(state: TreeState, index: int, theme: UITheme | None = None) -> str:
    """Compose one row without background handling."""
    active_theme = theme or DEFAULT_THEME
    entry = state.visible[index]
    is_cursor = index == state.cursor
    ansi = state.use_ansi
    out: list[str] = []

    if is_cursor:
        out.append(style(CURSOR_MARKER, active_theme.cursor_marker, bold=True) if ansi else CURSOR_MARKER)
    else:
        out.append("  ")

    if state.show_mark:
        if entry.is_selected:
            out.append(style(MARK_SELECTED, active_theme.mark_selected) if ansi else MARK_SELECTED)
        elif entry.is_readonly:
            out.append(style(MARK_READONLY, active_theme.mark_readonly) if ansi else MARK_READONLY)
        else:
            out.append(" ")
        out.append(" ")

    out.append(indent_for(entry, state.max_depth))

    if state.show_git:
        glyph = git_glyph(entry.git)
        color = git_color(entry.git, active_theme)
        out.append(style(glyph, color) if ansi and color else glyph)
        out.append(" ")

    out.append(style(entry.icon, icon_color(entry, active_theme)) if ansi else entry.icon)
    out.append(" ")

    if ansi:
        out.append(style(entry.name, name_color(entry, active_theme), bold=is_cursor))
    else:
        out.append(entry.name)
    if entry.kind is EntryKind.DIRECTORY:
        out.append("/")

    if state.show_size and entry.kind is EntryKind.FILE:
        size_text = format_size(entry.size)
        out.append("  ")
        out.append(style(size_text, active_theme.metadata) if ansi else size_text)

    if state.show_time and entry.mtime > 0:
        time_text = format_time(entry.mtime)
        out.append("  ")
        out.append(style(time_text, active_theme.metadata) if ansi else time_text)

    return "".join(out)


def row_background(state: TreeState, index: int) -> int:
    """Background color code for row ``index``, or ``-1`` for none."""
    if not state.alt_screen:
        return -1
    if index == state.cursor and state.sel_bg_color >= 0:
        return state.sel_bg_color
    return state.bg_color


def _status_message_line(state: TreeState, theme: UITheme) -> str:
    message = style(state.message, theme.status_message) if state.use_ansi else state.message
    if state.alt_screen and state.bg_color >= 0:
        message = apply_persistent_bg(message, state.bg_color)
    return message


def build_frame(state: TreeState, term_width: int = DEFAULT_TERMINAL_WIDTH, theme: UITheme | None = None) -> str:
    """Return the full screen contents for ``state`` as one string."""
    active_theme = theme or DEFAULT_THEME
    out: list[str] = []
    if state.alt_screen and state.bg_color >= 0:
        out.append(bg_256(state.bg_color))
    out.append(CLEAR_SCREEN)

    if state.show_header:
        for line in header_lines(state):
            out.append(line)
            out.append("\r\n")
        if state.message:
            out.append(_status_message_line(state, active_theme))
            out.append("\r\n")
        out.append("\r\n")
    elif state.message:
        out.append(_status_message_line(state, active_theme))
        out.append("\r\n")

    for index in range(len(state.visible)):
        line = build_row(state, index, active_theme)
        line_bg = row_background(state, index)
        if line_bg >= 0:
            line = pad_with_background(line, line_bg, term_width, state.bg_color)
        out.append(line)
        out.append("\r\n")
    return "".join(out)


def terminal_width(fd: int) -> int:
    """Columns of the terminal on ``fd``; 80 when it cannot be queried."""
    try:
        columns = os.get_terminal_size(fd).columns
    except OSError:
        return DEFAULT_TERMINAL_WIDTH
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def write_all(fd: int, text: str) -> None:
    data = text.encode("utf-8", errors="replace")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def render(state: TreeState, fd: int) -> None:
    """Draw the current frame on ``fd``."""
    write_all(fd, build_frame(state, terminal_width(fd)))


__all__ = [
    "build_frame",
    "build_row",
    "format_size",
    "format_time",
    "indent_for",
    "render",
    "row_background",
    "terminal_width",
    "write_all",
]
