"""Header and key-help text shown above the tree.

Presentation-only helpers; nothing here touches the terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..state import TreeState

TITLE_LINE = "lis - tree.nvim-ish file browser"

HELP_LINES: tuple[str, ...] = (
    "j/k:move l/h/enter:open/close space:mark .:hidden s:sort c:cd",
    "y:copy d:cut p:paste D:delete r:rename n:file N:dir o:open q:quit",
)


def root_status_line(state: TreeState) -> str:
    """Root path plus sort mode, selection and clipboard counters."""
    parts = [f"root: {state.root}  [sort: {state.sort.label}]"]
    if state.selected:
        parts.append(f"  [{len(state.selected)} selected]")
    if state.clipboard.paths:
        verb = "cut" if state.clipboard.is_cut else "copied"
        parts.append(f"  [{len(state.clipboard.paths)} {verb}]")
    return "".join(parts)


def header_lines(state: TreeState) -> list[str]:
    return [TITLE_LINE, root_status_line(state), *HELP_LINES]
