"""UI palette definitions.

Colors are fixed per semantic category (names, marks, git badges, metadata).
File icon colors come from the icon table in ``lis.icons``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ``#rrggbb`` palette used by renderers."""

    name: str
    cursor_marker: str
    name_directory: str
    name_selected: str
    name_default: str
    icon_directory: str
    mark_selected: str
    mark_readonly: str
    git_changed: str
    git_staged: str
    git_conflict: str
    git_dim: str
    metadata: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="gruvbox",
    cursor_marker="#FFFFFF",
    name_directory="#689FB6",
    name_selected="#b8bb26",
    name_default="#F09F17",
    icon_directory="#00afaf",
    mark_selected="#b8bb26",
    mark_readonly="#fb4934",
    git_changed="#fabd2f",
    git_staged="#b8bb26",
    git_conflict="#fb4934",
    git_dim="#928374",
    metadata="#928374",
    status_message="#fabd2f",
)
