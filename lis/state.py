from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .git_status import GitKind
from .tree_model.types import Clipboard, Entry, SortKind


@dataclass
class TreeState:
    root: Path
    visible: list[Entry] = field(default_factory=list)
    cursor: int = 0

    show_hidden: bool = False
    show_git: bool = False
    show_size: bool = False
    show_time: bool = False
    show_mark: bool = True
    show_header: bool = True
    use_ansi: bool = True
    alt_screen: bool = False
    generic_icons: bool = False
    # -1 means unlimited / unset.
    max_depth: int = -1
    bg_color: int = -1
    sel_bg_color: int = -1

    sort: SortKind = SortKind.NAME
    selected: set[Path] = field(default_factory=set)
    clipboard: Clipboard = field(default_factory=Clipboard)
    git_status: dict[Path, GitKind] = field(default_factory=dict)
    git_root: Path | None = None

    message: str = ""
    highlight_target: Path | None = None
    chosen_path: Path | None = None

    def current_entry(self) -> Entry | None:
        """Return the entry under the cursor, or ``None`` for an empty list."""
        if not self.visible:
            return None
        return self.visible[self.cursor]

    def clamp_cursor(self) -> None:
        if self.cursor >= len(self.visible):
            self.cursor = len(self.visible) - 1
        if self.cursor < 0:
            self.cursor = 0
