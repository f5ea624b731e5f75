"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .. import commands
from ..state import TreeState
from ..tree_model import set_expanded
from .key_registry import KeyComboBinding, KeyComboRegistry

QUIT_KEYS = frozenset({"q", "Q", "ESC", "CTRL_C"})


@dataclass(frozen=True)
class KeyContext:
    """State and bound operations required for key handling."""

    state: TreeState
    prompt: Callable[[str], str]


def _collapse_or_parent(state: TreeState) -> None:
    entry = state.current_entry()
    if entry is None:
        return
    if entry.is_dir and entry.is_expanded and entry.depth != 0:
        set_expanded(state, state.cursor, False)
        return
    if entry.depth > 0:
        # The parent row is the nearest shallower entry above the cursor.
        index = state.cursor - 1
        while index >= 0 and state.visible[index].depth >= entry.depth:
            index -= 1
        if index >= 0:
            state.cursor = index


def _collapse(state: TreeState) -> None:
    entry = state.current_entry()
    if entry is not None and entry.is_dir and entry.is_expanded and entry.depth != 0:
        set_expanded(state, state.cursor, False)


def _expand(state: TreeState) -> None:
    entry = state.current_entry()
    if entry is not None and entry.is_dir:
        set_expanded(state, state.cursor, True)


def _activate(state: TreeState) -> bool:
    """Toggle a directory or choose a file; ``True`` when a file was chosen."""
    entry = state.current_entry()
    if entry is None:
        return False
    if entry.is_dir:
        if entry.depth != 0:
            set_expanded(state, state.cursor, not entry.is_expanded)
        return False
    state.chosen_path = entry.path
    return True


def _select_and_advance(state: TreeState) -> None:
    commands.toggle_select(state)
    commands.move_cursor(state, 1)


def build_key_registry(context: KeyContext) -> KeyComboRegistry:
    """Bind every normal-mode key to its action.

    Handlers return ``True`` to end the session, ``False`` otherwise.
    """
    state = context.state
    prompt = context.prompt

    def action(func: Callable[[], object]) -> Callable[[], bool]:
        def run() -> bool:
            func()
            return False

        return run

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(tuple(QUIT_KEYS), lambda: True),
        KeyComboBinding(("j", "J", "DOWN", "CTRL_N"), action(lambda: commands.move_cursor(state, 1))),
        KeyComboBinding(("k", "K", "UP", "CTRL_P"), action(lambda: commands.move_cursor(state, -1))),
        KeyComboBinding(("g",), action(lambda: commands.cursor_to_top(state))),
        KeyComboBinding(("G",), action(lambda: commands.cursor_to_bottom(state))),
        KeyComboBinding(("l", "L", "RIGHT"), action(lambda: _expand(state))),
        KeyComboBinding(("h", "H"), action(lambda: _collapse_or_parent(state))),
        KeyComboBinding(("LEFT",), action(lambda: _collapse(state))),
        KeyComboBinding(("ENTER",), lambda: _activate(state)),
        KeyComboBinding((".",), action(lambda: commands.toggle_hidden(state))),
        KeyComboBinding((" ",), action(lambda: _select_and_advance(state))),
        KeyComboBinding(("a",), action(lambda: commands.select_all(state))),
        KeyComboBinding(("A",), action(lambda: commands.clear_selection(state))),
        KeyComboBinding(("y",), action(lambda: commands.copy_selected(state))),
        KeyComboBinding(("d",), action(lambda: commands.cut_selected(state))),
        KeyComboBinding(("p",), action(lambda: commands.paste_clipboard(state))),
        KeyComboBinding(("D",), action(lambda: commands.delete_selected(state))),
        KeyComboBinding(("s",), action(lambda: commands.cycle_sort(state))),
        KeyComboBinding(("S",), action(lambda: commands.toggle_size_column(state))),
        KeyComboBinding(("t",), action(lambda: commands.toggle_time_column(state))),
        KeyComboBinding(("o",), action(lambda: commands.open_system(state))),
        KeyComboBinding(("Y",), action(lambda: commands.yank_path(state))),
        KeyComboBinding(("R",), action(lambda: commands.refresh(state))),
        KeyComboBinding(("-", "BACKSPACE"), action(lambda: commands.root_to_parent(state))),
        KeyComboBinding(("c",), action(lambda: commands.root_to_cursor_directory(state))),
        KeyComboBinding(("r",), action(lambda: commands.rename_entry(state, prompt))),
        KeyComboBinding(("n",), action(lambda: commands.create_new(state, prompt, is_dir=False))),
        KeyComboBinding(("N",), action(lambda: commands.create_new(state, prompt, is_dir=True))),
    )


class KeyHandler:
    """Normal-mode handler with bound runtime dependencies."""

    def __init__(self, context: KeyContext) -> None:
        self.context = context
        self._registry = build_key_registry(context)

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit."""
        return bool(self._registry.dispatch(key))
