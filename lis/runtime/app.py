"""Runtime composition layer for lis.

Prepares the initial tree, wires terminal input and rendering into the
loop callbacks, and returns the path the user chose, if any.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from ..commands import refresh_git_status
from ..input import KeyContext, KeyHandler, read_key, read_line
from ..render import render, write_all
from ..state import TreeState
from ..terminal import TerminalController, interactive_fds
from ..tree_model import rebuild_visible, reveal_path
from .loop import RuntimeLoopCallbacks, run_main_loop

logger = logging.getLogger(__name__)


def prepare_state(state: TreeState) -> None:
    """Load git status, build the first Visible List, and reveal the highlight target."""
    refresh_git_status(state)
    rebuild_visible(state)
    if state.highlight_target is not None and not reveal_path(state, state.highlight_target):
        logger.debug("highlight target %s not visible", state.highlight_target)


def run_browser(state: TreeState) -> Path | None:
    """Run the interactive browser on the controlling terminal.

    Returns the activated file's path, or ``None`` when the user quit.
    Raises ``KeyReadError`` or ``TerminalUnavailableError`` on fatal
    terminal failures; the terminal is restored either way.
    """
    prepare_state(state)

    with interactive_fds() as (input_fd, output_fd):
        terminal = TerminalController(input_fd, output_fd, alt_screen=state.alt_screen)

        def prompt(text: str) -> str:
            terminal.set_cursor_visible(True)
            try:
                return read_line(text, partial(read_key, input_fd), partial(write_all, output_fd))
            finally:
                terminal.set_cursor_visible(False)

        handler = KeyHandler(KeyContext(state=state, prompt=prompt))
        callbacks = RuntimeLoopCallbacks(
            read_key=partial(read_key, input_fd),
            handle_key=handler.handle,
            render=partial(render, state, output_fd),
        )
        with terminal.raw_mode():
            run_main_loop(state, callbacks)

    return state.chosen_path
