"""Terminal control helpers for the browser session.

Owns the raw-mode lifecycle, alternate-screen switching, and cursor
visibility. Also opens ``/dev/tty`` when stdio is redirected.
"""

from __future__ import annotations

import contextlib
import os
import sys
import termios
import tty
from collections.abc import Iterator

from .errors import TerminalUnavailableError

ENTER_ALT_SCREEN = b"\x1b[?1049h"
LEAVE_ALT_SCREEN = b"\x1b[?1049l"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
TTY_DEVICE = "/dev/tty"


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int, *, alt_screen: bool = False) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.alt_screen = alt_screen
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalUnavailableError(f"input is not a terminal: {exc}") from exc

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        prefix = ENTER_ALT_SCREEN if self.alt_screen else b""
        os.write(self.stdout_fd, prefix + HIDE_CURSOR)

    def disable_tui_mode(self) -> None:
        suffix = LEAVE_ALT_SCREEN if self.alt_screen else b""
        os.write(self.stdout_fd, SHOW_CURSOR + suffix)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_cursor_visible(self, visible: bool) -> None:
        os.write(self.stdout_fd, SHOW_CURSOR if visible else HIDE_CURSOR)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


@contextlib.contextmanager
def interactive_fds() -> Iterator[tuple[int, int]]:
    """Yield ``(input_fd, output_fd)`` for the interactive UI.

    Uses stdin/stdout when both are terminals; otherwise opens the
    controlling terminal so stdout stays free for the chosen path.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if os.isatty(stdin_fd) and os.isatty(stdout_fd):
        yield stdin_fd, stdout_fd
        return
    try:
        tty_fd = os.open(TTY_DEVICE, os.O_RDWR)
    except OSError as exc:
        raise TerminalUnavailableError(f"cannot open {TTY_DEVICE}: {exc}") from exc
    try:
        yield tty_fd, tty_fd
    finally:
        os.close(tty_fd)
