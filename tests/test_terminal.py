"""Tests for terminal mode control sequences and tty selection.

Verifies raw-mode lifecycle safety and the expected escape payloads.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from lis import terminal as terminal_mod
from lis.errors import TerminalUnavailableError
from lis.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_without_alternate_screen(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("lis.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "lis.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("lis.terminal.os.write") as write_mock, mock.patch(
            "lis.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_alternate_screen_is_entered_and_left(self) -> None:
        with mock.patch("lis.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lis.terminal.tty.setraw"
        ), mock.patch("lis.terminal.os.write") as write_mock, mock.patch("lis.terminal.termios.tcsetattr"):
            controller = TerminalController(stdin_fd=0, stdout_fd=1, alt_screen=True)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h\x1b[?1049l"))

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("lis.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_non_tty_input_raises_terminal_unavailable(self) -> None:
        with mock.patch("lis.terminal.termios.tcgetattr", side_effect=termios.error(25, "Inappropriate ioctl")):
            with self.assertRaises(TerminalUnavailableError):
                TerminalController(stdin_fd=0, stdout_fd=1)

    def test_cursor_visibility(self) -> None:
        with mock.patch("lis.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
        with mock.patch("lis.terminal.os.write") as write_mock:
            controller.set_cursor_visible(True)
            controller.set_cursor_visible(False)
        self.assertEqual([call.args[1] for call in write_mock.call_args_list], [b"\x1b[?25h", b"\x1b[?25l"])


class InteractiveFdsTests(unittest.TestCase):
    def test_uses_stdio_when_both_are_terminals(self) -> None:
        with mock.patch("lis.terminal.sys") as sys_mock, mock.patch(
            "lis.terminal.os.isatty", return_value=True
        ), mock.patch("lis.terminal.os.open") as open_mock:
            sys_mock.stdin.fileno.return_value = 0
            sys_mock.stdout.fileno.return_value = 1
            with terminal_mod.interactive_fds() as fds:
                self.assertEqual(fds, (0, 1))
        open_mock.assert_not_called()

    def test_opens_controlling_tty_when_stdout_is_redirected(self) -> None:
        with mock.patch("lis.terminal.sys") as sys_mock, mock.patch(
            "lis.terminal.os.isatty", side_effect=lambda fd: fd == 0
        ), mock.patch("lis.terminal.os.open", return_value=9) as open_mock, mock.patch(
            "lis.terminal.os.close"
        ) as close_mock:
            sys_mock.stdin.fileno.return_value = 0
            sys_mock.stdout.fileno.return_value = 1
            with terminal_mod.interactive_fds() as fds:
                self.assertEqual(fds, (9, 9))
        open_mock.assert_called_once_with("/dev/tty", terminal_mod.os.O_RDWR)
        close_mock.assert_called_once_with(9)

    def test_missing_tty_raises(self) -> None:
        with mock.patch("lis.terminal.sys") as sys_mock, mock.patch(
            "lis.terminal.os.isatty", return_value=False
        ), mock.patch("lis.terminal.os.open", side_effect=OSError(6, "No such device")):
            sys_mock.stdin.fileno.return_value = 0
            sys_mock.stdout.fileno.return_value = 1
            with self.assertRaises(TerminalUnavailableError):
                with terminal_mod.interactive_fds():
                    pass


if __name__ == "__main__":
    unittest.main()
