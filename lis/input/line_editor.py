"""Single-line prompt editor used by rename and create commands."""

from __future__ import annotations

from collections.abc import Callable

_CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})


def read_line(
    prompt: str,
    read_key: Callable[[], str],
    write: Callable[[str], None],
) -> str:
    """Prompt on the current terminal line and collect text until Enter.

    Escape or Ctrl-C cancel and return ``""``. Backspace erases the last
    character on screen. Other named key tokens are ignored.
    """
    write("\r\n" + prompt)
    chars: list[str] = []
    while True:
        key = read_key()
        if key == "ENTER":
            return "".join(chars)
        if key in _CANCEL_KEYS:
            return ""
        if key == "BACKSPACE":
            if chars:
                chars.pop()
                write("\b \b")
            continue
        if len(key) == 1 and key.isprintable():
            chars.append(key)
            write(key)
