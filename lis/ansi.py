"""ANSI-aware text measurement and styling utilities.

Width counting skips escape sequences so padded rows line up with the
terminal edge. Persistent backgrounds are re-applied after every reset so a
styled row keeps one continuous background color.
"""

from __future__ import annotations

import re

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
ANSI_ESCAPE_RE = re.compile(r"\x1b[^m]*(?:m|$)")


def visible_width(text: str) -> int:
    """Return the number of character cells ``text`` occupies.

    An escape sequence starts at ESC and runs through the next ``m``; it
    contributes no width. Every other code point counts as one cell, which
    matches counting UTF-8 lead bytes and ignoring continuation bytes.
    """
    return len(strip_ansi(text))


def strip_ansi(text: str) -> str:
    """Remove escape sequences (ESC through the next ``m``) from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` into an RGB triple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"invalid hex color: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def fg_hex(color: str) -> str:
    """Return the truecolor foreground escape for ``#rrggbb``."""
    red, green, blue = hex_to_rgb(color)
    return f"\x1b[38;2;{red};{green};{blue}m"


def bg_256(code: int) -> str:
    """Return the 256-color background escape for palette index ``code``."""
    return f"\x1b[48;5;{code}m"


def style(text: str, color: str | None = None, *, bold: bool = False) -> str:
    """Wrap ``text`` in foreground/bold escapes terminated by a reset."""
    prefix = ""
    if bold:
        prefix += BOLD
    if color:
        prefix += fg_hex(color)
    if not prefix:
        return text
    return f"{prefix}{text}{RESET}"


def apply_persistent_bg(text: str, bg_color: int) -> str:
    """Re-assert background ``bg_color`` immediately after every reset in ``text``."""
    if bg_color < 0:
        return text
    return text.replace(RESET, RESET + bg_256(bg_color))


def pad_with_background(text: str, bg_color: int, width: int, page_bg: int = -1) -> str:
    """Fill a row to ``width`` cells on ``bg_color`` without visible seams.

    The row is prefixed with the background escape, padded with spaces up to
    ``width``, then reset. When a page background is configured it is
    re-asserted after the final reset so the next row starts on it.
    """
    padding = max(0, width - visible_width(text))
    out = [bg_256(bg_color), apply_persistent_bg(text, bg_color), " " * padding, RESET]
    if page_bg >= 0:
        out.append(bg_256(page_bg))
    return "".join(out)
