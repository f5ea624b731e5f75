"""Low-level terminal input decoding.

Reads raw bytes from the tty and translates them into normalized key tokens:
named tokens (``UP``, ``ENTER``, ``CTRL_C`` ...) for control input, and the
decoded character for printable input.
"""

from __future__ import annotations

import os
import select

from ..errors import KeyReadError

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x0e": "CTRL_N",
    b"\x10": "CTRL_P",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_byte(fd: int) -> bytes:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    try:
        ch = os.read(fd, 1)
    except OSError as exc:
        raise KeyReadError(f"failed to read key: {exc}") from exc
    if not ch:
        raise KeyReadError("end of input")
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_text(fd: int, first: bytes) -> str:
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if more is None:
            break
        data += more
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise KeyReadError(f"undecodable key input: {data!r}") from exc


def _read_escape_sequence(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    token = _CSI_FINAL_TOKENS.get(seq)
    if token is not None:
        return token
    # Swallow the rest of an unknown CSI sequence (params end at a final byte).
    while seq is not None and not (b"@" <= seq <= b"~"):
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    return "ESC"


def read_key(fd: int) -> str:
    """Block for one key press on ``fd`` and return its token.

    Raises ``KeyReadError`` when the input stream is closed or unreadable, or
    when printable input is not valid UTF-8.
    """
    ch = _read_byte(fd)
    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token
    if ch == b"\x1b":
        return _read_escape_sequence(fd)
    return _decode_text(fd, ch)
