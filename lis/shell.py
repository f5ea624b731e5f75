"""Best-effort desktop integrations: system opener and clipboard.

Both spawn an external tool and return without waiting for it to finish
beyond handing over input. Failures come back as ``False``.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _opener_command() -> list[str]:
    if sys.platform == "darwin":
        return ["open"]
    if os.name == "nt":
        return ["cmd", "/c", "start", ""]
    return ["xdg-open"]


def open_with_system(path: Path) -> bool:
    """Open ``path`` with the OS default handler without blocking the UI."""
    command = _opener_command()
    if shutil.which(command[0]) is None:
        logger.warning("no system opener found (%s)", command[0])
        return False
    try:
        subprocess.Popen(
            [*command, str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.warning("failed to open %s: %s", path, exc)
        return False
    return True


def copy_text_to_clipboard(text: str) -> bool:
    """Best-effort clipboard copy across macOS, Windows, and common Linux tools."""
    if not text:
        return False

    command_candidates: list[list[str]] = []
    if sys.platform == "darwin":
        command_candidates.append(["pbcopy"])
    elif os.name == "nt":
        command_candidates.append(["clip"])
    else:
        command_candidates.extend(
            [
                ["wl-copy"],
                ["xclip", "-selection", "clipboard"],
                ["xsel", "--clipboard", "--input"],
            ]
        )

    for command in command_candidates:
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.Popen(
                command,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                text=True,
                start_new_session=True,
            )
            assert proc.stdin is not None
            proc.stdin.write(text)
            proc.stdin.close()
        except OSError as exc:
            logger.debug("clipboard command %s failed: %s", command[0], exc)
            continue
        return True
    logger.warning("no clipboard tool available")
    return False
