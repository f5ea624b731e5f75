"""Main interactive event loop for the terminal UI.

Blocks on one key at a time, dispatches it, and redraws. Feature logic
lives in callbacks; this module only sequences them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..state import TreeState

logger = logging.getLogger(__name__)


class LoopPhase(Enum):
    RUNNING = "running"
    EXITING = "exiting"


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[], str]
    handle_key: Callable[[str], bool]
    render: Callable[[], None]


def run_main_loop(state: TreeState, callbacks: RuntimeLoopCallbacks) -> LoopPhase:
    """Run until a handler asks to quit.

    The status message is cleared before each dispatch and the frame is
    redrawn after every key that does not end the session. Errors from
    ``read_key`` propagate to the caller.
    """
    phase = LoopPhase.RUNNING
    callbacks.render()
    while phase is LoopPhase.RUNNING:
        key = callbacks.read_key()
        state.message = ""
        if callbacks.handle_key(key):
            phase = LoopPhase.EXITING
            continue
        callbacks.render()
    logger.debug("loop exiting, chosen path: %s", state.chosen_path)
    return phase
