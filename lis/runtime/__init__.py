"""Interactive runtime: event loop and session composition."""

from .app import prepare_state, run_browser
from .loop import LoopPhase, RuntimeLoopCallbacks, run_main_loop

__all__ = [
    "LoopPhase",
    "RuntimeLoopCallbacks",
    "prepare_state",
    "run_browser",
    "run_main_loop",
]
