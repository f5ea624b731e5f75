"""Input-layer public API for key decoding and interaction handlers.

Low-level terminal decoding (``read_key``), the prompt line editor, and the
normal-mode key dispatch used by the runtime loop.
"""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import KeyContext, KeyHandler
from .line_editor import read_line
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "read_line",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyContext",
    "KeyHandler",
]
