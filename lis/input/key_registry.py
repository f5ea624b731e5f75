"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Exact-match key dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings in order; later combos override earlier ones."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke the handler for ``key``; ``None`` means the key is unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
