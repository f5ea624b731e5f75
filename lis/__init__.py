"""Public package surface for lis.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``lis``.
"""

from __future__ import annotations

import logging

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "__version__"]
