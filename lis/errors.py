"""Exception types shared by the CLI, runtime loop, and input layer."""

from __future__ import annotations


class LisError(Exception):
    """Base class for errors that end a browser session."""


class KeyReadError(LisError):
    """The key source hit end-of-input or failed to decode."""


class TerminalUnavailableError(LisError):
    """No controlling terminal could be opened for the interactive UI."""


class InvalidPathError(LisError):
    """A path given on the command line does not exist or has the wrong kind."""
