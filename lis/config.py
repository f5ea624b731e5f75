"""JSON config defaults and debug-log setup.

The config file only supplies defaults for display options; command-line
flags override it and nothing is ever written back. Malformed or missing
config falls back to built-in defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lis"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

BOOL_KEYS = (
    "show_hidden",
    "show_git",
    "show_size",
    "show_time",
    "show_mark",
    "compact",
    "alt_screen",
    "generic_icons",
    "no_color",
)

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def config_bool(config: dict[str, object], key: str, default: bool = False) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = config.get(key)
    return value if isinstance(value, bool) else default


def config_int(config: dict[str, object], key: str, default: int, *, minimum: int, maximum: int | None = None) -> int:
    """Integer in ``[minimum, maximum]``; booleans and out-of-range values yield ``default``."""
    value = config.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum or (maximum is not None and value > maximum):
        return default
    return value


def config_path_value(config: dict[str, object], key: str) -> Path | None:
    value = config.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def configure_debug_log(path: Path) -> None:
    """Send all ``lis`` log records at DEBUG level to ``path``."""
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger(APP_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    logger.debug("debug log opened at %s", path)
