"""Tests for JSON config loading, value coercion, and debug-log setup."""

from __future__ import annotations

import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lis import config


class ConfigLoadTests(unittest.TestCase):
    def _with_config(self, content: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        path = Path(tmp.name) / "config.json"
        if content is not None:
            path.write_text(content, encoding="utf-8")
        patcher = mock.patch.object(config, "CONFIG_PATH", path)
        patcher.start()
        self.addCleanup(patcher.stop)
        return path

    def test_missing_file_yields_empty_config(self) -> None:
        self._with_config(None)
        self.assertEqual(config.load_config(), {})

    def test_malformed_or_non_object_json_yields_empty_config(self) -> None:
        self._with_config("{not json")
        self.assertEqual(config.load_config(), {})
        self._with_config("[1, 2]")
        self.assertEqual(config.load_config(), {})

    def test_object_is_returned(self) -> None:
        self._with_config(json.dumps({"show_hidden": True, "max_depth": 2}))
        self.assertEqual(config.load_config(), {"show_hidden": True, "max_depth": 2})


class ConfigValueTests(unittest.TestCase):
    def test_config_bool_accepts_only_booleans(self) -> None:
        data = {"a": True, "b": "yes", "c": 1}
        self.assertTrue(config.config_bool(data, "a"))
        self.assertFalse(config.config_bool(data, "b"))
        self.assertTrue(config.config_bool(data, "c", True))
        self.assertTrue(config.config_bool(data, "missing", True))

    def test_config_int_bounds(self) -> None:
        data = {"ok": 200, "low": -5, "high": 300, "flag": True, "text": "3"}
        self.assertEqual(config.config_int(data, "ok", -1, minimum=-1, maximum=255), 200)
        self.assertEqual(config.config_int(data, "low", -1, minimum=-1, maximum=255), -1)
        self.assertEqual(config.config_int(data, "high", -1, minimum=-1, maximum=255), -1)
        self.assertEqual(config.config_int(data, "flag", 7, minimum=0), 7)
        self.assertEqual(config.config_int(data, "text", 7, minimum=0), 7)

    def test_config_path_value(self) -> None:
        self.assertEqual(config.config_path_value({"debug_log": "/tmp/lis.log"}, "debug_log"), Path("/tmp/lis.log"))
        self.assertIsNone(config.config_path_value({"debug_log": "  "}, "debug_log"))
        self.assertIsNone(config.config_path_value({"debug_log": 3}, "debug_log"))


class DebugLogTests(unittest.TestCase):
    def test_configure_debug_log_writes_package_records(self) -> None:
        package_logger = logging.getLogger("lis")
        original_handlers = list(package_logger.handlers)
        original_level = package_logger.level
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "debug.log"
            try:
                config.configure_debug_log(log_path)
                logging.getLogger("lis.tree_model.reconcile").debug("rebuilt %d rows", 3)
            finally:
                for handler in package_logger.handlers:
                    if handler not in original_handlers:
                        handler.close()
                package_logger.handlers = original_handlers
                package_logger.setLevel(original_level)

            text = log_path.read_text(encoding="utf-8")

        self.assertIn("lis.tree_model.reconcile - DEBUG - rebuilt 3 rows", text)


if __name__ == "__main__":
    unittest.main()
