"""Tests for config persistence and input sanitization.

Ensures malformed config data falls back to built-in defaults on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from termreflow import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("termreflow.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_cli_defaults(), config.CliDefaults())

    def test_malformed_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("termreflow.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("termreflow.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_cli_defaults_drop_invalid_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("termreflow.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "width": True,
                        "tab_width": -2,
                        "breakpoints": 5,
                        "tail": ["x"],
                        "style": "   ",
                    }
                )
                self.assertEqual(config.load_cli_defaults(), config.CliDefaults())

    def test_cli_defaults_apply_valid_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("termreflow.config.CONFIG_PATH", config_path):
                config.save_config(
                    {"width": 72, "tab_width": 0, "breakpoints": "-/", "tail": "…", "style": "default"}
                )
                defaults = config.load_cli_defaults()
        self.assertEqual(defaults.width, 72)
        self.assertEqual(defaults.tab_width, 0)
        self.assertEqual(defaults.breakpoints, "-/")
        self.assertEqual(defaults.tail, "…")
        self.assertEqual(defaults.style, "default")

    def test_save_width_keeps_other_keys_and_ignores_non_positive(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("termreflow.config.CONFIG_PATH", config_path):
                config.save_config({"tail": "."})
                config.save_width(40)
                config.save_width(0)
                self.assertEqual(config.load_config(), {"tail": ".", "width": 40})


if __name__ == "__main__":
    unittest.main()
