"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from scopenav.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_grep_filters_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("scopenav.runtime.config.CONFIG_PATH", config_path):
                config.save_grep_filters(["*.go"], ["vendor"])
                self.assertEqual(config.load_grep_filters(), (["*.go"], ["vendor"]))

    def test_missing_or_malformed_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("scopenav.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_grep_filters(), ([], []))
                self.assertEqual(config.load_dir_max_depth(), config.DEFAULT_DIR_MAX_DEPTH)
                self.assertEqual(config.load_dir_excludes(), config.DEFAULT_DIR_EXCLUDES)
                self.assertEqual(config.load_key_overrides(), {})

    def test_loaders_sanitize_invalid_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("scopenav.runtime.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "grep_filters": {"include": ["*.py", 3, ""], "exclude": "vendor"},
                        "dir_max_depth": True,
                        "dir_excludes": [".git", None, "dist"],
                        "key_bindings": {"<C-k>": "ascend", "<C-j>": 5, "": "descend"},
                    }
                )

                self.assertEqual(config.load_grep_filters(), (["*.py"], []))
                self.assertEqual(config.load_dir_max_depth(), config.DEFAULT_DIR_MAX_DEPTH)
                self.assertEqual(config.load_dir_excludes(), (".git", "dist"))
                self.assertEqual(config.load_key_overrides(), {"<C-k>": "ascend"})

    def test_positive_dir_max_depth_is_used(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("scopenav.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"dir_max_depth": 5})
                self.assertEqual(config.load_dir_max_depth(), 5)
                config.save_config({"dir_max_depth": 0})
                self.assertEqual(config.load_dir_max_depth(), config.DEFAULT_DIR_MAX_DEPTH)

    def test_save_config_ignores_unwritable_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("scopenav.runtime.config.CONFIG_PATH", blocker / "config.json"):
                config.save_config({"dir_max_depth": 2})
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
