import tempfile
import unittest
from pathlib import Path

from memtrainer.config import load_config, validate_config


class ConfigTests(unittest.TestCase):
    def test_defaults_load(self) -> None:
        cfg = validate_config(load_config())
        self.assertEqual(cfg["session"]["instruction_delay_ms"], 2000)
        self.assertEqual(cfg["session"]["inter_item_gap_ms"], 200)
        self.assertFalse(cfg["history"]["enabled"])
        self.assertFalse(cfg["explain"])
        self.assertTrue(cfg["profile"]["path"].endswith("user_data.json"))

    def test_empty_config_gets_defaults(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg["session"]["instruction_delay_ms"], 2000)
        self.assertEqual(cfg["profile"]["default_username"], "Default User")

    def test_bad_values_are_repaired(self) -> None:
        cfg = validate_config(
            {
                "session": {"instruction_delay_ms": -5, "inter_item_gap_ms": "soon"},
                "profile": {"path": "  ", "default_username": ""},
                "history": {"enabled": 1},
            }
        )
        self.assertEqual(cfg["session"]["instruction_delay_ms"], 2000)
        self.assertEqual(cfg["session"]["inter_item_gap_ms"], 200)
        self.assertEqual(cfg["profile"]["path"], "~/.memtrainer/user_data.json")
        self.assertEqual(cfg["profile"]["default_username"], "Default User")
        self.assertIs(cfg["history"]["enabled"], True)

    def test_user_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("session:\n  instruction_delay_ms: 500\n", encoding="utf-8")
            cfg = validate_config(load_config(str(path)))
        self.assertEqual(cfg["session"]["instruction_delay_ms"], 500)
        self.assertEqual(cfg["session"]["inter_item_gap_ms"], 200)

    def test_non_mapping_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(str(path))

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/memtrainer.yml")


if __name__ == "__main__":
    unittest.main()
