import json
import tempfile
import unittest
from pathlib import Path

from memtrainer.app import build_manager
from memtrainer.session import ManualScheduler, Phase


class BuildManagerTests(unittest.TestCase):
    def test_wires_config_store_and_profile(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            profile_path = Path(tmp) / "user_data.json"
            cfg_path = Path(tmp) / "cfg.yml"
            cfg_path.write_text(
                "session:\n"
                "  instruction_delay_ms: 100\n"
                "  inter_item_gap_ms: 0\n"
                "profile:\n"
                f"  path: {profile_path}\n"
                "  default_username: tester\n",
                encoding="utf-8",
            )
            manager = build_manager(str(cfg_path), scheduler=ManualScheduler())
            self.assertEqual(manager.profile.username, "tester")
            self.assertTrue(profile_path.exists())

            session = manager.start("number", seed=9)
            manager.scheduler.advance(100)
            self.assertEqual(session.phase, Phase.PRESENTING)
            manager.scheduler.run_until_idle()
            for token in session.sequence:
                manager.submit_answer(token)
            manager.complete_input()
            self.assertTrue(manager.shutdown())

            saved = json.loads(profile_path.read_text(encoding="utf-8"))
            self.assertEqual(saved["totalExercisesCompleted"], 1)
            self.assertEqual(saved["scores"][0]["exerciseType"], "number")


if __name__ == "__main__":
    unittest.main()
