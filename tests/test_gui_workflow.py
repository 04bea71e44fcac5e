"""
Automated workflow test for the desktop shell backend (no window required)
"""
import json
import os
import tempfile
import unittest
from pathlib import Path

from common.models import AppConfig, SessionState
from ui.session_controller import ERROR, INFO, WARNING, SessionController


class TestTextAnalyzerGuiWorkflow(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.workdir = Path(self._tmp.name)
        self.controller = SessionController(AppConfig())
        self.input_file = self.workdir / "input.txt"
        with open(self.input_file, "w", encoding="utf-8") as f:
            f.write("Is it raining?\nYes it is.\nRun!")

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_analyze_save(self):
        self.assertIsNone(self.controller.load_file(self.input_file))
        self.assertEqual(self.controller.text, "Is it raining?\nYes it is.\nRun!\n")
        self.assertIsNone(self.controller.analyze())
        self.assertEqual(self.controller.session.state, SessionState.ANALYZED)
        self.assertIn("Количество предложений: 3", self.controller.result_lines())

        target = self.workdir / "result"
        self.assertIsNone(self.controller.check_export())
        self.assertFalse(self.controller.needs_overwrite_confirmation(target))
        feedback = self.controller.save(target)
        self.assertEqual(feedback.level, INFO)
        self.assertTrue(os.path.exists(self.workdir / "result.txt"))
        self.assertTrue(self.controller.needs_overwrite_confirmation(target))

    def test_typed_text_is_analyzed(self):
        self.assertIsNone(self.controller.analyze("Hello there. General Kenobi!"))
        lines = self.controller.result_lines()
        self.assertIn("Количество слов: 4", lines)
        self.assertIn("Восклицательные предложения: 1", lines)

    def test_empty_text_warns(self):
        feedback = self.controller.analyze("   ")
        self.assertEqual(feedback.level, WARNING)
        self.assertIn("пусто", feedback.message)
        self.assertIn("Количество предложений: 0", self.controller.result_lines())

    def test_save_without_analysis_warns(self):
        self.controller.edit("Not analyzed yet.")
        feedback = self.controller.check_export()
        self.assertEqual(feedback.level, WARNING)
        self.assertEqual(self.controller.save(self.workdir / "out").level, WARNING)
        self.assertFalse(os.path.exists(self.workdir / "out.txt"))

    def test_clear_resets_results(self):
        self.controller.analyze("One.")
        self.controller.clear()
        self.assertEqual(self.controller.text, "")
        self.assertIn("Количество слов: 0", self.controller.result_lines())
        self.assertIsNotNone(self.controller.check_export())

    def test_load_missing_file_reports_error(self):
        self.controller.analyze("Keep this.")
        feedback = self.controller.load_file(self.workdir / "missing.txt")
        self.assertEqual(feedback.level, ERROR)
        self.assertEqual(self.controller.text, "Keep this.")
        self.assertEqual(self.controller.session.state, SessionState.ANALYZED)

    def test_write_error_reports_message(self):
        self.controller.analyze("Saved?")
        blocker = self.workdir / "blocker"
        blocker.write_text("file", encoding="utf-8")
        feedback = self.controller.save(blocker / "report.txt")
        self.assertEqual(feedback.level, ERROR)
        self.assertTrue(feedback.message.startswith("Ошибка при сохранении файла: "))

    def test_events_are_logged(self):
        log_path = self.workdir / "events.jsonl"
        config = AppConfig()
        config.global_settings.event_log = str(log_path)
        controller = SessionController(config)
        controller.load_file(self.input_file)
        controller.analyze()
        controller.save(self.workdir / "logged")

        events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
        names = [event["event"] for event in events]
        self.assertEqual(names, ["transition", "load", "transition", "analyze", "save"])
        self.assertEqual(events[3]["sentence_count"], 3)


if __name__ == "__main__":
    unittest.main()
