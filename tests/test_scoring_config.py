import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumekit.core.config.scoring import (  # noqa: E402
    DEFAULT_SCORING_PATH,
    ScoringConfigError,
    get_scoring_config,
    get_scoring_int,
    get_scoring_value,
    load_scoring_file,
)
from resumekit.features import compute_heuristic_score, compute_job_match  # noqa: E402
from resumekit.schemas.resume import ResumeData  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("job_match.keyword_limit"), 24)

    def test_missing_and_suggestion_limits_are_independent(self):
        self.assertEqual(get_scoring_int("job_match.missing_limit", 0), 10)
        self.assertEqual(get_scoring_int("job_match.suggestion_keyword_limit", 0), 5)

    def test_default_config_ships_inside_package(self):
        package_dir = PROJECT_ROOT / "resumekit" / "core" / "config"
        self.assertEqual(DEFAULT_SCORING_PATH.parent, package_dir.resolve())
        self.assertTrue(DEFAULT_SCORING_PATH.is_file())

    def test_unknown_path_returns_default(self):
        self.assertEqual(get_scoring_value("job_match.nope", "fallback"), "fallback")
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")
        self.assertEqual(get_scoring_int("strength.summary_full_chars.deeper", 7), 7)


class ScoringOverrideTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, name: str, text: str) -> Path:
        path = Path(self.tmpdir.name) / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_env_override_changes_limits(self):
        path = self._write("scoring.yaml", "job_match:\n  missing_limit: 2\n  suggestion_keyword_limit: true\n")
        with mock.patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
            self.assertEqual(get_scoring_int("job_match.missing_limit", 10), 2)
            self.assertEqual(get_scoring_int("job_match.suggestion_keyword_limit", 5), 5)
            result = compute_job_match(ResumeData(), "kafka spark flink hadoop")
        self.assertEqual(result.missing_skills, ["kafka", "spark"])
        self.assertEqual(result.suggested_edits[0], "Add missing keywords to skills/about: kafka, spark.")

    def test_missing_config_falls_back_to_defaults(self):
        missing = Path(self.tmpdir.name) / "absent" / "scoring.yaml"
        with mock.patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(missing)}):
            with self.assertLogs("resumekit.core.config.scoring", level="WARNING"):
                self.assertEqual(get_scoring_int("job_match.missing_limit", 10), 10)
            result = compute_job_match(ResumeData(skills=["python"]), "python sql")
            score = compute_heuristic_score(ResumeData(skills=["SQL", "Excel"]))
        self.assertEqual(result.score, 50)
        self.assertEqual(result.missing_skills, ["sql"])
        self.assertEqual(score, 4)

    def test_malformed_config_falls_back_to_defaults(self):
        path = self._write("bad.yaml", "- not\n- a mapping\n")
        with mock.patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
            self.assertEqual(get_scoring_value("job_match.keyword_limit", 24), 24)

    def test_invalid_files_raise(self):
        cases = {
            "list.yaml": "- 1\n- 2\n",
            "broken.yaml": "job_match: [unclosed\n",
        }
        for name, text in cases.items():
            with self.subTest(name=name):
                with self.assertRaises(ScoringConfigError):
                    load_scoring_file(self._write(name, text))

        with self.assertRaises(ScoringConfigError):
            load_scoring_file(Path(self.tmpdir.name) / "missing.yaml")


if __name__ == "__main__":
    unittest.main()
