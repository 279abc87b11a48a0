import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumekit.ai.types import AIServiceError  # noqa: E402
from resumekit.features import compute_heuristic_score  # noqa: E402
from resumekit.schemas.resume import PersonalInfo, ResumeData  # noqa: E402
from resumekit.services.ai_actions import AIActions, invalid_format_notice, unavailable_notice  # noqa: E402
from resumekit.services.offline_ai import fallback_tailor_resume, fallback_translate_resume  # noqa: E402


class StaticGenerator:
    def __init__(self, output: str):
        self.output = output
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.output


class FailingGenerator:
    def __init__(self, exc: Exception):
        self.exc = exc
        self.calls = 0

    def complete(self, prompt: str) -> str:
        self.calls += 1
        raise self.exc


def _resume() -> ResumeData:
    return ResumeData(personal=PersonalInfo(name="Ann Lee", summary="Builds data tools."), skills=["Python"])


class RunActionTests(unittest.TestCase):
    def test_missing_generator_reports_error(self):
        outcome = AIActions(None).run_action("Improve About", "prompt")
        self.assertIsNone(outcome.output)
        self.assertEqual(outcome.error, "AI is not configured.")
        self.assertFalse(AIActions(None).available)

    def test_generator_failure_is_captured(self):
        actions = AIActions(FailingGenerator(AIServiceError("unauthorized", code="llm_exception")))
        outcome = actions.run_action("Improve About", "prompt")
        self.assertIsNone(outcome.output)
        self.assertEqual(outcome.error, "unauthorized")

    def test_strict_mode_raises(self):
        with self.assertRaises(AIServiceError) as ctx:
            AIActions(None, strict=True).run_action("Improve About", "prompt")
        self.assertEqual(ctx.exception.code, "llm_disabled")

        with self.assertRaises(AIServiceError) as ctx:
            AIActions(FailingGenerator(TimeoutError("timed out")), strict=True).run_action("Improve About", "prompt")
        self.assertEqual(ctx.exception.code, "llm_exception")

    def test_success_returns_output(self):
        generator = StaticGenerator("Sharper summary.")
        self.assertEqual(AIActions(generator).improve_summary("old"), "Sharper summary.")
        self.assertIn("old", generator.prompts[0])


class StructuredActionTests(unittest.TestCase):
    def test_unavailable_uses_fallback_with_notice(self):
        resume = _resume()
        result = AIActions(None).tailor_resume(resume, "Software Engineer")

        self.assertEqual(result.source, "fallback")
        self.assertEqual(result.notice, unavailable_notice("role tailoring"))
        self.assertEqual(result.resume, fallback_tailor_resume(resume, "Software Engineer"))

    def test_failure_and_empty_output_count_as_unavailable(self):
        for generator in (FailingGenerator(RuntimeError("401")), StaticGenerator("")):
            with self.subTest(generator=type(generator).__name__):
                result = AIActions(generator).translate_resume(_resume(), "Spanish")
                self.assertEqual(result.source, "fallback")
                self.assertEqual(result.notice, unavailable_notice("translation fallback"))

    def test_invalid_format_notice(self):
        result = AIActions(StaticGenerator("I could not do that.")).translate_resume(_resume(), "Klingon")

        self.assertEqual(result.source, "fallback")
        self.assertEqual(result.notice, invalid_format_notice("translation fallback"))
        self.assertEqual(result.resume, fallback_translate_resume(_resume(), "Klingon"))
        self.assertNotEqual(unavailable_notice("x"), invalid_format_notice("x"))

    def test_invalid_format_raises_in_strict_mode(self):
        actions = AIActions(StaticGenerator("no json"), strict=True)
        with self.assertRaises(AIServiceError) as ctx:
            actions.tailor_resume(_resume(), "Data Analyst")
        self.assertEqual(ctx.exception.code, "llm_invalid")

    def test_deeply_nested_output_uses_fallback(self):
        output = '{"a": ' + "[" * 100000 + "]" * 100000 + "}"
        result = AIActions(StaticGenerator(output)).translate_resume(_resume(), "Spanish")

        self.assertEqual(result.source, "fallback")
        self.assertEqual(result.notice, invalid_format_notice("translation fallback"))
        self.assertEqual(result.resume, fallback_translate_resume(_resume(), "Spanish"))

    def test_empty_output_raises_in_strict_mode(self):
        actions = AIActions(StaticGenerator(""), strict=True)
        with self.assertRaises(AIServiceError) as ctx:
            actions.import_profile(_resume(), "Ann Lee")
        self.assertEqual(ctx.exception.code, "llm_empty")

    def test_ai_result_is_normalized(self):
        output = '```json\n{"personal": {"summary": "Data analyst."}, "skills": ["SQL", "Tableau"]}\n```'
        result = AIActions(StaticGenerator(output)).tailor_resume(_resume(), "Data Analyst")

        self.assertEqual(result.source, "ai")
        self.assertEqual(result.notice, "")
        self.assertEqual(result.resume.personal.summary, "Data analyst.")
        self.assertEqual(result.resume.personal.name, "Ann Lee")
        self.assertEqual(result.resume.skills, ["SQL", "Tableau"])

    def test_import_profile_keeps_detected_linkedin_url(self):
        text = "Ann Lee\nhttps://www.linkedin.com/in/ann-lee\nSkills: SQL"
        output = '{"personal": {"summary": "Analyst"}}'
        result = AIActions(StaticGenerator(output)).import_profile(_resume(), text)

        self.assertEqual(result.source, "ai")
        self.assertEqual(result.resume.personal.linkedin, "https://www.linkedin.com/in/ann-lee")

        offline = AIActions(None).import_profile(_resume(), text)
        self.assertEqual(offline.notice, unavailable_notice("LinkedIn import"))
        self.assertEqual(offline.resume.personal.linkedin, "https://www.linkedin.com/in/ann-lee")
        self.assertEqual(offline.resume.skills, ["Python", "SQL"])


class TextActionTests(unittest.TestCase):
    def test_strength_prefers_ai_score(self):
        score = AIActions(StaticGenerator("Score: 87/100")).analyze_strength(_resume())
        self.assertEqual((score.score, score.source), (87, "ai"))

    def test_strength_falls_back_to_heuristic(self):
        resume = _resume()
        for actions in (AIActions(None), AIActions(StaticGenerator("Looks great!"))):
            score = actions.analyze_strength(resume)
            self.assertEqual(score.source, "heuristic")
            self.assertEqual(score.score, compute_heuristic_score(resume))

    def test_suggest_skills_drops_known_values(self):
        output = "1. python\n- Kubernetes.\nTerraform, terraform"
        self.assertEqual(AIActions(StaticGenerator(output)).suggest_skills(_resume()), ["Kubernetes", "Terraform"])
        self.assertIsNone(AIActions(None).suggest_skills(_resume()))

    def test_boost_achievements(self):
        generator = StaticGenerator("- Cut report time by 40%\n- Grew users 2x")
        actions = AIActions(generator)
        self.assertIsNone(actions.boost_achievements([]))
        self.assertEqual(generator.prompts, [])
        self.assertEqual(actions.boost_achievements(["Made reports"]), ["Cut report time by 40%", "Grew users 2x"])


if __name__ == "__main__":
    unittest.main()
