import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumekit.features import build_version_diff_summary, compute_heuristic_score  # noqa: E402
from resumekit.features.diff import NO_CHANGES  # noqa: E402
from resumekit.schemas.resume import (  # noqa: E402
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeData,
)


def _full_resume() -> ResumeData:
    return ResumeData(
        personal=PersonalInfo(
            name="Ann Lee",
            email="ann@example.com",
            phone="+1 555 123 4567",
            github="github.com/annlee",
            summary="S" * 160,
        ),
        skills=[f"Skill {index}" for index in range(12)],
        experience=[
            ExperienceEntry(company="Acme", role="Analyst", description="Cut reporting time by 30%"),
            ExperienceEntry(company="Globex", role="Intern", description="Supported the finance team"),
        ],
        projects=[ProjectEntry(name="Dash")],
        education=[EducationEntry(degree="BSc")],
        certifications=[CertificationEntry(name="PL-300")],
    )


class HeuristicScoreTests(unittest.TestCase):
    def test_empty_resume_scores_zero(self):
        self.assertEqual(compute_heuristic_score(ResumeData()), 0)

    def test_full_resume(self):
        self.assertEqual(compute_heuristic_score(_full_resume()), 90)

    def test_partial_summary_and_skill_points(self):
        resume = ResumeData(personal=PersonalInfo(summary="Short summary"), skills=["SQL", " ", "Excel"])
        self.assertEqual(compute_heuristic_score(resume), 8 + 4)

    def test_metric_points_capped(self):
        resume = ResumeData(
            experience=[ExperienceEntry(description=f"Saved ${index}k") for index in range(1, 6)]
        )
        self.assertEqual(compute_heuristic_score(resume), 10 + 15)


class VersionDiffTests(unittest.TestCase):
    def test_identical_versions(self):
        resume = _full_resume()
        self.assertEqual(build_version_diff_summary(resume, resume.model_copy(deep=True)), [NO_CHANGES])

    def test_changed_sections_in_order(self):
        before = _full_resume()
        after = before.model_copy(
            deep=True,
            update={
                "personal": before.personal.model_copy(update={"summary": "New summary"}),
                "skills": ["SQL"],
                "certifications": [],
            },
        )
        self.assertEqual(
            build_version_diff_summary(before, after),
            ["Summary changed", "Skills updated", "Certifications updated"],
        )

    def test_contact_changes_are_not_reported(self):
        before = _full_resume()
        after = before.model_copy(update={"personal": before.personal.model_copy(update={"email": "new@example.com"})})
        self.assertEqual(build_version_diff_summary(before, after), [NO_CHANGES])


if __name__ == "__main__":
    unittest.main()
