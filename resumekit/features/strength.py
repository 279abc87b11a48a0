from __future__ import annotations

import re

from resumekit.core.config.scoring import get_scoring_int
from resumekit.schemas.resume import ResumeData

_METRIC_RE = re.compile(r"\d|%|[$€£]")


def _has_metric(text: str) -> bool:
    return bool(_METRIC_RE.search(text or ""))


def compute_heuristic_score(resume: ResumeData) -> int:
    """Deterministic 0-100 resume strength score used when no AI score is available."""
    personal = resume.personal
    contact_points = get_scoring_int("strength.contact_points", 5)
    contact_fields = [
        personal.name,
        personal.email,
        personal.phone,
        personal.linkedin or personal.github,
    ]
    score = sum(contact_points for value in contact_fields if value.strip())

    summary = personal.summary.strip()
    if len(summary) >= get_scoring_int("strength.summary_full_chars", 150):
        score += get_scoring_int("strength.summary_full_points", 15)
    elif summary:
        score += get_scoring_int("strength.summary_partial_points", 8)

    skills = [skill for skill in resume.skills if skill.strip()]
    score += min(
        get_scoring_int("strength.skills_max_points", 20),
        len(skills) * get_scoring_int("strength.points_per_skill", 2),
    )

    if resume.experience:
        score += get_scoring_int("strength.experience_points", 10)
        with_metrics = sum(1 for entry in resume.experience if _has_metric(entry.description))
        score += min(
            get_scoring_int("strength.metric_max_points", 15),
            with_metrics * get_scoring_int("strength.metric_description_points", 5),
        )

    if resume.projects:
        score += get_scoring_int("strength.projects_points", 10)
    if resume.education:
        score += get_scoring_int("strength.education_points", 5)
    if resume.certifications:
        score += get_scoring_int("strength.certifications_points", 5)

    return max(0, min(100, score))
