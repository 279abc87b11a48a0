from __future__ import annotations

import math

from resumekit.core.config.scoring import get_scoring_int
from resumekit.schemas.match import JobMatchResult
from resumekit.schemas.resume import ResumeData

from .corpus import resume_corpus
from .keywords import DEFAULT_KEYWORD_LIMIT, top_keywords
from .tokens import split_tokens

DEFAULT_MISSING_LIMIT = 10
DEFAULT_SUGGESTION_KEYWORD_LIMIT = 5

EMPTY_JOB_DESCRIPTION_HINT = "Paste a fuller job description to generate a keyword match."
STRONG_COVERAGE_HINT = "Keyword coverage looks strong; keep role phrasing consistent with the posting."
QUANTIFY_BULLETS_TIP = "Rewrite 2-3 experience bullets with measurable outcomes (%, $, time saved)."
MIRROR_TITLE_TIP = "Mirror the job title and top tools once in summary and once in recent experience."


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_job_match(
    resume: ResumeData,
    job_description: str,
    *,
    keyword_limit: int | None = None,
    missing_limit: int | None = None,
    suggestion_keyword_limit: int | None = None,
) -> JobMatchResult:
    if keyword_limit is None:
        keyword_limit = get_scoring_int("job_match.keyword_limit", DEFAULT_KEYWORD_LIMIT)
    if missing_limit is None:
        missing_limit = get_scoring_int("job_match.missing_limit", DEFAULT_MISSING_LIMIT)
    if suggestion_keyword_limit is None:
        suggestion_keyword_limit = get_scoring_int(
            "job_match.suggestion_keyword_limit", DEFAULT_SUGGESTION_KEYWORD_LIMIT
        )

    jd_keywords = top_keywords(job_description, limit=keyword_limit)
    if not jd_keywords:
        return JobMatchResult(
            score=0,
            matched_keywords=[],
            missing_skills=[],
            suggested_edits=[EMPTY_JOB_DESCRIPTION_HINT],
        )

    resume_tokens = set(split_tokens(resume_corpus(resume)))
    matched = [keyword for keyword in jd_keywords if keyword in resume_tokens]
    missing = [keyword for keyword in jd_keywords if keyword not in resume_tokens][: max(0, missing_limit)]
    score = _round_half_up(len(matched) / len(jd_keywords) * 100)

    if missing:
        first_line = f"Add missing keywords to skills/about: {', '.join(missing[:suggestion_keyword_limit])}."
    else:
        first_line = STRONG_COVERAGE_HINT

    return JobMatchResult(
        score=max(0, min(100, score)),
        matched_keywords=matched,
        missing_skills=missing,
        suggested_edits=[first_line, QUANTIFY_BULLETS_TIP, MIRROR_TITLE_TIP],
    )
