from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from resumekit.ai.types import AIServiceError, TextGenerator
from resumekit.features.strength import compute_heuristic_score
from resumekit.normalize.ai_response import InvalidAIResponse, normalize_resume_from_ai, parse_json_object
from resumekit.normalize.text_output import extract_score, listify, pick_new_skills
from resumekit.normalize.utils import as_url
from resumekit.schemas.match import StrengthScore
from resumekit.schemas.resume import ResumeData
from resumekit.schemas.tools import ResumeActionResult, TargetRole

from .offline_ai import fallback_import_profile, fallback_tailor_resume, fallback_translate_resume

logger = logging.getLogger(__name__)

SKILL_SUGGESTION_LIMIT = 12

_RESUME_SCHEMA = """{
  "personal": { "name":"","email":"","phone":"","address":"","linkedin":"","github":"","photo":"","summary":"" },
  "education":[{"degree":"","institution":"","year":"","score":""}],
  "experience":[{"company":"","role":"","duration":"","description":""}],
  "projects":[{"name":"","link":"","description":"","tech":""}],
  "skills":[""],
  "certifications":[{"name":"","issuer":"","year":""}]
}"""

_LINKEDIN_URL_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/[^\s)]+", re.IGNORECASE)


def unavailable_notice(label: str) -> str:
    return f"Applied local {label} because AI request was unavailable (for example, unauthorized key)."


def invalid_format_notice(label: str) -> str:
    return f"Applied local {label} because AI response format was invalid."


@dataclass(frozen=True)
class ActionOutcome:
    action: str
    output: str | None = None
    error: str | None = None


class AIActions:
    """Resume actions backed by a remote text generator with deterministic fallbacks.

    Generator failures never escape unless ``strict`` is set; the structured
    actions then apply the matching offline transform and report a notice.
    """

    def __init__(self, generator: TextGenerator | None, *, strict: bool = False):
        self._generator = generator
        self._strict = strict

    @property
    def available(self) -> bool:
        return self._generator is not None

    def run_action(self, action: str, prompt: str) -> ActionOutcome:
        if self._generator is None:
            if self._strict:
                raise AIServiceError(f"AI is required for '{action}' but is not configured.", code="llm_disabled")
            return ActionOutcome(action=action, error="AI is not configured.")
        try:
            output = self._generator.complete(prompt)
        except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
            logger.warning("ai_action_failed action=%s: %s", action, exc)
            if self._strict:
                if isinstance(exc, AIServiceError):
                    raise
                raise AIServiceError(str(exc), code="llm_exception") from exc
            message = str(exc) or "AI request failed."
            return ActionOutcome(action=action, error=message)
        return ActionOutcome(action=action, output=output)

    def _structured_resume_action(
        self,
        *,
        action: str,
        prompt: str,
        resume: ResumeData,
        label: str,
        fallback: Callable[[], ResumeData],
    ) -> ResumeActionResult:
        outcome = self.run_action(action, prompt)
        if not outcome.output:
            if self._strict:
                raise AIServiceError("AI returned an empty response.", code="llm_empty")
            logger.info("ai_fallback_applied action=%s reason=unavailable", action)
            return ResumeActionResult(resume=fallback(), source="fallback", notice=unavailable_notice(label))
        try:
            payload = parse_json_object(outcome.output)
        except InvalidAIResponse as exc:
            logger.info("ai_fallback_applied action=%s reason=invalid_format: %s", action, exc)
            if self._strict:
                raise AIServiceError("AI response format was invalid.", code="llm_invalid") from exc
            return ResumeActionResult(resume=fallback(), source="fallback", notice=invalid_format_notice(label))
        return ResumeActionResult(resume=normalize_resume_from_ai(payload, resume), source="ai")

    def improve_summary(self, summary: str) -> str | None:
        prompt = (
            "Improve this resume About section to be concise and impact-focused.\n"
            f"Return 3-4 sentences, max 120 words, no bullet points.\n{summary}"
        )
        return self.run_action("Improve About", prompt).output

    def rewrite_experience(self, role: str, company: str, description: str) -> str | None:
        prompt = (
            "Rewrite this job description in a professional, achievement-oriented style.\n"
            f"Role: {role}\nCompany: {company}\nDescription: {description}"
        )
        return self.run_action("Rewrite Experience", prompt).output

    def generate_bullets(self, role: str, company: str) -> str | None:
        prompt = (
            "Generate 4 concise resume bullet points for this role with measurable impact.\n"
            f"Role: {role}\nCompany: {company}"
        )
        return self.run_action("Generate Bullets", prompt).output

    def ats_suggestions(self, resume: ResumeData) -> list[str] | None:
        prompt = f"Provide ATS optimization suggestions as bullet points for this resume:\n{resume.model_dump_json()}"
        output = self.run_action("ATS Suggestions", prompt).output
        return listify(output) if output else None

    def grammar_improve(self, content: str) -> str | None:
        prompt = f"Improve grammar and clarity without changing meaning:\n{content}"
        return self.run_action("Grammar Improve", prompt).output

    def suggest_skills(self, resume: ResumeData) -> list[str] | None:
        prompt = (
            f"Suggest {SKILL_SUGGESTION_LIMIT} resume skills tailored to this candidate.\n"
            "Return only skill names, one per line, no numbering.\n"
            "Keep each item concise and ATS friendly.\n"
            f"Resume data:\n{resume.model_dump_json()}"
        )
        output = self.run_action("AI Skill Suggestions", prompt).output
        if not output:
            return None
        return pick_new_skills(output, resume.skills, limit=SKILL_SUGGESTION_LIMIT)

    def analyze_strength(self, resume: ResumeData) -> StrengthScore:
        prompt = (
            "Rate this resume from 0 to 100 for strength and ATS readiness. Reply with only a number.\n"
            f"{resume.model_dump_json()}"
        )
        output = self.run_action("Strength Score", prompt).output
        ai_score = extract_score(output) if output else None
        if ai_score is not None:
            return StrengthScore(score=ai_score, source="ai")
        return StrengthScore(score=compute_heuristic_score(resume), source="heuristic")

    def tailor_resume(self, resume: ResumeData, role: TargetRole) -> ResumeActionResult:
        prompt = (
            f'Rewrite this resume for the role "{role}" while keeping claims realistic.\n'
            f"Return valid JSON only with this shape:\n{_RESUME_SCHEMA}\n"
            "Do not add extra keys.\n"
            f"Resume:\n{resume.model_dump_json()}"
        )
        return self._structured_resume_action(
            action=f"Tailor {role}",
            prompt=prompt,
            resume=resume,
            label="role tailoring",
            fallback=lambda: fallback_tailor_resume(resume, role),
        )

    def boost_achievements(self, lines: list[str]) -> list[str] | None:
        if not lines:
            return None
        joined = "\n".join(lines)
        prompt = (
            "Rewrite each resume bullet to be stronger and metrics-focused.\n"
            "For every line, include at least one measurable impact (%, $, time, users, volume) "
            "and keep it concise.\n"
            "Return one bullet per line, no numbering.\n"
            f"Lines:\n{joined}"
        )
        output = self.run_action("Achievement Booster", prompt).output
        return listify(output) if output else None

    def generate_cover_letter(self, resume: ResumeData, job_description: str) -> str | None:
        prompt = (
            "Write a tailored cover letter from the resume and job description below.\n"
            "Constraints:\n"
            "- 220 to 320 words\n"
            "- Professional and specific\n"
            "- Mention 2 concrete achievements\n"
            "- No placeholders\n"
            f"Resume:\n{resume.model_dump_json()}\n"
            f"Job Description:\n{job_description}"
        )
        return self.run_action("Cover Letter", prompt).output

    def import_profile(self, resume: ResumeData, profile_text: str) -> ResumeActionResult:
        link_match = _LINKEDIN_URL_RE.search(profile_text)
        if link_match:
            resume = resume.model_copy(
                update={"personal": resume.personal.model_copy(update={"linkedin": as_url(link_match.group(0))})}
            )

        prompt = (
            "Extract and map this LinkedIn profile URL/text into the resume JSON schema.\n"
            "Return valid JSON only, same schema keys as below. "
            "Fill what you can and leave unknown fields as empty strings.\n"
            f"Schema:\n{_RESUME_SCHEMA}\n"
            f"Current resume to preserve context:\n{resume.model_dump_json()}\n"
            f"LinkedIn input:\n{profile_text}"
        )
        return self._structured_resume_action(
            action="LinkedIn Import",
            prompt=prompt,
            resume=resume,
            label="LinkedIn import",
            fallback=lambda: fallback_import_profile(resume, profile_text),
        )

    def translate_resume(self, resume: ResumeData, language: str) -> ResumeActionResult:
        prompt = (
            f"Translate this resume into {language}.\n"
            "Return valid JSON only with the same keys and structure.\n"
            "Keep links, dates, numbers, and proper nouns unchanged.\n"
            f"Resume:\n{resume.model_dump_json()}"
        )
        return self._structured_resume_action(
            action=f"Translate Resume ({language})",
            prompt=prompt,
            resume=resume,
            label="translation fallback",
            fallback=lambda: fallback_translate_resume(resume, language),
        )
