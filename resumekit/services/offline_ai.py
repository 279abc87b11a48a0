from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from resumekit.normalize.utils import (
    EMAIL_RE,
    LINKEDIN_RE,
    PHONE_RE,
    as_url,
    clean,
    first_match,
    split_lines,
)
from resumekit.schemas.resume import ResumeData
from resumekit.schemas.tools import TargetRole

logger = logging.getLogger(__name__)

MAX_SKILLS = 30
MAX_SKILL_CHARS = 40
MAX_SUMMARY_CHARS = 500
MAX_NAME_CHARS = 80
MAX_EMAIL_CHARS = 120
MAX_PHONE_CHARS = 20
MAX_LINK_CHARS = 120
MAX_ROLE_CHARS = 120
MAX_DESCRIPTION_CHARS = 1200
MAX_TECH_CHARS = 120

_NAME_LINE_RE = re.compile(r"^[A-Za-z][A-Za-z'.\- ]{2,60}$")
_WHITESPACE_RE = re.compile(r"\s+")
_PROFILE_SPLIT_RE = re.compile(r"\r?\n|,|\|")
_SKILL_HINT_RE = re.compile(
    r"\b(sql|python|excel|tableau|power bi|react|node|aws|java|typescript|analytics|api)\b",
    re.IGNORECASE | re.ASCII,
)
_SKILLS_LABEL_RE = re.compile(r"^skills?\s*:?\s*", re.IGNORECASE)
_SUMMARY_RE = re.compile(r"(?:about|summary)\s*[:\n]+([\s\S]{20,600})", re.IGNORECASE)
# ASCII word runs, matching the boundaries the dictionaries were written for.
_WORD_RE = re.compile(r"[A-Za-z0-9_]+")


@dataclass(frozen=True)
class RoleProfile:
    focus_skills: tuple[str, ...]
    summary_prefix: str


ROLE_PROFILES: dict[str, RoleProfile] = {
    "Software Engineer": RoleProfile(
        focus_skills=(
            "Algorithms",
            "Data Structures",
            "REST APIs",
            "System Design",
            "TypeScript",
            "Testing",
            "CI/CD",
            "Cloud",
        ),
        summary_prefix=(
            "Software Engineer focused on building reliable, scalable products with clean code "
            "and measurable delivery outcomes."
        ),
    ),
    "Data Analyst": RoleProfile(
        focus_skills=(
            "SQL",
            "Data Visualization",
            "Python",
            "Statistics",
            "Dashboarding",
            "Excel",
            "A/B Testing",
            "Business Intelligence",
        ),
        summary_prefix=(
            "Data Analyst focused on turning raw data into actionable insights, clear dashboards, "
            "and measurable business decisions."
        ),
    ),
}

TRANSLATION_DICTIONARIES: dict[str, dict[str, str]] = {
    "spanish": {
        "and": "y",
        "with": "con",
        "developed": "desarrollado",
        "built": "construido",
        "improved": "mejorado",
        "reduced": "reducido",
        "increased": "aumentado",
        "managed": "gestionado",
        "project": "proyecto",
        "projects": "proyectos",
        "experience": "experiencia",
        "skills": "habilidades",
        "engineer": "ingeniero",
        "analyst": "analista",
        "data": "datos",
        "software": "software",
    },
    "french": {
        "and": "et",
        "with": "avec",
        "developed": "developpe",
        "built": "construit",
        "improved": "ameliore",
        "reduced": "reduit",
        "increased": "augmente",
        "managed": "gere",
        "project": "projet",
        "projects": "projets",
        "experience": "experience",
        "skills": "competences",
        "engineer": "ingenieur",
        "analyst": "analyste",
        "data": "donnees",
        "software": "logiciel",
    },
    "german": {
        "and": "und",
        "with": "mit",
        "developed": "entwickelt",
        "built": "gebaut",
        "improved": "verbessert",
        "reduced": "reduziert",
        "increased": "erhoeht",
        "managed": "geleitet",
        "project": "projekt",
        "projects": "projekte",
        "experience": "erfahrung",
        "skills": "faehigkeiten",
        "engineer": "ingenieur",
        "analyst": "analyst",
        "data": "daten",
        "software": "software",
    },
}


def merge_unique_skills(existing: list[str], additions: list[str] | tuple[str, ...]) -> list[str]:
    """Merge skill lists keeping the first spelling of each case-insensitive value."""
    seen: set[str] = set()
    merged: list[str] = []
    for skill in [*existing, *additions]:
        token = skill.strip()
        if not token:
            continue
        key = token.lower()
        if key in seen:
            continue
        seen.add(key)
        merged.append(clean(token, MAX_SKILL_CHARS))
        if len(merged) >= MAX_SKILLS:
            break
    return merged


def fallback_tailor_resume(resume: ResumeData, role: TargetRole) -> ResumeData:
    profile = ROLE_PROFILES.get(role)
    if profile is None:
        logger.warning("offline_tailor_unknown_role role=%s", role)
        return resume.model_copy(deep=True)

    summary_source = resume.personal.summary.strip()
    if summary_source:
        summary = f"{profile.summary_prefix} {summary_source}"[:MAX_SUMMARY_CHARS]
    else:
        summary = profile.summary_prefix[:MAX_SUMMARY_CHARS]

    return resume.model_copy(
        deep=True,
        update={
            "personal": resume.personal.model_copy(update={"summary": summary}),
            "skills": merge_unique_skills(resume.skills, profile.focus_skills),
            "experience": [
                item.model_copy(update={"role": item.role or role}) for item in resume.experience
            ],
        },
    )


def pick_likely_name(text: str) -> str:
    lines = [line.strip() for line in split_lines(text)]
    for line in [line for line in lines if line][:8]:
        if EMAIL_RE.search(line) or LINKEDIN_RE.search(line) or PHONE_RE.search(line):
            continue
        if not _NAME_LINE_RE.match(line):
            continue
        words = _WHITESPACE_RE.split(line)
        if 2 <= len(words) <= 5:
            return clean(line, MAX_NAME_CHARS)
    return ""


def extract_skill_candidates(text: str) -> list[str]:
    lines = [line.strip() for line in _PROFILE_SPLIT_RE.split(text)]
    return [_SKILLS_LABEL_RE.sub("", line, count=1) for line in lines if line and _SKILL_HINT_RE.search(line)]


def extract_summary(text: str) -> str:
    match = _SUMMARY_RE.search(text)
    return clean(match.group(1), MAX_SUMMARY_CHARS) if match else ""


def fallback_import_profile(resume: ResumeData, profile_text: str) -> ResumeData:
    """Pull contact details, summary and skills out of pasted LinkedIn/profile text."""
    text = (profile_text or "").strip()
    if not text:
        return resume.model_copy(deep=True)

    email = clean(first_match(EMAIL_RE, text), MAX_EMAIL_CHARS)
    phone = clean(first_match(PHONE_RE, text), MAX_PHONE_CHARS)
    linkedin = clean(as_url(first_match(LINKEDIN_RE, text)), MAX_LINK_CHARS)
    name = pick_likely_name(text)
    summary = extract_summary(text)

    personal = resume.personal
    return resume.model_copy(
        deep=True,
        update={
            "personal": personal.model_copy(
                update={
                    "name": name or personal.name,
                    "email": email or personal.email,
                    "phone": phone or personal.phone,
                    "linkedin": linkedin or personal.linkedin,
                    "summary": summary or personal.summary,
                }
            ),
            "skills": merge_unique_skills(resume.skills, extract_skill_candidates(text)),
        },
    )


def replace_terms(text: str, dictionary: dict[str, str]) -> str:
    return _WORD_RE.sub(lambda match: dictionary.get(match.group(0).lower(), match.group(0)), text)


def fallback_translate_resume(resume: ResumeData, language: str) -> ResumeData:
    dictionary = TRANSLATION_DICTIONARIES.get(language.strip().lower())
    if dictionary is None:
        summary = f"[{language}] {resume.personal.summary}"[:MAX_SUMMARY_CHARS]
        return resume.model_copy(
            deep=True,
            update={"personal": resume.personal.model_copy(update={"summary": summary})},
        )

    def translate(value: str, max_len: int) -> str:
        return clean(replace_terms(value, dictionary), max_len)

    return resume.model_copy(
        deep=True,
        update={
            "personal": resume.personal.model_copy(
                update={"summary": translate(resume.personal.summary, MAX_SUMMARY_CHARS)}
            ),
            "experience": [
                item.model_copy(
                    update={
                        "role": translate(item.role, MAX_ROLE_CHARS),
                        "description": translate(item.description, MAX_DESCRIPTION_CHARS),
                    }
                )
                for item in resume.experience
            ],
            "projects": [
                item.model_copy(
                    update={
                        "description": translate(item.description, MAX_DESCRIPTION_CHARS),
                        "tech": translate(item.tech, MAX_TECH_CHARS),
                    }
                )
                for item in resume.projects
            ],
            "skills": [translate(skill, MAX_SKILL_CHARS) for skill in resume.skills],
        },
    )
