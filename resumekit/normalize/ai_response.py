from __future__ import annotations

import json
import re
from typing import Any

from resumekit.schemas.resume import (
    ENTRY_KEYS,
    PERSONAL_KEYS,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeData,
)

_JSON_FENCE_RE = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)
_ANY_FENCE_RE = re.compile(r"```\s*([\s\S]*?)```")

MAX_SKILLS = 30


class InvalidAIResponse(ValueError):
    """Model output could not be turned into a JSON object."""


def extract_json_block(text: str) -> str:
    """Return the JSON-looking part of model output, or "" when there is none."""
    for pattern in (_JSON_FENCE_RE, _ANY_FENCE_RE):
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1).strip()

    first = text.find("{")
    last = text.rfind("}")
    if first != -1 and last > first:
        return text[first : last + 1]
    return ""


def parse_json_object(text: str) -> dict[str, Any]:
    block = extract_json_block(text)
    if not block:
        raise InvalidAIResponse("no JSON block found in model output")
    try:
        parsed = json.loads(block)
    except json.JSONDecodeError as exc:
        raise InvalidAIResponse(f"malformed JSON in model output: {exc.msg}") from exc
    except RecursionError as exc:
        raise InvalidAIResponse("model output JSON is nested too deeply") from exc
    if not isinstance(parsed, dict):
        raise InvalidAIResponse("model output JSON is not an object")
    return parsed


def _as_string(value: Any, fallback: str = "") -> str:
    return value.strip() if isinstance(value, str) else fallback


def _as_string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    items = [_as_string(item) for item in value]
    return [item for item in items if item][:MAX_SKILLS]


def _as_mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _normalize_list(value: Any, fallback: list[Any], keys: tuple[str, ...]) -> list[dict[str, str]] | list[Any]:
    if not isinstance(value, list) or not value:
        return fallback
    output: list[dict[str, str]] = []
    for raw_item in value:
        item = _as_mapping(raw_item)
        output.append({key: _as_string(item.get(key)) for key in keys})
    return output


def normalize_resume_from_ai(raw: Any, base: ResumeData) -> ResumeData:
    """Coerce loosely shaped model output into a ResumeData, using ``base`` for gaps.

    String fields fall back to the baseline value, list sections fall back to the
    whole baseline list, but skills default to an empty list.
    """
    candidate = _as_mapping(raw)
    envelope = candidate.get("resume")
    source = envelope if isinstance(envelope, dict) else candidate
    personal_raw = _as_mapping(source.get("personal"))

    personal = PersonalInfo(
        **{key: _as_string(personal_raw.get(key), getattr(base.personal, key)) for key in PERSONAL_KEYS}
    )

    def section(name: str, model: type) -> list[Any]:
        items = _normalize_list(source.get(name), getattr(base, name), ENTRY_KEYS[name])
        return [item.model_copy() if isinstance(item, model) else model(**item) for item in items]

    return ResumeData(
        personal=personal,
        education=section("education", EducationEntry),
        experience=section("experience", ExperienceEntry),
        projects=section("projects", ProjectEntry),
        skills=_as_string_list(source.get("skills")),
        certifications=section("certifications", CertificationEntry),
    )
