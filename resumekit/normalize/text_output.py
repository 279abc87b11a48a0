from __future__ import annotations

import re

from .utils import strip_list_marker

_SKILL_SPLIT_RE = re.compile(r"\n|,")
_SCORE_RE = re.compile(r"(\d{1,3})")


def listify(text: str) -> list[str]:
    """Split free-form model output into bullet lines without list markers."""
    lines = (strip_list_marker(line) for line in text.split("\n"))
    return [line for line in lines if line]


def normalize_skill_tokens(text: str) -> list[str]:
    tokens: list[str] = []
    for raw in _SKILL_SPLIT_RE.split(text):
        token = strip_list_marker(raw)
        if token.endswith("."):
            token = token[:-1]
        if token:
            tokens.append(token)
    return tokens


def extract_score(text: str) -> int | None:
    match = _SCORE_RE.search(text)
    if not match:
        return None
    return min(100, max(0, int(match.group(1))))


def pick_new_skills(output: str, existing: list[str], *, limit: int = 12, max_len: int = 40) -> list[str]:
    known = {skill.lower() for skill in existing}
    unique: list[str] = []
    seen: set[str] = set()
    for token in normalize_skill_tokens(output):
        key = token.lower()
        if len(key) > max_len or key in known or key in seen:
            continue
        seen.add(key)
        unique.append(token)
    return unique[:limit]
