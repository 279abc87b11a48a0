from __future__ import annotations

import re

_LIST_MARKER_RE = re.compile(r"^\s*(?:[-*]|\d+[.)])\s*")
_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_NEWLINE_RE = re.compile(r"\r?\n")

EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_RE = re.compile(r"\+?\d[\d\s().-]{8,}\d")
LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/[^\s,;|)]+", re.IGNORECASE)


def clean(value: str, max_len: int) -> str:
    return value.strip()[:max_len]


def as_url(value: str) -> str:
    if not value:
        return ""
    return value if _SCHEME_RE.match(value) else f"https://{value}"


def split_lines(text: str) -> list[str]:
    return _NEWLINE_RE.split(text)


def strip_list_marker(line: str) -> str:
    return _LIST_MARKER_RE.sub("", line, count=1).strip()


def first_match(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""
