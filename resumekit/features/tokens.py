from __future__ import annotations

import re
from typing import Iterator

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9+#./-]")

MIN_TOKEN_LENGTH = 3

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "this",
        "from",
        "your",
        "you",
        "are",
        "our",
        "will",
        "have",
        "has",
        "into",
        "using",
        "use",
        "across",
        "about",
        "job",
        "role",
        "team",
        "work",
        "years",
        "year",
        "experience",
        "ability",
        "skills",
        "skill",
        "responsible",
        "requirements",
    }
)


def clean_token(token: str) -> str:
    return _DISALLOWED_RE.sub("", token.lower()).strip()


def iter_tokens(text: str) -> Iterator[str]:
    for fragment in _WHITESPACE_RE.split(text or ""):
        token = clean_token(fragment)
        if len(token) < MIN_TOKEN_LENGTH or token in STOP_WORDS:
            continue
        yield token


def split_tokens(text: str) -> list[str]:
    """Tokens in text order; duplicates are kept for frequency counting."""
    return list(iter_tokens(text))
