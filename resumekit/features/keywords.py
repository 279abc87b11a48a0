from __future__ import annotations

from collections import Counter

from .tokens import iter_tokens

DEFAULT_KEYWORD_LIMIT = 24


def top_keywords(text: str, limit: int = DEFAULT_KEYWORD_LIMIT) -> list[str]:
    """Return the most frequent tokens of ``text``, highest count first.

    Ties keep first-seen order: Counter preserves insertion order and
    ``sorted`` is stable.
    """
    if limit <= 0:
        return []
    counts: Counter[str] = Counter(iter_tokens(text))
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]
