from __future__ import annotations

from functools import lru_cache

from resumekit.ai.factory import get_text_generator
from resumekit.core.config import settings
from resumekit.services.ai_actions import AIActions


@lru_cache(maxsize=1)
def get_ai_actions() -> AIActions:
    return AIActions(get_text_generator(settings), strict=settings.ai_strict)
