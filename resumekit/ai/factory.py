from __future__ import annotations

import logging

from resumekit.ai.providers.openai_provider import OpenAIGenerator
from resumekit.ai.types import TextGenerator
from resumekit.core.config import Settings, load_settings

logger = logging.getLogger(__name__)


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def ai_enabled(cfg: Settings) -> bool:
    if not cfg.ai_enabled:
        return False
    api_key = (cfg.openai_api_key or "").strip()
    return bool(api_key) and not _looks_like_placeholder(api_key)


def get_text_generator(cfg: Settings | None = None) -> TextGenerator | None:
    """Build the remote generator, or None when AI is disabled or has no usable key."""
    cfg = cfg or load_settings()
    if not ai_enabled(cfg):
        logger.info("ai_generator_disabled enabled=%s", cfg.ai_enabled)
        return None

    return OpenAIGenerator(
        model=cfg.ai_model,
        api_key=cfg.openai_api_key,
        base_url=cfg.openai_base_url,
        timeout_s=cfg.ai_timeout_s,
        max_retries=cfg.openai_max_retries,
    )
