from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from resumekit.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-route limit; AI-backed routes pass the tighter ``settings.ai_rate_limit``."""
    if settings.rate_limit_enabled:
        return limiter.limit(limit or settings.rate_limit)

    def decorator(func):
        return func

    return decorator
