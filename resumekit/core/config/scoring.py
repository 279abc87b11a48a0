from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SCORING_PATH = Path(__file__).resolve().with_name("scoring.yaml")


class ScoringConfigError(RuntimeError):
    pass


def scoring_config_path() -> Path:
    override = os.getenv("SCORING_CONFIG_PATH", "").strip()
    return Path(override) if override else DEFAULT_SCORING_PATH


@lru_cache(maxsize=4)
def load_scoring_file(path: Path) -> dict[str, Any]:
    """Parse one scoring YAML file; the result is cached per path."""
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ScoringConfigError(f"Scoring config not found at '{path}'.") from exc
    except OSError as exc:
        raise ScoringConfigError(f"Failed to read scoring config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ScoringConfigError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    return load_scoring_file(scoring_config_path())


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a nested value by dot path, e.g. 'job_match.missing_limit'.

    An unreadable or malformed config yields ``default`` so scoring stays usable.
    """
    if not path:
        return default

    try:
        current: Any = get_scoring_config()
    except ScoringConfigError as exc:
        logger.warning("scoring_config_unavailable path=%s: %s", path, exc)
        return default

    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def get_scoring_int(path: str, default: int) -> int:
    value = get_scoring_value(path, default)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value
