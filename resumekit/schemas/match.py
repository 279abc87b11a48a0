from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StrengthSource = Literal["ai", "heuristic"]


class JobMatchResult(BaseModel):
    score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    suggested_edits: list[str] = Field(default_factory=list)


class StrengthScore(BaseModel):
    score: int = Field(ge=0, le=100)
    source: StrengthSource
