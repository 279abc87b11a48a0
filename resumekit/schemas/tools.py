from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .match import JobMatchResult, StrengthScore
from .resume import ResumeData

TargetRole = Literal["Software Engineer", "Data Analyst"]
ResultSource = Literal["ai", "fallback"]


class ResumeActionResult(BaseModel):
    resume: ResumeData
    source: ResultSource
    notice: str = ""


class ResumeRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData)


class JobMatchRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData)
    job_description: str = Field(default="", max_length=50000)


class DiffRequest(BaseModel):
    before: ResumeData
    after: ResumeData


class DiffResponse(BaseModel):
    changes: list[str]


class TailorRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData)
    role: TargetRole


class ImportProfileRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData)
    profile_text: str = Field(min_length=1, max_length=20000)


class TranslateRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData)
    language: str = Field(min_length=1, max_length=40)


class AchievementsRequest(BaseModel):
    lines: list[str] = Field(default_factory=list, max_length=30)


class CoverLetterRequest(BaseModel):
    resume: ResumeData = Field(default_factory=ResumeData)
    job_description: str = Field(min_length=1, max_length=50000)


class TextRequest(BaseModel):
    text: str = Field(min_length=1, max_length=5000)


class TextResponse(BaseModel):
    output: str | None = None
    error: str | None = None


class LinesResponse(BaseModel):
    lines: list[str] = Field(default_factory=list)
    error: str | None = None


__all__ = [
    "AchievementsRequest",
    "CoverLetterRequest",
    "DiffRequest",
    "DiffResponse",
    "ImportProfileRequest",
    "JobMatchRequest",
    "JobMatchResult",
    "LinesResponse",
    "ResumeActionResult",
    "ResumeRequest",
    "StrengthScore",
    "TailorRequest",
    "TargetRole",
    "TextRequest",
    "TextResponse",
    "TranslateRequest",
]
