from __future__ import annotations

from pydantic import BaseModel, Field


class PersonalInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    github: str = ""
    photo: str = ""
    summary: str = ""


class EducationEntry(BaseModel):
    degree: str = ""
    institution: str = ""
    year: str = ""
    score: str = ""


class ExperienceEntry(BaseModel):
    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""


class ProjectEntry(BaseModel):
    name: str = ""
    link: str = ""
    description: str = ""
    tech: str = ""


class CertificationEntry(BaseModel):
    name: str = ""
    issuer: str = ""
    year: str = ""


class ResumeData(BaseModel):
    """Structured resume record.

    Transforms never mutate an instance in place; they return a copy with
    whole field values replaced, so the field set is identical before and after.
    """

    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)


# Whitelisted keys per list entity, in wire order.
ENTRY_KEYS: dict[str, tuple[str, ...]] = {
    "education": ("degree", "institution", "year", "score"),
    "experience": ("company", "role", "duration", "description"),
    "projects": ("name", "link", "description", "tech"),
    "certifications": ("name", "issuer", "year"),
}

PERSONAL_KEYS: tuple[str, ...] = tuple(PersonalInfo.model_fields)
