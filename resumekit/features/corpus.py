from __future__ import annotations

from resumekit.schemas.resume import ResumeData


def resume_corpus(resume: ResumeData) -> str:
    """Flatten a resume into one searchable text blob in a fixed section order."""
    experience = " ".join(f"{entry.role} {entry.company} {entry.description}" for entry in resume.experience)
    projects = " ".join(f"{item.name} {item.description} {item.tech}" for item in resume.projects)
    education = " ".join(f"{item.degree} {item.institution}" for item in resume.education)
    certifications = " ".join(f"{item.name} {item.issuer}" for item in resume.certifications)
    return " ".join(
        [
            resume.personal.summary,
            " ".join(resume.skills),
            experience,
            projects,
            education,
            certifications,
        ]
    )
