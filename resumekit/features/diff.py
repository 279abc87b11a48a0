from __future__ import annotations

from resumekit.schemas.resume import ResumeData

NO_CHANGES = "No major field changes detected"

_LIST_SECTIONS: tuple[tuple[str, str], ...] = (
    ("skills", "Skills updated"),
    ("experience", "Experience updated"),
    ("projects", "Projects updated"),
    ("education", "Education updated"),
    ("certifications", "Certifications updated"),
)


def build_version_diff_summary(a: ResumeData, b: ResumeData) -> list[str]:
    changes: list[str] = []
    if a.personal.summary != b.personal.summary:
        changes.append("Summary changed")
    for field_name, label in _LIST_SECTIONS:
        if getattr(a, field_name) != getattr(b, field_name):
            changes.append(label)
    return changes or [NO_CHANGES]
