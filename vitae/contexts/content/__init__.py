"""
Content Context

Responsibilities:
- Owns the immutable résumé data model (ResumeDocument and its entry records)
- Loads résumés from YAML/JSON (snake_case or camelCase keys)
- Provides pure edit functions that return new documents
- Formats dates for display and résumés as markdown previews

Owns: Résumé data representation, input validation, date display rules
Never: Measures text or decides page breaks
"""

from vitae.contexts.content.dates import format_date, format_date_range, format_location
from vitae.contexts.content.exceptions import InvalidResumeError
from vitae.contexts.content.markdown_formatter import format_resume_markdown
from vitae.contexts.content.resume_document import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
    SkillGroup,
    load_resume,
)

__all__ = [
    # Data structure classes
    "ResumeDocument",
    "ExperienceEntry",
    "EducationEntry",
    "SkillGroup",
    "ProjectEntry",
    "CertificationEntry",
    "load_resume",
    "InvalidResumeError",
    # Display helpers
    "format_date",
    "format_date_range",
    "format_location",
    "format_resume_markdown",
]
