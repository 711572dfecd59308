"""
Markdown Utilities

Helper functions for formatting a ResumeDocument as markdown for on-screen preview.
Applies the same blank-skipping and date rules as the PDF layout, so a preview never
shows a section the export would drop.
"""

from typing import List

from vitae.contexts.content.dates import format_date, format_date_range, format_location
from vitae.contexts.content.resume_document import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
)


def _right_pair(left: str, right: str) -> str:
    """Join a left/right pair the way the PDF puts them on one line."""
    if left and right:
        return f"{left} | {right}"
    return left or right


def format_experience_markdown(entry: ExperienceEntry) -> str:
    """
    Format a single experience entry as markdown.

    Company is formatted as ### (section header added separately by caller).
    """
    parts = [f"### {entry.company}"]

    dates = format_date_range(entry.start_date, entry.end_date, current=entry.current)
    if dates:
        parts.append(f"*{dates}*")

    position_line = _right_pair(
        f"**{entry.position}**" if entry.position else "",
        format_location(entry.city, entry.state),
    )
    if position_line:
        parts.append(position_line)

    parts.append("")
    for bullet in entry.bullets:
        parts.append(f"- {bullet}")

    return "\n".join(parts)


def format_education_markdown(entry: EducationEntry) -> str:
    """Format a single education entry as markdown."""
    parts = [f"### {entry.degree or entry.institution}"]

    if entry.degree and entry.institution:
        parts.append(entry.institution)
    location = format_location(entry.city, entry.state)
    if location:
        parts.append(location)
    dates = format_date_range(entry.start_date, entry.end_date)
    if dates:
        parts.append(f"*{dates}*")
    if entry.field:
        parts.append(entry.field)
    if entry.gpa:
        parts.append(f"**GPA: {entry.gpa}**")

    return "\n".join(parts)


def format_project_markdown(entry: ProjectEntry) -> str:
    """Format a single project as markdown; the name becomes a link when one exists."""
    name = f"[{entry.name}]({entry.link})" if entry.link else entry.name
    parts = [f"### {name}"]
    if entry.description:
        parts.append(f"- {entry.description}")
    if entry.visible_technologies:
        parts.append(f"*{', '.join(entry.visible_technologies)}*")
    return "\n".join(parts)


def format_certification_markdown(entry: CertificationEntry) -> str:
    name = f"[{entry.name}]({entry.link})" if entry.link else entry.name
    return "\n".join([f"### {name}", _right_pair(entry.issuer, format_date(entry.date))])


def format_resume_markdown(doc: ResumeDocument) -> str:
    """
    Format a complete résumé as markdown.

    Sections appear in the same fixed order as the PDF. Empty sections are omitted.

    Args:
        doc: Résumé to format

    Returns:
        Markdown text with # name, contact line and ## section headers
    """
    parts: List[str] = [f"# {doc.full_name}"]

    contacts = [doc.phone]
    if doc.email:
        contacts.append(f"[{doc.email}](mailto:{doc.email})")
    if doc.linkedin:
        contacts.append(f"[LinkedIn]({doc.linkedin})")
    contact_line = " | ".join(item for item in contacts if item)
    if contact_line:
        parts.append(contact_line)

    if doc.summary.strip():
        parts.append(f"## Professional Summary\n\n{doc.summary.strip()}")

    experience = [e for e in doc.experience if not e.is_blank()]
    if experience:
        parts.append("## Professional Experience")
        parts.extend(format_experience_markdown(e) for e in experience)

    education = [e for e in doc.education if not e.is_blank()]
    if education:
        parts.append("## Education")
        parts.extend(format_education_markdown(e) for e in education)

    skills = [g for g in doc.skills if not g.is_blank()]
    if skills:
        parts.append("## Skills")
        parts.append(
            "\n".join(f"- **{g.group_name}:** *{', '.join(g.visible_skills)}*" for g in skills)
        )

    projects = [p for p in doc.projects if not p.is_blank()]
    if projects:
        parts.append("## Projects")
        parts.extend(format_project_markdown(p) for p in projects)

    certifications = [c for c in doc.certifications if not c.is_blank()]
    if certifications:
        parts.append("## Certifications")
        parts.extend(format_certification_markdown(c) for c in certifications)

    return "\n\n".join(parts)
