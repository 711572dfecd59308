"""
Résumé Document Structure

Defines the immutable data representation of résumé content. This structure is the
interface between the content context (loading, editing, preview) and the layout
context (pagination and drawing).

All records are frozen dataclasses and all collections are tuples, so a document
cannot change underneath a layout pass. Edits go through vitae.contexts.content.edits,
which returns new documents.
"""

import re
from dataclasses import dataclass, fields
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from omegaconf import OmegaConf

from vitae.contexts.content.exceptions import InvalidResumeError

REQUIRED_KEYS = ("full_name", "title")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    """Convert camelCase keys from the web editor ("groupName") to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {_snake_case(str(key)): value for key, value in data.items()}


def _text(value: Any) -> str:
    """Coerce a scalar field to a trimmed string; None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def _text_tuple(value: Any, split_commas: bool = False) -> Tuple[str, ...]:
    """Coerce a list-ish field to a tuple of trimmed strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        if split_commas:
            return tuple(part.strip() for part in value.split(","))
        return (value.strip(),)
    return tuple(_text(item) for item in value)


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _is_blank(*values: str) -> bool:
    return not any((value or "").strip() for value in values)


@dataclass(frozen=True)
class SkillGroup:
    """
    A named group of skills, rendered as a bold label and a comma-joined run.

    Attributes:
        group_name: Label shown before the skills (e.g., "Languages")
        skills: Skill names in display order
    """

    group_name: str = ""
    skills: Tuple[str, ...] = ()

    @property
    def visible_skills(self) -> Tuple[str, ...]:
        """Skills that survive trimming."""
        return tuple(skill.strip() for skill in self.skills if skill and skill.strip())

    def is_blank(self) -> bool:
        """A group without a name or without any non-blank skill is not rendered."""
        return _is_blank(self.group_name) or not self.visible_skills

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkillGroup":
        data = _normalize_keys(data)
        return cls(
            group_name=_text(data.get("group_name")),
            skills=_text_tuple(data.get("skills"), split_commas=True),
        )


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One position held at a company.

    When current is True the rendered end label is "Present" regardless of end_date.
    Each description string is rendered as its own bullet.
    """

    company: str = ""
    position: str = ""
    city: str = ""
    state: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: Tuple[str, ...] = ()

    @property
    def bullets(self) -> Tuple[str, ...]:
        """Description strings that survive trimming."""
        return tuple(item.strip() for item in self.description if item and item.strip())

    def is_blank(self) -> bool:
        return _is_blank(self.company, self.position) and not self.bullets

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        data = _normalize_keys(data)
        return cls(
            company=_text(data.get("company")),
            position=_text(data.get("position")),
            city=_text(data.get("city")),
            state=_text(data.get("state")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
            current=_flag(data.get("current", False)),
            description=_text_tuple(data.get("description")),
        )


@dataclass(frozen=True)
class EducationEntry:
    """One degree. field and gpa are optional and omitted from layout when blank."""

    institution: str = ""
    degree: str = ""
    field: str = ""
    city: str = ""
    state: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""

    def is_blank(self) -> bool:
        return _is_blank(self.institution, self.degree, self.field)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        data = _normalize_keys(data)
        return cls(
            institution=_text(data.get("institution")),
            degree=_text(data.get("degree")),
            field=_text(data.get("field")),
            city=_text(data.get("city")),
            state=_text(data.get("state")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
            gpa=_text(data.get("gpa")),
        )


@dataclass(frozen=True)
class ProjectEntry:
    """A project; the name becomes link-addressable when link is set."""

    name: str = ""
    description: str = ""
    technologies: Tuple[str, ...] = ()
    link: str = ""

    @property
    def visible_technologies(self) -> Tuple[str, ...]:
        return tuple(tech.strip() for tech in self.technologies if tech and tech.strip())

    def is_blank(self) -> bool:
        return _is_blank(self.name, self.description)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectEntry":
        data = _normalize_keys(data)
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            technologies=_text_tuple(data.get("technologies"), split_commas=True),
            link=_text(data.get("link")),
        )


@dataclass(frozen=True)
class CertificationEntry:
    """A certification; the name becomes link-addressable when link is set."""

    name: str = ""
    issuer: str = ""
    date: str = ""
    link: str = ""

    def is_blank(self) -> bool:
        return _is_blank(self.name, self.issuer)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CertificationEntry":
        data = _normalize_keys(data)
        return cls(
            name=_text(data.get("name")),
            issuer=_text(data.get("issuer")),
            date=_text(data.get("date")),
            link=_text(data.get("link")),
        )


# Collection name -> entry type, in render order
COLLECTIONS = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "skills": SkillGroup,
    "projects": ProjectEntry,
    "certifications": CertificationEntry,
}


def _entries(entry_type, value: Optional[Iterable]) -> tuple:
    if not value:
        return ()
    return tuple(
        item if isinstance(item, entry_type) else entry_type.from_dict(item) for item in value
    )


@dataclass(frozen=True)
class ResumeDocument:
    """
    Complete résumé input for a layout pass.

    Scalar fields describe the person; the five collections hold ordered entries.
    Required on input: full_name and title (title names the exported file).
    """

    title: str = ""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillGroup, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[CertificationEntry, ...] = ()

    @classmethod
    def scalar_fields(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name not in COLLECTIONS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeDocument":
        """
        Build a document from a mapping with snake_case or camelCase keys.

        Unknown keys (id, user_id, created_at, ...) are ignored. Missing optional keys
        become empty values.

        Raises:
            InvalidResumeError: If data is not a mapping or a required key is absent
        """
        if not isinstance(data, Mapping):
            raise InvalidResumeError(f"Résumé data must be a mapping, got {type(data).__name__}")

        data = _normalize_keys(data)
        missing = tuple(key for key in REQUIRED_KEYS if key not in data)
        if missing:
            raise InvalidResumeError("Résumé is missing required fields", missing=missing)

        scalars = {name: _text(data.get(name)) for name in cls.scalar_fields()}
        collections = {
            name: _entries(entry_type, data.get(name)) for name, entry_type in COLLECTIONS.items()
        }
        return cls(**scalars, **collections)


def load_resume(path: Union[str, Path]) -> ResumeDocument:
    """
    Load a résumé from a YAML or JSON file.

    Args:
        path: Path to the résumé file

    Returns:
        ResumeDocument instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidResumeError: If the file content is not a valid résumé
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Résumé file not found: {path}")

    # OmegaConf parses JSON too since JSON is a YAML subset
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    return ResumeDocument.from_dict(data)
