"""
Pure edit operations on ResumeDocument.

Every function takes a document and returns a new one; the input is never mutated.
These replace in-place list splicing: nested collections are rebuilt as tuples with
dataclasses.replace, so a document handed to a layout pass stays valid for its
whole lifetime.

Examples:
    >>> doc = append_entry(doc, "experience")            # blank entry with one empty bullet
    >>> doc = update_entry(doc, "experience", 0, company="Acme")
    >>> doc = add_bullet(doc, 0, "Shipped the thing")
    >>> doc = add_skill(doc, 0, "Python")
"""

from dataclasses import replace
from typing import Any, Optional

from vitae.contexts.content.resume_document import (
    COLLECTIONS,
    ExperienceEntry,
    ResumeDocument,
)


def _blank_entry(collection: str):
    if collection == "experience":
        # New experience entries start with one empty bullet, ready for typing
        return ExperienceEntry(description=("",))
    return COLLECTIONS[collection]()


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        raise ValueError(
            f"Unknown collection: {collection}. Must be one of {list(COLLECTIONS)}"
        )


def _check_index(items: tuple, index: int, what: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range (0..{len(items) - 1})")


def _without(items: tuple, index: int) -> tuple:
    return items[:index] + items[index + 1 :]


def _replaced(items: tuple, index: int, value: Any) -> tuple:
    return items[:index] + (value,) + items[index + 1 :]


def set_field(doc: ResumeDocument, name: str, value: str) -> ResumeDocument:
    """Set a scalar field (title, full_name, email, phone, linkedin, summary)."""
    if name not in ResumeDocument.scalar_fields():
        raise ValueError(f"Unknown field: {name}")
    return replace(doc, **{name: value})


def append_entry(doc: ResumeDocument, collection: str, entry: Optional[Any] = None) -> ResumeDocument:
    """Append an entry (or a blank template) to a collection."""
    _check_collection(collection)
    entry_type = COLLECTIONS[collection]
    if entry is None:
        entry = _blank_entry(collection)
    elif not isinstance(entry, entry_type):
        entry = entry_type.from_dict(entry)
    return replace(doc, **{collection: getattr(doc, collection) + (entry,)})


def remove_entry(doc: ResumeDocument, collection: str, index: int) -> ResumeDocument:
    """Remove the entry at index from a collection."""
    _check_collection(collection)
    items = getattr(doc, collection)
    _check_index(items, index, collection)
    return replace(doc, **{collection: _without(items, index)})


def update_entry(doc: ResumeDocument, collection: str, index: int, **changes) -> ResumeDocument:
    """Replace fields of one entry. Sequence fields are stored as tuples."""
    _check_collection(collection)
    items = getattr(doc, collection)
    _check_index(items, index, collection)
    changes = {
        key: tuple(value) if isinstance(value, list) else value for key, value in changes.items()
    }
    return replace(doc, **{collection: _replaced(items, index, replace(items[index], **changes))})


def _edit_sequence(doc, collection, index, attribute, edit) -> ResumeDocument:
    items = getattr(doc, collection)
    _check_index(items, index, collection)
    entry = items[index]
    updated = replace(entry, **{attribute: edit(getattr(entry, attribute))})
    return replace(doc, **{collection: _replaced(items, index, updated)})


def add_bullet(doc: ResumeDocument, index: int, text: str = "") -> ResumeDocument:
    """Append a description bullet to experience entry index."""
    return _edit_sequence(doc, "experience", index, "description", lambda seq: seq + (text,))


def remove_bullet(doc: ResumeDocument, index: int, bullet_index: int) -> ResumeDocument:
    """Remove one description bullet from experience entry index."""

    def edit(seq):
        _check_index(seq, bullet_index, "bullet")
        return _without(seq, bullet_index)

    return _edit_sequence(doc, "experience", index, "description", edit)


def add_skill(doc: ResumeDocument, group_index: int, skill: str) -> ResumeDocument:
    """Append a skill to skill group group_index."""
    return _edit_sequence(doc, "skills", group_index, "skills", lambda seq: seq + (skill,))


def remove_skill(doc: ResumeDocument, group_index: int, skill_index: int) -> ResumeDocument:
    """Remove one skill from skill group group_index."""

    def edit(seq):
        _check_index(seq, skill_index, "skill")
        return _without(seq, skill_index)

    return _edit_sequence(doc, "skills", group_index, "skills", edit)


def add_technology(doc: ResumeDocument, index: int, technology: str) -> ResumeDocument:
    """Append a technology tag to project index."""
    return _edit_sequence(
        doc, "projects", index, "technologies", lambda seq: seq + (technology,)
    )


def remove_technology(doc: ResumeDocument, index: int, technology_index: int) -> ResumeDocument:
    """Remove one technology tag from project index."""

    def edit(seq):
        _check_index(seq, technology_index, "technology")
        return _without(seq, technology_index)

    return _edit_sequence(doc, "projects", index, "technologies", edit)
