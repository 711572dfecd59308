"""Unit tests for pure résumé edit functions."""

import pytest

from vitae.contexts.content import ExperienceEntry, ResumeDocument
from vitae.contexts.content.edits import (
    add_bullet,
    add_skill,
    add_technology,
    append_entry,
    remove_bullet,
    remove_entry,
    remove_skill,
    remove_technology,
    set_field,
    update_entry,
)


@pytest.mark.unit
def test_set_field_returns_new_document(sample_resume):
    updated = set_field(sample_resume, "summary", "New summary")
    assert updated.summary == "New summary"
    assert sample_resume.summary != "New summary"


@pytest.mark.unit
def test_set_field_rejects_collections(sample_resume):
    with pytest.raises(ValueError):
        set_field(sample_resume, "experience", "nope")


@pytest.mark.unit
def test_append_blank_experience_has_one_empty_bullet():
    doc = append_entry(ResumeDocument(title="t", full_name="n"), "experience")
    assert doc.experience == (ExperienceEntry(description=("",)),)


@pytest.mark.unit
def test_append_entry_from_dict(sample_resume):
    doc = append_entry(sample_resume, "projects", {"name": "Side", "technologies": ["Go"]})
    assert len(doc.projects) == len(sample_resume.projects) + 1
    assert doc.projects[-1].technologies == ("Go",)


@pytest.mark.unit
def test_unknown_collection(sample_resume):
    with pytest.raises(ValueError):
        append_entry(sample_resume, "hobbies")


@pytest.mark.unit
def test_remove_entry(sample_resume):
    doc = remove_entry(sample_resume, "skills", 0)
    assert [g.group_name for g in doc.skills] == ["Infrastructure"]
    assert len(sample_resume.skills) == 2


@pytest.mark.unit
def test_remove_entry_out_of_range(sample_resume):
    with pytest.raises(IndexError):
        remove_entry(sample_resume, "education", 5)


@pytest.mark.unit
def test_update_entry_converts_lists_to_tuples(sample_resume):
    doc = update_entry(sample_resume, "experience", 0, company="Globex", description=["one"])
    entry = doc.experience[0]
    assert entry.company == "Globex"
    assert entry.description == ("one",)
    assert entry.position == sample_resume.experience[0].position


@pytest.mark.unit
def test_bullets(sample_resume):
    doc = add_bullet(sample_resume, 0, "Third")
    assert doc.experience[0].description[-1] == "Third"
    doc = remove_bullet(doc, 0, 0)
    assert len(doc.experience[0].description) == len(sample_resume.experience[0].description)
    with pytest.raises(IndexError):
        remove_bullet(doc, 0, 99)


@pytest.mark.unit
def test_skills(sample_resume):
    doc = add_skill(sample_resume, 0, "Rust")
    assert doc.skills[0].skills[-1] == "Rust"
    doc = remove_skill(doc, 0, 0)
    assert doc.skills[0].skills == ("Go", "SQL", "Rust")


@pytest.mark.unit
def test_technologies(sample_resume):
    doc = add_technology(sample_resume, 0, "PostgreSQL")
    assert doc.projects[0].technologies == ("Python", "asyncio", "PostgreSQL")
    doc = remove_technology(doc, 0, 1)
    assert doc.projects[0].technologies == ("Python", "PostgreSQL")
