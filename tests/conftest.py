"""Shared fixtures for vitae tests."""

from pathlib import Path

import pytest

from vitae.contexts.content import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
    SkillGroup,
)
from vitae.contexts.layout import LayoutConfig, TextMeasurer
from vitae.contexts.layout.pager import Pager
from vitae.contexts.layout.typesetter import Typesetter

CONFIGS_PATH = Path(__file__).resolve().parent.parent / "configs"

LONG_BULLET = (
    "Designed and delivered a streaming ingestion service that replaced nightly batch "
    "jobs, reducing data latency for downstream analytics teams substantially"
)


@pytest.fixture
def config():
    """Default layout config, independent of VITAE_LAYOUT_CONFIG."""
    return LayoutConfig()


@pytest.fixture
def measurer():
    return TextMeasurer("Helvetica")


@pytest.fixture
def typesetter(config, measurer):
    return Typesetter(config, measurer)


@pytest.fixture
def pager(config):
    return Pager(config.page_width, config.page_height, config.margin, config.margin)


@pytest.fixture
def sample_resume():
    """A one-page résumé with every section populated."""
    return ResumeDocument(
        title="Jane_Doe_Backend",
        full_name="Jane Doe",
        email="jane.doe@example.com",
        phone="(555) 123-4567",
        linkedin="https://www.linkedin.com/in/janedoe",
        summary="Backend engineer building data-heavy web services and streaming pipelines.",
        experience=(
            ExperienceEntry(
                company="Acme Analytics",
                position="Senior Software Engineer",
                city="Boston",
                state="MA",
                start_date="2021-03-01",
                current=True,
                description=(
                    "Led the migration of the ingestion tier to an event-driven design.",
                    "Built a schema registry shared by twelve producer teams.",
                ),
            ),
        ),
        education=(
            EducationEntry(
                institution="State University",
                degree="B.S.",
                field="Computer Science",
                city="Amherst",
                state="MA",
                start_date="2013-09-01",
                end_date="2017-05-01",
                gpa="3.8",
            ),
        ),
        skills=(
            SkillGroup(group_name="Languages", skills=("Python", "Go", "SQL")),
            SkillGroup(group_name="Infrastructure", skills=("PostgreSQL", "Kafka")),
        ),
        projects=(
            ProjectEntry(
                name="tidewater",
                description="Replays production traffic against staging services.",
                technologies=("Python", "asyncio"),
                link="https://github.com/janedoe/tidewater",
            ),
        ),
        certifications=(
            CertificationEntry(
                name="AWS Certified Solutions Architect",
                issuer="Amazon Web Services",
                date="2022-08-01",
            ),
        ),
    )


@pytest.fixture
def long_resume():
    """Twelve experience entries with four long bullets each; spans several pages."""
    experience = tuple(
        ExperienceEntry(
            company=f"Company {index:02d}",
            position=f"Engineer {index:02d}",
            city="Denver",
            state="CO",
            start_date="2015-01-01",
            end_date="2016-01-01",
            description=(LONG_BULLET,) * 4,
        )
        for index in range(12)
    )
    return ResumeDocument(title="Long", full_name="Pat Long", experience=experience)


@pytest.fixture
def sample_resume_path():
    return CONFIGS_PATH / "sample_resume.yaml"
