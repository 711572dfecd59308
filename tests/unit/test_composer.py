"""Unit tests for document composition and pagination."""

import pytest

from vitae.contexts.content import ExperienceEntry, ResumeDocument
from vitae.contexts.content.edits import add_bullet
from vitae.contexts.layout import LayoutConfig, MeasurementBackendError, TextRun, compose, resume_filename

SECTION_TITLES = (
    "PROFESSIONAL SUMMARY",
    "PROFESSIONAL EXPERIENCE",
    "EDUCATION",
    "SKILLS",
    "PROJECTS",
    "CERTIFICATIONS",
)


def section_titles(layout):
    return [run.text for run in layout.text_runs() if run.text in SECTION_TITLES]


@pytest.mark.unit
def test_sample_resume_fits_one_page(sample_resume, config, measurer):
    layout = compose(sample_resume, config, measurer)
    assert layout.page_count == 1
    assert layout.page_width == config.page_width
    assert layout.page_height == config.page_height


@pytest.mark.unit
def test_sections_in_fixed_order(sample_resume, config, measurer):
    layout = compose(sample_resume, config, measurer)
    assert section_titles(layout) == list(SECTION_TITLES)

    ys = {run.text: run.y for run in layout.text_runs() if run.text in SECTION_TITLES}
    ordered = [ys[title] for title in SECTION_TITLES]
    assert ordered == sorted(ordered)


@pytest.mark.unit
def test_layout_is_idempotent(sample_resume, config, measurer):
    assert compose(sample_resume, config, measurer) == compose(sample_resume, config, measurer)


@pytest.mark.unit
def test_compose_does_not_modify_input(sample_resume, config, measurer):
    before = sample_resume
    compose(sample_resume, config, measurer)
    assert sample_resume == before


@pytest.mark.unit
def test_metadata_from_resume(sample_resume, config, measurer):
    layout = compose(sample_resume, config, measurer)
    assert layout.title == "Jane_Doe_Backend"
    assert layout.author == "Jane Doe"


@pytest.mark.unit
def test_empty_collections_produce_no_header_and_no_space(config, measurer):
    bare = ResumeDocument(title="t", full_name="Only Name")
    layout = compose(bare, config, measurer)
    assert section_titles(layout) == []
    assert [run.text for run in layout.text_runs()] == ["Only Name"]

    with_blank_entries = ResumeDocument(
        title="t",
        full_name="Only Name",
        experience=(ExperienceEntry(),),
    )
    assert compose(with_blank_entries, config, measurer).pages == layout.pages


@pytest.mark.unit
def test_long_resume_paginates(long_resume, config, measurer):
    layout = compose(long_resume, config, measurer)
    assert layout.page_count >= 2


@pytest.mark.unit
def test_company_never_separated_from_position(long_resume, config, measurer):
    layout = compose(long_resume, config, measurer)
    for index in range(12):
        (company_page, company_run), = layout.find_runs(f"Company {index:02d}")
        (position_page, position_run), = layout.find_runs(f"Engineer {index:02d}")
        assert company_page == position_page
        assert position_run.y > company_run.y


@pytest.mark.unit
def test_section_header_kept_with_first_entry(long_resume, config, measurer):
    layout = compose(long_resume, config, measurer)
    (title_page, _), = layout.find_runs("PROFESSIONAL EXPERIENCE")
    (first_page, _), = layout.find_runs("Company 00")
    assert title_page == first_page


@pytest.mark.unit
def test_every_baseline_within_margins(long_resume, config, measurer):
    layout = compose(long_resume, config, measurer)
    for _, op in layout.ops():
        assert config.margin <= op.y <= config.page_height - config.margin


@pytest.mark.unit
def test_no_empty_pages(long_resume, config, measurer):
    layout = compose(long_resume, config, measurer)
    assert all(len(page) > 0 for page in layout.pages)


@pytest.mark.unit
def test_oversized_entry_flows_across_pages(config, measurer):
    """An entry taller than a page starts on a fresh page and continues line by line."""
    doc = ResumeDocument(
        title="t",
        full_name="n",
        experience=(ExperienceEntry(company="Acme", position="Eng", description=("word",)),),
    )
    for _ in range(80):
        doc = add_bullet(doc, 0, "A bullet line that is long enough to be measured properly")
    layout = compose(doc, config, measurer)

    assert layout.page_count >= 2
    assert all(len(page) > 0 for page in layout.pages)
    for _, op in layout.ops():
        assert config.margin <= op.y <= config.page_height - config.margin


@pytest.mark.unit
def test_current_entry_shows_present(config, measurer):
    doc = ResumeDocument(
        title="t",
        full_name="n",
        experience=(
            ExperienceEntry(company="Acme", start_date="2020-01-01", end_date="2021-01-01", current=True),
        ),
    )
    layout = compose(doc, config, measurer)
    assert layout.find_runs("Jan 2020 - Present")


@pytest.mark.unit
def test_malformed_dates_render_nothing(config, measurer):
    doc = ResumeDocument(
        title="t",
        full_name="n",
        experience=(ExperienceEntry(company="Acme", start_date="someday", end_date="later"),),
    )
    layout = compose(doc, config, measurer)
    assert not [run for run in layout.text_runs() if " - " in run.text]


@pytest.mark.unit
def test_text_runs_carry_measured_width(sample_resume, config, measurer):
    layout = compose(sample_resume, config, measurer)
    for run in layout.text_runs():
        assert run.width == pytest.approx(measurer.width(run.text, run.style, run.font_size))


@pytest.mark.unit
def test_smaller_margin_fits_more(long_resume, measurer):
    wide = compose(long_resume, LayoutConfig(), measurer)
    narrow = compose(long_resume, LayoutConfig(margin=20), measurer)
    assert narrow.page_count <= wide.page_count


@pytest.mark.unit
def test_unknown_font_family_is_fatal(sample_resume):
    with pytest.raises(MeasurementBackendError):
        compose(sample_resume, LayoutConfig(font_family="NoSuchFont"))


@pytest.mark.unit
@pytest.mark.parametrize(
    "title, expected",
    [
        ("Jane_Doe_Backend", "Jane_Doe_Backend.pdf"),
        ("", "resume.pdf"),
        ("   ", "resume.pdf"),
        ("a/b:c", "a_b_c.pdf"),
    ],
)
def test_resume_filename(title, expected):
    assert resume_filename(ResumeDocument(title=title, full_name="n")) == expected
