"""Unit tests for PDF inspection helpers."""

import pytest

from vitae.contexts.layout import compose
from vitae.contexts.rendering import serialize_layout
from vitae.utils.pdf_processing import (
    PDFDocument,
    fold_for_matching,
    group_into_lines,
    page_count,
)


@pytest.mark.unit
def test_fold_for_matching():
    assert fold_for_matching("Mar 2021 - Present") == "mar2021present"
    assert fold_for_matching("• Languages:") == "languages"


@pytest.mark.unit
def test_fold_for_matching_strips_accents():
    assert fold_for_matching("Résumé") == fold_for_matching("RESUME")
    assert fold_for_matching("Résumé") == "resume"


@pytest.mark.unit
def test_group_into_lines_uses_baseline_and_orders_by_x():
    chars = [
        {"text": "S", "x0": 80.0, "top": 102.0, "bottom": 110.0},
        {"text": "b", "x0": 60.0, "top": 100.5, "bottom": 110.5},
        {"text": "a", "x0": 50.0, "top": 100.0, "bottom": 110.0},
        {"text": "c", "x0": 50.0, "top": 120.0, "bottom": 130.0},
    ]
    lines = group_into_lines(chars, tolerance=3.0)
    assert [[c["text"] for c in line] for line in lines] == [["a", "b", "S"], ["c"]]


@pytest.mark.unit
def test_group_into_lines_empty():
    assert group_into_lines([]) == []


@pytest.mark.unit
def test_page_count_unreadable_file(tmp_path):
    bogus = tmp_path / "bogus.pdf"
    bogus.write_bytes(b"not a pdf")
    assert page_count(bogus) is None


@pytest.mark.unit
def test_page_count_of_pdf_bytes(sample_resume, config, measurer):
    layout = compose(sample_resume, config=config, measurer=measurer)
    data = serialize_layout(layout, config, measurer)
    assert page_count(data) == layout.page_count
    assert page_count(b"not a pdf") is None


@pytest.mark.unit
def test_pdf_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PDFDocument(tmp_path / "missing.pdf")
