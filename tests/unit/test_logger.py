"""Unit tests for session logging setup."""

import re

import pytest
from loguru import logger

from vitae.contexts.layout.logger import log_section_skipped, setup_layout_logger
from vitae.utils.logger import session_log_dir, setup_logger


@pytest.mark.unit
def test_session_log_dir_name(tmp_path):
    log_dir = session_log_dir(tmp_path, "export")
    assert log_dir.parent == tmp_path
    assert re.fullmatch(r"export_\d{8}_\d{6}", log_dir.name)


@pytest.mark.unit
def test_setup_logger_writes_provenance(tmp_path):
    log_file = setup_logger("render", tmp_path / "session", {"Font family": "Times"}, console=False)
    logger.debug("detail line")
    logger.remove()

    text = log_file.read_text()
    assert log_file.name == "render.log"
    assert "reportlab:" in text
    assert "Font family: Times" in text
    assert "detail line" in text


@pytest.mark.unit
def test_context_logger_prefix(tmp_path):
    log_file = setup_layout_logger(tmp_path, font_family="Helvetica")
    log_section_skipped("projects")
    logger.remove()

    assert "[layout] Skipping empty section: projects" in log_file.read_text()
