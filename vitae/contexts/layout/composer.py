"""
Document composition.

compose() runs every section renderer in fixed order (Header, Summary, Experience,
Education, Skills, Projects, Certifications) against a fresh Pager and returns the
frozen DocumentLayout. It is a pure function of its inputs: the same résumé and
config always produce the same pages and ops.
"""

import re
import time
from typing import Optional

from vitae.contexts.content.resume_document import ResumeDocument
from vitae.contexts.layout.config import LayoutConfig, load_layout_config
from vitae.contexts.layout.draw_ops import DocumentLayout
from vitae.contexts.layout.logger import log_layout_result, log_layout_start, log_section_skipped
from vitae.contexts.layout.pager import Pager
from vitae.contexts.layout.section_renderers import SECTION_RENDERERS
from vitae.contexts.layout.text_measurer import TextMeasurer
from vitae.contexts.layout.typesetter import Typesetter

DEFAULT_FILENAME_STEM = "resume"
PDF_SUFFIX = ".pdf"

# Characters that would turn a title into a path or are invalid in common filesystems
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def build_measurer(config: LayoutConfig) -> TextMeasurer:
    """Measurer for the config's font family (raises MeasurementBackendError if unusable)."""
    return TextMeasurer(config.font_family, font_files=config.font_files or None)


def compose(
    resume: ResumeDocument,
    config: Optional[LayoutConfig] = None,
    measurer: Optional[TextMeasurer] = None,
) -> DocumentLayout:
    """
    Lay out a résumé into pages of DrawOps.

    Args:
        resume: Résumé to lay out (not modified)
        config: Layout configuration (default: load_layout_config())
        measurer: Width source (default: built from config); must match config's family

    Returns:
        DocumentLayout with one tuple of ops per page

    Raises:
        MeasurementBackendError: If the configured font family cannot be measured
    """
    if config is None:
        config = load_layout_config()
    if measurer is None:
        measurer = build_measurer(config)

    resume_name = resume.title or resume.full_name or DEFAULT_FILENAME_STEM
    log_layout_start(resume_name, measurer.font_family, (config.page_width, config.page_height))
    start_time = time.time()

    pager = Pager(
        page_width=config.page_width,
        page_height=config.page_height,
        top_margin=config.margin,
        bottom_margin=config.margin,
    )
    typesetter = Typesetter(config, measurer)

    for renderer in SECTION_RENDERERS:
        if not renderer.has_content(resume):
            log_section_skipped(renderer.name)
            continue
        renderer.render(resume, pager, typesetter)

    layout = pager.layout(title=resume.title or resume.full_name, author=resume.full_name)
    log_layout_result(resume_name, layout, time.time() - start_time)
    return layout


def resume_filename(resume: ResumeDocument) -> str:
    """
    File name for an exported résumé: "{title}.pdf", or "resume.pdf" without a title.

    Path separators and other characters invalid in file names are replaced by "_".
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", resume.title.strip()) or DEFAULT_FILENAME_STEM
    return f"{stem}{PDF_SUFFIX}"
