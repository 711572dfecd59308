"""
DocumentLayout to PDF serialization.

Draws every DrawOp onto a reportlab canvas. Layout coordinates are top-down, so
each y is flipped against the page height. Link-addressable runs get a URI
annotation covering their measured box.
"""

from io import BytesIO
from typing import Optional

from reportlab.pdfgen import canvas

from vitae.contexts.layout.config import LayoutConfig
from vitae.contexts.layout.draw_ops import DocumentLayout, Rule, TextRun
from vitae.contexts.layout.text_measurer import TextMeasurer
from vitae.contexts.rendering.logger import _log_debug

# Fraction of the font size below the baseline covered by a link box
LINK_DESCENT = 0.25


def _draw_text(pdf: canvas.Canvas, run: TextRun, page_height: float, measurer: TextMeasurer) -> None:
    baseline = page_height - run.y
    pdf.setFont(measurer.font_name(run.style), run.font_size)
    pdf.drawString(run.x, baseline, run.text)

    if run.link:
        rect = (
            run.x,
            baseline - run.font_size * LINK_DESCENT,
            run.x1,
            baseline + run.font_size,
        )
        pdf.linkURL(run.link, rect, relative=0, thickness=0)


def _draw_rule(pdf: canvas.Canvas, rule: Rule, page_height: float) -> None:
    y = page_height - rule.y
    pdf.setLineWidth(rule.line_width)
    pdf.line(rule.x0, y, rule.x1, y)


def serialize_layout(
    layout: DocumentLayout,
    config: LayoutConfig,
    measurer: Optional[TextMeasurer] = None,
) -> bytes:
    """
    Render a DocumentLayout into PDF bytes.

    Args:
        layout: Pages of DrawOps from compose()
        config: Layout configuration (font family for face names)
        measurer: Measurer used during layout; its face names are used for drawing

    Returns:
        Complete PDF document as bytes
    """
    if measurer is None:
        measurer = TextMeasurer(config.font_family, font_files=config.font_files or None)

    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(layout.page_width, layout.page_height))
    pdf.setTitle(layout.title)
    pdf.setAuthor(layout.author)

    for page_index, page in enumerate(layout.pages):
        for op in page:
            if isinstance(op, TextRun):
                _draw_text(pdf, op, layout.page_height, measurer)
            else:
                _draw_rule(pdf, op, layout.page_height)
        _log_debug(f"Serialized page {page_index + 1}: {len(page)} ops")
        pdf.showPage()

    pdf.save()
    data = buffer.getvalue()
    buffer.close()
    return data
