"""
Layout Context

Responsibilities:
- Measures text widths from font metrics
- Wraps paragraphs greedily to a maximum width
- Decides page breaks before any block is drawn
- Renders each résumé section into positioned DrawOps
- Composes sections in fixed order into a multi-page DocumentLayout

Owns: Geometry, typography, pagination
Never: Writes files or talks to a PDF canvas
"""

from vitae.contexts.layout.composer import compose, resume_filename
from vitae.contexts.layout.config import LayoutConfig, load_layout_config
from vitae.contexts.layout.draw_ops import DocumentLayout, DrawOp, PageCursor, Rule, TextRun
from vitae.contexts.layout.exceptions import MeasurementBackendError
from vitae.contexts.layout.line_wrapper import LineWrapper, wrap_text
from vitae.contexts.layout.pager import Pager
from vitae.contexts.layout.text_measurer import FontStyle, TextMeasurer

__all__ = [
    # Orchestration
    "compose",
    "resume_filename",
    # Configuration
    "LayoutConfig",
    "load_layout_config",
    # Building blocks
    "TextMeasurer",
    "FontStyle",
    "MeasurementBackendError",
    "LineWrapper",
    "wrap_text",
    "Pager",
    # Output
    "DocumentLayout",
    "DrawOp",
    "TextRun",
    "Rule",
    "PageCursor",
]
