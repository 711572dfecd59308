"""
Rendering Context

Responsibilities:
- Serializes a DocumentLayout onto a reportlab canvas (text, rules, link annotations)
- Saves PDF bytes atomically
- Orchestrates compose, serialize and save for one export

Owns: PDF output, file I/O
Never: Decides positions or page breaks (consumes DocumentLayout as-is)
"""

from vitae.contexts.rendering.exporter import ExportResult, export_resume, save_pdf
from vitae.contexts.rendering.serializer import serialize_layout

__all__ = [
    "ExportResult",
    "export_resume",
    "save_pdf",
    "serialize_layout",
]
