"""
vitae - structured résumé to print-ready PDF

Lays out a résumé record into fixed-size A4 pages with deterministic pagination,
greedy word wrapping, right-aligned date/location pairs, bulleted entries and
embedded hyperlinks.

Architecture:
- Content Context: Résumé data model, loading, pure edits, date formatting, preview
- Layout Context: Text measurement, line wrapping, pagination, section rendering
- Rendering Context: PDF serialization and export
"""

__version__ = "0.1.0"
