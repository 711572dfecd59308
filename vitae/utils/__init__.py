"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories
- PDF inspection (page count, text lines, links)
"""

from vitae.utils.pdf_processing import page_count
from vitae.utils.timestamp import now, today

__all__ = ["page_count", "now", "today"]
