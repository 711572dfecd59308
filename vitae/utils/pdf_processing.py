"""
PDF inspection utilities for exported résumés.

Main class:
    PDFDocument: Parsed PDF with per-page text lines and hyperlink regions.

Helper functions:
    page_count: Page count of a saved file or of in-memory PDF bytes.
    fold_for_matching: Accent- and case-insensitive text key for lookups.
    group_into_lines: Baseline clustering of pdfplumber characters.
"""

import unicodedata
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(source: Union[str, Path, bytes]) -> Optional[int]:
    """Number of pages in a PDF file or PDF bytes, or None if it cannot be parsed."""
    stream = BytesIO(source) if isinstance(source, bytes) else str(source)
    try:
        return len(PdfReader(stream).pages)
    except (PdfReadError, OSError):
        return None


def fold_for_matching(text: str) -> str:
    """
    Reduce text to lowercase letters and digits with accents stripped.

    "Résumé • Skills:" and "resume skills" fold to the same key, so lookups survive
    bullets, punctuation and composed versus decomposed accents in extracted text.
    """
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(c for c in decomposed if c.isalnum())


def group_into_lines(chars: List[dict], tolerance: float = 3.0) -> List[List[dict]]:
    """
    Cluster characters that share a baseline, top line first.

    Runs of different sizes drawn on one baseline (a bold skill prefix followed by
    smaller italic skills) have different tops but the same bottom, so clustering
    keys on "bottom". Each returned line is ordered left to right.
    """
    lines: List[List[dict]] = []
    anchor = None
    for char in sorted(chars, key=lambda c: c["bottom"]):
        if anchor is None or char["bottom"] - anchor > tolerance:
            lines.append([])
            anchor = char["bottom"]
        lines[-1].append(char)
    return [sorted(line, key=lambda c: c["x0"]) for line in lines]


@dataclass
class LinkRegion:
    """A clickable URI annotation on a page (top-down coordinates, points)."""

    uri: str
    x0: float
    top: float
    x1: float
    bottom: float


class PDFDocument:
    """
    Parsed PDF with line-based text extraction and link lookup.

    Page data is lazily loaded and cached on first access. Pages are 1-indexed.

    Args:
        pdf_path: Path to PDF file
        y_tolerance: Max Y-distance (points) to group characters as same line.

    Example:
        >>> pdf = PDFDocument(Path("resume.pdf"))
        >>> for line in pdf.get_lines(page=1):
        ...     print(line)
    """

    def __init__(self, pdf_path: Union[str, Path], y_tolerance: float = 3.0):
        pdf_path = Path(pdf_path)
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF not found: {pdf_path}")

        self.pdf_path = pdf_path
        self.y_tolerance = y_tolerance
        self._lines_cache: Optional[Dict[int, List[str]]] = None
        self._links_cache: Optional[Dict[int, List[LinkRegion]]] = None
        self._page_count: Optional[int] = None

    @property
    def page_count(self) -> int:
        if self._page_count is None:
            self._page_count = page_count(self.pdf_path) or 0
        return self._page_count

    def _ensure_loaded(self) -> None:
        """Extract lines and links from every page on first use."""
        if self._lines_cache is not None:
            return

        lines: Dict[int, List[str]] = {}
        links: Dict[int, List[LinkRegion]] = {}

        with pdfplumber.open(self.pdf_path) as pdf:
            for page_num, page in enumerate(pdf.pages, start=1):
                lines[page_num] = self._chars_to_lines(page.chars)
                links[page_num] = [
                    LinkRegion(
                        uri=link.get("uri") or "",
                        x0=link["x0"],
                        top=link["top"],
                        x1=link["x1"],
                        bottom=link["bottom"],
                    )
                    for link in page.hyperlinks
                ]

        self._lines_cache = lines
        self._links_cache = links

    def _chars_to_lines(self, chars: List) -> List[str]:
        """Convert character list to text lines grouped by baseline."""
        text_lines = []
        for char_objs in group_into_lines(chars, tolerance=self.y_tolerance):
            text_lines.append("".join(c["text"] for c in char_objs))
        return text_lines

    def get_lines(self, page: int) -> List[str]:
        """Text lines of a page, top-to-bottom. Empty list if the page doesn't exist."""
        self._ensure_loaded()
        return self._lines_cache.get(page, [])

    def get_links(self, page: int) -> List[LinkRegion]:
        """Link annotations of a page. Empty list if the page doesn't exist."""
        self._ensure_loaded()
        return self._links_cache.get(page, [])

    def find(self, text: str, whole_line: bool = False) -> Optional[Tuple[int, int]]:
        """
        Find first occurrence of text in the document.

        Args:
            text: Text to search for (folded: case, accents and punctuation ignored)
            whole_line: If True, text must match entire line. If False, substring match.

        Returns:
            Tuple of (page, line_index) for first match, or None.
        """
        self._ensure_loaded()
        text_norm = fold_for_matching(text)

        for page_num in sorted(self._lines_cache):
            for line_idx, line in enumerate(self._lines_cache[page_num]):
                line_norm = fold_for_matching(line)
                match = (text_norm == line_norm) if whole_line else (text_norm in line_norm)
                if match:
                    return page_num, line_idx

        return None
