"""
Draw operations produced by a layout pass.

A DrawOp is one primitive instruction for one page: a positioned text run or a
horizontal rule. Coordinates are in points with y measured top-down from the page's
top edge; for text, y is the baseline. Ops are frozen: created by a section
renderer, consumed once by the serializer.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from vitae.contexts.layout.text_measurer import FontStyle


@dataclass(frozen=True)
class TextRun:
    """
    A single-line run of text in one face.

    Attributes:
        text: Text to draw
        x: Left edge
        y: Baseline, top-down
        font_size: Size in points
        style: Face within the configured family
        width: Measured advance width (used for link boxes and alignment checks)
        link: Target URI when the run is link-addressable
    """

    text: str
    x: float
    y: float
    font_size: float
    style: FontStyle
    width: float
    link: Optional[str] = None

    @property
    def x1(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class Rule:
    """A horizontal line from x0 to x1 at y."""

    x0: float
    x1: float
    y: float
    line_width: float = 0.5


DrawOp = Union[TextRun, Rule]


@dataclass(frozen=True)
class PageCursor:
    """Snapshot of the pager position: page index (0-based) and y offset."""

    page: int
    y: float


@dataclass(frozen=True)
class DocumentLayout:
    """
    Result of a layout pass: DrawOps bucketed by page, in emission order.

    Attributes:
        pages: One tuple of ops per page
        page_width: Page width in points
        page_height: Page height in points
        title: Document title for PDF metadata
        author: Document author for PDF metadata
    """

    pages: Tuple[Tuple[DrawOp, ...], ...]
    page_width: float
    page_height: float
    title: str = ""
    author: str = ""

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def ops(self) -> Iterator[Tuple[int, DrawOp]]:
        """Yield (page_index, op) for every op in order."""
        for page_index, page in enumerate(self.pages):
            for op in page:
                yield page_index, op

    def text_runs(self, page: Optional[int] = None) -> Tuple[TextRun, ...]:
        """All text runs, or those of one page."""
        pages = self.pages if page is None else (self.pages[page],)
        return tuple(op for ops in pages for op in ops if isinstance(op, TextRun))

    def find_runs(self, text: str) -> Tuple[Tuple[int, TextRun], ...]:
        """(page_index, run) pairs whose text contains text."""
        return tuple(
            (page_index, op)
            for page_index, op in self.ops()
            if isinstance(op, TextRun) and text in op.text
        )
