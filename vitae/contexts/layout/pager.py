"""
Pagination state machine.

The Pager tracks the current page and vertical offset during one layout pass and
collects emitted DrawOps into per-page buckets. Callers estimate a block's height
before drawing any of it and ask reserve() for that much space; the pager starts a
new page first when the block would cross the bottom margin.

Pagination never fails. A block taller than a whole page starts at the top of a
fresh page and its remaining lines flow onto the following pages line by line.
"""

from typing import List

from vitae.contexts.layout.draw_ops import DocumentLayout, DrawOp, PageCursor
from vitae.contexts.layout.logger import log_oversized_block, log_page_break


class Pager:
    """
    Page cursor plus DrawOp buckets for one layout pass.

    Not shared between passes: each compose() call builds its own.

    Args:
        page_width: Page width in points (recorded on the layout)
        page_height: Page height in points
        top_margin: Initial y on every page
        bottom_margin: Space kept clear at the bottom of every page

    Example:
        >>> pager = Pager(595.28, 841.89, 57, 57)
        >>> pager.reserve(40)        # may start a new page
        >>> pager.emit(op)
        >>> pager.advance(40)
    """

    def __init__(
        self,
        page_width: float,
        page_height: float,
        top_margin: float,
        bottom_margin: float,
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.top_margin = top_margin
        self.bottom_margin = bottom_margin
        self.page = 0
        self.y = top_margin
        self._pages: List[List[DrawOp]] = [[]]

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self.bottom_margin

    @property
    def capacity(self) -> float:
        """Usable height of one page."""
        return self.bottom_limit - self.top_margin

    @property
    def remaining(self) -> float:
        return self.bottom_limit - self.y

    @property
    def at_page_top(self) -> bool:
        """True while nothing has advanced the cursor on the current page."""
        return self.y <= self.top_margin

    @property
    def cursor(self) -> PageCursor:
        return PageCursor(page=self.page, y=self.y)

    def fits(self, height: float) -> bool:
        return self.y + height <= self.bottom_limit

    def new_page(self) -> None:
        """Advance to the next page and reset y to the top margin."""
        self.page += 1
        self.y = self.top_margin
        self._pages.append([])

    def reserve(self, height: float) -> bool:
        """
        Make room for a block of the given height before it is drawn.

        Starts a new page when y + height would pass the bottom limit, unless the
        current page is still untouched (moving would only leave an empty page).

        Returns:
            True if a page break was inserted
        """
        if height > self.capacity:
            log_oversized_block(self.page, height, self.capacity)

        if self.fits(height) or self.at_page_top:
            return False

        log_page_break(self.page, self.y, height, self.bottom_limit)
        self.new_page()
        return True

    def advance(self, height: float) -> None:
        """Move the cursor down after drawing."""
        self.y += height

    def emit(self, op: DrawOp) -> None:
        """Append an op to the current page."""
        self._pages[self.page].append(op)

    def layout(self, title: str = "", author: str = "") -> DocumentLayout:
        """Freeze the collected pages into a DocumentLayout."""
        return DocumentLayout(
            pages=tuple(tuple(ops) for ops in self._pages),
            page_width=self.page_width,
            page_height=self.page_height,
            title=title,
            author=author,
        )
