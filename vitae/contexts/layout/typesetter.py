"""
Shared drawing helpers for section renderers.

The Typesetter turns "put this text here in this face" into TextRun ops on the
pager's current page, measuring every run with the same TextMeasurer the wrapper
uses. Font state lives in each op, so there is nothing to restore between bold,
italic and normal runs.
"""

from typing import List, Optional, Sequence, Tuple

from vitae.contexts.layout.config import LayoutConfig
from vitae.contexts.layout.draw_ops import Rule, TextRun
from vitae.contexts.layout.line_wrapper import LineWrapper
from vitae.contexts.layout.pager import Pager
from vitae.contexts.layout.text_measurer import FontStyle, TextMeasurer


class Typesetter:
    """
    Measurement-aware helpers bound to one config and measurer.

    Args:
        config: Layout configuration
        measurer: Width source shared with the wrapper
    """

    def __init__(self, config: LayoutConfig, measurer: TextMeasurer):
        self.config = config
        self.measurer = measurer
        self.wrapper = LineWrapper(measurer)

    @property
    def left_edge(self) -> float:
        return self.config.margin

    @property
    def right_edge(self) -> float:
        return self.config.margin + self.config.content_width

    def line_height(self, size: float) -> float:
        return self.config.line_height(size)

    def width(self, text: str, style: FontStyle, size: float) -> float:
        return self.measurer.width(text, style, size)

    def wrap(self, text: str, max_width: float, style: FontStyle, size: float) -> List[str]:
        return self.wrapper.wrap(text, max_width, style=style, size=size)

    # Emission

    def text(
        self,
        pager: Pager,
        text: str,
        x: float,
        style: FontStyle,
        size: float,
        link: Optional[str] = None,
    ) -> Optional[TextRun]:
        """Emit a run at the pager's current baseline. Blank text emits nothing."""
        if not text:
            return None
        run = TextRun(
            text=text,
            x=x,
            y=pager.y,
            font_size=size,
            style=style,
            width=self.width(text, style, size),
            link=link or None,
        )
        pager.emit(run)
        return run

    def right_aligned(
        self,
        pager: Pager,
        text: str,
        style: FontStyle,
        size: float,
        right: Optional[float] = None,
    ) -> Optional[TextRun]:
        """Emit a run whose right edge sits at right (default: the content edge)."""
        if not text:
            return None
        right = self.right_edge if right is None else right
        return self.text(pager, text, right - self.width(text, style, size), style, size)

    def centered_group(
        self,
        pager: Pager,
        items: Sequence[Tuple[str, Optional[str]]],
        separator: str,
        style: FontStyle,
        size: float,
    ) -> List[TextRun]:
        """
        Emit (text, link) items joined by separator, centered as one group.

        Each item is its own run so that links cover only their item.
        """
        separator_width = self.width(separator, style, size)
        total = sum(self.width(text, style, size) for text, _ in items)
        total += separator_width * max(len(items) - 1, 0)

        x = self.left_edge + (self.config.content_width - total) / 2
        runs = []
        for index, (text, link) in enumerate(items):
            run = self.text(pager, text, x, style, size, link=link)
            runs.append(run)
            x += run.width
            if index < len(items) - 1:
                self.text(pager, separator, x, style, size)
                x += separator_width
        return runs

    def rule(self, pager: Pager, line_width: float) -> Rule:
        rule = Rule(x0=self.left_edge, x1=self.right_edge, y=pager.y, line_width=line_width)
        pager.emit(rule)
        return rule

    # Bullets

    @property
    def bullet_x(self) -> float:
        return self.left_edge + self.config.bullet_indent

    def bullet_wrap_width(self, size: float) -> float:
        """Width available to bullet text after the indent and the marker."""
        marker_width = self.width(self.config.bullet_marker, FontStyle.NORMAL, size)
        return self.config.content_width - self.config.bullet_indent - marker_width

    def bullet_lines(self, text: str, size: float) -> List[str]:
        """Wrap one bullet; the first line gets the marker, the rest the continuation indent."""
        lines = self.wrap(text, self.bullet_wrap_width(size), FontStyle.NORMAL, size)
        return [
            (self.config.bullet_marker if index == 0 else self.config.bullet_continuation) + line
            for index, line in enumerate(lines)
        ]

    def bullet_height(self, text: str, size: float) -> float:
        return len(self.bullet_lines(text, size)) * self.line_height(size)

    def flow_lines(
        self,
        pager: Pager,
        lines: Sequence[str],
        x: float,
        style: FontStyle,
        size: float,
    ) -> None:
        """Emit lines one at a time, reserving each so a long block may cross pages."""
        line_height = self.line_height(size)
        for line in lines:
            pager.reserve(line_height)
            self.text(pager, line, x, style, size)
            pager.advance(line_height)

    # Section chrome

    def section_header_height(self) -> float:
        """Space reserved for a section title and its rule."""
        size = self.config.sizes.section
        return self.line_height(size) + self.config.spacing.section_gap

    def section_header(self, pager: Pager, title: str, keep_with: float = 0) -> None:
        """
        Emit an upper-cased bold title with a rule under it.

        Args:
            pager: Pager to draw on
            title: Section title
            keep_with: Height of the first block that must land on the same page
        """
        size = self.config.sizes.section
        pager.reserve(self.section_header_height() + keep_with)
        self.text(pager, title.upper(), self.left_edge, FontStyle.BOLD, size)
        pager.advance(self.line_height(size / 2))
        self.rule(pager, self.config.section_rule_width)
        pager.advance(self.config.spacing.section_gap)
