"""
Greedy word wrapping bounded by measured width.

Words are whitespace-separated and atomic: a word wider than the box is emitted on
its own line and allowed to overflow rather than being broken. This is plain
greedy filling, not minimum-raggedness balancing.
"""

from typing import List

from vitae.contexts.layout.text_measurer import FontStyle, TextMeasurer


def wrap_text(
    text: str,
    max_width: float,
    measurer: TextMeasurer,
    style: FontStyle = FontStyle.NORMAL,
    size: float = 11,
) -> List[str]:
    """
    Split text into lines no wider than max_width.

    Before a word is appended, the candidate "current + ' ' + word" is measured. If it
    exceeds max_width, current is flushed and the word starts the next line.

    Args:
        text: Paragraph to wrap (any whitespace separates words)
        max_width: Maximum line width in points
        measurer: Width source; must be the one used to draw the lines
        style: Face the lines will be drawn in
        size: Font size the lines will be drawn at

    Returns:
        Ordered lines, never empty. Blank text yields [""].

    Example:
        >>> wrap_text("one two three", 40, TextMeasurer(), size=11)
        ['one two', 'three']
    """
    words = text.split()
    if not words:
        return [""]

    lines = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if measurer.width(candidate, style, size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    lines.append(current)

    return lines


class LineWrapper:
    """wrap_text bound to a measurer, for callers that wrap many paragraphs."""

    def __init__(self, measurer: TextMeasurer):
        self.measurer = measurer

    def wrap(
        self,
        text: str,
        max_width: float,
        style: FontStyle = FontStyle.NORMAL,
        size: float = 11,
    ) -> List[str]:
        return wrap_text(text, max_width, self.measurer, style=style, size=size)

    def line_count(
        self,
        text: str,
        max_width: float,
        style: FontStyle = FontStyle.NORMAL,
        size: float = 11,
    ) -> int:
        return len(self.wrap(text, max_width, style=style, size=size))
