"""Unit tests for the Pager pagination state machine."""

import pytest

from vitae.contexts.layout import Pager, Rule

PAGE_HEIGHT = 800
MARGIN = 50


def make_pager():
    return Pager(600, PAGE_HEIGHT, MARGIN, MARGIN)


@pytest.mark.unit
def test_initial_state():
    pager = make_pager()
    assert pager.page == 0
    assert pager.y == MARGIN
    assert pager.at_page_top
    assert pager.capacity == pytest.approx(PAGE_HEIGHT - 2 * MARGIN)


@pytest.mark.unit
def test_reserve_within_page_does_not_break():
    pager = make_pager()
    pager.advance(100)
    assert pager.reserve(50) is False
    assert pager.page == 0
    assert pager.y == MARGIN + 100


@pytest.mark.unit
def test_reserve_breaks_when_block_crosses_bottom():
    pager = make_pager()
    pager.advance(pager.capacity - 10)

    assert pager.reserve(20) is True
    assert pager.page == 1
    assert pager.y == MARGIN


@pytest.mark.unit
def test_block_exactly_reaching_bottom_fits():
    pager = make_pager()
    pager.advance(pager.capacity - 20)
    assert pager.reserve(20) is False
    assert pager.page == 0


@pytest.mark.unit
def test_oversized_block_at_page_top_does_not_break():
    """A block taller than a page starts where it is instead of leaving an empty page."""
    pager = make_pager()
    assert pager.reserve(pager.capacity * 2) is False
    assert pager.page == 0


@pytest.mark.unit
def test_oversized_block_mid_page_moves_to_fresh_page_once():
    pager = make_pager()
    pager.advance(10)
    assert pager.reserve(pager.capacity * 2) is True
    assert pager.page == 1
    assert pager.reserve(pager.capacity * 2) is False
    assert pager.page == 1


@pytest.mark.unit
def test_emit_goes_to_current_page():
    pager = make_pager()
    first = Rule(x0=50, x1=550, y=pager.y)
    pager.emit(first)
    pager.new_page()
    second = Rule(x0=50, x1=550, y=pager.y)
    pager.emit(second)

    layout = pager.layout(title="t", author="a")
    assert layout.page_count == 2
    assert layout.pages[0] == (first,)
    assert layout.pages[1] == (second,)
    assert layout.title == "t"
    assert layout.author == "a"


@pytest.mark.unit
def test_cursor_snapshot():
    pager = make_pager()
    pager.advance(42)
    cursor = pager.cursor
    assert cursor.page == 0
    assert cursor.y == MARGIN + 42


@pytest.mark.unit
def test_layout_without_ops_has_one_empty_page():
    layout = make_pager().layout()
    assert layout.page_count == 1
    assert layout.pages == ((),)
