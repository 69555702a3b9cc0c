import pytest

from scroll_rules import ScrollContext, clamp, decide_down, decide_up


def _ctx(**kwargs):
    base = dict(cursor_row=0, offset=0, height=5, start=0, end=5, row_count=50, step=1)
    base.update(kwargs)
    return ScrollContext(**base)


@pytest.mark.parametrize(
    "v, low, high, expected",
    [
        (5, 0, 10, 5),
        (-1, 0, 10, 0),
        (11, 0, 10, 10),
        (3, 0, -1, -1),
    ],
)
def test_clamp(v, low, high, expected):
    assert clamp(v, low, high) == expected


@pytest.mark.parametrize(
    "ctx, rule, offset",
    [
        # window reaches the last row
        (_ctx(cursor_row=9, offset=2, start=4, end=10, row_count=10), "last_row_in_window", 1),
        (_ctx(cursor_row=9, offset=4, start=4, end=10, row_count=10, step=1), "last_row_in_window", 3),
        # cursor past the middle of the window while scrolled
        (_ctx(cursor_row=8, offset=3, start=3, end=13, step=2), "past_midpoint", 1),
        # large offset near the top: leave it alone
        (_ctx(cursor_row=2, offset=2, start=0, end=7), "hysteresis", None),
        # cursor walked off the bottom of an unscrolled window
        (_ctx(cursor_row=5, offset=0, start=0, end=10), "below_window", 1),
        (_ctx(cursor_row=1, offset=0, start=0, end=6), None, None),
    ],
)
def test_decide_down(ctx, rule, offset):
    decision = decide_down(ctx)
    assert decision.rule == rule
    assert decision.offset == offset
    assert decision.changes_offset is (offset is not None)


def test_decide_down_prefers_last_row_rule():
    ctx = _ctx(cursor_row=9, offset=3, start=4, end=10, row_count=10)
    assert decide_down(ctx).rule == "last_row_in_window"


@pytest.mark.parametrize(
    "ctx, rule, offset, bounded",
    [
        (_ctx(cursor_row=3, offset=5, start=0), "top_of_content", 3, True),
        (_ctx(cursor_row=6, offset=1, start=2, step=3), "near_top", 4, False),
        (_ctx(cursor_row=6, offset=5, start=2, step=3), "near_top", 5, False),
        (_ctx(cursor_row=14, offset=2, start=10, step=3), "scrolled", 5, False),
        (_ctx(cursor_row=14, offset=1, start=10, step=1), "scrolled", 2, False),
        (_ctx(cursor_row=14, offset=0, start=10), None, None, True),
    ],
)
def test_decide_up(ctx, rule, offset, bounded):
    decision = decide_up(ctx)
    assert decision.rule == rule
    assert decision.offset == offset
    assert decision.bounded is bounded
