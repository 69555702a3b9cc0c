"""Ordered rule tables for the viewport offset after a vertical move.

Rules are tried in order; the first one whose condition holds decides the
new offset. A rule may decide to keep the offset unchanged, which still
stops the search.
"""

from typing import Callable, NamedTuple, Optional


def clamp(v, low, high):
    return min(max(v, low), high)


class ScrollContext(NamedTuple):
    cursor_row: int
    offset: int
    height: int
    start: int
    end: int
    row_count: int
    step: int


class ScrollRule(NamedTuple):
    name: str
    when: Callable[[ScrollContext], bool]
    # None keeps the current offset
    offset: Optional[Callable[[ScrollContext], int]] = None
    # bounded offsets go through Viewport.set_y_offset, others are assigned as is
    bounded: bool = True


class ScrollDecision(NamedTuple):
    rule: Optional[str]
    offset: Optional[int]
    bounded: bool = True

    @property
    def changes_offset(self) -> bool:
        return self.offset is not None


DOWN_RULES = (
    ScrollRule(
        "last_row_in_window",
        lambda c: c.end == c.row_count and c.offset > 0,
        lambda c: clamp(c.offset - c.step, 1, c.height),
    ),
    ScrollRule(
        "past_midpoint",
        lambda c: c.cursor_row > (c.end - c.start) // 2 and c.offset > 0,
        lambda c: clamp(c.offset - c.step, 1, c.cursor_row),
    ),
    ScrollRule("hysteresis", lambda c: c.offset > 1),
    ScrollRule(
        "below_window",
        lambda c: c.cursor_row > c.offset + c.height - 1,
        lambda c: clamp(c.offset + 1, 0, 1),
    ),
)

UP_RULES = (
    ScrollRule(
        "top_of_content",
        lambda c: c.start == 0,
        lambda c: clamp(c.offset, 0, c.cursor_row),
    ),
    ScrollRule(
        "near_top",
        lambda c: c.start < c.height,
        lambda c: clamp(clamp(c.offset + c.step, 0, c.cursor_row), 0, c.height),
        bounded=False,
    ),
    ScrollRule(
        "scrolled",
        lambda c: c.offset >= 1,
        lambda c: clamp(c.offset + c.step, 1, c.height),
        bounded=False,
    ),
)


def decide(rules, ctx: ScrollContext) -> ScrollDecision:
    for rule in rules:
        if rule.when(ctx):
            if rule.offset is None:
                return ScrollDecision(rule.name, None)
            return ScrollDecision(rule.name, rule.offset(ctx), rule.bounded)
    return ScrollDecision(None, None)


def decide_down(ctx: ScrollContext) -> ScrollDecision:
    return decide(DOWN_RULES, ctx)


def decide_up(ctx: ScrollContext) -> ScrollDecision:
    return decide(UP_RULES, ctx)
