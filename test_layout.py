import layout
from layout import Block, Span


def test_render_pads_to_width():
    block = layout.render("ab", 4, padding=1)
    assert block.plain() == " ab   "
    assert block.width == 6
    assert block.height == 1


def test_render_right_aligned_and_truncated():
    assert layout.render("7", 3, align=layout.ALIGN_RIGHT).plain() == "  7"
    assert layout.render("abcdef", 3).plain() == "abc"


def test_render_bottom_border():
    block = layout.render("ID", 3, padding=1, style=layout.STYLE_HEADER, border_bottom=True)
    assert block.plain_lines() == [" ID  ", "─────"]
    assert block.lines[0][0].style == layout.STYLE_HEADER
    assert block.lines[1][0].style == layout.STYLE_BORDER


def test_join_horizontal_pads_shorter_blocks():
    tall = layout.render("ab", 4, border_bottom=True)
    short = layout.render("xyz", 3)

    joined = layout.join_horizontal([tall, short])

    assert joined.plain_lines() == ["ab  xyz", "────   "]


def test_join_vertical_and_restyle():
    joined = layout.join_vertical([layout.render("a", 1), layout.render("b", 1)])
    assert joined.plain() == "a\nb"

    highlighted = joined.restyle(layout.STYLE_HIGHLIGHT)
    assert all(s.style == layout.STYLE_HIGHLIGHT for line in highlighted.lines for s in line)
    # source block keeps its styles
    assert joined.lines[0][0].style == layout.STYLE_TEXT


def test_empty_blocks():
    assert layout.join_horizontal([]).plain() == ""
    assert Block().width == 0
    assert Block([[Span("abc")]]).width == 3
