"""Fixed-width styled text blocks.

A block is a list of lines, each line a list of spans. A span carries its
text and a style name; the curses pane maps style names to attributes, the
plain-text view simply concatenates span text.
"""

from typing import NamedTuple

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"

STYLE_TEXT = "text"
STYLE_HEADER = "header"
STYLE_BORDER = "border"
STYLE_INDEX = "index"
STYLE_HIGHLIGHT = "highlight"

BORDER_CHAR = "─"


class Span(NamedTuple):
    text: str
    style: str = STYLE_TEXT


class Block:
    def __init__(self, lines=None):
        self.lines: list[list[Span]] = [list(line) for line in (lines or [])]

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return max((line_width(line) for line in self.lines), default=0)

    def restyle(self, style: str) -> "Block":
        return Block([[Span(s.text, style) for s in line] for line in self.lines])

    def plain_lines(self) -> list[str]:
        return ["".join(s.text for s in line) for line in self.lines]

    def plain(self) -> str:
        return "\n".join(self.plain_lines())


def line_width(line) -> int:
    return sum(len(s.text) for s in line)


def fit(text: str, width: int, align: str = ALIGN_LEFT) -> str:
    text = text[:width]
    if align == ALIGN_RIGHT:
        return text.rjust(width)
    return text.ljust(width)


def render(
    text: str,
    width: int,
    align: str = ALIGN_LEFT,
    padding: int = 0,
    style: str = STYLE_TEXT,
    border_bottom: bool = False,
) -> Block:
    """Render text as a one-line block of exactly width + 2 * padding columns."""
    pad = " " * max(0, padding)
    body = f"{pad}{fit(text, max(0, width), align)}{pad}"
    lines = [[Span(body, style)]]
    if border_bottom:
        lines.append([Span(BORDER_CHAR * len(body), STYLE_BORDER)])
    return Block(lines)


def join_horizontal(blocks) -> Block:
    """Place blocks side by side, top aligned; short blocks are padded with blanks."""
    blocks = list(blocks)
    if not blocks:
        return Block()
    height = max(b.height for b in blocks)
    lines: list[list[Span]] = [[] for _ in range(height)]
    for block in blocks:
        w = block.width
        for y in range(height):
            if y < block.height:
                line = block.lines[y]
                lines[y].extend(line)
                gap = w - line_width(line)
                if gap > 0:
                    lines[y].append(Span(" " * gap))
            elif w:
                lines[y].append(Span(" " * w))
    return Block(lines)


def join_vertical(blocks) -> Block:
    lines = []
    for block in blocks:
        lines.extend(block.lines)
    return Block(lines)
