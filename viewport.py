from layout import Block


class Viewport:
    """Content lines plus a vertical offset inside a fixed visible height."""

    def __init__(self, height: int):
        self.height = max(0, height)
        self.y_offset = 0
        self.lines = []

    def set_content(self, block: Block):
        self.lines = list(block.lines)
        if self.y_offset > len(self.lines) - 1:
            self.goto_bottom()

    @property
    def max_y_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def set_y_offset(self, n: int):
        self.y_offset = min(max(n, 0), self.max_y_offset)

    def goto_bottom(self):
        self.set_y_offset(self.max_y_offset)

    def visible_lines(self):
        if not self.lines:
            return []
        top = max(0, self.y_offset)
        bottom = min(max(self.y_offset + self.height, top), len(self.lines))
        return self.lines[top:bottom]

    def view(self) -> Block:
        lines = self.visible_lines()
        # pad to the full height so frames keep a stable size
        while len(lines) < self.height:
            lines = lines + [[]]
        return Block(lines)
