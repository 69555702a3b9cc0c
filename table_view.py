import layout
from grid_model import Grid
from key_bindings import (
    EVENT_DOWN,
    EVENT_LEFT,
    EVENT_PAGE_DOWN,
    EVENT_PAGE_UP,
    EVENT_RIGHT,
    EVENT_UP,
)
from scroll_rules import ScrollContext, clamp, decide_down, decide_up
from viewport import Viewport

DEFAULT_HEIGHT = 20


class TableState:
    """Cursor and window bounds; the viewport owns the offset."""

    def __init__(self, cursor_row=0, cursor_col=0, start=0, end=0):
        self.cursor_row = cursor_row
        self.cursor_col = cursor_col
        self.start = start
        self.end = end

    def __repr__(self):
        return (
            f"TableState(cursor_row={self.cursor_row}, cursor_col={self.cursor_col}, "
            f"start={self.start}, end={self.end})"
        )


class TableView:
    """
    Scrollable table over an immutable Grid.
    Keeps the cursor row inside the viewport while moving and renders the
    visible slice, starting at the cursor column.
    """

    CELL_PADDING = 1

    def __init__(self, columns, rows, height: int = DEFAULT_HEIGHT):
        self.grid = Grid(columns, rows)
        self.state = TableState(cursor_row=0 if self.grid.row_count else -1)
        self.viewport = Viewport(min(max(0, height), self.grid.row_count))
        self.widths = self.grid.column_widths()
        self.update_viewport()

    @classmethod
    def from_grid(cls, grid: Grid, height: int = DEFAULT_HEIGHT):
        return cls(grid.columns, grid.rows, height=height)

    # ---------- accessors ----------
    @property
    def cursor_row(self) -> int:
        return self.state.cursor_row

    @property
    def cursor_col(self) -> int:
        return self.state.cursor_col

    @property
    def height(self) -> int:
        return self.viewport.height

    @property
    def y_offset(self) -> int:
        return self.viewport.y_offset

    @property
    def start(self) -> int:
        return self.state.start

    @property
    def end(self) -> int:
        return self.state.end

    def selected_row(self):
        if self.cursor_row < 0:
            return None
        return self.grid.rows[self.cursor_row]

    def displayed_rows(self) -> range:
        """Grid row indices currently shown through the viewport."""
        lines = len(self.viewport.visible_lines())
        first = self.state.start + max(0, self.viewport.y_offset)
        return range(first, first + lines)

    def visible_columns(self) -> range:
        return range(self.state.cursor_col, self.grid.col_count)

    # ---------- navigation ----------
    def update(self, event):
        if event == EVENT_UP:
            self.move_up(1)
        elif event == EVENT_DOWN:
            self.move_down(1)
        elif event == EVENT_PAGE_UP:
            self.page_up()
        elif event == EVENT_PAGE_DOWN:
            self.page_down()
        elif event == EVENT_LEFT:
            self.move_left(1)
        elif event == EVENT_RIGHT:
            self.move_right(1)

    def move_down(self, n: int = 1):
        self.state.cursor_row = self._clamp_row(self.state.cursor_row + n)
        self.update_viewport()
        decision = decide_down(self._scroll_context(n))
        if decision.changes_offset:
            self.viewport.set_y_offset(decision.offset)

    def move_up(self, n: int = 1):
        self.state.cursor_row = self._clamp_row(self.state.cursor_row - n)
        # decided against the window from before the move
        decision = decide_up(self._scroll_context(n))
        if decision.changes_offset:
            if decision.bounded:
                self.viewport.set_y_offset(decision.offset)
            else:
                self.viewport.y_offset = decision.offset
        self.update_viewport()

    def page_down(self):
        self.move_down(max(1, self.viewport.height))

    def page_up(self):
        self.move_up(max(1, self.viewport.height))

    def move_right(self, n: int = 1):
        self.state.cursor_col = self._clamp_col(self.state.cursor_col + n)
        self.update_viewport()

    def move_left(self, n: int = 1):
        self.state.cursor_col = self._clamp_col(self.state.cursor_col - n)
        self.update_viewport()

    def _clamp_row(self, row: int) -> int:
        if self.grid.row_count == 0:
            return -1
        return clamp(row, 0, self.grid.row_count - 1)

    def _clamp_col(self, col: int) -> int:
        return max(0, clamp(col, 0, self.grid.col_count - 1))

    def _scroll_context(self, n: int) -> ScrollContext:
        return ScrollContext(
            cursor_row=self.state.cursor_row,
            offset=self.viewport.y_offset,
            height=self.viewport.height,
            start=self.state.start,
            end=self.state.end,
            row_count=self.grid.row_count,
            step=n,
        )

    # ---------- rendering ----------
    def update_viewport(self):
        row = self.state.cursor_row
        height = self.viewport.height
        if row < 0:
            self.state.start = 0
            self.state.end = 0
        else:
            self.state.start = clamp(row - height, 0, row)
            self.state.end = clamp(row + height, row, self.grid.row_count)

        rendered = [self.render_row(r) for r in range(self.state.start, self.state.end)]
        self.viewport.set_content(layout.join_vertical(rendered))

    def _index_label(self, text: str, **kwargs) -> layout.Block:
        return layout.render(
            text,
            self.grid.index_label_width(),
            align=layout.ALIGN_RIGHT,
            style=layout.STYLE_INDEX,
            **kwargs,
        )

    def render_row(self, r: int) -> layout.Block:
        blocks = [self._index_label(str(r))]
        row = self.grid.rows[r]
        for c in self.visible_columns():
            blocks.append(
                layout.render(row[c], self.widths[c], padding=self.CELL_PADDING)
            )
        block = layout.join_horizontal(blocks)
        if r == self.state.cursor_row:
            return block.restyle(layout.STYLE_HIGHLIGHT)
        return block

    def headers_view(self) -> layout.Block:
        blocks = [self._index_label(" ", border_bottom=True)]
        for c in self.visible_columns():
            blocks.append(
                layout.render(
                    self.grid.columns[c],
                    self.widths[c],
                    padding=self.CELL_PADDING,
                    style=layout.STYLE_HEADER,
                    border_bottom=True,
                )
            )
        return layout.join_horizontal(blocks)

    def styled_view(self) -> layout.Block:
        return layout.join_vertical([self.headers_view(), self.viewport.view()])

    def view(self) -> str:
        return self.headers_view().plain() + "\n" + self.viewport.view().plain()
