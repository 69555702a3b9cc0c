import curses

from key_bindings import EVENT_QUIT, KeyMap
from logger import Logger
from screen_layout import ScreenLayout
from status_bar import render_status
from table_pane import TablePane
from table_view import DEFAULT_HEIGHT, TableView

log = Logger().setup_logger("Orchestrator")


class Orchestrator:
    def __init__(self, stdscr, grid, file_path=None, height=DEFAULT_HEIGHT, theme=None, key_map=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)

        self.grid = grid
        self.file_path = file_path
        self.requested_height = height
        self.key_map = key_map or KeyMap()
        self.exit_requested = False

        self.layout = ScreenLayout(stdscr)
        self.pane = TablePane(theme)
        self.table = TableView.from_grid(grid, height=self._fit_height())

    def _fit_height(self) -> int:
        return max(1, min(self.requested_height, self.layout.max_table_rows))

    # ---------------- UI ----------------

    def redraw(self):
        self.pane.draw(self.layout.table_win, self.table)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        column_name = None
        if self.grid.col_count:
            column_name = self.grid.columns[self.table.cursor_col]
        text = render_status(
            {
                "file_path": self.file_path,
                "shape": self.grid.shape,
                "cursor_row": self.table.cursor_row,
                "cursor_col": self.table.cursor_col,
                "column_name": column_name,
                "help": self.key_map.help_text(),
            },
            w,
        )
        try:
            # last cell of the screen cannot be written without an error
            sw.addnstr(0, 0, text, max(0, w - 1), curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

    def _on_resize(self):
        row, col = self.table.cursor_row, self.table.cursor_col
        try:
            curses.update_lines_cols()
        except AttributeError:
            pass
        self.stdscr.clear()
        self.layout = ScreenLayout(self.stdscr)
        self.table = TableView.from_grid(self.grid, height=self._fit_height())
        if row > 0:
            self.table.move_down(row)
        if col > 0:
            self.table.move_right(col)

    # ---------------- input ----------------

    def handle_key(self, ch):
        if ch == -1:
            return
        if ch == curses.KEY_RESIZE:
            self._on_resize()
            return
        event = self.key_map.event_for(ch)
        if event == EVENT_QUIT:
            self.exit_requested = True
        elif event is not None:
            self.table.update(event)

    def run(self):
        log.info(
            "Session started on %s (%d rows, height %d)",
            self.file_path,
            self.grid.row_count,
            self.table.height,
        )
        while not self.exit_requested:
            self.redraw()
            self.handle_key(self.stdscr.getch())
        log.info("Session ended on %s", self.file_path)
