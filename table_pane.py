import curses

import layout
from theme import Theme


class TablePane:
    PAIR_BORDER = 1
    PAIR_HEADER = 2
    PAIR_HIGHLIGHT = 3

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or Theme()
        self.colors_ready = False
        try:
            curses.start_color()
            curses.use_default_colors()
            if getattr(curses, "COLORS", 0) >= 256:
                curses.init_pair(self.PAIR_BORDER, self.theme.border_color, -1)
                curses.init_pair(self.PAIR_HEADER, self.theme.header_color, -1)
                curses.init_pair(
                    self.PAIR_HIGHLIGHT, self.theme.highlight_fg, self.theme.highlight_bg
                )
                self.colors_ready = True
        except curses.error:
            pass

    def _pair(self, pair, fallback):
        if not self.colors_ready:
            return fallback
        try:
            return curses.color_pair(pair)
        except curses.error:
            return fallback

    def attr_for(self, style: str) -> int:
        if style == layout.STYLE_HIGHLIGHT:
            return self._pair(self.PAIR_HIGHLIGHT, curses.A_REVERSE)
        if style == layout.STYLE_HEADER:
            return curses.A_BOLD | self._pair(self.PAIR_HEADER, curses.A_NORMAL)
        if style == layout.STYLE_BORDER:
            return self._pair(self.PAIR_BORDER, curses.A_DIM)
        return curses.A_NORMAL

    # ---------- rendering ----------
    def draw(self, win, table):
        win.erase()
        h, w = win.getmaxyx()

        border_attr = self.attr_for(layout.STYLE_BORDER)
        try:
            win.attron(border_attr)
            win.box()
            win.attroff(border_attr)
        except curses.error:
            pass

        # inside the box: one column/row of frame on every side
        max_y = h - 1
        max_x = w - 1
        for y, line in enumerate(table.styled_view().lines, start=1):
            if y >= max_y:
                break
            x = 1
            for span in line:
                avail = max_x - x
                if avail <= 0:
                    break
                try:
                    win.addnstr(y, x, span.text, avail, self.attr_for(span.style))
                except curses.error:
                    pass
                x += len(span.text)

        win.refresh()
