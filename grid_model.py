class Grid:
    """
    Header + rows of string cells for one session.
    Never mutated after construction; no rendering or input logic.
    """

    MARGIN = 1

    def __init__(self, columns, rows):
        self.columns = tuple(str(c) for c in columns)
        self.rows = tuple(tuple(str(v) for v in row) for row in rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.columns)

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count, self.col_count

    def column_widths(self) -> list[int]:
        widths = [len(c) for c in self.columns]
        for row in self.rows:
            for c, value in enumerate(row[: len(widths)]):
                widths[c] = max(widths[c], len(value))
        return [w + self.MARGIN for w in widths]

    def index_label_width(self) -> int:
        return max(len(str(self.row_count)), 2)
