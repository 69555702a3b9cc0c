from grid_model import Grid


def test_column_widths_use_longest_value_plus_margin():
    grid = Grid(["ID", "Name"], [["1", "Ann"], ["2", "Bob"], ["3", "Cory"]])
    assert grid.column_widths() == [3, 5]


def test_header_can_be_the_widest_value():
    grid = Grid(["identifier"], [["1"], ["22"]])
    assert grid.column_widths() == [11]


def test_empty_grid():
    grid = Grid([], [])
    assert grid.column_widths() == []
    assert grid.shape == (0, 0)


def test_grid_is_immutable_copy():
    rows = [["a", "b"]]
    grid = Grid(["x", "y"], rows)
    rows[0][0] = "changed"
    assert grid.rows == (("a", "b"),)


def test_index_label_width():
    assert Grid(["a"], [["1"]] * 3).index_label_width() == 2
    assert Grid(["a"], [["1"]] * 100).index_label_width() == 3
