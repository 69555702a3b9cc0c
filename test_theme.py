from theme import Theme


def test_defaults():
    theme = Theme()
    assert theme.border_color == 240
    assert theme.header_color == 15
    assert theme.highlight_fg == 229
    assert theme.highlight_bg == 57


def test_from_config_overrides_some_colors():
    theme = Theme.from_config({"THEME": {"highlight_bg": 21}})
    assert theme.highlight_bg == 21
    assert theme.highlight_fg == 229


def test_from_empty_config():
    theme = Theme.from_config(None)
    default = Theme()
    assert (theme.border_color, theme.highlight_bg) == (default.border_color, default.highlight_bg)
