from config_paths import THEME_DEFAULT


class Theme:
    """Colours used by the table pane, as xterm-256 colour numbers."""

    BORDER_COLOR = THEME_DEFAULT["border_color"]
    HEADER_COLOR = THEME_DEFAULT["header_color"]
    HIGHLIGHT_FG = THEME_DEFAULT["highlight_fg"]
    HIGHLIGHT_BG = THEME_DEFAULT["highlight_bg"]

    def __init__(
        self,
        border_color: int = BORDER_COLOR,
        header_color: int = HEADER_COLOR,
        highlight_fg: int = HIGHLIGHT_FG,
        highlight_bg: int = HIGHLIGHT_BG,
    ):
        self.border_color = border_color
        self.header_color = header_color
        self.highlight_fg = highlight_fg
        self.highlight_bg = highlight_bg

    @classmethod
    def from_config(cls, cfg):
        theme = (cfg or {}).get("THEME") or {}
        return cls(
            border_color=theme.get("border_color", cls.BORDER_COLOR),
            header_color=theme.get("header_color", cls.HEADER_COLOR),
            highlight_fg=theme.get("highlight_fg", cls.HIGHLIGHT_FG),
            highlight_bg=theme.get("highlight_bg", cls.HIGHLIGHT_BG),
        )
