import curses

import pytest

from key_bindings import CTRL_C, KeyBinding, KeyMap


@pytest.mark.parametrize(
    "key, event",
    [
        (curses.KEY_UP, "up"),
        (ord("k"), "up"),
        (curses.KEY_DOWN, "down"),
        (ord("j"), "down"),
        (ord("b"), "page_up"),
        (curses.KEY_PPAGE, "page_up"),
        (ord("f"), "page_down"),
        (curses.KEY_NPAGE, "page_down"),
        (ord(" "), "page_down"),
        (curses.KEY_LEFT, "left"),
        (curses.KEY_RIGHT, "right"),
        (ord("q"), "quit"),
        (CTRL_C, "quit"),
        (ord("z"), None),
    ],
)
def test_default_key_map(key, event):
    assert KeyMap().event_for(key) == event


def test_help_text_lists_bindings():
    text = KeyMap().help_text()
    assert text.startswith("↑/k up • ↓/j down")
    assert "f/pgdn page down" in text
    assert text.endswith("q quit")


def test_custom_bindings():
    km = KeyMap({"down": KeyBinding((ord("n"),), "n", "next")})
    assert km.event_for(ord("n")) == "down"
    assert km.event_for(ord("j")) is None
    assert km.help_text() == "n next"
