import curses
from typing import NamedTuple

EVENT_UP = "up"
EVENT_DOWN = "down"
EVENT_PAGE_UP = "page_up"
EVENT_PAGE_DOWN = "page_down"
EVENT_LEFT = "left"
EVENT_RIGHT = "right"
EVENT_QUIT = "quit"

CTRL_C = 3


class KeyBinding(NamedTuple):
    keys: tuple
    help_key: str
    help_desc: str

    def matches(self, ch) -> bool:
        return ch in self.keys


class KeyMap:
    def __init__(self, bindings=None):
        self.bindings: dict[str, KeyBinding] = dict(bindings or default_bindings())

    def event_for(self, ch):
        for event, binding in self.bindings.items():
            if binding.matches(ch):
                return event
        return None

    def help_text(self, separator=" • ") -> str:
        parts = [f"{b.help_key} {b.help_desc}" for b in self.bindings.values()]
        return separator.join(parts)


def default_bindings() -> dict[str, KeyBinding]:
    return {
        EVENT_UP: KeyBinding((curses.KEY_UP, ord("k")), "↑/k", "up"),
        EVENT_DOWN: KeyBinding((curses.KEY_DOWN, ord("j")), "↓/j", "down"),
        EVENT_PAGE_UP: KeyBinding((ord("b"), curses.KEY_PPAGE), "b/pgup", "page up"),
        EVENT_PAGE_DOWN: KeyBinding(
            (ord("f"), curses.KEY_NPAGE, ord(" ")), "f/pgdn", "page down"
        ),
        EVENT_LEFT: KeyBinding((curses.KEY_LEFT,), "←", "left"),
        EVENT_RIGHT: KeyBinding((curses.KEY_RIGHT,), "→", "right"),
        EVENT_QUIT: KeyBinding((ord("q"), CTRL_C), "q", "quit"),
    }
