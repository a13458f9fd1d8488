"""Key map resolved from settings into raw key codes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..settings import key_code

if TYPE_CHECKING:
    from ..settings import Settings


@dataclass(frozen=True)
class KeyMap:
    go_to_topics: int = ord("t")
    down: int = ord("j")
    up: int = ord("k")
    first: int = ord("g")
    last: int = ord("G")
    select: int = ord("s")
    toggle: int = 9
    append: int = ord("a")
    delete: int = ord("d")
    exit: int = ord("e")
    escape: int = 27
    quit: int = ord("q")
    backspace: frozenset[int] = frozenset({127, 263, 8})

    @classmethod
    def from_settings(cls, settings: Settings) -> "KeyMap":
        return cls(
            go_to_topics=key_code(settings.TODO_KEY_GO_TO_TOPICS),
            down=key_code(settings.TODO_KEY_DOWN),
            up=key_code(settings.TODO_KEY_UP),
            first=key_code(settings.TODO_KEY_FIRST),
            last=key_code(settings.TODO_KEY_LAST),
            select=key_code(settings.TODO_KEY_SELECT),
            toggle=key_code(settings.TODO_KEY_TOGGLE),
            append=key_code(settings.TODO_KEY_APPEND),
            delete=key_code(settings.TODO_KEY_DELETE),
            exit=key_code(settings.TODO_KEY_EXIT),
            escape=key_code(settings.TODO_KEY_ESCAPE),
            quit=key_code(settings.TODO_KEY_QUIT),
            backspace=frozenset(settings.TODO_KEY_BACKSPACE),
        )

    def is_backspace(self, key: int) -> bool:
        return key in self.backspace


# curses reports function/arrow keys in 0o400..0o777.
_CURSES_SPECIAL = range(0o400, 0o1000)


def key_char(key: int) -> str | None:
    """Printable character for a raw key code, or None."""
    if key < 0 or key in _CURSES_SPECIAL or key > 0x10FFFF:
        return None
    ch = chr(key)
    return ch if ch.isprintable() else None
