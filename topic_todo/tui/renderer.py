"""Renderer and key-source interfaces plus their curses implementation.

The router only depends on :class:`Renderer` and :class:`KeySource`; the
curses classes are wired in by the CLI.
"""
from __future__ import annotations

import curses
import getpass
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence

from .keys import key_char

if TYPE_CHECKING:
    from ..models import Item
    from ..settings import Settings
    from ..store import TopicSummary


START_SCREEN = (
    "            go22dos                   ",
    "                                      ",
    "type t     to go to todos             ",
    "type j/k   to go down/up              ",
    "type s     to select specific todos   ",
    "type TAB   to tick off todo           ",
    "type a     to add todo(s)             ",
    "type d     to delete todo(s)          ",
    "type ESC   to exit todos or text input",
    "type q     to quit                    ",
)

INPUT_PROMPTS = {
    "topic": "[new todos-topic]",
    "item": "[new todo]",
}


class Renderer(Protocol):
    """What the router draws through. Arguments are immutable snapshots."""

    def start_screen(self, status: str) -> None: ...

    def topics(self, summaries: Sequence[TopicSummary], selected: int, status: str) -> None: ...

    def items(self, topic: str, items: Sequence[Item], selected: int, status: str) -> None: ...

    def text_input(self, target: str | None, text: str) -> None: ...

    def command(self, key: int) -> None: ...

    def flash(self) -> None: ...


class KeySource(Protocol):
    def get_key(self) -> int: ...


def format_ratio(ratio: float | None) -> str:
    """Completion ratio cell; empty topics have no ratio."""
    if ratio is None:
        return "[ -- ]"
    return f"[{ratio:.2f}]"


def checkbox(item: Item) -> str:
    return "[X]" if item.done else "[ ]"


# ═══════════════════════════════════════════════════════════════════════════════
# THEME
# ═══════════════════════════════════════════════════════════════════════════════

HIGHLIGHT_PAIR = 1
CHECKBOX_TODO_PAIR = 2
CHECKBOX_DONE_PAIR = 3
OTHER_PAIR = 6


@dataclass(frozen=True)
class Theme:
    """Color pairs as (foreground, background) curses color names."""

    highlight: tuple[str, str] = ("black", "white")
    todo: tuple[str, str] = ("black", "red")
    done: tuple[str, str] = ("black", "green")
    other: tuple[str, str] = ("black", "cyan")

    @classmethod
    def from_settings(cls, settings: Settings) -> "Theme":
        return cls(
            highlight=(settings.TODO_COLOR_HIGHLIGHT_FG, settings.TODO_COLOR_HIGHLIGHT_BG),
            todo=(settings.TODO_COLOR_TODO_FG, settings.TODO_COLOR_TODO_BG),
            done=(settings.TODO_COLOR_DONE_FG, settings.TODO_COLOR_DONE_BG),
            other=(settings.TODO_COLOR_OTHER_FG, settings.TODO_COLOR_OTHER_BG),
        )

    def pairs(self) -> dict[int, tuple[int, int]]:
        """Pair number -> (fg, bg) curses color constants."""
        return {
            HIGHLIGHT_PAIR: _colors(self.highlight),
            CHECKBOX_TODO_PAIR: _colors(self.todo),
            CHECKBOX_DONE_PAIR: _colors(self.done),
            OTHER_PAIR: _colors(self.other),
        }


def _colors(pair: tuple[str, str]) -> tuple[int, int]:
    fg, bg = pair
    return getattr(curses, f"COLOR_{fg.upper()}"), getattr(curses, f"COLOR_{bg.upper()}")


# ═══════════════════════════════════════════════════════════════════════════════
# CURSES
# ═══════════════════════════════════════════════════════════════════════════════

class CursesKeySource:
    """Blocking key reads as code points; special keys keep their curses code."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def get_key(self) -> int:
        key = self.stdscr.get_wch()
        return ord(key) if isinstance(key, str) else key


class CursesRenderer:
    """Draws the screens onto a curses window."""

    def __init__(self, stdscr, theme: Theme | None = None, footer: str | None = None):
        self.stdscr = stdscr
        self.theme = theme or Theme()
        self.footer = footer if footer is not None else f"{getpass.getuser()} @ {socket.gethostname()}"
        self.colors = False

    def setup(self) -> None:
        """Terminal modes and color pairs; call once after curses starts."""
        curses.noecho()
        curses.set_escdelay(25)
        self._cursor(False)
        if curses.has_colors():
            curses.start_color()
            for number, (fg, bg) in self.theme.pairs().items():
                curses.init_pair(number, fg, bg)
            self.colors = True

    # -- drawing helpers ------------------------------------------------------

    def _attr(self, pair: int) -> int:
        if self.colors:
            return curses.color_pair(pair)
        return curses.A_REVERSE if pair == HIGHLIGHT_PAIR else 0

    def _cursor(self, visible: bool) -> None:
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            # Terminal cannot change cursor visibility.
            pass

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        height, width = self.stdscr.getmaxyx()
        if not 0 <= y < height or not 0 <= x < width:
            return
        try:
            self.stdscr.addstr(y, x, text[: width - x], attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen.
            pass

    def _bottom(self, text: str) -> None:
        height, width = self.stdscr.getmaxyx()
        self._put(height - 1, max(0, width // 2 - len(text) // 2), text)

    # -- Renderer -------------------------------------------------------------

    def start_screen(self, status: str) -> None:
        self._cursor(False)
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        top = max(0, height // 2 - len(START_SCREEN) // 2)
        for i, line in enumerate(START_SCREEN):
            self._put(top + i, max(0, width // 2 - len(line) // 2), line)
        self._bottom(self.footer)
        self.stdscr.refresh()

    def topics(self, summaries: Sequence[TopicSummary], selected: int, status: str) -> None:
        self._cursor(False)
        self.stdscr.erase()
        if not summaries:
            self._put(0, 0, "no topics atm")
        for i, summary in enumerate(summaries):
            cell = f"{format_ratio(summary.ratio)}  "
            self._put(i, 0, cell, self._attr(OTHER_PAIR))
            attr = self._attr(HIGHLIGHT_PAIR) if i == selected else 0
            self._put(i, len(cell), summary.topic, attr)
        self._bottom(status)
        self.stdscr.refresh()

    def items(self, topic: str, items: Sequence[Item], selected: int, status: str) -> None:
        self._cursor(False)
        self.stdscr.erase()
        if not items:
            self._put(0, 0, "no items atm")
        for i, item in enumerate(items):
            box = checkbox(item)
            pair = CHECKBOX_DONE_PAIR if item.done else CHECKBOX_TODO_PAIR
            self._put(i, 0, box, self._attr(pair))
            attr = self._attr(HIGHLIGHT_PAIR) if i == selected else 0
            self._put(i, len(box) + 2, item.text, attr)
        self._bottom(status)
        self.stdscr.refresh()

    def text_input(self, target: str | None, text: str) -> None:
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        prompt = INPUT_PROMPTS.get(target or "", "[new]")
        row = height // 2
        col = max(0, width // 2 - len(prompt) // 2)
        self._put(row - 1, col, prompt, self._attr(OTHER_PAIR))
        self._put(row, col, text, self._attr(HIGHLIGHT_PAIR))
        self._cursor(True)
        try:
            self.stdscr.move(row, min(width - 1, col + len(text)))
        except curses.error:
            # Window too small to place the cursor.
            pass
        self.stdscr.refresh()

    def command(self, key: int) -> None:
        ch = key_char(key)
        if ch is None:
            return
        height, _ = self.stdscr.getmaxyx()
        self._put(height - 1, 1, ch)
        self.stdscr.refresh()

    def flash(self) -> None:
        curses.flash()
