from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Named keys accepted in the TODO_KEY_* settings besides single characters.
KEY_NAMES = {
    "TAB": 9,
    "ESC": 27,
    "ESCAPE": 27,
    "ENTER": 10,
    "SPACE": 32,
    "DEL": 127,
}

COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def key_code(value: str | int) -> int:
    """Translate a key setting (``"j"``, ``"TAB"``, ``27``) into a key code."""
    if isinstance(value, int):
        return value
    s = str(value)
    if len(s) == 1:
        return ord(s)
    named = KEY_NAMES.get(s.strip().upper())
    if named is not None:
        return named
    if s.strip().isdigit():
        return int(s.strip())
    raise ValueError(f"unknown key {value!r}")


class Settings(BaseSettings):
    """Configuration for the topic_todo terminal app.

    Values are loaded from environment variables and `.env`.

    Notes:
    - Keys are single characters, a name from KEY_NAMES, or a raw key code.
    - Colors are curses color names (black, red, green, ...).
    - The log file is written under TODO_LOG_DIR; nothing is logged to the
      terminal while the curses screen is active.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Key map
    TODO_KEY_GO_TO_TOPICS: str = Field(default="t")
    TODO_KEY_DOWN: str = Field(default="j")
    TODO_KEY_UP: str = Field(default="k")
    # Pressed twice ("gg") to jump to the first entry.
    TODO_KEY_FIRST: str = Field(default="g")
    TODO_KEY_LAST: str = Field(default="G")
    TODO_KEY_SELECT: str = Field(default="s")
    TODO_KEY_TOGGLE: str = Field(default="TAB")
    TODO_KEY_APPEND: str = Field(default="a")
    TODO_KEY_DELETE: str = Field(default="d")
    TODO_KEY_EXIT: str = Field(default="e")
    TODO_KEY_ESCAPE: str = Field(default="ESC")
    TODO_KEY_QUIT: str = Field(default="q")
    # DEL, curses.KEY_BACKSPACE, ^H
    TODO_KEY_BACKSPACE: list[int] = Field(default_factory=lambda: [127, 263, 8])

    # Theme (curses color names, foreground/background)
    TODO_COLOR_HIGHLIGHT_FG: str = Field(default="black")
    TODO_COLOR_HIGHLIGHT_BG: str = Field(default="white")
    TODO_COLOR_TODO_FG: str = Field(default="black")
    TODO_COLOR_TODO_BG: str = Field(default="red")
    TODO_COLOR_DONE_FG: str = Field(default="black")
    TODO_COLOR_DONE_BG: str = Field(default="green")
    TODO_COLOR_OTHER_FG: str = Field(default="black")
    TODO_COLOR_OTHER_BG: str = Field(default="cyan")

    # Logging (diagnostic; the terminal belongs to curses)
    # None: per-user state dir. Relative paths sit beside the JSON file.
    TODO_LOG_DIR: Path | None = Field(default=None)
    TODO_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days).
    TODO_LOG_BACKUP_COUNT: int = Field(default=14, ge=0)

    # Persistence. None writes compact JSON.
    TODO_JSON_INDENT: int | None = Field(default=None)

    @field_validator(
        "TODO_KEY_GO_TO_TOPICS",
        "TODO_KEY_DOWN",
        "TODO_KEY_UP",
        "TODO_KEY_FIRST",
        "TODO_KEY_LAST",
        "TODO_KEY_SELECT",
        "TODO_KEY_TOGGLE",
        "TODO_KEY_APPEND",
        "TODO_KEY_DELETE",
        "TODO_KEY_EXIT",
        "TODO_KEY_ESCAPE",
        "TODO_KEY_QUIT",
    )
    @classmethod
    def _check_key(cls, v: str) -> str:
        key_code(v)
        return v

    @field_validator(
        "TODO_COLOR_HIGHLIGHT_FG",
        "TODO_COLOR_HIGHLIGHT_BG",
        "TODO_COLOR_TODO_FG",
        "TODO_COLOR_TODO_BG",
        "TODO_COLOR_DONE_FG",
        "TODO_COLOR_DONE_BG",
        "TODO_COLOR_OTHER_FG",
        "TODO_COLOR_OTHER_BG",
    )
    @classmethod
    def _check_color(cls, v: str) -> str:
        name = v.strip().lower()
        if name not in COLOR_NAMES:
            raise ValueError(f"unknown color {v!r}; expected one of {', '.join(COLOR_NAMES)}")
        return name

    @field_validator("TODO_LOG_LEVEL")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings() -> Settings:
    return Settings()
