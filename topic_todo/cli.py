from __future__ import annotations

import curses
import logging
from enum import IntEnum
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from .errors import PoisonedLock, StoreError, TodoError, Unrecoverable
from .logging import setup_logging
from .persistence import load
from .settings import Settings, load_settings
from .store import Store

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="topic_todo: a terminal to-do list organized into topics",
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


class ExitCode(IntEnum):
    OK = 0
    RUNTIME = 1  # store/navigation failure during the session
    USAGE = 2  # bad arguments or configuration
    LOAD = 3  # the JSON file could not be loaded
    UNRECOVERABLE = 4  # poisoned store or broken router
    INTERRUPTED = 130


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION
# ═══════════════════════════════════════════════════════════════════════════════

def run_session(store: Store, path: Path, settings: Settings, renderer, key_source) -> None:
    """Drive one TUI session until quit (which saves ``store`` to ``path``)."""
    from .tui.navigator import Navigator
    from .tui.router import Router
    from .tui.state import UIState
    # Import screens to register them
    from .tui import screens  # noqa: F401

    router = Router(
        store=store,
        renderer=renderer,
        settings=settings,
        state=UIState(),
        nav=Navigator(),
        path=path,
    )
    router.run(key_source)


def _curses_main(stdscr, store: Store, path: Path, settings: Settings) -> None:
    from .tui.renderer import CursesKeySource, CursesRenderer, Theme

    renderer = CursesRenderer(stdscr, Theme.from_settings(settings))
    renderer.setup()
    run_session(store, path, settings, renderer, CursesKeySource(stdscr))


def _run_terminal(store: Store, path: Path, settings: Settings) -> None:
    # curses.wrapper restores the terminal before any exception propagates.
    curses.wrapper(_curses_main, store, path, settings)


def _exit_code(exc: BaseException, store: Store) -> ExitCode:
    if isinstance(exc, (PoisonedLock, Unrecoverable)) or store.poisoned:
        return ExitCode.UNRECOVERABLE
    return ExitCode.RUNTIME


# ═══════════════════════════════════════════════════════════════════════════════
# COMMAND
# ═══════════════════════════════════════════════════════════════════════════════

@app.command()
def run(
    path: Path = typer.Argument(..., help="JSON file holding the topics", dir_okay=False),
):
    """
    Open the to-do list stored in [bold]PATH[/bold].

    [dim]The file is saved when you quit with q.[/dim]
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        err_console.print(f"[red]Invalid configuration:[/red]\n{e}")
        raise typer.Exit(code=ExitCode.USAGE)

    log_file = setup_logging(settings, path)

    try:
        store = load(path)
    except StoreError as e:
        logger.error("cannot load %s: %s", path, e)
        err_console.print(f"[red]Cannot load[/red] [cyan]{path}[/cyan]: {e}")
        raise typer.Exit(code=ExitCode.LOAD)

    try:
        _run_terminal(store, path, settings)
    except KeyboardInterrupt:
        logger.warning("interrupted; %s not saved", path)
        err_console.print("\n[dim]Interrupted. Changes were not saved.[/]")
        raise typer.Exit(code=ExitCode.INTERRUPTED)
    except TodoError as e:
        logger.exception("session aborted")
        err_console.print(f"[red]Error:[/red] {e}")
        err_console.print(f"[dim]Details in {log_file}[/dim]")
        raise typer.Exit(code=_exit_code(e, store))
    except Exception as e:
        logger.exception("unexpected failure")
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        err_console.print(f"[dim]Details in {log_file}[/dim]")
        raise typer.Exit(code=_exit_code(e, store))

    console.print(f"[green]✓[/green] Saved [cyan]{path}[/cyan]")


def main():
    app()
