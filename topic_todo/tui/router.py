"""Main router and screen registry for the TUI."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import NavigationError, StoreError, Unrecoverable
from .keys import KeyMap

if TYPE_CHECKING:
    from ..settings import Settings
    from ..store import Store
    from .navigator import Navigator
    from .renderer import KeySource, Renderer
    from .state import UIState

logger = logging.getLogger(__name__)


class Screen:
    """A screen of the TUI: draws itself and interprets one key at a time.

    ``handle`` returns a navigation command:
      - None: stay on the current screen
      - "back": pop to the previous screen
      - "home": reset to the splash screen
      - "quit": save and end the session
      - any other string: push that screen id
    """

    screen_id: str = ""

    def render(self, router: Router) -> None:
        raise NotImplementedError

    def handle(self, router: Router, key: int) -> str | None:
        raise NotImplementedError


class Router:
    """Main key loop with screen dispatch.

    The router owns the blocking key read, dispatches each key to the screen
    registered for the current navigation state and redraws from a fresh
    store snapshot afterwards. Store failures are never recovered locally;
    they are re-raised as :class:`NavigationError`.
    """

    def __init__(
        self,
        store: Store,
        renderer: Renderer,
        settings: Settings,
        state: UIState,
        nav: Navigator,
        path: str | Path,
        keys: KeyMap | None = None,
    ):
        """Initialize router with dependencies.

        Args:
            store: Topic/item store being edited
            renderer: Where screens are drawn
            settings: Application settings
            state: UI session state
            nav: Navigator instance
            path: JSON file the store is saved to on quit
            keys: Key map (defaults to the one in settings)
        """
        self.store = store
        self.renderer = renderer
        self.settings = settings
        self.state = state
        self.nav = nav
        self.path = Path(path)
        self.keys = keys or KeyMap.from_settings(settings)

    def run(self, key_source: KeySource) -> None:
        """Run the main key loop until the quit command.

        Suspends exactly once per iteration, on ``key_source.get_key()``.
        """
        self.state.add_to_history(self.nav.current())
        self.redraw()
        while self.dispatch(key_source.get_key()):
            pass

    def dispatch(self, key: int) -> bool:
        """Handle one key.

        Covers the screen's handler, the save on quit and the redraw, so any
        store failure surfaces as :class:`NavigationError`.

        Returns:
            False once the session has ended (store saved), True otherwise
        """
        current = self.nav.current()
        screen = self._screen(current)

        try:
            result = screen.handle(self, key)
            if result == "quit":
                self.quit()
                return False
            self._navigate(current, result)
            self.redraw()
        except StoreError as e:
            logger.error("store operation failed on %s (key=%d): %s", current, key, e)
            raise NavigationError(current, key, e) from e

        self.renderer.command(key)
        return True

    def _navigate(self, current: str, result: str | None) -> None:
        if result == "home":
            self.nav.home()
        elif result == "back":
            if self.nav.depth() > 1:
                self.nav.pop()
            else:
                logger.debug("back ignored on %s", current)
        elif result and result != current:
            self.nav.push(result)

        if self.nav.current() != current:
            self.state.add_to_history(self.nav.current())
            logger.debug("screen %s -> %s", current, self.nav.current())

    def redraw(self) -> None:
        self._screen(self.nav.current()).render(self)

    def quit(self) -> None:
        """Save the store to its file and signal the terminal."""
        self.store.save(self.path, indent=self.settings.TODO_JSON_INDENT)
        logger.info("session ended after %d screen visits", len(self.state.session_history))
        self.renderer.flash()

    def status_line(self) -> str:
        """Breadcrumb for the bottom line, naming the open topic."""
        labels = {}
        if "items" in self.nav.stack:
            labels["items"] = self.store.topic_id(self.state.topic_index)
        return self.nav.breadcrumbs(labels)

    @staticmethod
    def _screen(screen_id: str) -> Screen:
        screen = SCREENS.get(screen_id)
        if screen is None:
            raise Unrecoverable(f"no screen registered for {screen_id!r}")
        return screen


# Screen registry - maps screen IDs to screen instances
# Populated by importing topic_todo.tui.screens
SCREENS: dict[str, Screen] = {}


def register_screen(screen_id: str):
    """Class decorator to register a screen.

    Usage:
        @register_screen("topics")
        class TopicsScreen(Screen):
            ...
    """
    def decorator(cls: type[Screen]) -> type[Screen]:
        cls.screen_id = screen_id
        SCREENS[screen_id] = cls()
        return cls
    return decorator
