"""Splash screen, the entry point of the TUI."""
from __future__ import annotations

from ..router import Router, Screen, register_screen


@register_screen("start")
class StartScreen(Screen):
    """Shows the key help. Only "go to topics" and "quit" do anything here."""

    def render(self, router: Router) -> None:
        router.renderer.start_screen(router.status_line())

    def handle(self, router: Router, key: int) -> str | None:
        if key == router.keys.go_to_topics:
            return "topics"
        if key == router.keys.quit:
            return "quit"
        return None
