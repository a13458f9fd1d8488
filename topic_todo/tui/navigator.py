"""Navigation stack manager for screen-based routing."""
from __future__ import annotations


class Navigator:
    """Stack-based navigation with breadcrumbs.

    - Push on enter: opening a screen pushes it onto the stack
    - Pop on escape/exit: returns to the previous screen
    - Reset on home: clears the stack to ["start"]
    """

    ROOT = "start"

    # Screen ID to human-readable label mapping
    SCREEN_LABELS = {
        "start": "go22dos",
        "topics": "topics",
        "items": "items",
        "text_input": "new",
    }

    def __init__(self):
        """Initialize with the splash screen as the starting screen."""
        self.stack: list[str] = [self.ROOT]

    def push(self, screen: str) -> None:
        """Navigate to a new screen by pushing onto the stack.

        Args:
            screen: Screen identifier to navigate to
        """
        self.stack.append(screen)

    def pop(self) -> str | None:
        """Go back to the previous screen.

        Returns:
            The screen that was popped, or None if at root
        """
        if len(self.stack) > 1:
            return self.stack.pop()
        return None

    def home(self) -> None:
        """Reset navigation to the splash screen."""
        self.stack = [self.ROOT]

    def current(self) -> str:
        return self.stack[-1]

    def breadcrumbs(self, labels: dict[str, str] | None = None) -> str:
        """Generate breadcrumb navigation string.

        Args:
            labels: Per-call overrides, e.g. {"items": "Work"} to show the
                open topic instead of the generic label

        Returns:
            Breadcrumb path like "go22dos > topics > Work"
        """
        overrides = labels or {}
        parts = [
            overrides.get(screen, self.SCREEN_LABELS.get(screen, screen))
            for screen in self.stack
        ]
        return " > ".join(parts)

    def depth(self) -> int:
        return len(self.stack)
