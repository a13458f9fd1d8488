"""Session state for selection and text input across screens."""
from __future__ import annotations

from dataclasses import dataclass, field


def clamp(index: int, count: int) -> int:
    """Clamp ``index`` into ``[0, count - 1]``; 0 when ``count`` is 0."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


@dataclass
class UIState:
    """UI session state - selection indices, text buffer and pending chord.

    This state persists across screen transitions during a single session, so
    leaving the topics screen and coming back keeps the selected topic.
    """

    # Selection
    topic_index: int = 0
    item_index: int = 0

    # Text input sub-state: "topic" or "item" while capturing, else None
    input_target: str | None = None
    input_buffer: list[str] = field(default_factory=list)

    # First key of a two-key chord ("g g"), or None
    pending_key: int | None = None

    # Session history for debugging
    session_history: list[str] = field(default_factory=list)

    def add_to_history(self, screen: str) -> None:
        """Record screen visit in session history.

        Args:
            screen: Screen identifier that was visited
        """
        self.session_history.append(screen)

    def begin_input(self, target: str) -> None:
        """Start capturing text for a new topic or item."""
        self.input_target = target
        self.input_buffer = []

    def type_char(self, ch: str) -> None:
        self.input_buffer.append(ch)

    def backspace(self) -> None:
        """Drop the last captured character; no-op on an empty buffer."""
        if self.input_buffer:
            self.input_buffer.pop()

    @property
    def input_text(self) -> str:
        return "".join(self.input_buffer)

    def finish_input(self) -> tuple[str | None, str]:
        """End the text input sub-state.

        Returns:
            (target, text) that was being captured
        """
        result = (self.input_target, self.input_text)
        self.input_target = None
        self.input_buffer = []
        return result

    def clamp_topics(self, count: int) -> None:
        self.topic_index = clamp(self.topic_index, count)

    def clamp_items(self, count: int) -> None:
        self.item_index = clamp(self.item_index, count)
