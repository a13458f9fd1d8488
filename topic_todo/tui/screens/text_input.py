"""Modal text capture for new topics and items."""
from __future__ import annotations

import logging

from ...models import Item
from ..keys import key_char
from ..router import Router, Screen, register_screen

logger = logging.getLogger(__name__)


@register_screen("text_input")
class TextInputScreen(Screen):
    """Consumes raw keys as text until escape commits the buffer.

    ``state.input_target`` decides what is created: "topic" adds a topic,
    "item" adds a Todo item to the selected topic.
    """

    def render(self, router: Router) -> None:
        router.renderer.text_input(router.state.input_target, router.state.input_text)

    def handle(self, router: Router, key: int) -> str | None:
        keys, state, store = router.keys, router.state, router.store

        if key == keys.escape:
            target, text = state.finish_input()
            if target == "topic":
                store.add_topic(text)
                state.topic_index = 0
            elif target == "item":
                store.add_item(state.topic_index, Item.todo(text))
                state.item_index = 0
            else:
                logger.warning("text input committed without a target; discarded %r", text)
            return "back"

        if keys.is_backspace(key):
            state.backspace()
            return None

        ch = key_char(key)
        if ch is not None:
            state.type_char(ch)
        return None
