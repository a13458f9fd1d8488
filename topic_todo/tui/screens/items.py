"""Item list screen for the selected topic."""
from __future__ import annotations

from ..router import Router, Screen, register_screen
from .common import navigate


@register_screen("items")
class ItemsScreen(Screen):
    def render(self, router: Router) -> None:
        state = router.state
        items = router.store.items(state.topic_index)
        state.clamp_items(len(items))
        router.renderer.items(
            router.store.topic_id(state.topic_index),
            items,
            state.item_index,
            router.status_line(),
        )

    def handle(self, router: Router, key: int) -> str | None:
        keys, state, store = router.keys, router.state, router.store

        count = store.item_count(state.topic_index)
        state.clamp_items(count)

        moved = navigate(router, key, state.item_index, count)
        if moved is not None:
            state.item_index = moved
            return None

        if key == keys.toggle:
            if count:
                store.toggle_item(state.topic_index, state.item_index)
            return None
        if key == keys.delete:
            if count:
                store.delete_item(state.topic_index, state.item_index)
                state.item_index = 0
            return None
        if key == keys.append:
            state.begin_input("item")
            return "text_input"
        if key in (keys.escape, keys.exit):
            return "back"
        return None
