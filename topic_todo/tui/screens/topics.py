"""Topic list screen."""
from __future__ import annotations

from ..router import Router, Screen, register_screen
from .common import navigate


@register_screen("topics")
class TopicsScreen(Screen):
    def render(self, router: Router) -> None:
        summaries = router.store.snapshot()
        router.state.clamp_topics(len(summaries))
        router.renderer.topics(summaries, router.state.topic_index, router.status_line())

    def handle(self, router: Router, key: int) -> str | None:
        keys, state, store = router.keys, router.state, router.store

        count = store.topic_count()
        state.clamp_topics(count)

        moved = navigate(router, key, state.topic_index, count)
        if moved is not None:
            state.topic_index = moved
            return None

        if key == keys.append:
            state.begin_input("topic")
            return "text_input"
        if key == keys.delete:
            if count:
                store.delete_topic(state.topic_index)
                state.topic_index = 0
            return None
        if key == keys.select:
            if count:
                state.item_index = 0
                return "items"
            return None
        if key in (keys.escape, keys.exit):
            return "back"
        if key == keys.quit:
            return "quit"
        return None
