"""Exception taxonomy for topic_todo.

Every failure raised by the store, the persistence layer or the navigation
router derives from :class:`TodoError`, so the CLI can catch one type at the
top of the process.
"""
from __future__ import annotations


class TodoError(Exception):
    """Base class for all topic_todo errors."""


# ═══════════════════════════════════════════════════════════════════════════════
# STORE
# ═══════════════════════════════════════════════════════════════════════════════

class StoreError(TodoError):
    """A store operation failed. Never poisons the store."""


class TopicNotFound(StoreError):
    def __init__(self, topic_index: int, topic_count: int):
        super().__init__(f"no topic at index {topic_index} (have {topic_count})")
        self.topic_index = topic_index
        self.topic_count = topic_count


class ItemNotFound(StoreError):
    def __init__(self, topic: str, item_index: int, item_count: int):
        super().__init__(
            f"no item at index {item_index} in topic {topic!r} (have {item_count})"
        )
        self.topic = topic
        self.item_index = item_index
        self.item_count = item_count


class DuplicateTopic(StoreError):
    def __init__(self, topic: str):
        super().__init__(f"topic {topic!r} already exists")
        self.topic = topic


class StoreEncodingError(StoreError):
    """The JSON file or an encoded item could not be (de)serialized."""


class StoreIOError(StoreError):
    """Reading or writing the JSON file failed."""


# ═══════════════════════════════════════════════════════════════════════════════
# NAVIGATION / PROCESS
# ═══════════════════════════════════════════════════════════════════════════════

class NavigationError(TodoError):
    """A store failure surfaced while handling a key.

    The original :class:`StoreError` is kept as ``__cause__`` and on
    :attr:`store_error`.
    """

    def __init__(self, screen: str, key: int, store_error: StoreError):
        super().__init__(f"{screen}: key {key} failed: {store_error}")
        self.screen = screen
        self.key = key
        self.store_error = store_error


class PoisonedLock(TodoError):
    """A previous operation failed while holding the store lock."""


class Unrecoverable(TodoError):
    """The session cannot continue (e.g. the router reached an unknown screen)."""
