"""topic_todo: terminal to-do lists grouped into topics, stored as JSON."""

from .errors import (
    DuplicateTopic,
    ItemNotFound,
    NavigationError,
    PoisonedLock,
    StoreEncodingError,
    StoreError,
    StoreIOError,
    TodoError,
    TopicNotFound,
    Unrecoverable,
)
from .models import Item, Status
from .persistence import load
from .store import Store, TopicSummary

__all__ = [
    "DuplicateTopic",
    "Item",
    "ItemNotFound",
    "NavigationError",
    "PoisonedLock",
    "Status",
    "Store",
    "StoreEncodingError",
    "StoreError",
    "StoreIOError",
    "TodoError",
    "TopicNotFound",
    "TopicSummary",
    "Unrecoverable",
    "load",
]
