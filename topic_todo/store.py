"""In-memory topic/item store with position-based addressing.

Topics live in a mapping (topic -> list of items) plus an explicit display
order. Both are private; every mutator updates them together so ``order`` is
always a permutation of the mapping's keys.

All operations take one store-wide lock for their whole duration. An
unexpected exception raised while the lock is held poisons the store and every
later call raises :class:`PoisonedLock`. Expected :class:`StoreError` failures
are detected before anything is mutated and leave the store usable.
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from .errors import DuplicateTopic, ItemNotFound, PoisonedLock, StoreError, TopicNotFound
from .models import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicSummary:
    """Point-in-time view of one topic for the topics screen."""

    topic: str
    done: int
    total: int

    @property
    def ratio(self) -> float | None:
        """Done / total, or None when the topic has no items."""
        if self.total == 0:
            return None
        return self.done / self.total


class Store:
    """Owner of all topics and items."""

    def __init__(self, data: Mapping[str, Iterable[Item]] | None = None):
        self._lock = threading.RLock()
        self._poisoned = False
        self._data: dict[str, list[Item]] = {}
        self._order: list[str] = []
        for topic, items in (data or {}).items():
            self._data[topic] = list(items)
            self._order.append(topic)

    @contextmanager
    def _locked(self, op: str) -> Iterator[None]:
        with self._lock:
            if self._poisoned:
                raise PoisonedLock(f"store is poisoned; refusing {op}")
            try:
                yield
            except StoreError:
                raise
            except Exception:
                self._poisoned = True
                logger.exception("store poisoned during %s", op)
                raise

    # Lookups below assume the lock is held.

    def _topic_at(self, topic_index: int) -> str:
        if not 0 <= topic_index < len(self._order):
            raise TopicNotFound(topic_index, len(self._order))
        return self._order[topic_index]

    def _items_at(self, topic_index: int) -> tuple[str, list[Item]]:
        topic = self._topic_at(topic_index)
        return topic, self._data[topic]

    def _check_item(self, topic: str, items: list[Item], item_index: int) -> None:
        if not 0 <= item_index < len(items):
            raise ItemNotFound(topic, item_index, len(items))

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    # ═══════════════════════════════════════════════════════════════════════
    # MUTATORS
    # ═══════════════════════════════════════════════════════════════════════

    def add_topic(self, topic: str) -> None:
        """Create an empty topic and append it to the display order.

        Raises:
            DuplicateTopic: if ``topic`` already exists.
        """
        with self._locked("add_topic"):
            if topic in self._data:
                raise DuplicateTopic(topic)
            self._data[topic] = []
            self._order.append(topic)
            logger.debug("added topic %r (now %d)", topic, len(self._order))

    def delete_topic(self, topic_index: int) -> str:
        """Remove the topic at ``topic_index`` with all of its items.

        Returns:
            The removed topic identifier.
        """
        with self._locked("delete_topic"):
            topic = self._topic_at(topic_index)
            del self._order[topic_index]
            del self._data[topic]
            logger.debug("deleted topic %r at %d", topic, topic_index)
            return topic

    def add_item(self, topic_index: int, item: Item) -> None:
        with self._locked("add_item"):
            topic, items = self._items_at(topic_index)
            items.append(item)
            logger.debug("added item to %r (now %d)", topic, len(items))

    def delete_item(self, topic_index: int, item_index: int) -> Item:
        """Remove and return an item; later items shift down by one."""
        with self._locked("delete_item"):
            topic, items = self._items_at(topic_index)
            self._check_item(topic, items, item_index)
            item = items.pop(item_index)
            logger.debug("deleted item %d from %r", item_index, topic)
            return item

    def toggle_item(self, topic_index: int, item_index: int) -> Item:
        """Flip an item's status and move it to the end of its topic.

        Returns:
            The re-appended item.
        """
        with self._locked("toggle_item"):
            topic, items = self._items_at(topic_index)
            self._check_item(topic, items, item_index)
            item = items.pop(item_index).toggled()
            items.append(item)
            logger.debug("toggled item %d of %r -> %s", item_index, topic, item.status.name)
            return item

    def save(self, path: str | Path, indent: int | None = None) -> None:
        """Write the mapping (not the order) to ``path`` as JSON."""
        from .persistence import write_mapping

        with self._locked("save"):
            write_mapping(path, self._data, indent=indent)

    # ═══════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════

    def access_item(self, topic_index: int, item_index: int) -> Item:
        with self._locked("access_item"):
            topic, items = self._items_at(topic_index)
            self._check_item(topic, items, item_index)
            return items[item_index]

    @property
    def order(self) -> tuple[str, ...]:
        with self._locked("order"):
            return tuple(self._order)

    def topic_count(self) -> int:
        with self._locked("topic_count"):
            return len(self._order)

    def topic_id(self, topic_index: int) -> str:
        with self._locked("topic_id"):
            return self._topic_at(topic_index)

    def item_count(self, topic_index: int) -> int:
        with self._locked("item_count"):
            return len(self._items_at(topic_index)[1])

    def items(self, topic_index: int) -> tuple[Item, ...]:
        with self._locked("items"):
            return tuple(self._items_at(topic_index)[1])

    def completion_ratio(self, topic_index: int) -> float | None:
        """Fraction of Done items, or None for an empty topic."""
        with self._locked("completion_ratio"):
            topic, items = self._items_at(topic_index)
            return _summarize(topic, items).ratio

    def snapshot(self) -> tuple[TopicSummary, ...]:
        """Summaries of every topic in display order."""
        with self._locked("snapshot"):
            return tuple(_summarize(t, self._data[t]) for t in self._order)

    def to_dict(self) -> dict[str, list[str]]:
        """Plain ``{topic: [encoded item, ...]}`` copy of the mapping."""
        with self._locked("to_dict"):
            return {t: [item.encode() for item in items] for t, items in self._data.items()}


def _summarize(topic: str, items: list[Item]) -> TopicSummary:
    return TopicSummary(topic=topic, done=sum(1 for i in items if i.done), total=len(items))
