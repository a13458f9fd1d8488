"""JSON file (de)serialization for the store.

File shape::

    {"Work": ["0Buy milk", "1Call Bob"], "Home": []}

Each item string is one status character (``'0'`` todo, ``'1'`` done)
followed by the text. The topic display order is not persisted.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Sequence

from .errors import StoreEncodingError, StoreIOError
from .models import Item

if TYPE_CHECKING:
    from .store import Store

logger = logging.getLogger(__name__)


def read_mapping(path: str | Path) -> dict[str, list[Item]]:
    """Read and validate the JSON file at ``path``.

    Raises:
        StoreIOError: file missing or unreadable.
        StoreEncodingError: not JSON, wrong shape, or a malformed item string.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise StoreEncodingError(f"{p} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise StoreIOError(f"cannot read {p}: {e}") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise StoreEncodingError(f"{p} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise StoreEncodingError(f"{p}: expected a JSON object, got {type(raw).__name__}")

    data: dict[str, list[Item]] = {}
    for topic, items in raw.items():
        if not isinstance(items, list):
            raise StoreEncodingError(f"{p}: topic {topic!r} must map to a list")
        data[topic] = [Item.decode(s) for s in items]
    return data


def write_mapping(
    path: str | Path,
    data: Mapping[str, Sequence[Item]],
    indent: int | None = None,
) -> None:
    """Encode ``data`` and write it to ``path``, creating or truncating it."""
    p = Path(path)
    try:
        payload = json.dumps(
            {topic: [item.encode() for item in items] for topic, items in data.items()},
            ensure_ascii=False,
            indent=indent,
        )
    except (TypeError, ValueError) as e:
        raise StoreEncodingError(f"cannot encode store: {e}") from e

    try:
        p.write_text(payload, encoding="utf-8")
    except UnicodeEncodeError as e:
        raise StoreEncodingError(f"cannot encode store for {p}: {e}") from e
    except OSError as e:
        raise StoreIOError(f"cannot write {p}: {e}") from e

    logger.info("saved %d topics to %s", len(data), os.fspath(p))


def load(path: str | Path) -> "Store":
    """Build a :class:`Store` from the JSON file at ``path``.

    The display order follows the file's key order, which is not guaranteed to
    match the previous session.
    """
    from .store import Store

    data = read_mapping(path)
    logger.info("loaded %d topics from %s", len(data), os.fspath(path))
    return Store(data)
