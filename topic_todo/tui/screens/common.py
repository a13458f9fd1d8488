"""Selection movement shared by the topics and items screens."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..router import Router


def navigate(router: Router, key: int, index: int, count: int) -> int | None:
    """Apply a movement key to a selection.

    Args:
        router: Router holding the key map and the pending chord
        key: Key that was pressed
        index: Current selection
        count: Number of entries, read from the store just now

    Returns:
        The new selection if ``key`` was consumed as movement, else None.
        A key that follows a lone first-chord key cancels the chord and is
        consumed without moving.
    """
    keys = router.keys
    state = router.state

    if state.pending_key is not None:
        state.pending_key = None
        return 0 if key == keys.first else index

    if key == keys.down:
        return index + 1 if index < count - 1 else index
    if key == keys.up:
        return index - 1 if index > 0 else index
    if key == keys.first:
        state.pending_key = key
        return index
    if key == keys.last:
        return max(count - 1, 0)
    return None
