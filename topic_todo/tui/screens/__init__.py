"""Screen modules for the TUI."""
from __future__ import annotations

# Import all screen modules to register them with the router
from . import (
    items,
    start,
    text_input,
    topics,
)

__all__ = [
    "items",
    "start",
    "text_input",
    "topics",
]
