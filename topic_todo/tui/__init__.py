"""TUI (Terminal User Interface) module for topic_todo.

Provides a screen-based, key-driven navigation system over the store.
"""
from .keys import KeyMap
from .navigator import Navigator
from .router import Router
from .state import UIState

__all__ = ["KeyMap", "Navigator", "Router", "UIState"]
