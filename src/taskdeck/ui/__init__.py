"""Textual user interface."""

from .app import TaskDeckApp, key_name

__all__ = ["TaskDeckApp", "key_name"]
