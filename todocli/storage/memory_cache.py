"""
In-Memory Cache
================
Keeps the snapshot in process memory for the current session only.
Nothing survives a restart; useful as a test double.
"""

from __future__ import annotations

from dataclasses import replace

from todocli.storage.base import TodoCache
from todocli.todo import Todo


class InMemoryCache(TodoCache):
    """Snapshot backend backed by a plain list."""

    name = "memory"

    def __init__(self):
        self._todos: list[Todo] = []

    def write(self, todos: list[Todo]) -> None:
        # Copy the records so later toggles don't leak into the snapshot
        self._todos = [replace(todo) for todo in todos]

    def read(self) -> list[Todo]:
        return [replace(todo) for todo in self._todos]
