"""
Todo Manager — The Session List
=================================
Holds the authoritative, append-ordered list of todos for one run and
exposes the four user operations on it.

Indices passed in by callers are 1-based display indices, exactly as
printed by list_todos().
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from todocli.todo import Todo

logger = logging.getLogger(__name__)


class TodoManager:
    """In-memory todo list with add / list / toggle / delete.

    The manager only prints notices; it never touches a storage backend.
    Persisting the list is the caller's job (see App).
    """

    def __init__(self, echo: Optional[Callable[[str], None]] = None):
        self._todos: list[Todo] = []
        self._echo = echo or print

    @property
    def todos(self) -> list[Todo]:
        """All todos in display order (read-only view)."""
        return list(self._todos)

    @property
    def count(self) -> int:
        return len(self._todos)

    def replace_all(self, todos: list[Todo]):
        """Seed the list, e.g. from a loaded snapshot."""
        self._todos = list(todos)

    def list_todos(self):
        if not self._todos:
            self._echo("🤖 There is no todo!")
            return

        self._echo("📝 Your Todos:")
        for number, todo in enumerate(self._todos, start=1):
            self._echo(f"{number}) {todo}")

    def add_todo(self, title: str) -> Todo:
        todo = Todo(title=title)
        self._todos.append(todo)
        logger.debug("Added todo %s", todo.id)
        self._echo("📌 Todo added!")
        return todo

    def toggle_completion(self, index: int) -> bool:
        """Flip the completion flag of the todo at `index`.

        Returns:
            True if a todo was toggled, False if `index` is out of range.
        """
        position = self._position(index)
        if position is None:
            return False

        self._todos[position].toggle()
        self._echo("🔄 Todo completion status toggled!")
        return True

    def delete_todo(self, index: int) -> bool:
        """Remove the todo at `index`; later todos move up by one.

        Returns:
            True if a todo was removed, False if `index` is out of range.
        """
        position = self._position(index)
        if position is None:
            return False

        removed = self._todos.pop(position)
        logger.debug("Deleted todo %s", removed.id)
        self._echo("🗑️ Todo deleted!")
        return True

    def _position(self, index: int) -> Optional[int]:
        """Convert a display index to a list position, or None if out of range."""
        position = index - 1
        if 0 <= position < len(self._todos):
            return position
        self._echo(f"⚠️ There is no todo #{index}.")
        return None
