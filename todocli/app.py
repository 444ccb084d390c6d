"""
Todo App — The Command Loop
=============================
Reads a command per line, dispatches it to the TodoManager, and keeps
the storage backend in sync with the list.

Commands: add, list, toggle, delete, exit
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Optional

from todocli.manager import TodoManager
from todocli.storage.base import TodoCache

logger = logging.getLogger(__name__)

WELCOME = "💫 Welcome to Todo CLI! 💫"
PROMPT = "What would you like to do? (add, list, toggle, delete, exit): "
GOODBYE = "👋 Thank you for using Todo CLI! See you next time!"
RETRY = "Something went wrong try again"
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


class App:
    """Interactive read-eval-print loop over a TodoManager.

    When a cache is given, the saved snapshot seeds the manager on run()
    and every successful add/toggle/delete writes the full list back.
    """

    class Command(Enum):
        ADD = "add"
        LIST = "list"
        TOGGLE = "toggle"
        DELETE = "delete"
        EXIT = "exit"

    def __init__(
        self,
        manager: Optional[TodoManager] = None,
        cache: Optional[TodoCache] = None,
        input_fn: Optional[Callable[[], str]] = None,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self._input = input_fn or input
        self._echo = echo or print
        self.manager = manager or TodoManager(echo=self._echo)
        self.cache = cache
        self.is_active = False

    @classmethod
    def parse_command(cls, line: str) -> Optional[App.Command]:
        """Match a line to a Command, ignoring case and surrounding spaces."""
        try:
            return cls.Command(line.strip().lower())
        except ValueError:
            return None

    def run(self):
        """Loop until 'exit' or end of input."""
        self._echo(WELCOME)
        self._restore()

        self.is_active = True
        while self.is_active:
            self._echo(PROMPT)
            try:
                line = self._input()
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving command loop")
                self.is_active = False
                break

            command = self.parse_command(line)
            if command is not None:
                self.dispatch(command)

    def dispatch(self, command: App.Command):
        """Run one command against the manager."""
        if command is App.Command.ADD:
            self._echo("Add the todo title:")
            title = self._read_line()
            if title is None:
                self._echo(RETRY)
                return
            self.manager.add_todo(title)
            self._persist()

        elif command is App.Command.LIST:
            self.manager.list_todos()

        elif command is App.Command.TOGGLE:
            self._echo("Enter the todo number:")
            index = self._read_index()
            if index is not None and self.manager.toggle_completion(index):
                self._persist()

        elif command is App.Command.DELETE:
            self._echo("Enter the todo number to delete: ")
            index = self._read_index()
            if index is not None and self.manager.delete_todo(index):
                self._persist()

        elif command is App.Command.EXIT:
            self.is_active = False
            self._echo(GOODBYE)

    # ─── Input helpers ────────────────────────────────────

    def _read_line(self) -> Optional[str]:
        try:
            return self._input()
        except (EOFError, KeyboardInterrupt):
            return None

    def _read_index(self) -> Optional[int]:
        line = self._read_line()
        if line is not None:
            text = line.strip()
            if INDEX_PATTERN.fullmatch(text):
                return int(text)
            logger.debug("Rejected non-numeric index %r", line)
        self._echo(RETRY)
        return None

    # ─── Persistence ──────────────────────────────────────

    def _restore(self):
        if self.cache is None:
            return
        todos = self.cache.load()
        if todos:
            self.manager.replace_all(todos)
            logger.info("Restored %d todo(s) from %s backend", len(todos), self.cache.name)

    def _persist(self):
        if self.cache is not None:
            self.cache.save(self.manager.todos)
