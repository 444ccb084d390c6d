"""
Storage Base — Abstract Snapshot Interface
============================================
Backend-agnostic interface for persisting the todo list.
All backends (JSON file, in-memory) implement this.

A backend stores one snapshot: the complete ordered list of todos.
Saving replaces it wholesale; loading returns it whole or not at all.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from todocli.todo import Todo

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
#  Errors
# ─────────────────────────────────────────────────────────────

class StorageError(Exception):
    """Base class for all backend failures."""


class StorageUnavailableError(StorageError):
    """The storage location could not be resolved."""


class StorageWriteError(StorageError):
    """The snapshot could not be written."""


class StorageReadError(StorageError):
    """The snapshot could not be read or decoded."""


class SnapshotMissingError(StorageReadError):
    """Nothing has been saved yet."""


# ─────────────────────────────────────────────────────────────
#  Cache
# ─────────────────────────────────────────────────────────────

class TodoCache(ABC):
    """Abstract base class for todo snapshot backends.

    Subclasses implement the strict operations:
        - write(): Persist a snapshot, raising StorageError on failure
        - read():  Return the snapshot, raising StorageError on failure

    Callers normally use save() and load(), which never raise: failures
    are logged and turned into a no-op save or a None load.
    """

    name: str = "base"

    @abstractmethod
    def write(self, todos: list[Todo]) -> None:
        """Replace the stored snapshot with `todos`.

        Raises:
            StorageError: If the snapshot could not be stored.
        """
        ...

    @abstractmethod
    def read(self) -> list[Todo]:
        """Return the stored snapshot.

        Raises:
            SnapshotMissingError: If nothing was ever saved.
            StorageError: If the snapshot could not be retrieved.
        """
        ...

    def save(self, todos: list[Todo]) -> None:
        """Persist the given todos, logging instead of raising on failure."""
        try:
            self.write(todos)
        except StorageError as e:
            logger.warning("Error saving todos to %s backend: %s", self.name, e)
            return
        logger.debug("Saved %d todo(s) to %s backend", len(todos), self.name)

    def load(self) -> Optional[list[Todo]]:
        """Return the saved todos, or None if none exist or reading failed."""
        try:
            todos = self.read()
        except SnapshotMissingError as e:
            logger.debug("No saved todos in %s backend: %s", self.name, e)
            return None
        except StorageError as e:
            logger.warning("Error loading todos from %s backend: %s", self.name, e)
            return None
        logger.debug("Loaded %d todo(s) from %s backend", len(todos), self.name)
        return todos
