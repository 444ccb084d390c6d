"""
Storage Layer
==============
Pluggable snapshot backends for the todo list.
"""

from todocli.storage.base import (
    TodoCache, StorageError, StorageUnavailableError,
    StorageWriteError, StorageReadError, SnapshotMissingError,
)
from todocli.storage.file_cache import JSONFileCache
from todocli.storage.memory_cache import InMemoryCache
from todocli.storage.registry import get_cache, list_caches, register_cache

__all__ = [
    "TodoCache", "StorageError", "StorageUnavailableError",
    "StorageWriteError", "StorageReadError", "SnapshotMissingError",
    "JSONFileCache", "InMemoryCache",
    "get_cache", "list_caches", "register_cache",
]
