"""
Cache Registry — Name-to-Backend Lookup
=========================================
Maps backend names to their implementation classes so the entry point
can pick one at construction time.
"""

from __future__ import annotations

from typing import Type

from todocli.storage.base import TodoCache
from todocli.storage.file_cache import JSONFileCache
from todocli.storage.memory_cache import InMemoryCache

_REGISTRY: dict[str, Type[TodoCache]] = {}


def register_cache(name: str, cache_class: Type[TodoCache]):
    """Register a backend class under a name."""
    _REGISTRY[name.lower()] = cache_class


def get_cache(name: str, **options) -> TodoCache:
    """Instantiate a backend by name.

    Args:
        name: Registered backend name ("file", "memory").
        **options: Constructor arguments for the backend.

    Raises:
        ValueError: If no backend is registered under that name.
    """
    key = name.lower()
    if key not in _REGISTRY:
        available = sorted(_REGISTRY) or ["(none registered)"]
        raise ValueError(f"Unknown storage backend '{name}'. Available: {available}.")
    return _REGISTRY[key](**options)


def list_caches() -> list[str]:
    """List all registered backend names."""
    return sorted(_REGISTRY.keys())


register_cache(JSONFileCache.name, JSONFileCache)
register_cache(InMemoryCache.name, InMemoryCache)
