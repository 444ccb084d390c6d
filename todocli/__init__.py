"""
Todo CLI — Interactive Todo-List Manager
==========================================
A small read-eval-print loop for keeping a personal todo list.

Architecture:
    Todo         — The data record (id, title, completion flag)
    Storage      — Pluggable snapshot backends (JSON file, in-memory)
    TodoManager  — The authoritative in-session list
    App          — The command loop that drives the manager
"""

__version__ = "0.1.0"

from todocli.todo import Todo
from todocli.manager import TodoManager
from todocli.app import App
from todocli.storage import TodoCache, JSONFileCache, InMemoryCache, get_cache

__all__ = [
    "Todo", "TodoManager", "App",
    "TodoCache", "JSONFileCache", "InMemoryCache", "get_cache",
]
