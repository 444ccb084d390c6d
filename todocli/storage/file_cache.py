"""
JSON File Cache — Snapshot on Disk
====================================
Persists the todo list as a JSON array in the user's documents directory.

File format:
    [
      {"id": "<uuid>", "title": "Buy milk", "isCompleted": false},
      ...
    ]

Writes are atomic: the snapshot goes to a temporary file in the same
directory which then replaces todos.json, so a reader never sees a
half-written file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from todocli.paths import documents_dir
from todocli.storage.base import (
    TodoCache, StorageWriteError, StorageReadError, SnapshotMissingError,
)
from todocli.todo import Todo

logger = logging.getLogger(__name__)

FILE_NAME = "todos.json"


# ─────────────────────────────────────────────────────────────
#  Wire Model
# ─────────────────────────────────────────────────────────────

class TodoPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    title: str
    is_completed: bool = Field(alias="isCompleted")


_SNAPSHOT = TypeAdapter(list[TodoPayload])


# ─────────────────────────────────────────────────────────────
#  Cache
# ─────────────────────────────────────────────────────────────

class JSONFileCache(TodoCache):
    """Snapshot backend that stores todos.json on the file system."""

    name = "file"

    def __init__(self, directory: Optional[str] = None):
        """
        Args:
            directory: Folder holding todos.json. When omitted the user's
                documents directory is looked up on every call.
        """
        self._directory = Path(directory) if directory else None

    @property
    def file_path(self) -> Path:
        """Full path of todos.json (resolved fresh each time)."""
        directory = self._directory or documents_dir()
        return directory / FILE_NAME

    def write(self, todos: list[Todo]) -> None:
        path = self.file_path
        try:
            data = json.dumps(
                [t.to_dict() for t in todos], indent=2, ensure_ascii=False,
            ).encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageWriteError(f"cannot encode snapshot as UTF-8: {e}") from e

        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{FILE_NAME}.", suffix=".tmp", dir=path.parent,
            )
        except OSError as e:
            raise StorageWriteError(f"cannot create temp file in {path.parent}: {e}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageWriteError(f"cannot write {path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.debug("Wrote %d todo(s) to %s", len(todos), path)

    def read(self) -> list[Todo]:
        path = self.file_path

        if not path.exists():
            raise SnapshotMissingError(f"{path} does not exist")

        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"cannot read {path}: {e}") from e

        try:
            payloads = _SNAPSHOT.validate_json(raw)
        except ValidationError as e:
            raise StorageReadError(
                f"malformed snapshot in {path}: {e.error_count()} error(s)"
            ) from e

        return [Todo.from_dict(p.model_dump(by_alias=True)) for p in payloads]
