"""
Todo — The Data Record
=======================
A single todo item: a title, a completion flag and a process-unique id.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass
class Todo:
    """One entry of the todo list.

    The id and title never change after creation; only the completion
    flag is mutated, and only through toggle().
    """

    title: str
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    _READ_ONLY = ("id", "title")

    def __setattr__(self, name, value):
        if name in self._READ_ONLY and name in self.__dict__:
            raise AttributeError(f"Todo.{name} cannot be changed after creation")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return f"{self.title}. {'✅' if self.is_completed else '❌'}"

    def toggle(self):
        """Flip the completion flag."""
        self.is_completed = not self.is_completed

    def to_dict(self) -> dict:
        """Serialize to the persisted JSON shape."""
        return {
            "id": str(self.id),
            "title": self.title,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Todo:
        """Deserialize from the persisted JSON shape."""
        return cls(
            title=data["title"],
            is_completed=bool(data.get("isCompleted", False)),
            id=uuid.UUID(str(data["id"])),
        )
