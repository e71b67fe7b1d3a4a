"""
File models for the todo CLI.

Models representing the structure of the JSON data file.
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from .base import Category, Task, User


class StorageFile(BaseModel):
    """Model for data.json.

    Holds every user, task and category in creation order. Files written
    by older versions may contain ``null`` for an empty list.
    """

    users: List[User] = Field(default_factory=list)
    tasks: List[Task] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)

    @field_validator("users", "tasks", "categories", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat a null list as empty."""
        return [] if v is None else v

    def next_user_id(self) -> int:
        return len(self.users) + 1

    def next_task_id(self) -> int:
        return len(self.tasks) + 1

    def next_category_id(self) -> int:
        return len(self.categories) + 1
