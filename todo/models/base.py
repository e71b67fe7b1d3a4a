"""
Entity models for the todo CLI.

Field names match the keys of the JSON data file.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Valid status values for tasks."""

    PENDING = "pending"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"


class User(BaseModel):
    """A registered user. ``email`` is the login key, ``password`` a bcrypt hash."""

    id: int = Field(gt=0)
    name: str
    email: str
    password: str


class Category(BaseModel):
    """A task category owned by one user."""

    id: int = Field(gt=0)
    name: str
    user_id: int


class Task(BaseModel):
    """A task owned by one user.

    ``category_id`` and ``user_id`` are plain references; nothing checks
    that the category or user exists.
    """

    id: int = Field(gt=0)
    name: str
    date: datetime
    status: TaskStatus = TaskStatus.PENDING
    user_id: int
    category_id: int

    def is_owned_by(self, user: User) -> bool:
        """Check whether the task belongs to ``user``."""
        return self.user_id == user.id
