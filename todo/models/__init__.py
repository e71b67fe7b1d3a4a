"""
Data models for the todo CLI.

Import models explicitly from their modules:
    from todo.models.base import User, Category, Task, TaskStatus
    from todo.models.files import StorageFile
"""

from .base import Category, Task, TaskStatus, User
from .files import StorageFile

__all__ = ["Category", "StorageFile", "Task", "TaskStatus", "User"]
