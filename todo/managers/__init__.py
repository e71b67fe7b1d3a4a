"""
Managers for the todo CLI.

This package contains focused manager classes that handle specific aspects of todo functionality:
- StorageManager: Persistence to the JSON data file
- AuthManager: Registration and login
- CategoryManager: Category creation and lookup
- TaskManager: Task creation, parsing and listing
"""

from todo.managers.auth_manager import AuthManager
from todo.managers.category_manager import CategoryManager
from todo.managers.storage_manager import StorageManager
from todo.managers.task_manager import TaskManager

__all__ = [
    "AuthManager",
    "CategoryManager",
    "StorageManager",
    "TaskManager",
]
