"""
TodoCore - Core business logic for the todo CLI.

Orchestrates manager classes for all business operations.
Uses StorageManager for the JSON data file.
"""

from pathlib import Path
from typing import Optional

import click

from todo.constants import DEFAULT_BCRYPT_ROUNDS
from todo.exceptions import StorageError
from todo.managers import AuthManager, CategoryManager, StorageManager, TaskManager


class TodoCore:
    """
    Core class for business logic operations.

    Orchestrates manager classes:
    - StorageManager: Persistence to the data file
    - AuthManager: Registration and login
    - CategoryManager: Categories
    - TaskManager: Tasks

    The session is not held here; callers pass it to each operation.
    """

    def __init__(
        self,
        data_file: Optional[Path] = None,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
    ):
        """
        Initialize the TodoCore and load the data file.

        Args:
            data_file: Path to the JSON data file. Defaults to data.json in current directory.
            bcrypt_rounds: bcrypt cost factor for new password hashes.
        """
        self.storage = StorageManager(data_file)
        self.data = self.storage.load()

        self.auth_manager = AuthManager(self.data, self.save, rounds=bcrypt_rounds)
        self.category_manager = CategoryManager(self.data, self.save)
        self.task_manager = TaskManager(self.data, self.save)

    def save(self) -> bool:
        """Persist all data.

        A failed write is reported and the in-memory data is kept as is.

        Returns:
            True if the data file was written.
        """
        try:
            self.storage.save(self.data)
        except StorageError as e:
            click.echo(f"Error saving data: {e}", err=True)
            return False
        return True
