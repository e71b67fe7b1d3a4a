"""
Storage manager for the todo CLI.

Handles loading and saving of the JSON data file.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from todo.constants import DEFAULT_DATA_FILE
from todo.exceptions import StorageError
from todo.models.files import StorageFile

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Manages persistence of all todo data to a single JSON file.

    Every save rewrites the whole document. Writes go through a temp file
    in the same directory so an interrupted write leaves the old file intact.
    """

    def __init__(self, data_file: Optional[Path] = None) -> None:
        """
        Initialize the StorageManager with a data file path.

        Args:
            data_file: Path to the JSON data file. Defaults to data.json in current directory.
        """
        self.data_file = Path(data_file) if data_file else Path(DEFAULT_DATA_FILE)

    def _atomic_write(self, file_path: Path, data: Dict[str, Any]) -> None:
        """Write data to a JSON file atomically to prevent corruption.

        Args:
            file_path: Path to the file to write.
            data: Dictionary data to write as JSON.

        Raises:
            StorageError: If writing to file fails.
        """
        directory = file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=directory, prefix=".tmp_todo_", suffix=".json"
            )
        except OSError as e:
            raise StorageError(f"Failed to write to {file_path}: {e}")

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as temp_file:
                json.dump(data, temp_file, indent=2)
            os.replace(temp_path, file_path)
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write to {file_path}: {e}")

    def load(self) -> StorageFile:
        """Load the data file and return it as a StorageFile model.

        A missing file is a first run; an unreadable or invalid one is
        logged and replaced by empty storage. Never raises.
        """
        if not self.data_file.exists():
            logger.debug("No data file at %s, starting empty", self.data_file)
            return StorageFile()

        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            storage = StorageFile.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Error loading data from %s: %s", self.data_file, e)
            return StorageFile()

        logger.debug(
            "Loaded %d users, %d tasks, %d categories from %s",
            len(storage.users),
            len(storage.tasks),
            len(storage.categories),
            self.data_file,
        )
        return storage

    def save(self, data: StorageFile) -> None:
        """Save a StorageFile model to the data file.

        Raises:
            StorageError: If the file cannot be written.
        """
        self._atomic_write(self.data_file, data.model_dump(mode="json"))
        logger.debug("Saved data to %s", self.data_file)
