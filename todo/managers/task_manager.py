"""
TaskManager for task operations in the todo CLI.

Handles:
- Parsing and validating task input (date, category ID)
- Creating tasks for the session user
- Listing the session user's tasks
"""

import logging
from datetime import datetime
from typing import Callable, List

from todo.constants import CATEGORY_ID_ERROR, DATE_FORMAT_ERROR
from todo.exceptions import InvalidCategoryIdError, InvalidDateError
from todo.models.base import Task, TaskStatus
from todo.models.files import StorageFile
from todo.session import Session
from todo.utils import format_date, parse_date, parse_int

logger = logging.getLogger(__name__)


class TaskManager:
    """
    Manages task operations for the todo CLI.

    Category IDs are only checked for being integers; a task may point at
    a category that does not exist or belongs to someone else.
    """

    def __init__(self, data: StorageFile, save_callback: Callable[[], None]) -> None:
        """
        Initialize TaskManager.

        Args:
            data: Loaded storage the tasks live in.
            save_callback: Callback function to persist storage.
        """
        self.data = data
        self._save_callback = save_callback

    # =========================================================================
    # Input parsing
    # =========================================================================

    @staticmethod
    def parse_task_date(value: str) -> datetime:
        """Parse a task date.

        Raises:
            InvalidDateError: If the value matches no supported format.
        """
        parsed = parse_date(value)
        if parsed is None:
            raise InvalidDateError(DATE_FORMAT_ERROR)
        return parsed

    @staticmethod
    def parse_category_id(value: str) -> int:
        """Parse a category ID.

        Raises:
            InvalidCategoryIdError: If the value is not an integer.
        """
        category_id = parse_int(value)
        if category_id is None:
            raise InvalidCategoryIdError(CATEGORY_ID_ERROR)
        return category_id

    # =========================================================================
    # Task operations
    # =========================================================================

    def create_task(
        self,
        session: Session,
        name: str,
        date: datetime,
        category_id: int,
    ) -> Task:
        """Create a pending task owned by the session user and persist.

        Raises:
            AuthenticationError: If nobody is logged in.
        """
        user = session.require_user()
        task = Task(
            id=self.data.next_task_id(),
            name=name,
            date=date,
            status=TaskStatus.PENDING,
            user_id=user.id,
            category_id=category_id,
        )
        self.data.tasks.append(task)
        logger.debug("Created task %d for user %d", task.id, user.id)
        self._save_callback()
        return task

    def get_user_tasks(self, session: Session) -> List[Task]:
        """Tasks owned by the session user, in storage order."""
        user = session.require_user()
        return [task for task in self.data.tasks if task.is_owned_by(user)]

    @staticmethod
    def format_task(task: Task) -> str:
        """Render a task as one listing line."""
        return (
            f"ID: {task.id}, Name: {task.name}, "
            f"Date: {format_date(task.date)}, Status: {task.status.value}"
        )
