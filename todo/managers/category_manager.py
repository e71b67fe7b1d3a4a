"""
CategoryManager for category operations in the todo CLI.
"""

import logging
from typing import Callable, List

from todo.models.base import Category
from todo.models.files import StorageFile
from todo.session import Session

logger = logging.getLogger(__name__)


class CategoryManager:
    """Creates categories and lists the ones owned by the session user."""

    def __init__(self, data: StorageFile, save_callback: Callable[[], None]) -> None:
        self.data = data
        self._save_callback = save_callback

    def create_category(self, session: Session, name: str) -> Category:
        """Create a category owned by the session user and persist.

        Raises:
            AuthenticationError: If nobody is logged in.
        """
        user = session.require_user()
        category = Category(
            id=self.data.next_category_id(),
            name=name,
            user_id=user.id,
        )
        self.data.categories.append(category)
        logger.debug("Created category %d for user %d", category.id, user.id)
        self._save_callback()
        return category

    def get_user_categories(self, session: Session) -> List[Category]:
        """Categories owned by the session user, in creation order."""
        user = session.require_user()
        return [c for c in self.data.categories if c.user_id == user.id]
