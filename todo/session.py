"""
Session state for one run of the todo CLI.

A Session is created by the shell and passed to every command handler.
There is no logout: once a user is set it stays set for the run.
"""

from typing import Optional

from todo.exceptions import AuthenticationError
from todo.models.base import User


class Session:
    """Holds the currently authenticated user, if any."""

    def __init__(self, user: Optional[User] = None) -> None:
        self._user = user

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def login(self, user: User) -> None:
        """Make ``user`` the current user."""
        self._user = user

    def require_user(self) -> User:
        """Return the current user.

        Raises:
            AuthenticationError: If nobody is logged in.
        """
        if self._user is None:
            raise AuthenticationError("No user is logged in.")
        return self._user

    def __repr__(self) -> str:
        email = self._user.email if self._user else None
        return f"Session(user={email!r})"
