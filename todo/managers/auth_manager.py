"""
AuthManager for user registration and login in the todo CLI.

Passwords are stored as bcrypt hashes; hashes written by other bcrypt
implementations ($2a$, $2b$, $2y$) verify the same way.
"""

import logging
from typing import Callable, Optional

import bcrypt

from todo.constants import DEFAULT_BCRYPT_ROUNDS
from todo.exceptions import AuthenticationError, PasswordHashError
from todo.models.base import User
from todo.models.files import StorageFile
from todo.session import Session

logger = logging.getLogger(__name__)


class AuthManager:
    """
    Registers users and authenticates login attempts.

    Duplicate emails are accepted on registration; login tries every user
    with a matching email.
    """

    def __init__(
        self,
        data: StorageFile,
        save_callback: Callable[[], None],
        rounds: int = DEFAULT_BCRYPT_ROUNDS,
    ) -> None:
        """
        Initialize AuthManager.

        Args:
            data: Loaded storage the users live in.
            save_callback: Callback function to persist storage.
            rounds: bcrypt cost factor for new hashes.
        """
        self.data = data
        self._save_callback = save_callback
        self.rounds = rounds

    def hash_password(self, raw_password: str) -> str:
        """Hash a password with a fresh salt.

        Raises:
            PasswordHashError: If bcrypt rejects the password or cost factor.
        """
        try:
            hashed = bcrypt.hashpw(raw_password.encode("utf-8"), bcrypt.gensalt(self.rounds))
        except ValueError as e:
            raise PasswordHashError(str(e)) from e
        return hashed.decode("utf-8")

    @staticmethod
    def verify_password(raw_password: str, hashed: str) -> bool:
        """Check a password against a stored hash.

        A stored value bcrypt cannot parse never verifies.
        """
        try:
            return bcrypt.checkpw(raw_password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False

    def register(self, session: Session, name: str, email: str, raw_password: str) -> User:
        """Create a user, log them in and persist.

        Args:
            session: Session to log the new user into.
            name: Display name.
            email: Login key.
            raw_password: Plain text password, hashed before storage.

        Returns:
            The created user.

        Raises:
            PasswordHashError: If hashing fails. Nothing is created.
        """
        hashed = self.hash_password(raw_password)
        user = User(
            id=self.data.next_user_id(),
            name=name,
            email=email,
            password=hashed,
        )
        self.data.users.append(user)
        session.login(user)
        logger.info("Registered user %d (%s)", user.id, user.email)
        self._save_callback()
        return user

    def login(self, session: Session, email: str, raw_password: str) -> User:
        """Authenticate by email and password.

        Users are scanned in order and every verified match is logged in,
        so with duplicate emails the last matching user wins.

        Returns:
            The user now in the session.

        Raises:
            AuthenticationError: If no user verified. The session is unchanged.
        """
        matched: Optional[User] = None
        for user in self.data.users:
            if user.email == email and self.verify_password(raw_password, user.password):
                matched = user
                session.login(user)

        if matched is None:
            logger.info("Failed login for %s", email)
            raise AuthenticationError(f"Wrong credentials for {email}")

        logger.info("User %d logged in", matched.id)
        return matched
