"""
Command registry for the interactive todo shell.

Each command kind is a CommandName member; handlers register against it
with the ``command`` decorator and all share the (core, session) signature.
"""
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List

from todo.exceptions import ConfigurationError, UnknownCommandError
from todo.session import Session

if TYPE_CHECKING:
    from todo.core import TodoCore

CommandHandler = Callable[["TodoCore", Session], None]


class CommandName(str, Enum):
    """Commands understood by the shell, keyed by their literal token."""

    CREATE_TASK = "create-task"
    CREATE_CATEGORY = "create-category"
    REGISTER = "register"
    LOGIN = "login"
    LIST_TASKS = "list-tasks"

    @classmethod
    def parse(cls, text: str) -> "CommandName":
        """Resolve a literal command token.

        Raises:
            UnknownCommandError: If ``text`` is not a command name.
        """
        try:
            return cls(text)
        except ValueError:
            raise UnknownCommandError(text)


class CommandRegistry:
    """Maps every CommandName to its handler."""

    def __init__(self) -> None:
        self._handlers: Dict[CommandName, CommandHandler] = {}

    def command(self, name: CommandName) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator registering a handler for ``name``."""
        def decorator(handler: CommandHandler) -> CommandHandler:
            if name in self._handlers:
                raise ConfigurationError(f"Handler for '{name.value}' registered twice.")
            self._handlers[name] = handler
            return handler
        return decorator

    def get(self, name: CommandName) -> CommandHandler:
        return self._handlers[name]

    def missing(self) -> List[CommandName]:
        """Command names with no registered handler."""
        return [name for name in CommandName if name not in self._handlers]

    def validate(self) -> None:
        """Check that every command kind has a handler.

        Raises:
            ConfigurationError: Listing the commands without handlers.
        """
        missing = self.missing()
        if missing:
            names = ", ".join(name.value for name in missing)
            raise ConfigurationError(f"No handler registered for: {names}")

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


registry = CommandRegistry()
command = registry.command
