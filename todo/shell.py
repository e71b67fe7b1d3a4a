"""
Interactive shell for the todo CLI.

Reads one command per line, applies the login gate, dispatches to the
registered handler and repeats until ``exit``.
"""
import logging
from enum import Enum
from typing import Optional

import click

from todo.commands import CommandName, CommandRegistry, registry as default_registry
from todo.constants import (
    EMPTY_COMMAND_MESSAGE,
    EXIT_COMMAND,
    GOODBYE,
    PROMPT_NEXT_COMMAND,
    READ_FAILED_MESSAGE,
    UNGATED_COMMANDS,
    WRONG_CREDENTIALS_MESSAGE,
)
from todo.core import TodoCore
from todo.exceptions import AuthenticationError, UnknownCommandError, ValidationError
from todo.session import Session

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOGIN_FAILED = 1


class ShellState(str, Enum):
    AWAITING_COMMAND = "awaiting-command"
    DISPATCHING = "dispatching"
    EXITED = "exited"


class Shell:
    """
    Command loop bound to one TodoCore and one Session.

    Failed logins end the loop with EXIT_LOGIN_FAILED; every other error
    is printed and the loop continues.
    """

    def __init__(
        self,
        core: TodoCore,
        session: Optional[Session] = None,
        registry: Optional[CommandRegistry] = None,
    ) -> None:
        self.core = core
        self.session = session if session is not None else Session()
        self.registry = registry if registry is not None else default_registry
        self.state = ShellState.AWAITING_COMMAND
        self.exit_code: Optional[int] = None

    def dispatch(self, command: str) -> None:
        """Run one command.

        Without a logged-in user, anything but register/exit runs login
        instead and the requested command is dropped.

        Raises:
            AuthenticationError: From a failed login.
            ValidationError: From bad task input.
            UnknownCommandError: If the command is not registered.
        """
        if command not in UNGATED_COMMANDS and not self.session.is_authenticated:
            logger.debug("No session, running login instead of %r", command)
            self.registry.get(CommandName.LOGIN)(self.core, self.session)
            return

        name = CommandName.parse(command)
        logger.debug("Dispatching %s", name.value)
        self.registry.get(name)(self.core, self.session)

    def run_command(self, command: str) -> bool:
        """Dispatch ``command`` and report recoverable errors.

        Returns:
            False if the shell has to stop.
        """
        self.state = ShellState.DISPATCHING
        try:
            self.dispatch(command)
        except AuthenticationError:
            click.echo(WRONG_CREDENTIALS_MESSAGE)
            self._exit(EXIT_LOGIN_FAILED)
            return False
        except (ValidationError, UnknownCommandError) as e:
            click.echo(str(e))
        self.state = ShellState.AWAITING_COMMAND
        return True

    def read_command(self) -> Optional[str]:
        """Prompt for the next command.

        Returns:
            The line read, or None if no more input can be read.
        """
        try:
            return click.prompt(
                PROMPT_NEXT_COMMAND,
                default="",
                show_default=False,
                prompt_suffix=":\n",
            )
        except click.Abort:
            return None

    def run(self, command: str) -> int:
        """Loop from an initial command until exit.

        Returns:
            Process exit status.
        """
        while True:
            if command:
                try:
                    if not self.run_command(command):
                        return self.exit_code
                except click.Abort:
                    # Input ended inside a command prompt.
                    click.echo()
                    click.echo(READ_FAILED_MESSAGE)
                    return self._exit(EXIT_OK)
            else:
                click.echo(EMPTY_COMMAND_MESSAGE)

            try:
                line = self.read_command()
            except UnicodeDecodeError as e:
                logger.debug("Unreadable input: %s", e)
                click.echo(READ_FAILED_MESSAGE)
                continue
            if line is None:
                click.echo(READ_FAILED_MESSAGE)
                return self._exit(EXIT_OK)

            if line == EXIT_COMMAND:
                click.echo(GOODBYE)
                return self._exit(EXIT_OK)

            command = line

    def _exit(self, code: int) -> int:
        self.state = ShellState.EXITED
        self.exit_code = code
        return code
