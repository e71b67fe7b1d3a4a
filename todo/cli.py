"""
Command-line entry point for the todo CLI.

Starts the interactive shell with an optional first command.
"""
import logging
from pathlib import Path

import click

from todo.constants import (
    DEFAULT_BCRYPT_ROUNDS,
    DEFAULT_COMMAND,
    DEFAULT_DATA_FILE,
    GREETING,
    ConfigManager,
)
from todo.core import TodoCore
from todo.exceptions import ConfigurationError
from todo.logging_setup import setup_logging
from todo.shell import Shell


@click.command()
@click.option(
    "-c", "--command", "command",
    default=DEFAULT_COMMAND, show_default=True,
    help="Command to run first (register, login, create-task, create-category, list-tasks).",
)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"JSON data file. Defaults to the config value or {DEFAULT_DATA_FILE}.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON config file. Defaults to todo.config.json if present.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr.")
@click.pass_context
def cli(ctx, command, data_file, config_path, verbose):
    """A command-line todo manager.

    Register or log in, then create categories and tasks and list your
    tasks. Type 'exit' at the prompt to quit.
    """
    try:
        config = ConfigManager(config_path, required=config_path is not None)
        rounds = config.get_int("bcrypt_rounds", DEFAULT_BCRYPT_ROUNDS)
        if data_file is None:
            data_file = Path(config.get_str("data_file", DEFAULT_DATA_FILE))
        log_file = config.get_str("log_file", None)
    except (ConfigurationError, TypeError, ValueError) as e:
        raise click.UsageError(str(e))

    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)

    click.echo(GREETING)
    core = TodoCore(data_file, bcrypt_rounds=rounds)
    ctx.exit(Shell(core).run(command))


if __name__ == '__main__':
    cli()
