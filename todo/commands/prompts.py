"""
Prompt helpers shared by the command handlers.
"""
import sys

import click


def stdin_is_interactive() -> bool:
    """Return True when stdin is a terminal."""
    return sys.stdin.isatty()


def ask(label: str, hide_input: bool = False) -> str:
    """Prompt for one line of free text. Empty answers are accepted.

    Hidden input only applies on a terminal; piped input is read like any
    other answer so it stays on the same stream as the rest of the session.

    Raises:
        click.Abort: If input ends or the user interrupts.
    """
    return click.prompt(
        label,
        default="",
        show_default=False,
        prompt_suffix=": ",
        hide_input=hide_input and stdin_is_interactive(),
    )
