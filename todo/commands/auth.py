"""
Register and login commands.
"""
import click

from todo.commands.prompts import ask
from todo.commands.registry import CommandName, command
from todo.exceptions import PasswordHashError


@command(CommandName.REGISTER)
def register(core, session):
    """Create an account and log into it."""
    name = ask("Enter your name")
    email = ask("Enter your email")
    password = ask("Enter your password", hide_input=True)

    try:
        core.auth_manager.register(session, name, email, password)
    except PasswordHashError as e:
        click.echo(f"Error hashing password: {e}")
        return

    click.echo("User registered successfully!")


@command(CommandName.LOGIN)
def login(core, session):
    """Log in by email and password.

    AuthenticationError propagates; the shell treats it as fatal.
    """
    email = ask("Enter your email")
    password = ask("Enter your password", hide_input=True)

    core.auth_manager.login(session, email, password)
    click.echo("You have been logged in!")
    click.echo(f"Logged in as: {email}")
