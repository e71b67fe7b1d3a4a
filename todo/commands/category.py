"""
Category commands.
"""
import click

from todo.commands.prompts import ask
from todo.commands.registry import CommandName, command


@command(CommandName.CREATE_CATEGORY)
def create_category(core, session):
    """Create a category for the logged-in user."""
    name = ask("Enter your category name")
    core.category_manager.create_category(session, name)
    click.echo(f"Category created: {name}")
