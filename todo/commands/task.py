"""
Task commands.

Input errors raise ValidationError subclasses before anything is stored;
the shell prints them and keeps going.
"""
import click

from todo.commands.prompts import ask
from todo.commands.registry import CommandName, command


@command(CommandName.CREATE_TASK)
def create_task(core, session):
    """Create a task for the logged-in user."""
    tasks = core.task_manager

    name = ask("Enter your task name")
    date = tasks.parse_task_date(ask("Enter your task date"))

    for category in core.category_manager.get_user_categories(session):
        click.echo(f"{category.id}. {category.name}")

    category_id = tasks.parse_category_id(ask("Enter your task category ID"))

    tasks.create_task(session, name, date, category_id)
    click.echo(f"Task created: {name}")


@command(CommandName.LIST_TASKS)
def list_tasks(core, session):
    """Print the logged-in user's tasks."""
    for task in core.task_manager.get_user_tasks(session):
        click.echo(core.task_manager.format_task(task))
