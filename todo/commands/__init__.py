"""
Interactive shell commands.

Importing this package registers every handler on ``registry``.
"""
from todo.commands import auth, category, task
from todo.commands.registry import CommandName, CommandRegistry, registry

registry.validate()

__all__ = ["CommandName", "CommandRegistry", "registry"]
