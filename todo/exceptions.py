"""
Custom exceptions for the todo CLI application.
"""


class TodoError(Exception):
    """Base exception for all todo-related errors."""
    pass


class ValidationError(TodoError):
    """Raised when user input cannot be parsed."""
    pass


class InvalidDateError(ValidationError):
    """Raised when a task date matches none of the supported formats."""
    pass


class InvalidCategoryIdError(ValidationError):
    """Raised when a category ID is not an integer."""
    pass


class UnknownCommandError(TodoError):
    """Raised when a command name is not in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name}")
        self.name = name


class StorageError(TodoError):
    """Raised when the data file cannot be written."""
    pass


class PasswordHashError(TodoError):
    """Raised when a password cannot be hashed."""
    pass


class AuthenticationError(TodoError):
    """Raised when no user matches the given credentials."""
    pass


class ConfigurationError(TodoError):
    """Raised when there's a configuration or setup issue."""
    pass
