"""
Constants for the todo CLI application.

Note: These constants serve as default fallback values.
Actual values may be overridden from todo.config.json via ConfigManager,
and from the command line.
"""
import json
from pathlib import Path
from typing import Any, Optional

from todo.exceptions import ConfigurationError

# =============================================================================
# Default Fallback Values
# =============================================================================

DEFAULT_DATA_FILE = "data.json"
DEFAULT_CONFIG_FILE = "todo.config.json"
DEFAULT_COMMAND = "no-command"

# bcrypt cost factor (2^rounds iterations)
DEFAULT_BCRYPT_ROUNDS = 10

# Date formats accepted by create-task, tried in order
DATE_FORMATS = [
    "%Y-%m-%d",              # YYYY-MM-DD
    "%Y-%m-%dT%H:%M:%S%z",   # RFC 3339, e.g. 2025-12-02T10:00:00Z
    "%Y-%m-%dT%H:%M:%S.%f%z",  # RFC 3339 with fractional seconds
]
DISPLAY_DATE_FORMAT = "%Y-%m-%d"

# Shape checks applied before strptime, which also takes unpadded fields
DATE_REGEX_PATTERN = (
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}"
    r"(T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{1,9})?(Z|[+-][0-9]{2}:[0-9]{2}))?$"
)
MAX_FRACTION_DIGITS = 6  # strptime %f stops at microseconds
INTEGER_REGEX_PATTERN = r"^[+-]?[0-9]+$"

# Commands that skip the login gate
UNGATED_COMMANDS = ("register", "exit")
EXIT_COMMAND = "exit"

# =============================================================================
# User-facing messages
# =============================================================================

GREETING = "Hello todo app"
GOODBYE = "Goodbye!"
PROMPT_NEXT_COMMAND = "Please enter another command"
EMPTY_COMMAND_MESSAGE = "Empty command. Please enter a valid command."
READ_FAILED_MESSAGE = "Failed to read input"
WRONG_CREDENTIALS_MESSAGE = "Wrong credentials!"
DATE_FORMAT_ERROR = (
    "Invalid date format. Use YYYY-MM-DD (e.g., 2025-12-02) "
    "or RFC3339 (e.g., 2025-12-02T10:00:00Z)"
)
CATEGORY_ID_ERROR = "Invalid category ID. Please enter a number."


# =============================================================================
# Config Loader
# =============================================================================


class ConfigManager:
    """
    Loads configuration from a JSON file with fallback to defaults.

    Usage:
        config = ConfigManager()
        data_file = config.get_str('data_file', DEFAULT_DATA_FILE)

        config = ConfigManager(config_path=Path("/custom/todo.config.json"), required=True)
    """

    def __init__(self, config_path: Optional[Path] = None, required: bool = False) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to the config file. Defaults to todo.config.json
                in the current directory.
            required: If True, a missing or unreadable file raises
                ConfigurationError instead of falling back to defaults.
        """
        self._config: Optional[dict] = None
        self._config_path = config_path if config_path is not None else Path(DEFAULT_CONFIG_FILE)
        self._required = required

    def _load_config(self) -> dict:
        """Load config from the JSON file."""
        if self._config is not None:
            return self._config

        if not self._config_path.exists():
            if self._required:
                raise ConfigurationError(f"Config file not found: {self._config_path}")
            self._config = {}
            return self._config

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
            if self._required:
                raise ConfigurationError(f"Failed to read config file {self._config_path}: {e}")
            loaded = {}

        if not isinstance(loaded, dict):
            if self._required:
                raise ConfigurationError(f"Config file {self._config_path} must contain a JSON object.")
            loaded = {}

        self._config = loaded
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to default."""
        config = self._load_config()
        return config.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        """Get an integer config value with fallback."""
        value = self.get(key, default)
        return int(value) if value is not None else default

    def get_str(self, key: str, default: Optional[str]) -> Optional[str]:
        """Get a string config value with fallback."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path
