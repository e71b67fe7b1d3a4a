"""
Test fixtures for the todo CLI test suite.

Provides:
- Temporary data/config file fixtures (isolated from the working directory)
- Mock data builders for users, categories and tasks
- Scripted prompt input for driving command handlers and the shell
"""

import json
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator, List, Optional

import bcrypt
import click
import pytest

from todo.core import TodoCore
from todo.models.base import Category, Task, TaskStatus, User
from todo.models.files import StorageFile
from todo.session import Session

# Lowest cost bcrypt accepts; keeps hashing fast in tests.
TEST_BCRYPT_ROUNDS = 4


# =============================================================================
# Temporary File Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="todo_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """Path for a data file that does not exist yet."""
    return temp_dir / "data.json"


@pytest.fixture
def config_file(temp_dir: Path, data_file: Path) -> Path:
    """Config file pointing at ``data_file`` with a fast bcrypt cost."""
    path = temp_dir / "todo.config.json"
    path.write_text(json.dumps({
        "data_file": str(data_file),
        "bcrypt_rounds": TEST_BCRYPT_ROUNDS,
    }))
    return path


# =============================================================================
# Mock Data Builders
# =============================================================================


class MockDataBuilder:
    """Helper class for building todo entities for testing."""

    @staticmethod
    def hash_password(raw_password: str) -> str:
        return bcrypt.hashpw(
            raw_password.encode("utf-8"), bcrypt.gensalt(TEST_BCRYPT_ROUNDS)
        ).decode("utf-8")

    @staticmethod
    def create_user(
        id: int = 1,
        name: str = "Test User",
        email: str = "test@example.com",
        password: str = "secret",
    ) -> User:
        """Create a user whose password hashes ``password``."""
        return User(
            id=id,
            name=name,
            email=email,
            password=MockDataBuilder.hash_password(password),
        )

    @staticmethod
    def create_category(
        id: int = 1,
        name: str = "Test Category",
        user_id: int = 1,
    ) -> Category:
        return Category(id=id, name=name, user_id=user_id)

    @staticmethod
    def create_task(
        id: int = 1,
        name: str = "Test Task",
        date: Optional[datetime] = None,
        status: TaskStatus = TaskStatus.PENDING,
        user_id: int = 1,
        category_id: int = 1,
    ) -> Task:
        return Task(
            id=id,
            name=name,
            date=date or datetime(2025, 12, 2, tzinfo=timezone.utc),
            status=status,
            user_id=user_id,
            category_id=category_id,
        )


@pytest.fixture
def mock_data() -> MockDataBuilder:
    """Provide mock data builder for test item creation."""
    return MockDataBuilder()


@pytest.fixture
def sample_storage(mock_data: MockDataBuilder) -> StorageFile:
    """Two users, each with one category and one task.

    alice@example.com / alice-pw owns category 1 and task 1.
    bob@example.com / bob-pw owns category 2 and task 2.
    """
    return StorageFile(
        users=[
            mock_data.create_user(id=1, name="Alice", email="alice@example.com", password="alice-pw"),
            mock_data.create_user(id=2, name="Bob", email="bob@example.com", password="bob-pw"),
        ],
        categories=[
            mock_data.create_category(id=1, name="Home", user_id=1),
            mock_data.create_category(id=2, name="Work", user_id=2),
        ],
        tasks=[
            mock_data.create_task(id=1, name="Water plants", user_id=1, category_id=1),
            mock_data.create_task(
                id=2, name="Write report", user_id=2, category_id=2,
                status=TaskStatus.IN_PROGRESS,
            ),
        ],
    )


# =============================================================================
# Core / Session Fixtures
# =============================================================================


@pytest.fixture
def core(data_file: Path) -> TodoCore:
    """TodoCore on an empty data file."""
    return TodoCore(data_file, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def sample_core(data_file: Path, sample_storage: StorageFile) -> TodoCore:
    """TodoCore loaded from a data file holding ``sample_storage``."""
    data_file.write_text(sample_storage.model_dump_json(indent=2))
    return TodoCore(data_file, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def session() -> Session:
    """A session with nobody logged in."""
    return Session()


@pytest.fixture
def save_counter():
    """Save callback that counts calls in ``save_counter.count``."""
    def save_callback():
        save_callback.count += 1

    save_callback.count = 0
    return save_callback


# =============================================================================
# Scripted Input
# =============================================================================


class ScriptedInput:
    """Replacement for click.prompt that answers from a list of lines.

    Raises click.Abort once the lines run out, as click does at end of input.
    """

    def __init__(self) -> None:
        self.lines: List[str] = []
        self.prompts: List[str] = []

    def feed(self, *lines: str) -> None:
        self.lines.extend(lines)

    def __call__(self, text, default=None, **kwargs):
        self.prompts.append(text)
        if not self.lines:
            raise click.Abort()
        value = self.lines.pop(0)
        if not value and default is not None:
            return default
        return value


@pytest.fixture
def scripted_input(monkeypatch) -> ScriptedInput:
    """Patch click.prompt with a ScriptedInput."""
    scripted = ScriptedInput()
    monkeypatch.setattr(click, "prompt", scripted)
    return scripted
