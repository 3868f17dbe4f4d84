"""Shared fixtures for the UCS renamer tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from ucs_rename.catalog.services import CategoryCatalog
from ucs_rename.core.config import EnvVars
from ucs_rename.naming.services import FieldPrompter

DATA_DIR = Path(__file__).parent / "data"


class StubSelector:
    """Selector that returns a canned choice and records what it was shown."""

    def __init__(self, choice=None, error=None):
        self.choice = choice
        self.error = error
        self.calls = []

    def select(self, lines):
        self.calls.append(list(lines))
        if self.error is not None:
            raise self.error
        return self.choice


def make_console() -> Console:
    return Console(file=io.StringIO(), width=120)


def console_text(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep overrides from the developer's shell out of the tests."""
    for name in (
        EnvVars.CAT_ID,
        EnvVars.CREATOR_ID,
        EnvVars.SOURCE_ID,
        EnvVars.USER_DATA,
        EnvVars.CSV_FILE,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def override_csv() -> Path:
    return DATA_DIR / "override.csv"


@pytest.fixture
def catalog() -> CategoryCatalog:
    return CategoryCatalog.load()


@pytest.fixture
def make_prompter():
    """Build a FieldPrompter reading from the given lines."""

    def _make(text: str, reprompt: bool = True) -> FieldPrompter:
        return FieldPrompter(
            console=make_console(),
            error_console=make_console(),
            input_stream=io.StringIO(text),
            reprompt=reprompt,
        )

    return _make
