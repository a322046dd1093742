"""Pytest configuration and shared fixtures."""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from task_cli.config import Config, ConfigModel  # noqa: E402
from task_cli.operations import TaskOperations  # noqa: E402
from task_cli.storage import TaskStore  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the user's config and data files."""
    monkeypatch.setenv("TASK_CLI_CONFIG", str(tmp_path / "no-such-config.yaml"))
    monkeypatch.setenv("TASK_CLI_DATA_DIR", str(tmp_path / "data"))
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding task.txt and completed.txt for the test."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def config(data_dir):
    return ConfigModel(data_dir=str(data_dir))


@pytest.fixture
def store(config):
    return TaskStore(config)


@pytest.fixture
def console():
    """Console that records plain text output."""
    return Console(file=io.StringIO(), width=80, highlight=False, emoji=False, soft_wrap=True)


@pytest.fixture
def ops(store, console):
    return TaskOperations(store, console)


@pytest.fixture
def output(console):
    """Return everything printed to the fixture console so far."""
    return console.file.getvalue
