"""Shared test fixtures for aide tests."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from aide import utils
from aide.search import build


@pytest.fixture(autouse=True)
def reset_verbosity(monkeypatch):
    """Drop any verbosity cached or overridden by an earlier test."""
    monkeypatch.setattr(utils, "_verbosity", None)


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Isolated config and data directories.

    Sets up:
    - XDG_CONFIG_HOME pointing to tmp_path (config at tmp_path/aide/config.yaml)
    - AIDE_HOME pointing to tmp_path/data
    - Working directory changed to tmp_path

    Returns the data directory path.
    """
    data_dir = tmp_path / "data"
    data_dir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("AIDE_HOME", str(data_dir))
    monkeypatch.chdir(tmp_path)

    return data_dir


@pytest.fixture
def populated_home(temp_home):
    """Data directory with a few tasks, aides and config values.

    Creates:
    - tasks: fix_login (priority 2), write-report, commands
    - aides: commands (text, two entries), journal (file)
    - config: database_url, api_endpoint, debug_mode

    Returns the data directory path.
    """
    write_store(temp_home, {
        "tasks": {
            "fix_login": {"priority": 2, "status": "created",
                          "created_at": "2026-01-02 09:00:00", "log": []},
            "write-report": {"priority": 3, "status": "in_progress",
                             "created_at": "2026-01-01 09:00:00", "log": ["[2026-01-01 10:00:00] draft"]},
            "commands": {"priority": 3, "status": "created",
                         "created_at": "2026-01-03 09:00:00", "log": []},
        },
        "aides": {
            "commands": {"type": "text", "entries": [
                "[2026-01-01 09:00:00] git log --oneline --graph",
                "[2026-01-01 09:05:00] docker compose up -d",
            ]},
            "journal": {"type": "file", "entries": []},
        },
        "config": {
            "database_url": "postgres://localhost/aide",
            "api_endpoint": "https://api.example.com",
            "debug_mode": "false",
        },
    })
    return temp_home


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_index():
    """Index of the configuration keys used across scoring tests."""
    return build(["database_url", "api_endpoint", "debug_mode"], kind="config")


def write_store(data_dir: Path, data: dict) -> None:
    """Write an aide.yaml directly."""
    (data_dir / "aide.yaml").write_text(yaml.safe_dump(data))


def read_store(data_dir: Path) -> dict:
    """Parse aide.yaml."""
    return yaml.safe_load((data_dir / "aide.yaml").read_text()) or {}
