"""Shared test fixtures for zpredict tests."""

from pathlib import Path

import pytest

from zpredict.database import ScoreStore, make_table


@pytest.fixture(autouse=True)
def temp_config(tmp_path, monkeypatch):
    """Point the config at an empty temporary directory.

    Sets up:
    - XDG_CONFIG_HOME pointing to tmp_path (config at tmp_path/zpredict/config.yaml)
    - ZPREDICT_ZOXIDE unset so the config decides the binary

    Returns the config file path (not created yet).
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("ZPREDICT_ZOXIDE", raising=False)
    return Path(tmp_path) / "zpredict" / "config.yaml"


@pytest.fixture
def write_config(temp_config):
    """Write a config.yaml with the given lines."""

    def _write(text: str) -> Path:
        temp_config.parent.mkdir(parents=True, exist_ok=True)
        temp_config.write_text(text)
        return temp_config

    return _write


@pytest.fixture
def home_table():
    """A realistic score table with POSIX paths.

    Scores are distinct except for the two "notes" directories.
    """
    return make_table({
        "/home/alice": 40.0,
        "/home/alice/projects": 22.5,
        "/home/alice/projects/backend": 18.0,
        "/home/alice/projects/backend-api": 9.0,
        "/home/alice/projects/frontend": 12.0,
        "/home/alice/work/Backend": 30.0,
        "/home/alice/notes": 5.0,
        "/home/alice/Notes": 5.0,
        "/srv/www/site": 1.5,
    })


@pytest.fixture
def windows_table():
    """Score table with backslash paths and a directory name containing spaces."""
    return make_table({
        "C:\\Users\\bob\\source\\repos": 14.0,
        "C:\\Users\\bob\\source\\repos\\zpredict": 20.0,
        "C:\\Users\\bob\\My Documents": 8.0,
        "D:\\games\\steam": 3.0,
    })


@pytest.fixture
def home_store(home_table):
    return ScoreStore(home_table)


def score_lines(table: dict) -> str:
    """Render a table the way `zoxide query --list --all --score` does."""
    return "".join(f"{score:>6.1f} {path}\n" for path, score in table.items())


@pytest.fixture
def scores_file(tmp_path, home_table):
    """home_table written as a score listing file."""
    path = tmp_path / "scores.txt"
    path.write_text(score_lines(home_table))
    return path
