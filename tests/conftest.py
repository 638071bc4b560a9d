import os

import pytest

from dirmarks.framework.store import BookmarkStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "dirmarks.db"


@pytest.fixture
def store(db_path):
    bookmark_store = BookmarkStore.initialize(db_path)
    yield bookmark_store
    bookmark_store.close()


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Isolated config directory, with the working directory set to a folder named 'work'."""
    home = tmp_path / "home"
    work_dir = tmp_path / "projects" / "work"
    work_dir.mkdir(parents=True)
    monkeypatch.setenv("DIRMARKS_HOME", str(home))
    monkeypatch.delenv("DIRMARKS_DB", raising=False)
    monkeypatch.chdir(work_dir)
    yield home, os.getcwd()
