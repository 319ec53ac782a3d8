"""Shared fixtures: a throwaway SQLite database per test."""

import pytest

from studentdb.db.engine import get_engine
from studentdb.db.schema import bootstrap_schema
from studentdb.db.sql_log import detach_sql_logger
from studentdb.repository import StudentRepository


@pytest.fixture
def engine(tmp_path):
    """Engine on a fresh database file with the students table in place."""
    eng = get_engine(f"sqlite:///{tmp_path / 'students.sqlite'}")
    bootstrap_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine):
    return StudentRepository(engine)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Working directory laid out like a checkout: an empty db/ folder."""
    (tmp_path / "db").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_sql_logger():
    # handlers bound to a captured stdout must not outlive the test
    yield
    detach_sql_logger()
