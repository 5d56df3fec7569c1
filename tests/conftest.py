"""
pytest configuration and fixtures.

Loads environment variables from .env file for all tests.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from parceltrack.db import DatabaseConnection


def pytest_configure(config):
    """Load .env file before running tests"""
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"

    if env_file.exists():
        print(f"Loading environment from {env_file}")
        load_dotenv(env_file)


@pytest.fixture
def db(monkeypatch):
    """Fresh in-memory SQLite database with the parcel table."""
    monkeypatch.delenv("INSTANCE_CONNECTION_NAME", raising=False)
    DatabaseConnection.close()
    DatabaseConnection.initialize(database_url="sqlite://", create_tables=True)
    yield DatabaseConnection
    DatabaseConnection.close()


@pytest.fixture
def session(db):
    """Session on the test database, rolled back and closed afterwards."""
    session = db.get_session()
    yield session
    session.rollback()
    session.close()
