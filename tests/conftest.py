"""
Pytest configuration: every test runs against a fresh in-memory SQLite database.
"""

import os

# Must be set before the app modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["FRONTEND_URL"] = "https://ecoaction.example.com"
os.environ["DEFAULT_USER_ID"] = "eco_user_123"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, SQLModel

from app.database import create_db_and_tables, engine
from app.main import app
from app.store import ActivityStore


@pytest.fixture(autouse=True)
def reset_db():
    SQLModel.metadata.drop_all(engine)
    create_db_and_tables()
    yield


@pytest.fixture
def store():
    with Session(engine) as session:
        yield ActivityStore(session)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def travel_payload():
    return {
        "type": "Travel",
        "details": {"mode": "Car", "distance": 100, "unit": "km"},
        "carbonFootprint": 14.0,
        "date": "2025-10-20",
    }


class BrokenSession:
    """Stands in for a session whose database went away."""

    def __init__(self):
        self.rolled_back = False
        self.added = []

    def add(self, obj):
        self.added.append(obj)

    def commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    def rollback(self):
        self.rolled_back = True

    def refresh(self, obj):
        pass

    def exec(self, statement):
        raise OperationalError("SELECT", {}, Exception("unable to open database file"))


@pytest.fixture
def broken_session():
    return BrokenSession()
