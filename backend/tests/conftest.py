import os

# Point the app at an in-memory database before any shifolink module builds the engine.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event

import shifolink.db.models  # noqa: F401
from shifolink.db.base import Base
from shifolink.db.session import engine
from shifolink.main import app


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def create(client):
    """POST a payload and return the created entity's data."""

    def _create(entity: str, payload: dict) -> dict:
        response = client.post(f"/{entity}", json=payload)
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    return _create
