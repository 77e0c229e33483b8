"""Shared fixtures: an in-memory database wired into the FastAPI app."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Keep the module-level engine away from the real data directory.
os.environ.setdefault(
    "MATHMENTOR_DB_PATH", str(Path(tempfile.mkdtemp()) / "leaderboard-test.db")
)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from mathmentor import models  # noqa: F401
from mathmentor.app import app
from mathmentor.client import ApiClient, MemoryStore, UserContext
from mathmentor.core import get_session


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def api(client):
    return ApiClient(http=client, base_url="/api")


@pytest.fixture()
def context(api):
    return UserContext(api, MemoryStore())
