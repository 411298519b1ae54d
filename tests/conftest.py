# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from task_api.core.database import create_db_engine, get_db, init_db
from task_api.main import create_app
from task_api.repositories import InMemoryTaskRepository
from task_api.services import TaskService


@pytest.fixture()
def engine():
    """Fresh in-memory SQLite database per test, tables created."""
    engine = create_db_engine("sqlite://")
    assert init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine) -> Iterator[Session]:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine) -> Iterator[TestClient]:
    """TestClient whose requests all hit the per-test database."""
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def service() -> TaskService:
    return TaskService(InMemoryTaskRepository())
