"""
Shared fixtures: an in-memory database, repository/service objects and an API client.
"""

import pytest
from fastapi.testclient import TestClient

from task_tracker.core.config import Settings
from task_tracker.database import Database
from task_tracker.main import create_application
from task_tracker.repositories import TaskRepository
from task_tracker.services import TaskService


@pytest.fixture
def test_settings() -> Settings:
    return Settings(ENVIRONMENT="testing", DATABASE_URL="sqlite://", DEBUG=False)


@pytest.fixture
def database(test_settings: Settings):
    db = Database.from_settings(test_settings)
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def db_session(database: Database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def repository(db_session) -> TaskRepository:
    return TaskRepository(db_session)


@pytest.fixture
def service(repository: TaskRepository) -> TaskService:
    return TaskService(repository)


@pytest.fixture
def app(test_settings: Settings, database: Database):
    return create_application(test_settings, database)


@pytest.fixture
def api_client(app):
    with TestClient(app) as client:
        yield client
