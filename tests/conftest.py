# tests/conftest.py
import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.db import MongoDatabase
from app.main import create_app

from .fakes import UnreachableClient


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        mongo_uri="mongodb://localhost:27017/taskmaster_test",
        app_version="2.3.4",
        environment="test",
        hostname="test-host",
        log_level="WARNING",
    )


@pytest.fixture()
def database() -> MongoDatabase:
    return MongoDatabase(mongomock.MongoClient(), db_name="taskmaster_test")


@pytest.fixture()
def client(settings: Settings, database: MongoDatabase):
    app = create_app(settings=settings, database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def degraded_client(settings: Settings):
    """App whose database is down for the whole test."""
    app = create_app(settings=settings, database=MongoDatabase(UnreachableClient(), db_name="taskmaster_test"))
    with TestClient(app) as c:
        yield c
