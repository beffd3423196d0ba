from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from tinydb import TinyDB

from books_api.core.config import Settings
from books_api.core.database import open_database
from books_api.main import create_app


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db.json"


@pytest.fixture
def settings(db_path: Path) -> Settings:
    return Settings(DATABASE_FILE=str(db_path), LOG_LEVEL="WARNING")


@pytest.fixture
def database(settings: Settings) -> Generator[TinyDB, None, None]:
    db = open_database(settings.DATABASE_FILE)
    yield db
    db.close()


@pytest.fixture
def failing_write(database: TinyDB, monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every write to the database file fail."""

    def write(data):
        raise OSError("disk full")

    monkeypatch.setattr(database.storage, "write", write)


@pytest.fixture
def client(settings: Settings, database: TinyDB) -> Generator[TestClient, None, None]:
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def legacy_client(db_path: Path, database: TinyDB) -> Generator[TestClient, None, None]:
    """Client with silent no-op Update/Delete on unknown ids."""
    legacy = Settings(DATABASE_FILE=str(db_path), LOG_LEVEL="WARNING", STRICT_NOT_FOUND=False)
    app = create_app(settings=legacy, database=database)
    with TestClient(app) as test_client:
        yield test_client
