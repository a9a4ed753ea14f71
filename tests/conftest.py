import os
import tempfile
from pathlib import Path

# Point the app at a throwaway SQLite file before app.config is imported
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="url_shortener_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_DIR / 'test.db'}"
os.environ["STORE_BACKEND"] = "sql"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from app.database import SessionLocal, engine
from app.dependencies.store import get_store
from app.main import app
from app.models.mapping import UrlMapping
from app.services.shortener import Shortener
from app.store.sql import SqlAlchemyMappingStore

ROOT_DIR = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Run Alembic migrations at the start of the test session."""
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config(str(ROOT_DIR / "alembic.ini"))

    # Migrations are exercised exactly as in production
    command.upgrade(alembic_cfg, "head")

    yield

    # Release pooled connections so the tables can be dropped
    engine.dispose()
    command.downgrade(alembic_cfg, "base")


@pytest.fixture(autouse=True)
def clean_mappings():
    """Every test starts with an empty mappings table."""
    yield
    with engine.begin() as connection:
        connection.execute(delete(UrlMapping))


@pytest.fixture
def store():
    return SqlAlchemyMappingStore(SessionLocal)


@pytest.fixture
def shortener(store):
    return Shortener(store)


@pytest.fixture
def client(store):
    """Test client whose routes share the fixture store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
