"""
Fixtures for testing

We stub the env-vars **before** importing anything that might transitively
import `main.py`, so sqlsanitize.core.config.Settings() sees valid values.
"""

import os

# ----- 1)  FORCE dummy environment variables -------------------------------
os.environ["TESTING"] = "1"
os.environ["DB_NAME"] = "testdb"
os.environ["SEED_ON_STARTUP"] = "0"

# ----- 2)  Now it’s safe to import the app ---------------------------------
import mongomock
import pytest
from fastapi.testclient import TestClient

from main import app
from sqlsanitize.api.deps import get_db
from sqlsanitize.core.database import ensure_indexes
from sqlsanitize.utils.censor import build_matcher


@pytest.fixture(name="db")
def db_fixture():
    """In-memory MongoDB database with the production indexes."""
    database = mongomock.MongoClient().testdb
    ensure_indexes(database)
    yield database


@pytest.fixture
def client(db):
    """TestClient whose get_db dependency yields the mongomock database."""
    async def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _fresh_matcher_cache():
    build_matcher.cache_clear()
    yield
