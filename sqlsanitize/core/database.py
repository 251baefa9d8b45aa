# core/database.py
import logging
from contextlib import asynccontextmanager
from urllib.parse import quote_plus

from pymongo import ASCENDING, MongoClient

from sqlsanitize.core.config import get_settings

logger = logging.getLogger(__name__)

SENSITIVE_WORDS = "sensitive_words"


def get_mongo_uri() -> str:
    """Build the MongoDB URI from settings unless a full URI is given."""
    settings = get_settings()
    if settings.mongo_uri:
        return settings.mongo_uri

    creds = ""
    if settings.mongo_user and settings.mongo_password:
        # password might contain special chars
        creds = f"{quote_plus(settings.mongo_user)}:{quote_plus(settings.mongo_password)}@"
    return (
        f"mongodb://{creds}{settings.mongo_host}:{settings.mongo_port}/"
        f"{settings.mongo_db}?serverSelectionTimeoutMS=2000"
    )


def ensure_indexes(db) -> None:
    """Canonical words are lower-case, so a plain unique index is case-insensitive."""
    db[SENSITIVE_WORDS].create_index([("word", ASCENDING)], unique=True)


@asynccontextmanager
async def mongo_client():
    """
    Async contextmanager to provide a MongoClient on startup and close on shutdown.
    """
    client = MongoClient(get_mongo_uri())
    try:
        yield client
    finally:
        client.close()

@asynccontextmanager
async def mongo_db():
    """
    Dependency: yields the configured database instance.
    """
    async with mongo_client() as client:
        yield client[get_settings().mongo_db]
