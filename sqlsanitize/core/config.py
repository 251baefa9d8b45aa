# sqlsanitize/core/config.py

import os
from dotenv import load_dotenv
from pathlib import Path
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from sqlsanitize.core.logging import resolve_level

# ─── 1) Load your .env into os.environ ─────────────────────────────────────────
env_path = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=env_path, override=False)

DEFAULT_SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "sql_sensitive_list.json"


class Settings(BaseSettings):
    # ──────────────────────────────────────────────────────────
    testing: bool = Field(False, description="TESTING")

    # ───────────────────────── Mongo ──────────────────────────
    mongo_uri:      str | None = Field(None, description="MONGO_URI")
    mongo_host:     str        = Field("localhost", description="MONGO_HOST")
    mongo_port:     int        = Field(27017, description="MONGO_PORT")
    mongo_user:     str | None = Field(None, description="MONGO_USER")
    mongo_password: str | None = Field(None, description="MONGO_PASSWORD")
    mongo_db:       str | None = Field(None, description="DB_NAME")

    # ───────────────────────── Seeding ────────────────────────
    seed_on_startup: bool = Field(True, description="SEED_ON_STARTUP")
    seed_words_file: Path = Field(DEFAULT_SEED_FILE, description="SEED_WORDS_FILE")

    # ───────────────────────── Misc ───────────────────────────
    log_level:    str        = Field("INFO", description="LOG_LEVEL")
    frontend_url: str | None = Field(None, description="FRONTEND_URL")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        resolve_level(value)
        return value.strip().upper()

    @model_validator(mode="after")
    def _require_mongo_db(self) -> "Settings":
        if not self.testing and not self.mongo_db:
            raise ValueError("Missing required env-vars: DB_NAME")
        return self


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@lru_cache
def get_settings() -> Settings:
    """
    Build Settings from os.environ, extracting only the keys we need.
    """
    data = {
        "testing":         _env_flag("TESTING", "0"),
        "mongo_uri":       os.getenv("MONGO_URI"),
        "mongo_host":      os.getenv("MONGO_HOST", "localhost"),
        "mongo_port":      os.getenv("MONGO_PORT", "27017"),
        "mongo_user":      os.getenv("MONGO_USER"),
        "mongo_password":  os.getenv("MONGO_PASSWORD"),
        "mongo_db":        os.getenv("DB_NAME", "sqlsanitize" if _env_flag("TESTING", "0") else None),
        "seed_on_startup": _env_flag("SEED_ON_STARTUP", "1"),
        "seed_words_file": os.getenv("SEED_WORDS_FILE") or DEFAULT_SEED_FILE,
        "log_level":       os.getenv("LOG_LEVEL", "INFO").upper(),
        "frontend_url":    os.getenv("FRONTEND_URL"),
    }
    return Settings.model_validate(data)
