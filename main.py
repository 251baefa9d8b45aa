from dotenv import load_dotenv
from pathlib import Path
# explicitly point at your .env
load_dotenv(dotenv_path=Path(__file__).parent / ".env", override=False)

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sqlsanitize.api.sensitive_words import router as sensitive_words_router
from sqlsanitize.core.config import get_settings
from sqlsanitize.core.database import ensure_indexes, mongo_db
from sqlsanitize.core.logging import setup_logging
from sqlsanitize.services.seeder import seed_sensitive_words

settings = get_settings()
setup_logging(level=settings.log_level)   # single call replaces logging.basicConfig
logger = logging.getLogger(__name__)      # module-specific logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application-wide startup / shutdown lifecycle hook.

    * Creates the unique index on the sensitive word collection.
    * Seeds the catalog from the configured JSON list when enabled.
    """
    async with mongo_db() as db:
        ensure_indexes(db)
        if settings.seed_on_startup:
            seed_sensitive_words(db, settings.seed_words_file)
        else:
            logger.info("ℹ️  Seeding disabled (SEED_ON_STARTUP=0).")

    # ───────────── application runs ─────────────
    yield

    logger.info("Shutting down.")


app = FastAPI(
    title="SQL Sanitize",
    description="Manage sensitive SQL words/phrases and mask them out of text.",
    lifespan=lifespan,
)

# Build CORS origins list
allow_origins = ["http://localhost:3000"]
if settings.frontend_url:
    allow_origins.append(settings.frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],  # Allows all HTTP methods (GET, POST, etc.)
    allow_headers=["*"],  # Allows all headers
)

app.include_router(sensitive_words_router)


@app.get("/health", tags=["utils"])
async def health() -> dict[str, str]:
    """CI smoke-test endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
