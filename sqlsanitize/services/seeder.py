"""
Startup seeding of the sensitive word catalog from a JSON list of terms.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from sqlsanitize.core.database import SENSITIVE_WORDS, ensure_indexes
from sqlsanitize.utils.censor import normalize_term

logger = logging.getLogger(__name__)


def load_seed_terms(seed_file: Path) -> list[str]:
    with open(seed_file, "r", encoding="utf-8") as f:
        terms = json.load(f)
    if not isinstance(terms, list):
        raise ValueError(f"Seed file {seed_file} must contain a JSON array of strings")
    return terms


def seed_sensitive_words(db, seed_file: Path | None) -> tuple[int, int]:
    """
    Insert every seed term that is not stored yet.

    Returns ``(inserted, skipped)``. A missing seed file is logged and
    skipped; a blank entry raises ``InvalidTerm``.
    """
    if seed_file is None or not Path(seed_file).exists():
        logger.warning("Seed file not found or not provided; skipping seeding.")
        return 0, 0

    ensure_indexes(db)
    collection = db[SENSITIVE_WORDS]

    inserted = skipped = 0
    for raw in load_seed_terms(Path(seed_file)):
        normalized = normalize_term(raw)
        if collection.find_one({"word": normalized}):
            skipped += 1
            continue
        collection.insert_one({"word": normalized})
        inserted += 1

    logger.info(
        "SensitiveWord seeding complete: inserted=%d, skipped=%d (from %s).",
        inserted, skipped, seed_file,
    )
    return inserted, skipped
