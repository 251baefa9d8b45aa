"""
Unit-tests for sqlsanitize.services.seeder – mongomock + tmp_path seed files.
"""
import json
import logging

import pytest

from sqlsanitize.core.config import DEFAULT_SEED_FILE
from sqlsanitize.core.database import SENSITIVE_WORDS
from sqlsanitize.services.seeder import seed_sensitive_words
from sqlsanitize.utils.censor import InvalidTerm


@pytest.fixture
def seed_file(tmp_path):
    """Write a JSON seed list and return its path."""
    def _write(terms):
        p = tmp_path / "seed.json"
        p.write_text(json.dumps(terms), encoding="utf-8")
        return p
    return _write


def test_seed_inserts_normalized_and_skips_existing(db, seed_file, caplog):
    db[SENSITIVE_WORDS].insert_one({"word": "select"})

    with caplog.at_level(logging.INFO, logger="sqlsanitize.services.seeder"):
        inserted, skipped = seed_sensitive_words(db, seed_file(["SELECT", " Order By ", "*", "order by"]))

    assert (inserted, skipped) == (2, 2)
    words = sorted(doc["word"] for doc in db[SENSITIVE_WORDS].find())
    assert words == ["*", "order by", "select"]
    assert "inserted=2, skipped=2" in caplog.text


def test_seed_missing_file_is_skipped(db, tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="sqlsanitize.services.seeder"):
        assert seed_sensitive_words(db, tmp_path / "nope.json") == (0, 0)
        assert seed_sensitive_words(db, None) == (0, 0)

    assert "skipping seeding" in caplog.text
    assert db[SENSITIVE_WORDS].count_documents({}) == 0


def test_seed_blank_entry_raises(db, seed_file):
    with pytest.raises(InvalidTerm):
        seed_sensitive_words(db, seed_file(["select", "  "]))


@pytest.mark.parametrize("entry", [5, True, ["select"], {"word": "select"}])
def test_seed_non_string_entry_raises(db, seed_file, entry):
    with pytest.raises(InvalidTerm):
        seed_sensitive_words(db, seed_file(["select", entry]))


def test_seed_rejects_non_list(db, seed_file):
    with pytest.raises(ValueError):
        seed_sensitive_words(db, seed_file({"word": "select"}))


def test_default_seed_list_loads(db):
    inserted, skipped = seed_sensitive_words(db, DEFAULT_SEED_FILE)

    assert inserted > 0
    assert skipped == 0
    assert db[SENSITIVE_WORDS].find_one({"word": "order by"})
    # second run is a no-op
    assert seed_sensitive_words(db, DEFAULT_SEED_FILE) == (0, inserted)
