from fastapi import HTTPException, Depends
from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError
from sqlsanitize.api.deps import get_db
from sqlsanitize.core.database import SENSITIVE_WORDS
from sqlsanitize.schemas.api import ApiCode
from sqlsanitize.schemas.sensitive_word import SensitiveWord
from sqlsanitize.utils.censor import InvalidTerm, normalize_term, sanitize
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

class SensitiveWordService:
    """
    Service class for the sensitive word/phrase catalog.

    Words are normalized (trimmed and lower-cased) before they are stored,
    so the unique index on ``word`` enforces case-insensitive uniqueness.
    Sanitizing reads the whole catalog and masks whole-word / whole-phrase
    matches only.
    """

    def __init__(self, db):
        self.db = db
        self.collection = db[SENSITIVE_WORDS]

    @staticmethod
    def _normalize(word: Optional[str]) -> str:
        try:
            return normalize_term(word)
        except InvalidTerm as e:
            raise HTTPException(status_code=400, detail=str(e))

    @staticmethod
    def _object_id(word_id: str) -> ObjectId:
        if not word_id or not ObjectId.is_valid(word_id):
            raise HTTPException(status_code=400, detail=f"Invalid ID: {word_id}")
        return ObjectId(word_id)

    async def list_words(self) -> List[SensitiveWord]:
        """Return all stored words/phrases, sorted alphabetically ignoring case."""
        try:
            words = [SensitiveWord.from_document(doc) for doc in self.collection.find()]
            words.sort(key=lambda w: w.word.lower())
            return words
        except Exception as e:
            logger.error(f"Error retrieving sensitive words: {e}")
            raise HTTPException(status_code=500, detail="Failed to retrieve sensitive words")

    async def add(self, word: Optional[str]) -> SensitiveWord:
        """Add a new word/phrase; duplicates (ignoring case) are rejected."""
        normalized = self._normalize(word)
        try:
            if self.collection.find_one({"word": normalized}):
                raise HTTPException(status_code=409, detail=f"Word/Phrase already exists: {normalized}")

            result = self.collection.insert_one({"word": normalized})
            if not result.inserted_id:
                raise HTTPException(status_code=500, detail="Failed to create sensitive word")
            logger.info("Added sensitive word %r", normalized)
            return SensitiveWord(id=str(result.inserted_id), word=normalized)

        except HTTPException:
            raise
        except DuplicateKeyError:
            # lost a race against a concurrent insert
            raise HTTPException(status_code=409, detail=f"Word/Phrase already exists: {normalized}")
        except Exception as e:
            logger.error(f"Error adding sensitive word: {e}")
            raise HTTPException(status_code=500, detail="Failed to add sensitive word")

    async def update(self, word_id: str, word: Optional[str]) -> SensitiveWord:
        """Replace the value of an existing word/phrase; the ID stays the same."""
        oid = self._object_id(word_id)
        try:
            existing = self.collection.find_one({"_id": oid})
            if not existing:
                raise HTTPException(status_code=404, detail=f"No word found with ID {word_id}")

            normalized = self._normalize(word)

            clash = self.collection.find_one({"word": normalized, "_id": {"$ne": oid}})
            if clash:
                raise HTTPException(status_code=409, detail=f"Duplicate word: {normalized}")

            self.collection.update_one({"_id": oid}, {"$set": {"word": normalized}})
            logger.info("Updated sensitive word %s: %r -> %r", word_id, existing["word"], normalized)
            return SensitiveWord(id=word_id, word=normalized)

        except HTTPException:
            raise
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail=f"Duplicate word: {normalized}")
        except Exception as e:
            logger.error(f"Error updating sensitive word: {e}")
            raise HTTPException(status_code=500, detail="Failed to update sensitive word")

    async def delete(self, word_id: str) -> None:
        """Delete a word/phrase by ID. Unknown IDs are not an error."""
        oid = self._object_id(word_id)
        try:
            result = self.collection.delete_one({"_id": oid})
            if result.deleted_count:
                logger.info("Deleted sensitive word %s", word_id)
        except Exception as e:
            logger.error(f"Error deleting sensitive word: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete sensitive word")

    async def sanitize(self, text: Optional[str]) -> Optional[str]:
        """Mask every stored word/phrase in *text*; None/empty come back as-is."""
        if not text:
            return text
        try:
            terms = [doc["word"] for doc in self.collection.find({}, {"word": 1}).sort("word", ASCENDING)]
        except Exception as e:
            logger.error(f"Error loading sensitive words for sanitize: {e}")
            raise HTTPException(status_code=500, detail="Failed to load sensitive words")
        try:
            return sanitize(terms, text)
        except InvalidTerm as e:
            # bad catalog entry; surfaced, never skipped
            logger.error(f"Invalid sensitive word in catalog: {e}")
            raise HTTPException(
                status_code=ApiCode.ERROR.id,
                detail=f"{ApiCode.ERROR.description}: invalid sensitive word in catalog ({e})",
            )

# Factory function to create sensitive word service
def get_sensitive_word_service(db=Depends(get_db)) -> SensitiveWordService:
    return SensitiveWordService(db)
