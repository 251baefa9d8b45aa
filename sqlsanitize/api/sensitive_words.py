from fastapi import APIRouter, Depends
from sqlsanitize.services.sensitive_word_service import get_sensitive_word_service, SensitiveWordService
from sqlsanitize.schemas.api import ApiCode, ApiResult
from sqlsanitize.schemas.sensitive_word import (
    SanitizeRequest,
    SensitiveWord,
    SensitiveWordRequest,
)
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/sensitive-words", tags=["Sensitive Words"])

@router.get("", response_model=ApiResult[List[SensitiveWord]])
async def get_all_sensitive_words(
    service: SensitiveWordService = Depends(get_sensitive_word_service)
):
    """List every sensitive word/phrase, sorted A→Z ignoring case."""
    try:
        words = await service.list_words()
        if not words:
            return ApiResult.of(ApiCode.NO_CONTENT, words)
        return ApiResult.of(ApiCode.OK, words)
    except Exception as e:
        logger.error(f"Error in get_all_sensitive_words endpoint: {e}")
        raise

@router.post("", response_model=ApiResult[SensitiveWord])
async def add_sensitive_word(
    request: SensitiveWordRequest,
    service: SensitiveWordService = Depends(get_sensitive_word_service)
):
    """Add a sensitive word/phrase, e.g. {"word": "SELECT"}."""
    try:
        return ApiResult.of(ApiCode.CREATED, await service.add(request.word))
    except Exception as e:
        logger.error(f"Error in add_sensitive_word endpoint: {e}")
        raise

@router.put("/{word_id}", response_model=ApiResult[SensitiveWord])
async def update_sensitive_word(
    word_id: str,
    request: SensitiveWordRequest,
    service: SensitiveWordService = Depends(get_sensitive_word_service)
):
    """Update a sensitive word/phrase by ID, e.g. {"word": "order by"}."""
    try:
        return ApiResult.of(ApiCode.OK, await service.update(word_id, request.word))
    except Exception as e:
        logger.error(f"Error in update_sensitive_word endpoint: {e}")
        raise

@router.delete("/{word_id}", response_model=ApiResult[None])
async def delete_sensitive_word(
    word_id: str,
    service: SensitiveWordService = Depends(get_sensitive_word_service)
):
    """Delete a sensitive word/phrase by ID; OK even if the ID did not exist."""
    try:
        await service.delete(word_id)
        return ApiResult.of(ApiCode.OK)
    except Exception as e:
        logger.error(f"Error in delete_sensitive_word endpoint: {e}")
        raise

@router.post("/sanitize", response_model=ApiResult[Optional[str]])
async def sanitize_text(
    request: SanitizeRequest,
    service: SensitiveWordService = Depends(get_sensitive_word_service)
):
    """Replace stored words/phrases in the input with asterisks."""
    try:
        return ApiResult.of(ApiCode.OK, await service.sanitize(request.input))
    except Exception as e:
        logger.error(f"Error in sanitize_text endpoint: {e}")
        raise
