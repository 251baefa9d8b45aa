from pydantic import BaseModel, Field, field_validator


class SensitiveWord(BaseModel):
    """A stored word or phrase to be masked (case-insensitive)."""
    id: str = Field(..., description="Database ID of the sensitive word", examples=["66f1c0a5e13b4b2f9c8d7a10"])
    word: str = Field(..., description="Canonical (trimmed, lower-case) word or phrase", examples=["select"])

    @classmethod
    def from_document(cls, doc: dict) -> "SensitiveWord":
        return cls(id=str(doc["_id"]), word=doc["word"])


class SensitiveWordRequest(BaseModel):
    """Request model for creating/updating a sensitive word or phrase."""
    word: str = Field(..., description="Word or phrase to store as sensitive", examples=["SELECT"])

    @field_validator("word")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("word must not be blank")
        return value


class SanitizeRequest(BaseModel):
    """Request model for the sanitize endpoint."""
    input: str = Field(..., description="Text to sanitize", examples=["Select * from users order by name"])

    @field_validator("input")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("input must not be blank")
        return value
