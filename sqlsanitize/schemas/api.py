from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiCode(Enum):
    """Response codes carried inside every ApiResult envelope."""

    OK = (200, "Action successful")
    CREATED = (201, "Resource created")
    NO_CONTENT = (204, "No sensitive words found")
    ERROR = (500, "Internal server error")

    @property
    def id(self) -> int:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


class ApiResult(BaseModel, Generic[T]):
    """Generic wrapper for all API responses."""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="When the response was created")
    code: int = Field(..., description="Numeric result code (HTTP-style)")
    message: str = Field(..., description="Human-readable message for the code")
    data: Optional[T] = Field(None, description="Optional payload")

    @classmethod
    def of(cls, api_code: ApiCode, data: Optional[T] = None) -> "ApiResult[T]":
        return cls(code=api_code.id, message=api_code.description, data=data)
