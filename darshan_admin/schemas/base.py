from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional, Generic, TypeVar
from datetime import datetime
import uuid

T = TypeVar('T')


class Envelope(BaseModel, Generic[T]):
    status: str
    data: Optional[T] = None
    error: Optional[str] = None


class Message(BaseModel):
    message: str


class StandardErrorResponse(BaseModel):
    """Standardized error response format"""
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    @field_validator('error_code')
    @classmethod
    def validate_error_code(cls, v):
        if not v or not v.isupper():
            raise ValueError("error_code must be a non-empty uppercase string")
        return v


D = TypeVar('D')
I = TypeVar('I')


class SaveResponse(BaseModel, Generic[D, I]):
    """Outcome of a successful save: the new empty draft and the refreshed list"""
    entity_id: str
    created: bool
    draft: D
    items: List[I] = []
