from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_serializer, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StringProperties(BaseModel):
    """Properties derived from a string value; never recomputed after creation"""

    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    content_hash: str
    character_frequency: Mapping[str, int]

    @field_validator("character_frequency")
    @classmethod
    def freeze_frequency(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer("character_frequency")
    def serialize_frequency(self, v):
        return dict(v)


class StringEntry(BaseModel):
    """A stored string with its derived properties and identifier"""

    model_config = ConfigDict(frozen=True)

    id: str  # SHA-256 hash of value
    value: str
    properties: StringProperties
    created_at: datetime = Field(default_factory=utcnow)


class FilterSet(BaseModel):
    """
    Optional typed constraints used to narrow a listing.
    Every key is independent; an empty filter set matches everything.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_palindrome: Optional[StrictBool] = None
    min_length: Optional[StrictInt] = None
    max_length: Optional[StrictInt] = None
    word_count: Optional[StrictInt] = None
    contains_character: Optional[str] = None

    @field_validator("contains_character")
    @classmethod
    def validate_single_character(cls, v):
        if v is not None and len(v) != 1:
            raise ValueError("contains_character must be a single character")
        return v

    def applied(self) -> Dict[str, Any]:
        """Only the keys that were actually supplied, with their typed values"""
        return self.model_dump(exclude_none=True)


class FilterResult(BaseModel):
    data: List[StringEntry]
    count: int
    filters_applied: Dict[str, Any]
