import re
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

from string_analyzer.exceptions import InvalidInput
from string_analyzer.models import FilterSet, StringEntry

INTEGER_KEYS = ("min_length", "max_length", "word_count")

_NUMERAL = re.compile(r"[0-9]+")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: StringEntry) -> "StringResponse":
        props = entry.properties
        return cls(
            id=entry.id,
            value=entry.value,
            properties=StringProperties(
                length=props.length,
                is_palindrome=props.is_palindrome,
                unique_characters=props.unique_characters,
                word_count=props.word_count,
                sha256_hash=props.content_hash,
                character_frequency_map=dict(props.character_frequency),
            ),
            created_at=entry.created_at,
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: Dict[str, Any]


def decode_filters(params: Mapping[str, Optional[str]]) -> FilterSet:
    """
    Decode raw query parameter strings into a typed FilterSet.

    Booleans must be the literal strings "true" or "false", integers
    base-10 non-negative numerals, and contains_character exactly one
    character. Every bad parameter is reported in one InvalidInput.
    """
    decoded: Dict[str, Any] = {}
    errors: List[str] = []

    raw = params.get("is_palindrome")
    if raw is not None:
        if raw == "true":
            decoded["is_palindrome"] = True
        elif raw == "false":
            decoded["is_palindrome"] = False
        else:
            errors.append('is_palindrome must be "true" or "false"')

    for key in INTEGER_KEYS:
        raw = params.get(key)
        if raw is None:
            continue
        if _NUMERAL.fullmatch(raw):
            decoded[key] = int(raw)
        else:
            errors.append(f"{key} must be a non-negative integer")

    raw = params.get("contains_character")
    if raw is not None:
        if len(raw) == 1:
            decoded["contains_character"] = raw
        else:
            errors.append("contains_character must be a single character")

    if errors:
        raise InvalidInput("; ".join(errors))

    return FilterSet(**decoded)
