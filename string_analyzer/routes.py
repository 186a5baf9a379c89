import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from string_analyzer import crud
from string_analyzer.exceptions import InvalidInput
from string_analyzer.schemas import (
    NaturalLanguageResponse,
    StringListResponse,
    StringResponse,
    decode_filters,
)
from string_analyzer.storage import InMemoryStore

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> InMemoryStore:
    """Dependency to provide the application's store."""
    return request.app.state.store


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
async def create_string(request: Request, store: InMemoryStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 400 if "value" is missing, 422 if it is not a string,
    409 if the string already exists.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidInput("Invalid request body")

    if not isinstance(body, dict) or "value" not in body:
        raise InvalidInput("Missing required field: value")

    entry = crud.create_string(store, body["value"])
    logger.info(f"Stored string {entry.id}")
    return StringResponse.from_entry(entry)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Filter strings that contain this character"),
    store: InMemoryStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    filter_set = decode_filters(
        {
            "is_palindrome": is_palindrome,
            "min_length": min_length,
            "max_length": max_length,
            "word_count": word_count,
            "contains_character": contains_character,
        }
    )
    result = crud.get_all_strings(store, filter_set)

    return StringListResponse(
        data=[StringResponse.from_entry(e) for e in result.data],
        count=result.count,
        filters_applied=result.filters_applied,
    )


# Must be registered before /strings/{string_value}
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: InMemoryStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    result = crud.filter_by_natural_language(store, query)
    logger.info(f"Interpreted {query!r} as {result['interpreted_query']['parsed_filters']}")

    return NaturalLanguageResponse(
        data=[StringResponse.from_entry(e) for e in result["data"]],
        count=result["count"],
        interpreted_query=result["interpreted_query"],
    )


@router.get("/strings/{string_value}", response_model=StringResponse)
def get_string(string_value: str, store: InMemoryStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.from_entry(crud.get_string_by_value(store, string_value))


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: InMemoryStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    logger.info(f"Deleted string {string_value!r}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
