from typing import Any, Dict, Optional

from string_analyzer.exceptions import Conflict, InvalidInput, InvalidType, NotFound
from string_analyzer.filters import apply_filters
from string_analyzer.models import FilterResult, FilterSet, StringEntry
from string_analyzer.nlp import format_interpretation, parse_natural_language_query
from string_analyzer.storage import InMemoryStore
from string_analyzer.utils import analyze_string


def create_string(store: InMemoryStore, value: Any) -> StringEntry:
    """Analyze and store a new string"""
    if value is None:
        raise InvalidInput("Missing required field: value")
    if not isinstance(value, str):
        raise InvalidType('Invalid data type for "value": must be string')
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInput('Invalid "value": must be valid UTF-8 text')

    if store.exists(value):
        raise Conflict()

    properties = analyze_string(value)
    entry = StringEntry(
        id=properties.content_hash,
        value=value,
        properties=properties,
    )
    return store.insert(entry)


def get_string_by_value(store: InMemoryStore, value: str) -> StringEntry:
    entry = store.find_by_value(value)
    if entry is None:
        raise NotFound()
    return entry


def get_string_by_id(store: InMemoryStore, string_id: str) -> StringEntry:
    """Get string analysis by ID (hash)"""
    entry = store.find_by_id(string_id)
    if entry is None:
        raise NotFound()
    return entry


def get_all_strings(store: InMemoryStore, filter_set: Optional[FilterSet] = None) -> FilterResult:
    """Get all strings with optional filters"""
    return apply_filters(store.list_all(), filter_set or FilterSet())


def filter_by_natural_language(store: InMemoryStore, query: Any) -> Dict[str, Any]:
    """
    Filter strings using a natural language query.
    Example: "all single word palindromic strings"
    """
    if not isinstance(query, str) or not query.strip():
        raise InvalidInput('Query parameter "query" is required and must be a non-empty string')

    filter_set = parse_natural_language_query(query)
    result = apply_filters(store.list_all(), filter_set)

    return {
        "data": result.data,
        "count": result.count,
        "interpreted_query": format_interpretation(query, filter_set),
    }


def delete_string(store: InMemoryStore, value: str) -> bool:
    """Delete string analysis by value"""
    if not store.remove(value):
        raise NotFound()
    return True
