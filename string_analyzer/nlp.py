"""
Natural language query translation.

A fixed, ordered list of independent rules is run against the lower-cased
query. Every rule that matches writes exactly one FilterSet field, and a
later rule overwrites a field set by an earlier one (last write wins):

- "<N> words" overrides "single word" / "one word"
- "at least N" overrides "longer than N" / "more than N"
- "at most N" overrides "shorter than N" / "less than N"
- "first vowel" overrides "contains X", and "second vowel" overrides both

The override between the contains / vowel rules follows rule order, not the
order of the phrases in the query. This is intentional.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}
"""
import re
from typing import Any, Callable, Dict, List, NamedTuple

from string_analyzer.exceptions import Conflicting, Unparseable
from string_analyzer.models import FilterSet


class Rule(NamedTuple):
    name: str
    field: str
    pattern: re.Pattern
    extract: Callable[[re.Match], Any]


def _number(match: re.Match) -> int:
    return int(match.group(1))


RULES: List[Rule] = [
    Rule(
        "single_word",
        "word_count",
        re.compile(r"\b(?:single|one)\s+word\b", re.ASCII),
        lambda m: 1,
    ),
    Rule(
        "word_count",
        "word_count",
        re.compile(r"\b(\d+)\s+words?\b", re.ASCII),
        _number,
    ),
    Rule(
        "palindrome",
        "is_palindrome",
        re.compile(r"\bpalindrom(?:ic|es|e)\b", re.ASCII),
        lambda m: True,
    ),
    Rule(
        "longer_than",
        "min_length",
        re.compile(r"\b(?:longer|more)\s+than\s+(\d+)(?:\s+characters?)?\b", re.ASCII),
        lambda m: _number(m) + 1,
    ),
    Rule(
        "shorter_than",
        "max_length",
        re.compile(r"\b(?:shorter|less)\s+than\s+(\d+)(?:\s+characters?)?\b", re.ASCII),
        lambda m: _number(m) - 1,
    ),
    Rule(
        "at_least",
        "min_length",
        re.compile(r"\bat\s+least\s+(\d+)(?:\s+characters?)?\b", re.ASCII),
        _number,
    ),
    Rule(
        "at_most",
        "max_length",
        re.compile(r"\bat\s+most\s+(\d+)(?:\s+characters?)?\b", re.ASCII),
        _number,
    ),
    Rule(
        "contains_letter",
        "contains_character",
        re.compile(r"\bcontain(?:s|ing)?(?:\s+(?:the\s+)?(?:letter|character))?\s+([a-z])\b", re.ASCII),
        lambda m: m.group(1),
    ),
    Rule(
        "first_vowel",
        "contains_character",
        re.compile(r"\bfirst\s+vowel\b", re.ASCII),
        lambda m: "a",
    ),
    Rule(
        "second_vowel",
        "contains_character",
        re.compile(r"\bsecond\s+vowel\b", re.ASCII),
        lambda m: "e",
    ),
]


def extract_filters(query: str) -> Dict[str, Any]:
    """Run every rule in order and collect the fields they set"""
    normalized = query.lower()
    filters: Dict[str, Any] = {}

    for rule in RULES:
        match = rule.pattern.search(normalized)
        if match:
            filters[rule.field] = rule.extract(match)

    return filters


def parse_natural_language_query(query: str) -> FilterSet:
    """
    Translate a free text query into a FilterSet.

    Raises Unparseable when no rule matched and Conflicting when
    min_length ends up greater than max_length. No other combination
    is treated as contradictory.
    """
    filters = extract_filters(query)

    if not filters:
        raise Unparseable()

    min_length = filters.get("min_length")
    max_length = filters.get("max_length")
    if min_length is not None and max_length is not None and min_length > max_length:
        raise Conflicting(
            "Query parsed but resulted in conflicting filters: min_length > max_length",
            parsed_filters=filters,
        )

    return FilterSet(**filters)


def format_interpretation(original: str, filter_set: FilterSet) -> Dict[str, Any]:
    return {
        "original": original,
        "parsed_filters": filter_set.applied(),
    }
