"""Tests for structured filter evaluation."""

import pytest
from pydantic import ValidationError

from string_analyzer.filters import apply_filters, matches
from string_analyzer.models import FilterSet, StringEntry
from string_analyzer.utils import analyze_string


def make_entry(value: str) -> StringEntry:
    props = analyze_string(value)
    return StringEntry(id=props.content_hash, value=value, properties=props)


@pytest.fixture
def entries():
    return [make_entry(v) for v in ["abc", "level", "racecar", "hello world", "Zebra"]]


def test_empty_filter_set_matches_everything(entries):
    result = apply_filters(entries, FilterSet())

    assert result.count == len(entries)
    assert result.filters_applied == {}


def test_length_bounds_are_inclusive():
    entries = [make_entry("abc"), make_entry("abcde"), make_entry("abcdefg")]

    result = apply_filters(entries, FilterSet(min_length=4, max_length=6))

    assert [e.value for e in result.data] == ["abcde"]
    assert result.count == 1
    assert apply_filters(entries, FilterSet(min_length=5, max_length=5)).count == 1


def test_palindrome_filter_both_ways(entries):
    palindromes = apply_filters(entries, FilterSet(is_palindrome=True))
    others = apply_filters(entries, FilterSet(is_palindrome=False))

    assert [e.value for e in palindromes.data] == ["level", "racecar"]
    assert [e.value for e in others.data] == ["abc", "hello world", "Zebra"]
    assert others.filters_applied == {"is_palindrome": False}


def test_word_count_is_exact(entries):
    result = apply_filters(entries, FilterSet(word_count=2))

    assert [e.value for e in result.data] == ["hello world"]


def test_contains_character_is_case_sensitive(entries):
    assert apply_filters(entries, FilterSet(contains_character="z")).count == 0
    assert apply_filters(entries, FilterSet(contains_character="Z")).count == 1


def test_filters_compose_with_and(entries):
    filter_set = FilterSet(is_palindrome=True, min_length=6, contains_character="r")

    result = apply_filters(entries, filter_set)

    assert [e.value for e in result.data] == ["racecar"]
    assert result.filters_applied == {
        "is_palindrome": True,
        "min_length": 6,
        "contains_character": "r",
    }


def test_unsatisfiable_filters_yield_empty_result(entries):
    result = apply_filters(entries, FilterSet(word_count=1, min_length=1000))

    assert result.data == []
    assert result.count == 0


def test_matches_single_entry():
    entry = make_entry("noon")

    assert matches(entry, FilterSet(is_palindrome=True, word_count=1))
    assert not matches(entry, FilterSet(max_length=3))


def test_filter_set_rejects_multi_character_contains():
    with pytest.raises(ValidationError):
        FilterSet(contains_character="ab")


def test_filter_set_rejects_untyped_values():
    with pytest.raises(ValidationError):
        FilterSet(min_length="5")
    with pytest.raises(ValidationError):
        FilterSet(is_palindrome="true")
