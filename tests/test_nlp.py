"""Tests for natural language query translation."""

import pytest

from string_analyzer.exceptions import Conflicting, Unparseable
from string_analyzer.models import FilterSet
from string_analyzer.nlp import (
    RULES,
    extract_filters,
    format_interpretation,
    parse_natural_language_query,
)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("all single word palindromic strings", {"word_count": 1, "is_palindrome": True}),
        ("strings longer than 10 characters", {"min_length": 11}),
        ("strings shorter than 5 characters", {"max_length": 4}),
        ("strings with more than 3 characters", {"min_length": 4}),
        ("strings less than 8", {"max_length": 7}),
        ("at least 4 characters", {"min_length": 4}),
        ("at most 9 characters", {"max_length": 9}),
        ("strings containing the letter z", {"contains_character": "z"}),
        ("strings that contain the character q", {"contains_character": "q"}),
        ("contains x", {"contains_character": "x"}),
        ("palindromic strings that contain the first vowel", {"is_palindrome": True, "contains_character": "a"}),
        ("strings with the second vowel", {"contains_character": "e"}),
        ("two word strings with 2 words", {"word_count": 2}),
        ("show me palindromes", {"is_palindrome": True}),
    ],
)
def test_parse_queries(query, expected):
    assert parse_natural_language_query(query).applied() == expected


def test_matching_is_case_insensitive():
    result = parse_natural_language_query("ALL SINGLE WORD PALINDROMIC STRINGS")

    assert result == FilterSet(word_count=1, is_palindrome=True)


def test_numbered_words_override_single_word():
    assert parse_natural_language_query("one word and 3 words").word_count == 3


def test_at_least_overrides_longer_than():
    result = parse_natural_language_query("longer than 10 and at least 3 characters")

    assert result.min_length == 3


def test_at_most_overrides_shorter_than():
    result = parse_natural_language_query("shorter than 10 but at most 20 characters")

    assert result.max_length == 20


def test_vowel_rules_override_contains_regardless_of_phrase_order():
    result = parse_natural_language_query("second vowel or first vowel, containing the letter z")

    assert result.contains_character == "e"


@pytest.mark.parametrize("query", ["asdljasd", "", "show me everything", "words"])
def test_unparseable_queries(query):
    with pytest.raises(Unparseable):
        parse_natural_language_query(query)


def test_conflicting_length_bounds():
    with pytest.raises(Conflicting) as exc_info:
        parse_natural_language_query("at least 10 characters and at most 5 characters")

    assert exc_info.value.parsed_filters == {"min_length": 10, "max_length": 5}


def test_longer_than_and_shorter_than_same_number_conflict():
    with pytest.raises(Conflicting):
        parse_natural_language_query("longer than 5 and shorter than 5")


def test_equal_bounds_do_not_conflict():
    result = parse_natural_language_query("at least 5 and at most 5 characters")

    assert result.min_length == result.max_length == 5


def test_impractical_combination_is_accepted():
    result = parse_natural_language_query("single word strings at least 1000 characters")

    assert result.applied() == {"word_count": 1, "min_length": 1000}


def test_contains_only_matches_a_single_letter():
    assert extract_filters("contains the letter zz") == {}


def test_rule_order_is_fixed():
    assert [rule.name for rule in RULES] == [
        "single_word",
        "word_count",
        "palindrome",
        "longer_than",
        "shorter_than",
        "at_least",
        "at_most",
        "contains_letter",
        "first_vowel",
        "second_vowel",
    ]


def test_format_interpretation():
    filter_set = FilterSet(word_count=1, is_palindrome=True)

    assert format_interpretation("single word palindromes", filter_set) == {
        "original": "single word palindromes",
        "parsed_filters": {"is_palindrome": True, "word_count": 1},
    }


def test_only_ascii_digits_are_numbers():
    with pytest.raises(Unparseable):
        parse_natural_language_query("longer than ١٠")


def test_contains_letter_followed_by_accented_character():
    assert parse_natural_language_query("contains zé").contains_character == "z"
