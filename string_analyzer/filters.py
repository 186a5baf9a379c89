from typing import Callable, Iterable, List

from string_analyzer.models import FilterResult, FilterSet, StringEntry

Predicate = Callable[[StringEntry], bool]


def build_predicates(filter_set: FilterSet) -> List[Predicate]:
    """One predicate per supplied filter key; absent keys add no constraint"""
    predicates: List[Predicate] = []

    if filter_set.is_palindrome is not None:
        expected = filter_set.is_palindrome
        predicates.append(lambda e: e.properties.is_palindrome == expected)

    if filter_set.min_length is not None:
        min_length = filter_set.min_length
        predicates.append(lambda e: e.properties.length >= min_length)

    if filter_set.max_length is not None:
        max_length = filter_set.max_length
        predicates.append(lambda e: e.properties.length <= max_length)

    if filter_set.word_count is not None:
        word_count = filter_set.word_count
        predicates.append(lambda e: e.properties.word_count == word_count)

    if filter_set.contains_character is not None:
        char = filter_set.contains_character
        predicates.append(lambda e: char in e.value)

    return predicates


def matches(entry: StringEntry, filter_set: FilterSet) -> bool:
    return all(predicate(entry) for predicate in build_predicates(filter_set))


def apply_filters(entries: Iterable[StringEntry], filter_set: FilterSet) -> FilterResult:
    """Narrow entries by every supplied filter (logical AND)"""
    predicates = build_predicates(filter_set)
    data = [e for e in entries if all(predicate(e) for predicate in predicates)]

    return FilterResult(
        data=data,
        count=len(data),
        filters_applied=filter_set.applied(),
    )
