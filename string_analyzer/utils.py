import hashlib
from collections import Counter
from typing import Dict

from string_analyzer.models import StringProperties


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string as lowercase hex"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """
    Check if string reads the same forwards and backwards.
    Only case is normalized; whitespace and punctuation count.
    """
    return text.casefold() == text[::-1].casefold()


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string (case-sensitive)"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        content_hash=compute_sha256(value),
        character_frequency=get_character_frequency(value),
    )
