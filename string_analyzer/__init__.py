"""Analyze, store and query strings by their derived properties."""

__version__ = "1.0.0"
