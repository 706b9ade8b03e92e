"""Hypothesis strategies for currencylex property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- text: Han runs, ASCII words, amounts, and unit boundary contexts

Usage:
    from tests.strategies import han_runs, trailing_boundaries
"""

from .text import (
    amounts,
    ascii_word_tails,
    delimited_separators,
    han_runs,
    token_free_text,
    trailing_boundaries,
)

__all__ = [
    "amounts",
    "ascii_word_tails",
    "delimited_separators",
    "han_runs",
    "token_free_text",
    "trailing_boundaries",
]
