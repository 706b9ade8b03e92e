"""Core text-substitution layer.

This package holds the pure, I/O-free part of currencylex: token
classification, boundary pattern construction, and placeholder replacement.
The localization layer depends on it, never the reverse:

    core <- localization

Exports:
    UnitReplacer: Precompiled ordered unit-token rules
    UnitRule: Token with its classification and compiled pattern
    replace_currency_units: Functional form of UnitReplacer.replace
    classify_token: Ideographic/delimited classification
    compile_unit_pattern: Memoized standalone-occurrence pattern
    CurrencyLexError: Base exception
    CurrencyConfigError: Construction-time misconfiguration

Python 3.13+.
"""

from .errors import CurrencyConfigError, CurrencyLexError
from .replacer import UnitReplacer, replace_currency_units
from .tokens import UnitRule, classify_token, compile_unit_pattern, unit_matches_placeholder

__all__ = [
    "CurrencyConfigError",
    "CurrencyLexError",
    "UnitReplacer",
    "UnitRule",
    "classify_token",
    "compile_unit_pattern",
    "replace_currency_units",
    "unit_matches_placeholder",
]
