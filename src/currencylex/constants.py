"""Shared constants for currencylex.

This module provides centralized configuration constants used across
the core and localization packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Placeholder: Transient marker staging a currency substitution
- Symbol defaults: Configuration key and fallback currency symbol
- Unit tokens: Default written forms of currency units
- Boundary sets: Characters flanking a standalone ideographic unit

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Placeholder
    "PLACEHOLDER",
    # Symbol defaults
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_CURRENCY_SYMBOL_KEY",
    # Unit tokens
    "DEFAULT_CURRENCY_UNITS",
    # Boundary sets
    "HAN_RANGE_START",
    "HAN_RANGE_END",
    "IDEOGRAPHIC_LEADING_BOUNDARY",
    "IDEOGRAPHIC_TRAILING_BOUNDARY",
]

# ============================================================================
# PLACEHOLDER
# ============================================================================

# Marks a confirmed currency span between the replace and fill passes.
# Braces are not word characters and "{" is not a leading boundary, so the
# default unit tokens can never re-match inside it.
PLACEHOLDER: str = "{currency}"

# ============================================================================
# SYMBOL DEFAULTS
# ============================================================================

# Key read from the application params on every call.
DEFAULT_CURRENCY_SYMBOL_KEY: str = "currency_symbol"

# FULLWIDTH YEN SIGN (U+FFE5). Distinct from U+00A5 in DEFAULT_CURRENCY_UNITS,
# so a filled symbol never looks like a unit token.
DEFAULT_CURRENCY_SYMBOL: str = "\uffe5"

# ============================================================================
# UNIT TOKENS
# ============================================================================

# Order is replacement precedence: the first token claiming a span wins.
DEFAULT_CURRENCY_UNITS: tuple[str, ...] = (
    "元",  # Yuan (Han)
    "yuan",
    "yuans",
    "Yuan",
    "Yuans",
    "dollar",
    "dollars",
    "Dollar",
    "Dollars",
    "$",
    "USD",
    "RMB",
    "CNY",
    "usd",
    "rmb",
    "cny",
    "¥",  # Yen/Yuan sign
)

# ============================================================================
# BOUNDARY SETS
# ============================================================================

# CJK Unified Ideographs subset used to classify a token as ideographic.
HAN_RANGE_START: str = "\u4e00"
HAN_RANGE_END: str = "\u9fa5"

# Single characters allowed immediately before an ideographic unit, besides
# start-of-text, ASCII digits, and ASCII whitespace.
IDEOGRAPHIC_LEADING_BOUNDARY: str = "}]"

# Single characters allowed immediately after an ideographic unit, besides
# end-of-text and ASCII whitespace. Full-width and ASCII clause punctuation
# plus HTML angle brackets; keep this set exact.
IDEOGRAPHIC_TRAILING_BOUNDARY: str = (
    "\uff0c\u3002\uff01\uff1f\u3001\uff1b\uff1a"  # Full-width ，。！？、；：
    ",.!?;:"
    "<>"
)
