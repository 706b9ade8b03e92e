"""currencylex - Currency unit replacement for translated messages.

A post-processing layer for message lookups. Translated text (or the source
message, when no translation exists) has every standalone currency unit
token ("元", "yuan", "USD", "$", ...) replaced by one configurable currency
symbol read from the application params.

Boundary detection handles two regimes: Han text, where a unit is recognized
by the digits, brackets and punctuation around it, and space-delimited text,
where a unit must not touch other word characters.

Public API:
    CurrencyMessageSource - Lookup orchestrator with symbol filling
    CurrencyConfig - Construction-time configuration
    CatalogLookup - In-memory catalogs with base-language fallback
    CldrCurrencyParams - Params deriving the symbol from CLDR via Babel
    UnitReplacer - Precompiled boundary-aware unit replacement
    replace_currency_units - Functional form of UnitReplacer.replace

Exceptions:
    CurrencyLexError - Base exception class
    CurrencyConfigError - Invalid construction-time configuration

Submodules:
    currencylex.core - Token classification, patterns, replacement
    currencylex.localization - Collaborators and orchestration
    currencylex.constants - Placeholder, defaults, boundary sets
"""

# Essential Public API - Minimal exports for clean namespace
from .constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_CURRENCY_UNITS, PLACEHOLDER
from .core import CurrencyConfigError, CurrencyLexError, UnitReplacer, replace_currency_units
from .enums import LookupStatus, TokenScript
from .localization import (
    CatalogLookup,
    CldrCurrencyParams,
    CurrencyConfig,
    CurrencyMessageSource,
    MessageLookup,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencylex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_CURRENCY_UNITS",
    "PLACEHOLDER",
    "CatalogLookup",
    "CldrCurrencyParams",
    "CurrencyConfig",
    "CurrencyConfigError",
    "CurrencyLexError",
    "CurrencyMessageSource",
    "LookupStatus",
    "MessageLookup",
    "TokenScript",
    "UnitReplacer",
    "__version__",
    "replace_currency_units",
]
