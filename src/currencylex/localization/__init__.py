"""Lookup orchestration package for CurrencyMessageSource.

Provides the full localization stack: type aliases, collaborator protocols,
the in-memory catalog lookup, CLDR-backed symbol params, configuration, and
the orchestrator.

Submodules:
    types        - PEP 695 type aliases (Category, MessageKey, LanguageCode, ...)
    loading      - MessageLookup and ParamsReader protocols, CatalogLookup
    config       - CurrencyConfig (construction-time configuration)
    symbols      - CldrCurrencyParams, cldr_currency_symbol (Babel/CLDR)
    orchestrator - CurrencyMessageSource

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from currencylex.enums import LookupStatus
from currencylex.localization.config import CurrencyConfig
from currencylex.localization.loading import CatalogLookup, MessageLookup, ParamsReader
from currencylex.localization.orchestrator import CurrencyMessageSource
from currencylex.localization.symbols import CldrCurrencyParams, cldr_currency_symbol
from currencylex.localization.types import (
    Category,
    LanguageCode,
    LookupFunction,
    LookupResult,
    MessageKey,
    ParamsKey,
)

__all__ = [
    # Main orchestrator
    "CurrencyMessageSource",
    "CurrencyConfig",
    # Collaborator protocols and implementations
    "MessageLookup",
    "ParamsReader",
    "CatalogLookup",
    "CldrCurrencyParams",
    "cldr_currency_symbol",
    # Lookup tri-state
    "LookupStatus",
    # Type aliases for user code type annotations
    "Category",
    "LanguageCode",
    "LookupFunction",
    "LookupResult",
    "MessageKey",
    "ParamsKey",
]
