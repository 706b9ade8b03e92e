"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating CurrencyMessageSource call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from typing import TypeAlias

__all__ = [
    "Category",
    "LanguageCode",
    "LookupFunction",
    "LookupResult",
    "MessageKey",
    "ParamsKey",
]

Category: TypeAlias = str
"""Message category (e.g., 'app', 'errors')."""

MessageKey: TypeAlias = str
"""Source message used as the catalog key (e.g., 'Hello', '余额100元')."""

LanguageCode: TypeAlias = str
"""BCP-47 or POSIX language code (e.g., 'zh-CN', 'en_US')."""

ParamsKey: TypeAlias = str
"""Key in the application params (e.g., 'currency_symbol')."""

LookupResult: TypeAlias = str | None
"""Translated text, '' for an explicit empty translation, None when missing."""

LookupFunction: TypeAlias = Callable[[Category, MessageKey, LanguageCode], LookupResult]
"""Plain callable form of the MessageLookup protocol."""
