"""Collaborator protocols and the in-memory catalog lookup.

CurrencyMessageSource depends on two external capabilities, both injected at
construction:

Components:
    MessageLookup - Protocol for resolving (category, key, language) to text
    ParamsReader - Protocol for reading application params (any Mapping fits)
    CatalogLookup - Immutable in-memory catalogs with base-language fallback

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, TypeAlias, runtime_checkable

from currencylex.locale_utils import base_languages, normalize_locale
from currencylex.localization.types import (
    Category,
    LanguageCode,
    LookupResult,
    MessageKey,
    ParamsKey,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "MessageLookup",
    "ParamsReader",
    # Concrete lookup
    "CatalogLookup",
]

logger = logging.getLogger(__name__)

CatalogMapping: TypeAlias = Mapping[LanguageCode, Mapping[Category, Mapping[MessageKey, str]]]


@runtime_checkable
class MessageLookup(Protocol):
    """Protocol for resolving a message in a catalog.

    This is a Protocol (structural typing) rather than ABC so any message
    catalog subsystem can be adapted without inheriting from this package.

    Example:
        >>> class GettextLookup:
        ...     def __init__(self, translations):
        ...         self._translations = translations
        ...     def lookup(self, category, key, language):
        ...         text = self._translations[language].gettext(key)
        ...         return None if text == key else text
    """

    def lookup(self, category: Category, key: MessageKey, language: LanguageCode) -> LookupResult:
        """Resolve a message.

        Args:
            category: Message category (e.g., 'app')
            key: Source message used as the catalog key
            language: Target language code

        Returns:
            Translated text, '' for an explicit empty translation,
            or None when the catalog has no entry
        """


class ParamsReader(Protocol):
    """Protocol for reading application params.

    Any Mapping[str, str] (including a plain dict) satisfies it.
    """

    def get(self, key: ParamsKey, default: str | None = None, /) -> str | None:
        """Return the value for key, or default when absent."""


@dataclass(frozen=True, slots=True)
class CatalogLookup:
    """In-memory message catalogs keyed by language and category.

    Implements MessageLookup. Language codes are normalized to POSIX form on
    both sides, and a lookup for "zh-Hans-CN" falls back through "zh_Hans"
    and "zh" before reporting the message missing.

    Example:
        >>> catalogs = {"zh-CN": {"app": {"Hello": "你好", "currency": "元"}}}
        >>> lookup = CatalogLookup(catalogs)
        >>> lookup.lookup("app", "Hello", "zh_CN")
        '你好'
        >>> lookup.lookup("app", "用户名", "zh-CN") is None
        True

    Attributes:
        catalogs: language -> category -> key -> translated text
    """

    catalogs: CatalogMapping
    _normalized: Mapping[LanguageCode, Mapping[Category, Mapping[MessageKey, str]]] = field(
        init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Index catalogs by normalized language code.

        Raises:
            ValueError: If two language codes normalize to the same key
        """
        normalized: dict[LanguageCode, Mapping[Category, Mapping[MessageKey, str]]] = {}
        for language, categories in self.catalogs.items():
            key = normalize_locale(language)
            if key in normalized:
                msg = f"Duplicate catalog for language '{language}' (normalized: '{key}')"
                raise ValueError(msg)
            normalized[key] = categories
        object.__setattr__(self, "_normalized", MappingProxyType(normalized))

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """Normalized language codes with a catalog."""
        return tuple(self._normalized)

    def lookup(self, category: Category, key: MessageKey, language: LanguageCode) -> LookupResult:
        """Resolve a message, falling back to base languages.

        Args:
            category: Message category
            key: Source message
            language: Target language code

        Returns:
            Stored text verbatim (including ''), or None if no catalog in the
            fallback chain holds the key
        """
        for candidate in base_languages(language):
            messages = self._normalized.get(candidate, {}).get(category)
            if messages is not None and key in messages:
                if candidate != normalize_locale(language):
                    logger.debug(
                        "Message '%s' resolved from base language '%s' for '%s'",
                        key,
                        candidate,
                        language,
                    )
                return messages[key]
        return None

    def __call__(self, category: Category, key: MessageKey, language: LanguageCode) -> LookupResult:
        """Alias for lookup(), so the catalog also works as a LookupFunction."""
        return self.lookup(category, key, language)
