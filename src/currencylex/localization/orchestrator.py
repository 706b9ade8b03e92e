"""Lookup orchestration with currency symbol filling.

Implements CurrencyMessageSource, a post-processing layer over an injected
message lookup. It wraps the lookup instead of extending a catalog class, and
reads the currency symbol through an injected params reader instead of a
global application object.

Resolution pipeline for translate(category, message, language):
    1. Look the message up.
    2. Missing (None) and message non-empty: use the message itself, so
       untranslated keys still get their currency units processed.
    3. Still missing, or explicitly empty: return as-is.
    4. Replacement enabled: unit tokens -> placeholder -> currency symbol.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from currencylex.core.replacer import UnitReplacer
from currencylex.enums import LookupStatus
from currencylex.localization.config import CurrencyConfig
from currencylex.localization.loading import MessageLookup

if TYPE_CHECKING:
    from currencylex.localization.loading import ParamsReader
    from currencylex.localization.types import (
        Category,
        LanguageCode,
        LookupFunction,
        LookupResult,
        MessageKey,
    )

__all__ = ["CurrencyMessageSource"]

logger = logging.getLogger(__name__)

_NO_PARAMS: Mapping[str, str] = {}


class CurrencyMessageSource:
    """Message source that replaces currency units with a configured symbol.

    Architecture:
    - MessageLookup: the sole source of translated text (injected)
    - ParamsReader: the sole source of the currency symbol (injected)
    - UnitReplacer: compiled once from CurrencyConfig.currency_units

    The symbol is read from the params on every call, so runtime changes to
    the params take effect immediately. No state is written after
    construction; instances are reentrant and safe to share across threads.

    Example - Catalog with missing key fallback:
        >>> lookup = CatalogLookup({"zh-CN": {"app": {"currency": "元"}}})
        >>> source = CurrencyMessageSource(lookup, {"currency_symbol": "￥"})
        >>> source.translate("app", "currency", "zh-CN")
        '￥'
        >>> source.translate("app", "余额100元", "zh-CN")
        '余额100￥'

    Example - Plain callable lookup:
        >>> source = CurrencyMessageSource(lambda c, k, lang: None)
        >>> source.translate("app", "Price: 100 yuan", "en-US")
        'Price: 100 ￥'

    Attributes:
        config: Immutable currency replacement configuration
    """

    __slots__ = ("_config", "_lookup", "_params", "_replacer")

    def __init__(
        self,
        lookup: MessageLookup | LookupFunction,
        params: ParamsReader | None = None,
        *,
        config: CurrencyConfig | None = None,
    ) -> None:
        """Initialize the message source.

        Args:
            lookup: MessageLookup implementation, or a plain callable
                ``(category, key, language) -> str | None``
            params: Application params holding the currency symbol. Any
                Mapping works. ``None`` means the default symbol is always used.
            config: Currency replacement configuration. ``None`` uses
                ``CurrencyConfig()`` defaults.

        Raises:
            TypeError: If lookup is neither a MessageLookup nor callable
        """
        if isinstance(lookup, MessageLookup):
            self._lookup: LookupFunction = lookup.lookup
        elif callable(lookup):
            self._lookup = lookup
        else:
            msg = f"lookup must be a MessageLookup or callable, got {type(lookup).__name__}"
            raise TypeError(msg)

        self._params: ParamsReader = params if params is not None else _NO_PARAMS
        self._config = config if config is not None else CurrencyConfig()
        self._replacer = UnitReplacer(
            self._config.currency_units, self._config.placeholder
        )

    @property
    def config(self) -> CurrencyConfig:
        """Currency replacement configuration."""
        return self._config

    @property
    def replacer(self) -> UnitReplacer:
        """Compiled unit replacer built from the configuration."""
        return self._replacer

    def translate(
        self, category: Category, message: MessageKey, language: LanguageCode
    ) -> LookupResult:
        """Translate a message and fill in the currency symbol.

        Args:
            category: Message category (e.g., 'app')
            message: Source message, also the fallback text when missing
            language: Target language code

        Returns:
            Processed translation; '' for an explicit empty translation;
            None only when the lookup misses and message is ''
        """
        translated = self._lookup(category, message, language)

        if translated is None and message != "":
            logger.debug(
                "No translation for '%s' in category '%s' (%s); using message as text",
                message,
                category,
                language,
            )
            translated = message

        status = LookupStatus.of(translated)
        if status is not LookupStatus.FOUND:
            logger.debug("Passing through %s translation for '%s'", status, message)
            return translated

        if self._config.enable_currency_replace:
            translated = self.replace_currency_units(translated)
            translated = self.fill_currency_symbol(translated)

        return translated

    def replace_currency_units(self, text: str) -> str:
        """Replace standalone currency unit tokens with the placeholder."""
        return self._replacer.replace(text)

    def fill_currency_symbol(self, text: str) -> str:
        """Replace every placeholder occurrence with the current currency symbol."""
        placeholder = self._config.placeholder
        if placeholder not in text:
            return text
        return text.replace(placeholder, self.get_currency_symbol())

    def get_currency_symbol(self) -> str:
        """Read the currency symbol from the params.

        Returns:
            ``params[currency_symbol_key]`` as a string, or the configured
            default symbol when the key is absent
        """
        symbol = self._params.get(self._config.currency_symbol_key)
        if symbol is None:
            return self._config.default_currency_symbol
        return str(symbol)

    def __repr__(self) -> str:
        """Return debug representation."""
        return (
            f"CurrencyMessageSource(units={len(self._replacer.units)}, "
            f"enabled={self._config.enable_currency_replace})"
        )
