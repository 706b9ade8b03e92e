"""CLDR-backed currency symbol params.

Derives the currency symbol from an ISO 4217 code and a locale instead of a
hard-coded params entry, using Babel's CLDR data. The result plugs into
CurrencyMessageSource as its params reader.

Thread-safe. Babel caches locale data internally; the symbol itself is
looked up on every access, never stored.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from currencylex.constants import DEFAULT_CURRENCY_SYMBOL_KEY
from currencylex.locale_utils import get_babel_locale
from currencylex.localization.types import LanguageCode, ParamsKey

__all__ = ["CldrCurrencyParams", "cldr_currency_symbol"]

logger = logging.getLogger(__name__)

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3


def cldr_currency_symbol(currency_code: str, locale_code: LanguageCode) -> str:
    """Return the CLDR symbol for a currency in a locale.

    Unknown or malformed locales degrade to the ISO code itself, which is
    always a readable currency mention.

    Args:
        currency_code: ISO 4217 code (e.g., "CNY", "USD")
        locale_code: BCP-47 or POSIX locale (e.g., "zh-CN", "en_US")

    Returns:
        Localized symbol (e.g., "¥" for CNY in zh_CN, "CN¥" in en_US)

    Example:
        >>> cldr_currency_symbol("CNY", "zh_CN")
        '¥'
        >>> cldr_currency_symbol("USD", "en_US")
        '$'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import UnknownLocaleError  # noqa: PLC0415
    from babel.numbers import get_currency_symbol  # noqa: PLC0415

    try:
        return get_currency_symbol(currency_code, locale=get_babel_locale(locale_code))
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Using currency code '%s' as symbol",
            locale_code,
            e,
            currency_code,
        )
        return currency_code
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Using currency code '%s' as symbol",
            locale_code,
            e,
            currency_code,
        )
        return currency_code


class CldrCurrencyParams(Mapping[ParamsKey, str]):
    """Read-only params whose currency symbol comes from CLDR.

    ``params[symbol_key]`` is resolved through Babel on each access; every
    other key is served from ``extra``.

    Example:
        >>> params = CldrCurrencyParams("USD", "en_US")
        >>> params["currency_symbol"]
        '$'
        >>> params.get("missing") is None
        True
    """

    __slots__ = ("_currency_code", "_extra", "_locale", "_symbol_key")

    def __init__(
        self,
        currency_code: str,
        locale: LanguageCode,
        *,
        symbol_key: ParamsKey = DEFAULT_CURRENCY_SYMBOL_KEY,
        extra: Mapping[ParamsKey, str] | None = None,
    ) -> None:
        """Initialize CLDR-backed params.

        Args:
            currency_code: ISO 4217 code, case-insensitive (e.g., "cny")
            locale: Locale used for the symbol (e.g., "zh-CN")
            symbol_key: Key under which the symbol is exposed
            extra: Additional static params

        Raises:
            ValueError: If currency_code is not three ASCII letters
        """
        code = currency_code.upper()
        if len(code) != ISO_CURRENCY_CODE_LENGTH or not (code.isascii() and code.isalpha()):
            msg = f"Currency code must be 3 ASCII letters (ISO 4217), got: '{currency_code}'"
            raise ValueError(msg)
        self._currency_code = code
        self._locale = locale
        self._symbol_key = symbol_key
        self._extra: dict[ParamsKey, str] = dict(extra or {})
        self._extra.pop(symbol_key, None)

    @property
    def currency_code(self) -> str:
        """Normalized ISO 4217 code."""
        return self._currency_code

    @property
    def locale(self) -> LanguageCode:
        """Locale the symbol is resolved for."""
        return self._locale

    def __getitem__(self, key: ParamsKey) -> str:
        if key == self._symbol_key:
            return cldr_currency_symbol(self._currency_code, self._locale)
        return self._extra[key]

    def __iter__(self) -> Iterator[ParamsKey]:
        yield self._symbol_key
        yield from self._extra

    def __len__(self) -> int:
        return len(self._extra) + 1

    def __repr__(self) -> str:
        """Return debug representation."""
        return (
            f"CldrCurrencyParams(currency_code={self._currency_code!r}, "
            f"locale={self._locale!r}, symbol_key={self._symbol_key!r})"
        )
