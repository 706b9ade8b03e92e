"""Currency replacement configuration for CurrencyMessageSource.

Provides a single frozen dataclass that encapsulates the construction-time
settings: the ordered unit tokens, the enable flag, the params key holding the
currency symbol, the default symbol, and the placeholder literal.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from currencylex.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_CURRENCY_SYMBOL_KEY,
    DEFAULT_CURRENCY_UNITS,
    PLACEHOLDER,
)
from currencylex.core.errors import CurrencyConfigError
from currencylex.core.tokens import unit_matches_placeholder

__all__ = ["CurrencyConfig"]


@dataclass(frozen=True, slots=True)
class CurrencyConfig:
    """Immutable configuration for currency unit replacement.

    All fields have sensible defaults; constructing ``CurrencyConfig()`` with
    no arguments reproduces the stock behavior (Chinese and English yuan and
    dollar forms, ISO codes, "$" and "¥", filled with "￥" unless the params
    say otherwise).

    Attributes:
        currency_units: Unit tokens in precedence order. Any iterable of str
            is accepted and stored as a tuple.
        enable_currency_replace: When False, translations are returned
            without unit replacement or symbol filling (default: True).
        currency_symbol_key: Params key read on every call for the symbol
            (default: "currency_symbol").
        default_currency_symbol: Symbol used when the params lack the key
            (default: "￥").
        placeholder: Transient marker between the replace and fill passes
            (default: "{currency}"). No unit token may match it.

    Example:
        >>> config = CurrencyConfig(currency_units=["元", "USD"])
        >>> config.currency_units
        ('元', 'USD')
        >>> config.disabled().enable_currency_replace
        False
    """

    currency_units: tuple[str, ...] = DEFAULT_CURRENCY_UNITS
    enable_currency_replace: bool = True
    currency_symbol_key: str = DEFAULT_CURRENCY_SYMBOL_KEY
    default_currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    placeholder: str = PLACEHOLDER

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            CurrencyConfigError: If currency_units is a bare string or holds
                non-string items, if placeholder or currency_symbol_key is
                empty, or if a unit token matches the placeholder.
        """
        if isinstance(self.currency_units, str):
            msg = (
                "currency_units must be a sequence of tokens, not a string: "
                f"{self.currency_units!r}"
            )
            raise CurrencyConfigError(msg, field_name="currency_units")
        units = tuple(self.currency_units)
        for unit in units:
            if not isinstance(unit, str):
                msg = f"currency_units items must be str, got {type(unit).__name__}: {unit!r}"
                raise CurrencyConfigError(msg, field_name="currency_units")
        object.__setattr__(self, "currency_units", units)

        if not self.placeholder:
            msg = "placeholder cannot be empty"
            raise CurrencyConfigError(msg, field_name="placeholder")
        if not self.currency_symbol_key:
            msg = "currency_symbol_key cannot be empty"
            raise CurrencyConfigError(msg, field_name="currency_symbol_key")

        # A unit matching the placeholder would be substituted twice.
        for unit in units:
            if unit_matches_placeholder(unit, self.placeholder):
                msg = f"Unit token {unit!r} matches placeholder {self.placeholder!r}"
                raise CurrencyConfigError(msg, field_name="placeholder")

    def with_units(self, units: Iterable[str]) -> CurrencyConfig:
        """Return a copy with a different unit token list."""
        return dataclasses.replace(self, currency_units=tuple(units))

    def disabled(self) -> CurrencyConfig:
        """Return a copy with currency replacement switched off."""
        return dataclasses.replace(self, enable_currency_replace=False)
