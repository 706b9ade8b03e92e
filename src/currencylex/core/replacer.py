"""Boundary-aware replacement of currency unit tokens.

Rewrites every standalone occurrence of a configured unit token into a neutral
placeholder. Tokens are applied in list order; a span claimed by an earlier
token becomes the placeholder, which no later token can match.

Pure string transform: no I/O, no shared mutable state, never raises for
str input.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from currencylex.constants import PLACEHOLDER
from currencylex.core.tokens import UnitRule, unit_matches_placeholder

__all__ = ["UnitReplacer", "replace_currency_units"]

logger = logging.getLogger(__name__)


class UnitReplacer:
    """Precompiled, ordered set of unit-token replacement rules.

    Classification and pattern compilation happen once, at construction.
    Instances are immutable and safe to share across threads.

    Example:
        >>> replacer = UnitReplacer(["元", "yuan"])
        >>> replacer.replace("余额100元")
        '余额100{currency}'
        >>> replacer.replace("元素")
        '元素'
    """

    __slots__ = ("_placeholder", "_rules")

    def __init__(self, units: Iterable[str], placeholder: str = PLACEHOLDER) -> None:
        """Compile replacement rules.

        Empty tokens are skipped with a warning: they would match at every
        position. Tokens whose pattern matches the placeholder are skipped
        too, so an inserted placeholder is never rewritten by a later token.

        Args:
            units: Unit tokens in precedence order
            placeholder: Literal substituted for each standalone occurrence
        """
        rules: list[UnitRule] = []
        for unit in units:
            if not unit:
                logger.warning("Ignoring empty currency unit token")
                continue
            if unit_matches_placeholder(unit, placeholder):
                logger.warning(
                    "Ignoring currency unit token %r: it matches placeholder %r",
                    unit,
                    placeholder,
                )
                continue
            rules.append(UnitRule.for_token(unit))
        self._rules: tuple[UnitRule, ...] = tuple(rules)
        self._placeholder = placeholder

    @property
    def rules(self) -> tuple[UnitRule, ...]:
        """Compiled rules in precedence order."""
        return self._rules

    @property
    def units(self) -> tuple[str, ...]:
        """Unit tokens in precedence order (ignored tokens excluded)."""
        return tuple(rule.token for rule in self._rules)

    @property
    def placeholder(self) -> str:
        """Literal substituted for standalone unit occurrences."""
        return self._placeholder

    def replace(self, text: str) -> str:
        """Replace standalone unit occurrences in text with the placeholder.

        Args:
            text: Input text

        Returns:
            Text with every qualifying occurrence replaced; unchanged if no
            rule matches
        """
        if not text or not self._rules:
            return text

        placeholder = self._placeholder
        for rule in self._rules:
            # Callable replacement: the placeholder is inserted literally even
            # if it contains backslashes or group references.
            text, count = rule.pattern.subn(lambda _match: placeholder, text)
            if count:
                logger.debug(
                    "Replaced %d occurrence(s) of %s unit %r", count, rule.script, rule.token
                )
        return text

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"UnitReplacer(units={self.units!r}, placeholder={self._placeholder!r})"


def replace_currency_units(
    text: str,
    units: Iterable[str],
    placeholder: str = PLACEHOLDER,
) -> str:
    """Replace standalone currency unit tokens in text with a placeholder.

    Functional form of UnitReplacer for one-off use. Patterns are memoized
    per token, so repeated calls do not recompile.

    Args:
        text: Input text
        units: Unit tokens in precedence order; empty list is identity
        placeholder: Literal substituted for each standalone occurrence

    Returns:
        Rewritten text

    Example:
        >>> replace_currency_units("Price: 100 yuan", ["yuan"])
        'Price: 100 {currency}'
        >>> replace_currency_units("yuanbao", ["yuan"])
        'yuanbao'
    """
    return UnitReplacer(units, placeholder).replace(text)
