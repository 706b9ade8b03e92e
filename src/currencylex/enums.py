"""Enumerations for currencylex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum


class TokenScript(StrEnum):
    """Boundary regime a unit token is matched under.

    StrEnum provides automatic string conversion: str(TokenScript.IDEOGRAPHIC) == "ideographic"
    """

    IDEOGRAPHIC = "ideographic"
    """Token contains a Han ideograph: 元 (boundary inferred from digits and punctuation)"""

    DELIMITED = "delimited"
    """Token written in a space-delimited script: yuan, USD, $ (word boundary)"""


class LookupStatus(StrEnum):
    """Tri-state outcome of a message lookup.

    StrEnum provides automatic string conversion: str(LookupStatus.MISSING) == "missing"
    """

    FOUND = "found"
    """Lookup returned a non-empty translation"""

    EMPTY = "empty"
    """Lookup returned an explicit empty translation"""

    MISSING = "missing"
    """Lookup has no entry for the key (None)"""

    @classmethod
    def of(cls, value: str | None) -> LookupStatus:
        """Classify a lookup value.

        Example:
            >>> LookupStatus.of(None)
            <LookupStatus.MISSING: 'missing'>
            >>> LookupStatus.of("")
            <LookupStatus.EMPTY: 'empty'>
        """
        if value is None:
            return cls.MISSING
        if value == "":
            return cls.EMPTY
        return cls.FOUND


__all__ = [
    "LookupStatus",
    "TokenScript",
]
