"""Unit token classification and boundary pattern construction.

Each unit token is matched under one of two boundary regimes:

- IDEOGRAPHIC: Han text has no inter-word whitespace, so a standalone unit is
  inferred from what flanks it. The preceding character must be start-of-text,
  an ASCII digit, ASCII whitespace, "}" or "]"; the following character must be
  end-of-text, ASCII whitespace, clause punctuation (full-width or ASCII), "<"
  or ">". Matches "100元", "{user_gift}元<" and a sentence-final "元"; rejects
  the "元" inside "元素".
- DELIMITED: the token must not touch an ASCII word character ([A-Za-z0-9_])
  on either side. Matches "100 yuan" and "(USD)"; rejects "yuanbao".

All patterns are compiled with re.ASCII and the token is escaped, so any token
string is matched verbatim and case-sensitively.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from currencylex.constants import (
    HAN_RANGE_END,
    HAN_RANGE_START,
    IDEOGRAPHIC_LEADING_BOUNDARY,
    IDEOGRAPHIC_TRAILING_BOUNDARY,
)
from currencylex.enums import TokenScript

__all__ = [
    "UnitRule",
    "classify_token",
    "compile_unit_pattern",
    "unit_matches_placeholder",
]

# Maximum distinct tokens with memoized patterns.
_PATTERN_CACHE_SIZE: int = 256

_HAN_CHARACTER = re.compile(f"[{HAN_RANGE_START}-{HAN_RANGE_END}]")

# Negated classes: "not preceded by anything outside the set" also holds at
# start-of-text, which keeps the lookbehind fixed-width.
_LEADING = rf"(?<![^\d\s{re.escape(IDEOGRAPHIC_LEADING_BOUNDARY)}])"
_TRAILING = rf"(?![^\s{re.escape(IDEOGRAPHIC_TRAILING_BOUNDARY)}])"


def classify_token(token: str) -> TokenScript:
    """Classify a unit token by the boundary regime it is matched under.

    Args:
        token: Unit token (e.g., "元", "yuan", "$")

    Returns:
        TokenScript.IDEOGRAPHIC if the token holds at least one Han ideograph
        (U+4E00..U+9FA5), otherwise TokenScript.DELIMITED

    Example:
        >>> classify_token("元")
        <TokenScript.IDEOGRAPHIC: 'ideographic'>
        >>> classify_token("USD")
        <TokenScript.DELIMITED: 'delimited'>
    """
    if _HAN_CHARACTER.search(token):
        return TokenScript.IDEOGRAPHIC
    return TokenScript.DELIMITED


@functools.lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def compile_unit_pattern(token: str) -> re.Pattern[str]:
    """Compile the standalone-occurrence pattern for a unit token.

    Memoized per token; compiled patterns are immutable and shareable
    across threads.

    Args:
        token: Non-empty unit token

    Returns:
        Compiled pattern matching only standalone occurrences of token

    Raises:
        ValueError: If token is empty (it would match at every position)
    """
    if not token:
        msg = "Unit token cannot be empty"
        raise ValueError(msg)

    escaped = re.escape(token)
    match classify_token(token):
        case TokenScript.IDEOGRAPHIC:
            source = f"{_LEADING}{escaped}{_TRAILING}"
        case TokenScript.DELIMITED:
            source = rf"(?<!\w){escaped}(?!\w)"
    return re.compile(source, re.ASCII)


def unit_matches_placeholder(token: str, placeholder: str) -> bool:
    """Check whether a unit token would re-match inside the placeholder.

    The placeholder is tested in isolation, where both text edges count as
    boundaries for either regime.

    Args:
        token: Unit token to test (empty tokens never match)
        placeholder: Placeholder literal

    Returns:
        True if the token's pattern finds a match in the placeholder
    """
    if not token:
        return False
    return compile_unit_pattern(token).search(placeholder) is not None


@dataclass(frozen=True, slots=True)
class UnitRule:
    """A unit token with its classification and compiled pattern.

    Built once per token when a UnitReplacer is constructed, so the
    classification is not recomputed on each replacement.

    Attributes:
        token: The unit token
        script: Boundary regime the token is matched under
        pattern: Compiled standalone-occurrence pattern
    """

    token: str
    script: TokenScript
    pattern: re.Pattern[str]

    @classmethod
    def for_token(cls, token: str) -> UnitRule:
        """Build the rule for a non-empty unit token.

        Raises:
            ValueError: If token is empty
        """
        return cls(
            token=token,
            script=classify_token(token),
            pattern=compile_unit_pattern(token),
        )
