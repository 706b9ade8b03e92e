"""Hypothesis strategies for currency unit replacement property tests.

Provides strategies for generating Han runs, ASCII words, amounts and
boundary characters that flank (or fail to flank) a unit token.

Usage:
    from tests.strategies.text import han_runs, token_free_text

Event-Emitting Strategies (HypoFuzz-Optimized):
    - trailing_boundaries: Emits trailing_boundary=end|whitespace|punct|angle
    - delimited_separators: Emits delimited_separator=edge|whitespace|punct

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from currencylex.constants import IDEOGRAPHIC_TRAILING_BOUNDARY

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# Han characters U+4E00..U+4FFF, minus the yuan unit itself.
_HAN_ALPHABET: str = "".join(chr(cp) for cp in range(0x4E00, 0x5000) if chr(cp) != "元")

# Lowercase letters that cannot spell any default unit token.
_SAFE_LOWERCASE: str = "abcefghijklnopqstvwxz"

_SAFE_PUNCTUATION: str = " ,.;:!?()[]<>-+*/\n\t，。！？、；："


def han_runs(min_size: int = 1, max_size: int = 8) -> SearchStrategy[str]:
    """Generate runs of Han ideographs that never contain 元."""
    return st.text(alphabet=_HAN_ALPHABET, min_size=min_size, max_size=max_size)


def amounts() -> SearchStrategy[str]:
    """Generate ASCII digit strings such as '100'."""
    return st.text(alphabet="0123456789", min_size=1, max_size=9)


def ascii_word_tails() -> SearchStrategy[str]:
    """Generate word characters that glue onto a delimited token."""
    return st.text(
        alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_",
        min_size=1,
        max_size=6,
    )


def token_free_text() -> SearchStrategy[str]:
    """Generate text that cannot contain any default unit token."""
    return st.text(
        alphabet=_HAN_ALPHABET[:200] + _SAFE_LOWERCASE + "0123456789" + _SAFE_PUNCTUATION,
        max_size=60,
    )


@st.composite
def trailing_boundaries(draw: DrawFn) -> str:
    """Generate a valid right-hand context for an ideographic unit.

    Events emitted:
    - trailing_boundary=end|whitespace|punct|angle
    """
    kind = draw(st.sampled_from(["end", "whitespace", "punct", "angle"]))
    event(f"trailing_boundary={kind}")
    match kind:
        case "end":
            return ""
        case "whitespace":
            return draw(st.sampled_from([" ", "\n", "\r", "\t"]))
        case "angle":
            return draw(st.sampled_from(["<", ">"]))
        case _:
            punct = IDEOGRAPHIC_TRAILING_BOUNDARY.replace("<", "").replace(">", "")
            return draw(st.sampled_from(list(punct)))


@st.composite
def delimited_separators(draw: DrawFn) -> str:
    """Generate a non-word context for a delimited unit.

    Events emitted:
    - delimited_separator=edge|whitespace|punct
    """
    kind = draw(st.sampled_from(["edge", "whitespace", "punct"]))
    event(f"delimited_separator={kind}")
    match kind:
        case "edge":
            return ""
        case "whitespace":
            return draw(st.sampled_from([" ", "\n", "\t"]))
        case _:
            return draw(st.sampled_from(list(",.;:!?()[]<>\"'/-")))
