"""Hypothesis property-based tests for boundary-aware unit replacement.

Tests universal properties of the two boundary regimes:
- Text without a standalone unit is never modified
- Amount + Han unit + trailing boundary is always replaced
- Han unit wedged between ideographs is never replaced
- Delimited units glued to word characters are never replaced
- Delimited units flanked by non-word characters are always replaced

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from currencylex import DEFAULT_CURRENCY_UNITS, PLACEHOLDER
from currencylex.core import UnitReplacer, replace_currency_units
from tests.strategies import (
    amounts,
    ascii_word_tails,
    delimited_separators,
    han_runs,
    token_free_text,
    trailing_boundaries,
)

_DELIMITED_UNITS = [u for u in DEFAULT_CURRENCY_UNITS if u.isascii() and u.isalpha()]


class TestNoSpuriousReplacement:
    """Text without unit tokens is returned unchanged."""

    @given(text=token_free_text())
    def test_identity_without_units(self, text: str) -> None:
        """replace(T, units) == T when T holds no unit token."""
        event(f"text_len={'empty' if not text else 'nonempty'}")
        assert replace_currency_units(text, DEFAULT_CURRENCY_UNITS) == text

    @given(text=st.text(max_size=80))
    def test_empty_unit_list_is_identity(self, text: str) -> None:
        """Any text is unchanged by an empty unit list."""
        assert replace_currency_units(text, []) == text

    @given(text=st.text(max_size=80))
    def test_never_raises(self, text: str) -> None:
        """Arbitrary text is processed without raising."""
        result = UnitReplacer(DEFAULT_CURRENCY_UNITS).replace(text)
        assert isinstance(result, str)


class TestIdeographicBoundaries:
    """Properties of the Han boundary rule."""

    @given(prefix=han_runs(min_size=0), amount=amounts(), trailing=trailing_boundaries())
    def test_amount_unit_punct_replaced(self, prefix: str, amount: str, trailing: str) -> None:
        """<digits>元<boundary> is replaced."""
        text = f"{prefix}{amount}元{trailing}"

        assert replace_currency_units(text, ["元"]) == f"{prefix}{amount}{PLACEHOLDER}{trailing}"

    @given(before=han_runs(), after=han_runs())
    def test_unit_between_ideographs_untouched(self, before: str, after: str) -> None:
        """<ideograph>元<ideograph> is left alone."""
        text = f"{before}元{after}"

        assert replace_currency_units(text, ["元"]) == text

    @given(amount=amounts(), after=han_runs())
    def test_unit_followed_by_ideograph_untouched(self, amount: str, after: str) -> None:
        """A trailing ideograph blocks the match even after an amount."""
        text = f"{amount}元{after}"

        assert replace_currency_units(text, ["元"]) == text

    @given(name=st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12))
    def test_after_closing_placeholder_brace(self, name: str) -> None:
        """{name}元< is replaced."""
        text = f":{{{name}}}元<"

        assert replace_currency_units(text, ["元"]) == f":{{{name}}}{PLACEHOLDER}<"


class TestDelimitedBoundaries:
    """Properties of the word boundary rule."""

    @given(unit=st.sampled_from(_DELIMITED_UNITS), tail=ascii_word_tails())
    def test_unit_glued_to_word_untouched(self, unit: str, tail: str) -> None:
        """<unit><word> is not replaced by the bare unit's rule."""
        text = f"{unit}{tail}"

        assert replace_currency_units(text, [unit]) == text

    @given(unit=st.sampled_from(_DELIMITED_UNITS), head=ascii_word_tails())
    def test_unit_preceded_by_word_untouched(self, unit: str, head: str) -> None:
        """<word><unit> is not replaced."""
        text = f"{head}{unit}"

        assert replace_currency_units(text, [unit]) == text

    @given(
        unit=st.sampled_from(_DELIMITED_UNITS),
        left=delimited_separators(),
        right=delimited_separators(),
    )
    def test_unit_between_separators_replaced(self, unit: str, left: str, right: str) -> None:
        """<sep><unit><sep> is replaced."""
        text = f"{left}{unit}{right}"

        assert replace_currency_units(text, [unit]) == f"{left}{PLACEHOLDER}{right}"


class TestDeterminism:
    """Replacement has no hidden state."""

    @given(text=st.text(max_size=60))
    def test_repeatable(self, text: str) -> None:
        """Two runs over the same text agree."""
        replacer = UnitReplacer(DEFAULT_CURRENCY_UNITS)

        assert replacer.replace(text) == replacer.replace(text)
