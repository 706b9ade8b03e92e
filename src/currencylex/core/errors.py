"""Core error types shared across the core and localization layers.

Runtime substitution never raises: missing translations, empty translations,
malformed tokens, and absent configuration keys all degrade to documented
fallbacks. The only errors this package raises describe misconfiguration
detected at construction time.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["CurrencyConfigError", "CurrencyLexError"]


class CurrencyLexError(Exception):
    """Base exception for all currencylex errors."""


class CurrencyConfigError(CurrencyLexError, ValueError):
    """Invalid construction-time currency configuration.

    Subclasses ValueError so callers validating configuration with
    ``except ValueError`` keep working.

    Examples:
    - Unit tokens passed as a bare string instead of a sequence
    - Empty placeholder or symbol key
    - Placeholder that a configured unit token would match

    Attributes:
        field_name: Name of the offending CurrencyConfig field
    """

    def __init__(self, message: str, *, field_name: str = "") -> None:
        """Initialize CurrencyConfigError.

        Args:
            message: Human-readable description of the problem
            field_name: CurrencyConfig field that failed validation
        """
        super().__init__(message)
        self.field_name = field_name
