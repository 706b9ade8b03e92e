"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes language code normalization used by the catalog lookup and the
CLDR-backed symbol reader. Provides canonical locale handling so that
"zh-CN" and "zh_CN" address the same catalog.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "base_languages",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (zh-CN), while Babel/POSIX uses underscores (zh_CN).

    Args:
        locale_code: BCP-47 locale code (e.g., "zh-CN", "en-US")

    Returns:
        POSIX-formatted locale code (e.g., "zh_CN", "en_US")

    Example:
        >>> normalize_locale("zh-CN")
        'zh_CN'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def base_languages(locale_code: str) -> tuple[str, ...]:
    """Return the locale followed by its progressively shorter parents.

    Subtags are dropped from the right, so a catalog registered for the bare
    language serves every regional variant that has no catalog of its own.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        Normalized codes from most to least specific; empty for ""

    Example:
        >>> base_languages("zh-Hans-CN")
        ('zh_Hans_CN', 'zh_Hans', 'zh')
        >>> base_languages("en")
        ('en',)
    """
    normalized = normalize_locale(locale_code)
    parts = [part for part in normalized.split("_") if part]
    return tuple("_".join(parts[:end]) for end in range(len(parts), 0, -1))


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("zh-CN")
        >>> locale.language
        'zh'
        >>> locale.territory
        'CN'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
