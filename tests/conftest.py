"""Pytest configuration for the currencylex test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from currencylex import CatalogLookup, CurrencyMessageSource

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


# Load appropriate profile automatically
settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================

# Catalogs mirror a typical app: English keys with Chinese values, and a
# Chinese catalog that deliberately lacks entries for Chinese keys.
ZH_CN_MESSAGES: dict[str, str] = {
    "Hello": "你好",
    "World": "世界",
    "Price": "价格",
    "currency": "元",
    "blank": "",
}

EN_US_MESSAGES: dict[str, str] = {
    "Hello": "Hello",
    "World": "World",
    "Price": "Price",
}


@pytest.fixture
def catalog_lookup() -> CatalogLookup:
    """In-memory catalogs for zh-CN and en-US under the 'app' category."""
    return CatalogLookup({
        "zh-CN": {"app": ZH_CN_MESSAGES},
        "en-US": {"app": EN_US_MESSAGES},
    })


@pytest.fixture
def params() -> dict[str, str]:
    """Mutable application params with the fullwidth yuan sign."""
    return {"currency_symbol": "￥"}


@pytest.fixture
def message_source(
    catalog_lookup: CatalogLookup, params: dict[str, str]
) -> CurrencyMessageSource:
    """Message source with default configuration."""
    return CurrencyMessageSource(catalog_lookup, params)
