"""Pytest configuration for the cldrfacts test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Shared fixtures:
- sample_document / sample_dataset: small hand-written dataset covering
  every collection, with "001" and "root" defaults
- clean_default_dataset: resets the process-wide default dataset around
  a test
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from cldrfacts.data import Dataset, load_dataset
from cldrfacts.runtime import reset_default_dataset

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


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED DATASETS
# =============================================================================


def make_sample_document() -> dict[str, Any]:
    """Small dataset document touching every collection."""
    return {
        "telephone_codes": [
            {"regions": ["US", "CA"], "value": ["1"]},
            {"regions": ["LV"], "value": ["371"]},
        ],
        "postcode_regexes": [
            {"regions": ["US"], "value": r"\d{5}(-\d{4})?"},
            {"regions": ["CA"], "value": r"[A-Z]\d[A-Z] ?\d[A-Z]\d"},
            {"regions": ["LV"], "value": r"LV-\d{4}"},
        ],
        "region_codes": [
            {
                "regions": ["US"],
                "value": {"alpha3": "USA", "numeric": "840", "fips10": "US", "internet": ["us"]},
            },
        ],
        "first_days_of_week": [
            {"regions": ["US", "CA", "JP"], "value": "sun"},
            {"regions": ["001"], "value": "mon"},
        ],
        "paper_sizes": [
            {"regions": ["US", "CA"], "value": "US-Letter"},
            {"regions": ["001"], "value": "A4"},
        ],
        "measurement_systems": [
            {"regions": ["US", "LR"], "value": "US"},
            {"regions": ["GB"], "value": "UK"},
            {"regions": ["001"], "value": "metric"},
        ],
        "currency_periods": {
            "en-US": [{"value": "USD", "from": "1792-01-01"}],
            "lv-LV": [
                {"value": "EUR", "from": "2014-01-01"},
                {"value": "LVL", "from": "1992-06-28", "to": "2014-01-01"},
            ],
            "de-DE": [
                {"value": "EUR", "from": "2002-01-01"},
                {"value": "DEM", "from": "1948-06-20", "to": "2002-01-01"},
            ],
        },
        "plural_rules": [
            {"locales": ["en", "de"], "rules": {"one": "i = 1 and v = 0"}},
            {
                "locales": ["lv"],
                "rules": {
                    "zero": "n % 10 = 0 or n % 100 = 11..19 or v = 2 and f % 100 = 11..19",
                    "one": "n % 10 = 1 and n % 100 != 11 or v = 2 and f % 10 = 1 and "
                    "f % 100 != 11 or v != 2 and f % 10 = 1",
                },
            },
            {"locales": ["ja"], "rules": {}},
            {"locales": ["root"], "rules": {}},
        ],
        "ordinal_rules": [
            {
                "locales": ["en"],
                "rules": {
                    "one": "n % 10 = 1 and n % 100 != 11",
                    "two": "n % 10 = 2 and n % 100 != 12",
                    "few": "n % 10 = 3 and n % 100 != 13",
                },
            },
        ],
        "day_period_rules": [
            {
                "locales": ["en"],
                "rules": {
                    "midnight": {"at": "00:00"},
                    "noon": {"at": "12:00"},
                    "morning1": {"from": "06:00", "before": "12:00"},
                    "afternoon1": {"from": "12:00", "before": "18:00"},
                    "evening1": {"from": "18:00", "before": "21:00"},
                    "night1": {"from": "21:00", "before": "06:00"},
                },
            },
        ],
        "currency_display_names": [
            {"locales": ["en"], "names": {"USD": "US Dollar", "EUR": "Euro"}},
            {"locales": ["lv"], "names": {"EUR": "eiro"}},
            {"locales": ["root"], "names": {"USD": "US$", "EUR": "€"}},
        ],
        "characters": [
            {
                "locales": ["en"],
                "characters": {
                    "main": "[a b c d e f g h i j k l m n o p q r s t u v w x y z]",
                    "index": "[A B C D E F G H I J K L M N O P Q R S T U V W X Y Z]",
                    "character_order": "left-to-right",
                },
            },
            {
                "locales": ["lv"],
                "characters": {
                    "main": "[a ā b c č d e ē f g ģ h i ī j k ķ l ļ "
                    "m n ņ o p r s š t u ū v z ž]",
                },
            },
            {"locales": ["root"], "characters": {"character_order": "left-to-right"}},
        ],
    }


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Fresh copy of the sample document (safe to mutate)."""
    return make_sample_document()


@pytest.fixture(scope="session")
def sample_dataset() -> Dataset:
    """Sample dataset, built once per session (Datasets are immutable)."""
    return load_dataset(make_sample_document())


@pytest.fixture
def clean_default_dataset() -> Iterator[None]:
    """Reset the process-wide default dataset before and after a test."""
    reset_default_dataset()
    yield
    reset_default_dataset()
