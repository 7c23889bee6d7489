"""Shared constants for cldrfacts.

This module provides centralized configuration constants used across the
core, data and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Reserved identifiers: World region and root locale keys
- Defaults: Values applied when a dataset has no data at any fallback level
- Identifier syntax: Subtag separators
- Input limits: Size constraints for rule sources

Python 3.13+. Zero external dependencies.
"""

from cldrfacts.enums import Weekday

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reserved identifiers
    "WORLD_REGION_ID",
    "ROOT_LOCALE_ID",
    "OTHER_CATEGORY",
    # Defaults
    "DEFAULT_FIRST_DAY_OF_WEEK",
    "DEFAULT_BABEL_LOCALES",
    "DATASET_ENV_VAR",
    # Identifier syntax
    "LOCALE_SEPARATORS",
    "CANONICAL_SEPARATOR",
    # Time
    "SECONDS_PER_DAY",
    # Input limits
    "MAX_RULE_SOURCE_LENGTH",
    "MAX_IDENTIFIER_LENGTH",
]

# ============================================================================
# RESERVED IDENTIFIERS
# ============================================================================

# UN M.49 code for "World". Region collections key their universal default here.
WORLD_REGION_ID: str = "001"

# CLDR root locale. A rule set keyed by exactly ("root",) is the language default.
ROOT_LOCALE_ID: str = "root"

# Every plural rule set implicitly ends with this category.
OTHER_CATEGORY: str = "other"

# ============================================================================
# DEFAULTS
# ============================================================================

# Used by LocaleFacts.first_day_of_week when neither the region nor "001" has data.
DEFAULT_FIRST_DAY_OF_WEEK: Weekday = Weekday.MONDAY

# Locales compiled by build_babel_dataset() when the default dataset is
# loaded without an explicit loader or CLDRFACTS_DATASET path.
DEFAULT_BABEL_LOCALES: tuple[str, ...] = (
    "ar-SA", "de-DE", "en-GB", "en-US", "es-ES", "fr-FR", "hi-IN", "it-IT",
    "ja-JP", "ko-KR", "lv-LV", "nl-NL", "pl-PL", "pt-BR", "ru-RU", "sv-SE",
    "tr-TR", "uk-UA", "zh-CN",
)

# Environment variable naming a JSON dataset file for the default dataset.
DATASET_ENV_VAR: str = "CLDRFACTS_DATASET"

# ============================================================================
# IDENTIFIER SYNTAX
# ============================================================================

# BCP-47 uses "-", POSIX/Babel uses "_". Both are accepted on input.
LOCALE_SEPARATORS: frozenset[str] = frozenset({"-", "_"})

CANONICAL_SEPARATOR: str = "-"

# ============================================================================
# TIME
# ============================================================================

SECONDS_PER_DAY: int = 24 * 60 * 60

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest CLDR plural rule (with samples) is well under 1 KB.
MAX_RULE_SOURCE_LENGTH: int = 4096

# BCP-47 recommends supporting tags of at least 35 characters.
MAX_IDENTIFIER_LENGTH: int = 255
