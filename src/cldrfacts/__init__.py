"""cldrfacts - CLDR locale and region facts with fallback resolution.

Answers questions such as "which currency does en-US use today", "what is
the postal-code pattern for Canada", "what is the first day of the week in
France", or "which plural category does 22 take in Russian" from an
immutable, pre-indexed CLDR dataset.

Public API:
    LocaleFacts - Typed accessors (currency, postcode, plural category, ...)
    Dataset - Immutable, pre-indexed collection of facts
    load_dataset - Load a Dataset from JSON or a mapping
    build_babel_dataset - Build a Dataset from Babel's CLDR data
    LocaleKey - Locale identifier decomposition
    resolve_region_fact / resolve_locale_fact / resolve_temporal_fact /
    resolve_plural_category - Generic resolvers taking an explicit Dataset

Exceptions:
    LocaleDataError - Base exception class
    InvalidIdentifierError - Malformed locale or region identifier
    InvalidArgumentError - Caller contract violation
    PluralRuleSyntaxError - Plural rule does not parse
    DatasetLoadError - Dataset source cannot be loaded

Submodules:
    cldrfacts.core - LocaleKey
    cldrfacts.data - Dataset model, indexes, loaders
    cldrfacts.plural - Plural rule parser and engine
    cldrfacts.runtime - Resolvers, LocaleFacts, default dataset
    cldrfacts.diagnostics - Error types and diagnostic formatting
"""

from .core import LocaleKey
from .data import Dataset, build_babel_dataset, load_dataset
from .diagnostics import (
    DatasetLoadError,
    FrozenLocaleError,
    InvalidArgumentError,
    InvalidIdentifierError,
    LocaleDataError,
    PluralRuleSyntaxError,
)
from .enums import (
    LocaleCollection,
    MeasurementSystem,
    PaperSize,
    PluralRuleKind,
    RegionCollection,
    TemporalCollection,
    Weekday,
)
from .runtime import (
    LocaleFacts,
    get_default_dataset,
    resolve_locale_fact,
    resolve_plural_category,
    resolve_region_fact,
    resolve_temporal_fact,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrfacts")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CLDR release the plural rule grammar follows
__cldr_version__ = "47"

__all__ = [
    "Dataset",
    "DatasetLoadError",
    "FrozenLocaleError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "LocaleCollection",
    "LocaleDataError",
    "LocaleFacts",
    "LocaleKey",
    "MeasurementSystem",
    "PaperSize",
    "PluralRuleKind",
    "PluralRuleSyntaxError",
    "RegionCollection",
    "TemporalCollection",
    "Weekday",
    "__cldr_version__",
    "__version__",
    "build_babel_dataset",
    "get_default_dataset",
    "load_dataset",
    "resolve_locale_fact",
    "resolve_plural_category",
    "resolve_region_fact",
    "resolve_temporal_fact",
]
