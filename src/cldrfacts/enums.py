"""Enumerations for cldrfacts type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class PluralRuleKind(StrEnum):
    """Which of the two independent CLDR plural rule sets to use.

    StrEnum provides automatic string conversion: str(PluralRuleKind.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Counting: 1 apple, 2 apples"""

    ORDINAL = "ordinal"
    """Ranking: 1st, 2nd, 3rd place"""


class Weekday(IntEnum):
    """Day of week, numbered like datetime.date.weekday() (Monday == 0).

    IntEnum so that values compare directly with date.weekday() and
    Babel's Locale.first_week_day.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class MeasurementSystem(StrEnum):
    """CLDR measurementSystem type attribute."""

    METRIC = "metric"
    US = "US"
    UK = "UK"


class PaperSize(StrEnum):
    """CLDR paperSize type attribute."""

    A4 = "A4"
    US_LETTER = "US-Letter"


class Operand(StrEnum):
    """CLDR plural operands (UTS #35, Part 3, Section 5.1).

    StrEnum provides automatic string conversion: str(Operand.N) == "n"
    """

    N = "n"
    """Absolute value of the source number"""

    I = "i"  # noqa: E741 - CLDR operand name
    """Integer digits of n"""

    V = "v"
    """Number of visible fraction digits, with trailing zeros"""

    W = "w"
    """Number of visible fraction digits, without trailing zeros"""

    F = "f"
    """Visible fraction digits as an integer, with trailing zeros"""

    T = "t"
    """Visible fraction digits as an integer, without trailing zeros"""

    C = "c"
    """Compact decimal exponent"""

    E = "e"
    """Synonym for c"""


class RelationKind(StrEnum):
    """Kind of plural-rule relation.

    Negated forms are distinct kinds rather than wrappers: integer-list
    membership and continuous-range membership treat non-integral operands
    differently.
    """

    IN = "in"
    """`=`, `is`, `in`: operand is an integer contained in the range list"""

    NOT_IN = "not in"
    """`!=`, `is not`, `not in`"""

    WITHIN = "within"
    """Operand lies inside a range, non-integers included"""

    NOT_WITHIN = "not within"
    """`not within`"""


class RegionCollection(StrEnum):
    """Region-keyed Dataset collections (exact region, then "001")."""

    TELEPHONE_CODES = "telephone_codes"
    POSTCODE_REGEXES = "postcode_regexes"
    REGION_CODES = "region_codes"
    FIRST_DAYS_OF_WEEK = "first_days_of_week"
    PAPER_SIZES = "paper_sizes"
    MEASUREMENT_SYSTEMS = "measurement_systems"


class LocaleCollection(StrEnum):
    """Locale-keyed Dataset collections (language, then "root")."""

    PLURAL_RULES = "plural_rule_sets"
    ORDINAL_RULES = "ordinal_rule_sets"
    DAY_PERIOD_RULES = "day_period_rule_sets"
    CURRENCY_DISPLAY_NAMES = "currency_display_names"
    CHARACTERS = "characters"


class TemporalCollection(StrEnum):
    """Locale-keyed Dataset collections of time-bounded records."""

    CURRENCY_PERIODS = "currency_periods"


__all__ = [
    "LocaleCollection",
    "MeasurementSystem",
    "Operand",
    "PaperSize",
    "PluralRuleKind",
    "RegionCollection",
    "RelationKind",
    "TemporalCollection",
    "Weekday",
]
