"""CLDR plural rule engine.

Parses CLDR plural rule conditions and evaluates them against the
operands of a number to select a plural category.

Public API:
    PluralRule - Category plus parsed condition
    compile_rules - Parse category -> rule text pairs
    match_category - Select a category for a number
    PluralOperands - n, i, v, w, f, t, c operands of a number
    parse_condition - Parse a single rule condition

Python 3.13+. Zero external dependencies.
"""

from .ast import ALWAYS, AndCondition, Condition, OrCondition, RangeItem, Relation
from .engine import evaluate, relation_holds
from .operands import PluralOperands, PluralValue
from .parser import parse_condition, strip_samples
from .rules import PLURAL_CATEGORIES, PluralRule, compile_rules, match_category, match_rule

__all__ = [
    "ALWAYS",
    "PLURAL_CATEGORIES",
    "AndCondition",
    "Condition",
    "OrCondition",
    "PluralOperands",
    "PluralRule",
    "PluralValue",
    "RangeItem",
    "Relation",
    "compile_rules",
    "evaluate",
    "match_category",
    "match_rule",
    "parse_condition",
    "relation_holds",
    "strip_samples",
]
