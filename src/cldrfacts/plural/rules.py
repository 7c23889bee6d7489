"""CLDR plural rule matching.

Selects a plural category ("zero", "one", "two", "few", "many", "other")
for a number from an ordered sequence of PluralRule objects.

Every rule set implicitly ends with "other": a number no rule matches is
"other", so well-formed data never needs to declare it.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from cldrfacts.constants import OTHER_CATEGORY

from .ast import OrCondition
from .engine import evaluate
from .operands import PluralOperands, PluralValue
from .parser import parse_condition

__all__ = ["PLURAL_CATEGORIES", "PluralRule", "compile_rules", "match_category", "match_rule"]

PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")


@dataclass(frozen=True, slots=True)
class PluralRule:
    """One category and the condition that selects it.

    Attributes:
        category: Plural category name
        condition: Parsed condition
        source: Original rule text (kept for display and serialization)
    """

    category: str
    condition: OrCondition
    source: str = ""

    @classmethod
    def parse(cls, category: str, source: str) -> PluralRule:
        """Build a rule from CLDR rule text.

        Raises:
            PluralRuleSyntaxError: If source does not parse
        """
        return cls(category=category, condition=parse_condition(source), source=source)

    def matches(self, operands: PluralOperands) -> bool:
        """True if this rule's condition holds for the operands."""
        return evaluate(self.condition, operands)


def compile_rules(rules: Mapping[str, str] | Iterable[tuple[str, str]]) -> tuple[PluralRule, ...]:
    """Parse ``category -> rule text`` pairs into an ordered rule tuple.

    Declaration order is kept, except that an explicit "other" rule is
    moved last so it can never shadow a more specific category.

    Example:
        >>> rules = compile_rules({"one": "n = 1", "other": ""})
        >>> [rule.category for rule in rules]
        ['one', 'other']
    """
    pairs = rules.items() if isinstance(rules, Mapping) else rules
    parsed = [PluralRule.parse(category, source) for category, source in pairs]
    return tuple(sorted(parsed, key=lambda rule: rule.category == OTHER_CATEGORY))


def match_rule(
    rules: Sequence[PluralRule], value: PluralValue | PluralOperands
) -> PluralRule | None:
    """Return the first rule matching value, or None."""
    operands = value if isinstance(value, PluralOperands) else PluralOperands.from_value(value)
    for rule in rules:
        if rule.matches(operands):
            return rule
    return None


def match_category(rules: Sequence[PluralRule], value: PluralValue | PluralOperands) -> str:
    """Select the plural category for a number.

    Rules are tried in order; the first match wins. No match means "other".

    Args:
        rules: Ordered rule sequence (cardinal or ordinal)
        value: Number or pre-computed operands

    Returns:
        Plural category name

    Raises:
        InvalidArgumentError: If value cannot be turned into operands

    Examples:
        >>> rules = compile_rules({
        ...     "one": "n = 1",
        ...     "few": "n % 10 = 2..4 and n % 100 != 12..14",
        ... })
        >>> [match_category(rules, n) for n in (1, 2, 5, 22, 112)]
        ['one', 'few', 'other', 'few', 'other']
    """
    rule = match_rule(rules, value)
    return rule.category if rule is not None else OTHER_CATEGORY
