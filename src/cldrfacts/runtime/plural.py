"""Locale-aware plural category selection.

Resolves the cardinal or ordinal rule set for a locale through the
language-then-root chain and matches a number against it. A locale with no
rule set at any level behaves like CLDR root: every number is "other".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from cldrfacts.constants import OTHER_CATEGORY
from cldrfacts.data.model import Dataset
from cldrfacts.diagnostics import ErrorTemplate, InvalidArgumentError
from cldrfacts.enums import LocaleCollection, PluralRuleKind
from cldrfacts.plural.operands import PluralOperands, PluralValue
from cldrfacts.plural.rules import PluralRule, match_category

from .fallback import ResolveResult, resolve_locale_fact

__all__ = ["coerce_rule_kind", "resolve_plural_category", "resolve_plural_rules"]

logger = logging.getLogger(__name__)

_COLLECTIONS: dict[PluralRuleKind, LocaleCollection] = {
    PluralRuleKind.CARDINAL: LocaleCollection.PLURAL_RULES,
    PluralRuleKind.ORDINAL: LocaleCollection.ORDINAL_RULES,
}


def coerce_rule_kind(kind: object) -> PluralRuleKind:
    """Convert "cardinal"/"ordinal" to PluralRuleKind.

    Raises:
        InvalidArgumentError: For any other value
    """
    try:
        return PluralRuleKind(kind)
    except ValueError:
        raise InvalidArgumentError(ErrorTemplate.unsupported_rule_kind(kind)) from None


def resolve_plural_rules(
    dataset: Dataset, locale_id: str, kind: PluralRuleKind = PluralRuleKind.CARDINAL
) -> ResolveResult[tuple[PluralRule, ...]]:
    """Rule set for a locale: language, then root.

    Raises:
        InvalidArgumentError: If kind is neither cardinal nor ordinal
    """
    return resolve_locale_fact(dataset, locale_id, _COLLECTIONS[coerce_rule_kind(kind)])


def resolve_plural_category(
    dataset: Dataset,
    locale_id: str,
    kind: PluralRuleKind,
    value: PluralValue | PluralOperands,
) -> ResolveResult[str]:
    """Plural category of value for a locale.

    Args:
        dataset: Dataset to search
        locale_id: Locale identifier (e.g. "lv-LV")
        kind: PluralRuleKind.CARDINAL or PluralRuleKind.ORDINAL
        value: Number, numeric string, or pre-computed operands

    Returns:
        ``(category, errors)``. The category is "other" when the locale has
        no rule set at any level, and None only when locale_id is malformed.

    Raises:
        InvalidArgumentError: If kind is unsupported or value cannot be
            turned into plural operands

    Example:
        >>> from cldrfacts.data import load_dataset
        >>> dataset = load_dataset({"plural_rules": [
        ...     {"locales": ["en"], "rules": {"one": "i = 1 and v = 0"}},
        ... ]})
        >>> resolve_plural_category(dataset, "en-US", PluralRuleKind.CARDINAL, 1)
        ('one', ())
    """
    rule_kind = coerce_rule_kind(kind)
    operands = value if isinstance(value, PluralOperands) else PluralOperands.from_value(value)

    rules, errors = resolve_plural_rules(dataset, locale_id, rule_kind)
    if errors:
        return None, errors
    if rules is None:
        logger.debug("No %s rules for '%s'; using '%s'", rule_kind, locale_id, OTHER_CATEGORY)
        return OTHER_CATEGORY, ()
    return match_category(rules, operands), ()
