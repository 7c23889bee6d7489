"""Plural condition evaluation.

Evaluates parsed conditions against a PluralOperands set. Pure functions:
evaluating the same condition on the same operands always gives the same
answer.

Relation semantics:
    IN / NOT_IN (``=``, ``!=``, ``is``, ``in``):
        Integer-list membership. A non-integral operand (n = 1.5) is never
        IN any list, so ``n != 1`` is true for 1.5.
    WITHIN / NOT_WITHIN:
        Continuous range membership. 1.5 is within 1..2.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from cldrfacts.enums import RelationKind

from .ast import OrCondition, RangeItem, Relation
from .operands import PluralOperands

__all__ = ["evaluate", "relation_holds"]


def _is_integral(value: int | Decimal) -> bool:
    if isinstance(value, int):
        return True
    return value == value.to_integral_value()


def _in_integer_ranges(value: int | Decimal, ranges: tuple[RangeItem, ...]) -> bool:
    if not _is_integral(value):
        return False
    return any(item.low <= value <= item.high for item in ranges)


def _within_ranges(value: int | Decimal, ranges: tuple[RangeItem, ...]) -> bool:
    return any(item.low <= value <= item.high for item in ranges)


def relation_holds(relation: Relation, operands: PluralOperands) -> bool:
    """Evaluate a single relation.

    Args:
        relation: Parsed relation
        operands: Operand set of the number being categorized

    Returns:
        True if the relation is satisfied
    """
    value = operands.get(relation.operand)
    if relation.modulus is not None:
        value = value % relation.modulus

    match relation.kind:
        case RelationKind.IN:
            return _in_integer_ranges(value, relation.ranges)
        case RelationKind.NOT_IN:
            return not _in_integer_ranges(value, relation.ranges)
        case RelationKind.WITHIN:
            return _within_ranges(value, relation.ranges)
        case RelationKind.NOT_WITHIN:
            return not _within_ranges(value, relation.ranges)


def evaluate(condition: OrCondition, operands: PluralOperands) -> bool:
    """Evaluate a condition with short-circuit and/or.

    Args:
        condition: Parsed condition
        operands: Operand set of the number being categorized

    Returns:
        True if the condition is satisfied (always True for ALWAYS)

    Example:
        >>> from cldrfacts.plural.parser import parse_condition
        >>> evaluate(parse_condition("n = 1"), PluralOperands.from_value(1))
        True
    """
    if condition.is_always:
        return True
    return any(
        all(relation_holds(relation, operands) for relation in branch.relations)
        for branch in condition.conditions
    )
