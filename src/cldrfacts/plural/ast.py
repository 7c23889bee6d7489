"""Plural rule condition AST.

A parsed condition is an OrCondition of AndConditions of Relations:

    n % 10 = 2..4 and n % 100 != 12..14 or n = 0
    └──────────── AndCondition ───────────┘    └ AndCondition ┘

"and" binds tighter than "or", so no parentheses are needed (CLDR rules
have none). All nodes are immutable and hashable.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from cldrfacts.enums import Operand, RelationKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "RangeItem",
    "Relation",
    "AndCondition",
    "OrCondition",
    "Condition",
    "ALWAYS",
]


@dataclass(frozen=True, slots=True)
class RangeItem:
    """Inclusive integer range. A single value has low == high.

    Attributes:
        low: Lower bound (inclusive)
        high: Upper bound (inclusive)
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        """Validate range invariants."""
        if self.low > self.high:
            msg = f"RangeItem low ({self.low}) must be <= high ({self.high})"
            raise ValueError(msg)

    def __str__(self) -> str:
        if self.low == self.high:
            return str(self.low)
        return f"{self.low}..{self.high}"


@dataclass(frozen=True, slots=True)
class Relation:
    """Single comparison: ``operand [% modulus] <kind> range_list``.

    Attributes:
        operand: Operand being tested
        modulus: Positive divisor applied before comparison, or None
        kind: Membership kind (integer list vs. continuous range, negated or not)
        ranges: Non-empty range list
    """

    operand: Operand
    modulus: int | None
    kind: RelationKind
    ranges: tuple[RangeItem, ...]

    def __str__(self) -> str:
        expr = str(self.operand)
        if self.modulus is not None:
            expr = f"{expr} % {self.modulus}"
        range_list = ",".join(str(item) for item in self.ranges)
        match self.kind:
            case RelationKind.IN:
                return f"{expr} = {range_list}"
            case RelationKind.NOT_IN:
                return f"{expr} != {range_list}"
            case RelationKind.WITHIN | RelationKind.NOT_WITHIN:
                return f"{expr} {self.kind} {range_list}"


@dataclass(frozen=True, slots=True)
class AndCondition:
    """Conjunction of relations (short-circuit)."""

    relations: tuple[Relation, ...]

    def __str__(self) -> str:
        return " and ".join(str(relation) for relation in self.relations)


@dataclass(frozen=True, slots=True)
class OrCondition:
    """Disjunction of conjunctions (short-circuit).

    An OrCondition with no branches is always true; it is what the bare
    CLDR "other" rule parses to.
    """

    conditions: tuple[AndCondition, ...]

    @property
    def is_always(self) -> bool:
        """True for the empty condition."""
        return not self.conditions

    def __str__(self) -> str:
        return " or ".join(str(condition) for condition in self.conditions)


type Condition = OrCondition

ALWAYS: OrCondition = OrCondition(conditions=())
