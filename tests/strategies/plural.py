"""Hypothesis strategies for plural operands and rule sources.

Event-Emitting Strategies (HypoFuzz-Optimized):
- plural_values: Emits plural_value_type=int|decimal|float|string
- decimal_values: Emits decimal_fraction_digits=N
- relation_sources: Emits relation_operator==|!=|is|in|within

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# ============================================================================
# POOLS
# ============================================================================

# Languages whose rules Babel ships, chosen for rule variety:
# one/other, zero/one, one/few/many, all six categories, none at all.
BABEL_PLURAL_LANGUAGES = [
    "en", "de", "fr", "pt", "lv", "lt", "pl", "ru", "uk",
    "cs", "sl", "ar", "cy", "ga", "he", "ja", "zh", "ko",
]

_OPERANDS = ["n", "i", "v", "w", "f", "t"]

plural_integers: SearchStrategy[int] = st.integers(min_value=0, max_value=10_000_000)


# ============================================================================
# COMPOSITE STRATEGIES
# ============================================================================


@st.composite
def decimal_values(draw: DrawFn) -> Decimal:
    """Generate a non-negative Decimal with 0-3 visible fraction digits.

    Events emitted:
    - decimal_fraction_digits={0|1|2|3}
    """
    digits = draw(st.integers(min_value=0, max_value=3))
    event(f"decimal_fraction_digits={digits}")
    scaled = draw(st.integers(min_value=0, max_value=10**6))
    return Decimal(scaled).scaleb(-digits)


@st.composite
def plural_values(draw: DrawFn) -> int | float | Decimal | str:
    """Generate any value PluralOperands.from_value() accepts.

    Events emitted:
    - plural_value_type={int|decimal|float|string}
    """
    kind = draw(st.sampled_from(["int", "decimal", "float", "string"]))
    event(f"plural_value_type={kind}")
    match kind:
        case "int":
            return draw(st.integers(min_value=-(10**9), max_value=10**9))
        case "decimal":
            return draw(decimal_values())
        case "float":
            return draw(
                st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False)
            )
        case _:
            return str(draw(decimal_values()))


@st.composite
def relation_sources(draw: DrawFn) -> str:
    """Generate a single well-formed relation such as ``n % 10 = 2..4``.

    Events emitted:
    - relation_operator={=|!=|is|in|within}
    """
    operand = draw(st.sampled_from(_OPERANDS))
    modulus = draw(st.none() | st.sampled_from([10, 100, 1000]))
    expr = operand if modulus is None else f"{operand} % {modulus}"
    operator = draw(st.sampled_from(["=", "!=", "is", "in", "within"]))
    event(f"relation_operator={operator}")

    low = draw(st.integers(min_value=0, max_value=100))
    if operator == "is":
        return f"{expr} is {low}"
    high = draw(st.integers(min_value=low, max_value=low + 20))
    item = str(low) if low == high else f"{low}..{high}"
    return f"{expr} {operator} {item}"


@st.composite
def condition_sources(draw: DrawFn) -> str:
    """Generate ``rel and rel or rel`` style conditions."""
    branches = draw(
        st.lists(
            st.lists(relation_sources(), min_size=1, max_size=3).map(" and ".join),
            min_size=1,
            max_size=3,
        )
    )
    return " or ".join(branches)
