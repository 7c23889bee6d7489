"""Parser for CLDR plural rule conditions.

Grammar (UTS #35 Part 3, "Plural rules syntax"), samples excluded:

    condition     = and_condition ('or' and_condition)*
    and_condition = relation ('and' relation)*
    relation      = is_relation | in_relation | within_relation
    is_relation   = expr 'is' ('not')? value
    in_relation   = expr (('not')? 'in' | '=' | '!=') range_list
    within_relation = expr ('not')? 'within' range_list
    expr          = operand (('mod' | '%') value)?
    range_list    = (range | value) (',' (range | value))*
    range         = value'..'value

Everything from the first '@' on (``@integer 2~4, ...``) is sample data and
is ignored. An empty condition parses to ALWAYS.

Hand-written recursive descent over a token list; each production is one
method. Errors raise PluralRuleSyntaxError with the character offset of the
offending token.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from cldrfacts.constants import MAX_RULE_SOURCE_LENGTH
from cldrfacts.diagnostics import ErrorTemplate, PluralRuleSyntaxError
from cldrfacts.enums import Operand, RelationKind

from .ast import ALWAYS, AndCondition, OrCondition, RangeItem, Relation

__all__ = ["parse_condition", "strip_samples"]

_TOKEN_PATTERN = re.compile(
    r"(?P<ws>\s+)|(?P<int>\d+)|(?P<range>\.\.)|(?P<ne>!=)|(?P<punct>[=%,])|(?P<word>[a-z]+)"
)

_OPERANDS: frozenset[str] = frozenset(operand.value for operand in Operand)


@dataclass(frozen=True, slots=True)
class _Token:
    kind: str
    text: str
    pos: int


def strip_samples(source: str) -> str:
    """Drop ``@integer``/``@decimal`` sample lists from a rule source.

    Example:
        >>> strip_samples("i = 1 and v = 0 @integer 1")
        'i = 1 and v = 0'
    """
    return source.partition("@")[0].strip()


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise PluralRuleSyntaxError(
                ErrorTemplate.rule_unexpected_token(text[pos], "a plural rule token", pos),
                source=text,
            )
        kind = match.lastgroup
        if kind is not None and kind != "ws":
            tokens.append(_Token(kind=kind, text=match.group(), pos=pos))
        pos = match.end()
    return tokens


class _ConditionParser:
    """Recursive descent over a token list."""

    __slots__ = ("_index", "_source", "_tokens")

    def __init__(self, source: str, tokens: list[_Token]) -> None:
        self._source = source
        self._tokens = tokens
        self._index = 0

    # -- token helpers -------------------------------------------------

    def _peek(self) -> _Token | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _accept(self, text: str) -> bool:
        token = self._peek()
        if token is not None and token.text == text:
            self._index += 1
            return True
        return False

    def _next(self, expected: str) -> _Token:
        token = self._peek()
        if token is None:
            raise PluralRuleSyntaxError(
                ErrorTemplate.rule_unexpected_end(expected, len(self._source)),
                source=self._source,
            )
        self._index += 1
        return token

    def _error(self, token: _Token, expected: str) -> PluralRuleSyntaxError:
        return PluralRuleSyntaxError(
            ErrorTemplate.rule_unexpected_token(token.text, expected, token.pos),
            source=self._source,
        )

    def _value(self) -> int:
        token = self._next("an integer")
        if token.kind != "int":
            raise self._error(token, "an integer")
        return int(token.text)

    # -- productions ---------------------------------------------------

    def parse(self) -> OrCondition:
        if not self._tokens:
            return ALWAYS
        branches = [self._and_condition()]
        while self._accept("or"):
            branches.append(self._and_condition())
        trailing = self._peek()
        if trailing is not None:
            raise self._error(trailing, "'and', 'or' or end of rule")
        return OrCondition(conditions=tuple(branches))

    def _and_condition(self) -> AndCondition:
        relations = [self._relation()]
        while self._accept("and"):
            relations.append(self._relation())
        return AndCondition(relations=tuple(relations))

    def _relation(self) -> Relation:
        operand = self._operand()
        modulus: int | None = None
        if self._accept("%") or self._accept("mod"):
            start = self._peek()
            modulus = self._value()
            if modulus == 0 and start is not None:
                raise self._error(start, "a positive modulus")

        token = self._next("a relation operator")
        match token.text:
            case "=":
                kind, ranges = RelationKind.IN, self._range_list()
            case "!=":
                kind, ranges = RelationKind.NOT_IN, self._range_list()
            case "is":
                kind = RelationKind.NOT_IN if self._accept("not") else RelationKind.IN
                value = self._value()
                ranges = (RangeItem(low=value, high=value),)
            case "in":
                kind, ranges = RelationKind.IN, self._range_list()
            case "within":
                kind, ranges = RelationKind.WITHIN, self._range_list()
            case "not":
                follow = self._next("'in' or 'within'")
                if follow.text == "in":
                    kind = RelationKind.NOT_IN
                elif follow.text == "within":
                    kind = RelationKind.NOT_WITHIN
                else:
                    raise self._error(follow, "'in' or 'within'")
                ranges = self._range_list()
            case _:
                raise self._error(token, "a relation operator")

        return Relation(operand=operand, modulus=modulus, kind=kind, ranges=ranges)

    def _operand(self) -> Operand:
        token = self._next("an operand")
        if token.kind != "word":
            raise self._error(token, "an operand")
        if token.text not in _OPERANDS:
            raise PluralRuleSyntaxError(
                ErrorTemplate.rule_unknown_operand(token.text, token.pos),
                source=self._source,
            )
        return Operand(token.text)

    def _range_list(self) -> tuple[RangeItem, ...]:
        items = [self._range_item()]
        while self._accept(","):
            items.append(self._range_item())
        return tuple(items)

    def _range_item(self) -> RangeItem:
        start = self._peek()
        low = self._value()
        high = low
        if self._accept(".."):
            high = self._value()
        if low > high:
            position = start.pos if start is not None else 0
            raise PluralRuleSyntaxError(
                ErrorTemplate.rule_invalid_range(low, high, position),
                source=self._source,
            )
        return RangeItem(low=low, high=high)


@lru_cache(maxsize=1024)
def parse_condition(source: str) -> OrCondition:
    """Parse a CLDR plural rule condition.

    Results are cached; conditions are immutable so sharing is safe.

    Args:
        source: Rule text, optionally with trailing samples

    Returns:
        Parsed condition (ALWAYS for an empty rule)

    Raises:
        PluralRuleSyntaxError: If the rule does not follow the grammar

    Examples:
        >>> str(parse_condition("n % 10 = 2..4 and n % 100 != 12..14"))
        'n % 10 = 2..4 and n % 100 != 12..14'
        >>> parse_condition("@integer 0~15, 100").is_always
        True
    """
    if len(source) > MAX_RULE_SOURCE_LENGTH:
        raise PluralRuleSyntaxError(
            ErrorTemplate.rule_too_long(len(source), MAX_RULE_SOURCE_LENGTH),
            source=source[:MAX_RULE_SOURCE_LENGTH],
        )
    text = strip_samples(source)
    return _ConditionParser(text, _tokenize(text)).parse()
