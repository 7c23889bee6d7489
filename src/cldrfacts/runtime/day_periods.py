"""Day-period selection ("morning1", "noon", "night1", ...).

Rules are checked in two passes over the locale's rule set:

    1. ``at`` rules, exact second match ("midnight", "noon")
    2. ``from``/``before`` windows, lower bound inclusive, upper exclusive;
       a window with from >= before wraps past midnight

If nothing matches the period is "am" before noon and "pm" from noon on.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, time

from cldrfacts.constants import SECONDS_PER_DAY
from cldrfacts.data.model import Dataset, DayPeriodRule
from cldrfacts.diagnostics import ErrorTemplate, InvalidArgumentError
from cldrfacts.enums import LocaleCollection

from .fallback import ResolveResult, resolve_locale_fact

__all__ = ["resolve_day_period", "seconds_past_midnight", "select_day_period"]

logger = logging.getLogger(__name__)

_NOON = SECONDS_PER_DAY // 2


def seconds_past_midnight(moment: time | datetime | int) -> int:
    """Seconds since midnight for a time, datetime, or second count.

    Raises:
        InvalidArgumentError: If an int is outside 0..86399

    Example:
        >>> seconds_past_midnight(time(6, 30))
        23400
    """
    if isinstance(moment, datetime):
        moment = moment.time()
    if isinstance(moment, time):
        return moment.hour * 3600 + moment.minute * 60 + moment.second
    if isinstance(moment, int) and not isinstance(moment, bool) and 0 <= moment < SECONDS_PER_DAY:
        return moment
    raise InvalidArgumentError(ErrorTemplate.invalid_time_of_day(moment))


def _in_window(rule: DayPeriodRule, seconds: int) -> bool:
    if rule.start is None or rule.before is None:
        return False
    if rule.start < rule.before:
        return rule.start <= seconds < rule.before
    return seconds >= rule.start or seconds < rule.before


def select_day_period(rules: Sequence[DayPeriodRule], moment: time | datetime | int) -> str:
    """Period id for a time of day.

    Args:
        rules: A locale's day-period rules
        moment: Time of day

    Returns:
        Matching period id, or "am"/"pm" when no rule covers moment

    Example:
        >>> rules = (
        ...     DayPeriodRule("noon", at=43200),
        ...     DayPeriodRule("morning1", start=21600, before=43200),
        ...     DayPeriodRule("night1", start=79200, before=21600),
        ... )
        >>> [select_day_period(rules, time(h)) for h in (7, 12, 23, 3, 15)]
        ['morning1', 'noon', 'night1', 'night1', 'pm']
    """
    seconds = seconds_past_midnight(moment)
    for rule in rules:
        if rule.at is not None and rule.at == seconds:
            return rule.period
    for rule in rules:
        if rule.at is None and _in_window(rule, seconds):
            return rule.period
    return "am" if seconds < _NOON else "pm"


def resolve_day_period(
    dataset: Dataset, locale_id: str, moment: time | datetime | int
) -> ResolveResult[str]:
    """Day period for a locale: language, then root rules.

    Returns:
        ``(period, errors)``; period is None when no rule set exists at
        any level (or locale_id is malformed)

    Raises:
        InvalidArgumentError: If moment is not a time of day
    """
    seconds = seconds_past_midnight(moment)
    rules, errors = resolve_locale_fact(dataset, locale_id, LocaleCollection.DAY_PERIOD_RULES)
    if rules is None:
        return None, errors
    period = select_day_period(rules, seconds)
    logger.debug("Day period for '%s' at %s: %s", locale_id, moment, period)
    return period, ()
