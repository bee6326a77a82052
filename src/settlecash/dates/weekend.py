from __future__ import annotations

import calendar
import logging
from collections.abc import Iterable, Mapping

from .parsing import CalendarDate

logger = logging.getLogger(__name__)

SAT_SUN: frozenset[int] = frozenset({calendar.SATURDAY, calendar.SUNDAY})
FRI_SAT: frozenset[int] = frozenset({calendar.FRIDAY, calendar.SATURDAY})

# Currencies whose settlement calendar does not use the Saturday/Sunday weekend.
DEFAULT_WEEKENDS: dict[str, frozenset[int]] = {
    "AED": FRI_SAT,
    "SAR": FRI_SAT,
}


class WeekendCalendar:
    """Currency -> weekend weekdays (``calendar.MONDAY`` .. ``calendar.SUNDAY``).

    Holidays are not modelled. Currency codes are matched exactly, so an
    unlisted spelling such as ``"aed"`` gets the default weekend.
    """

    def __init__(
        self,
        table: Mapping[str, Iterable[int]] | None = None,
        default: Iterable[int] = SAT_SUN,
    ) -> None:
        source = DEFAULT_WEEKENDS if table is None else table
        self.table: dict[str, frozenset[int]] = {
            ccy: frozenset(days) for ccy, days in source.items()
        }
        self.default = frozenset(default)
        for days in (self.default, *self.table.values()):
            if len(days) >= 7:
                raise ValueError("a weekend cannot cover the whole week")
            if any(d not in range(7) for d in days):
                raise ValueError(f"weekday numbers must be 0..6: {sorted(days)}")

    def weekend_days(self, currency: str) -> frozenset[int]:
        return self.table.get(currency, self.default)

    def days_to_business_day(self, date: CalendarDate, currency: str) -> int:
        """Length of the run of weekend days starting at ``date``; 0 on a business day.

        The shift is one jump to the first business day. With non-contiguous
        weekend days only the run containing ``date`` counts, so the result
        is never a later weekend day and never skips past a business day.
        """
        weekend = self.weekend_days(currency)
        weekday = date.weekday()
        offset = 0
        while (weekday + offset) % 7 in weekend:
            offset += 1
        return offset

    def adjust(self, date: CalendarDate, currency: str) -> CalendarDate:
        """Return ``date`` or, if it is a weekend day for ``currency``, the next business day."""
        offset = self.days_to_business_day(date, currency)
        if offset == 0:
            return date
        adjusted = date.plus_days(offset)
        logger.debug(
            "Settlement %s falls on a %s weekend; moved +%d to %s",
            date,
            currency,
            offset,
            adjusted,
        )
        return adjusted


DEFAULT_CALENDAR = WeekendCalendar()


def adjust_to_business_day(date: CalendarDate, currency: str) -> CalendarDate:
    return DEFAULT_CALENDAR.adjust(date, currency)
