from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass

from settlecash.conv import to_int_lenient

logger = logging.getLogger(__name__)

# Input abbreviations accepted by parse_trade_date (exact, case-sensitive).
PARSE_MONTHS: dict[str, int] = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}
FALLBACK_MONTH = 12

# Display names used in report labels. Not the inverse of PARSE_MONTHS:
# July and Sept are four letters here.
DISPLAY_MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "July",
    "Aug",
    "Sept",
    "Oct",
    "Nov",
    "Dec",
)


class DateFormatError(ValueError):
    """A trade date string could not be turned into a calendar date."""


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Proleptic Gregorian date; ordering is chronological."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            dt.date(self.year, self.month, self.day)
        except (TypeError, ValueError) as e:
            raise DateFormatError(
                f"Not a calendar date: year={self.year} month={self.month} "
                f"day={self.day}"
            ) from e

    @classmethod
    def from_date(cls, d: dt.date) -> CalendarDate:
        return cls(d.year, d.month, d.day)

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    def weekday(self) -> int:
        """Monday=0 ... Sunday=6, as ``datetime.date.weekday``."""
        return self.to_date().weekday()

    def plus_days(self, days: int) -> CalendarDate:
        return CalendarDate.from_date(self.to_date() + dt.timedelta(days=days))


def month_from_abbrev(text: str) -> int:
    """Map a three-letter month to 1..12; anything unrecognised is December."""
    month = PARSE_MONTHS.get(text)
    if month is None:
        logger.debug(
            "Unrecognised month %r; falling back to %d", text, FALLBACK_MONTH
        )
        return FALLBACK_MONTH
    return month


def parse_trade_date(text: str) -> CalendarDate:
    """Parse ``"<day> <Mon> <year>"``, e.g. ``"3 Mar 2017"``.

    Day and year are read leniently (leading digits only, 0 when absent). The
    result must still be a real date, otherwise DateFormatError is raised.
    """
    parts = text.split(" ", 2)
    if len(parts) < 3:
        raise DateFormatError(
            f"Expected '<day> <month> <year>' with two space separators: {text!r}"
        )
    day_tok, month_tok, year_tok = parts
    return CalendarDate(
        year=to_int_lenient(year_tok),
        month=month_from_abbrev(month_tok),
        day=to_int_lenient(day_tok),
    )


def format_settlement_date(date: CalendarDate) -> str:
    """Render as ``"<day> <Month> <yyyy>"``, e.g. ``"6 Mar 2017"`` or ``"1 Sept 2017"``."""
    return f"{date.day} {DISPLAY_MONTHS[date.month - 1]} {date.year:04d}"
