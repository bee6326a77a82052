from .parsing import (
    CalendarDate,
    DateFormatError,
    format_settlement_date,
    parse_trade_date,
)
from .weekend import DEFAULT_CALENDAR, WeekendCalendar, adjust_to_business_day

__all__ = [
    "CalendarDate",
    "DateFormatError",
    "format_settlement_date",
    "parse_trade_date",
    "DEFAULT_CALENDAR",
    "WeekendCalendar",
    "adjust_to_business_day",
]
