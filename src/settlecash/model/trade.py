from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from enum import Enum
from typing import Any

from settlecash.conv import to_dec_strict
from settlecash.dates import (
    DEFAULT_CALENDAR,
    CalendarDate,
    WeekendCalendar,
    format_settlement_date,
    parse_trade_date,
)

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """A trade field broke one of the construction invariants."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class Side(Enum):
    BUY = "B"
    SELL = "S"

    @classmethod
    def parse(cls, value: Any) -> Side:
        """Accept a Side or exactly its letter, ``"B"`` or ``"S"``."""
        if isinstance(value, cls):
            return value
        for side in cls:
            if value == side.value:
                return side
        raise ValueError(f"Buy / Sell must be 'B' or 'S', got {value!r}")


@dataclass(frozen=True)
class TradeRecord:
    """One buy or sell instruction.

    All invariants are checked in ``__post_init__`` in field order and the first
    failure raises ValidationError, so an instance is always fully valid.
    Numeric fields are normalised to Decimal. The settlement date is kept raw
    and parsed on demand.
    """

    counterparty_name: str
    side: Side
    agreed_rate: Decimal
    currency_code: str
    instruction_date: str
    raw_settlement_date: str
    units: int
    price_per_unit: Decimal
    weekend_calendar: WeekendCalendar = field(
        default=DEFAULT_CALENDAR, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if not self.counterparty_name:
            raise ValidationError("counterparty_name", "Entity cannot be empty")

        try:
            side = Side.parse(self.side)
        except ValueError as e:
            raise ValidationError("side", str(e)) from e
        object.__setattr__(self, "side", side)

        rate = _positive_decimal("agreed_rate", self.agreed_rate)
        object.__setattr__(self, "agreed_rate", rate)

        if not isinstance(self.currency_code, str) or len(self.currency_code) != 3:
            raise ValidationError(
                "currency_code", f"Currency must have 3 characters: {self.currency_code!r}"
            )

        if not self.instruction_date:
            raise ValidationError("instruction_date", "Instruction date cannot be empty")
        if not self.raw_settlement_date:
            raise ValidationError(
                "raw_settlement_date", "Settlement date cannot be empty"
            )

        if isinstance(self.units, bool) or not isinstance(self.units, int):
            raise ValidationError("units", f"Units must be an integer: {self.units!r}")
        if self.units <= 0:
            raise ValidationError("units", f"Units must be positive: {self.units}")

        price = _positive_decimal("price_per_unit", self.price_per_unit)
        object.__setattr__(self, "price_per_unit", price)

    @property
    def adjusted_settlement_date(self) -> CalendarDate:
        """Raw settlement date moved past the currency's weekend, if needed."""
        parsed = parse_trade_date(self.raw_settlement_date)
        return self.weekend_calendar.adjust(parsed, self.currency_code)

    @property
    def settlement_date_label(self) -> str:
        return format_settlement_date(self.adjusted_settlement_date)

    @property
    def notional_value(self) -> Decimal:
        """agreed_rate * price_per_unit * units, never rounded by the context."""
        digits = (
            len(self.agreed_rate.as_tuple().digits)
            + len(self.price_per_unit.as_tuple().digits)
            + len(str(self.units))
        )
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits)
            return self.agreed_rate * self.price_per_unit * self.units


def _positive_decimal(name: str, value: Any) -> Decimal:
    try:
        dec = to_dec_strict(value)
    except ValueError as e:
        raise ValidationError(name, f"Not a number: {e}") from e
    if dec <= 0:
        raise ValidationError(name, f"May not be zero or negative: {dec}")
    return dec


@dataclass(frozen=True)
class TradeResult:
    """Outcome of build_trade: exactly one of ``trade`` and ``error`` is set."""

    trade: TradeRecord | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_trade(**fields: Any) -> TradeResult:
    """Construct a TradeRecord, returning the validation failure instead of raising."""
    try:
        trade = TradeRecord(**fields)
    except ValidationError as e:
        logger.debug("Rejected trade for %s: %s", fields.get("counterparty_name"), e)
        return TradeResult(error=e)
    return TradeResult(trade=trade)
