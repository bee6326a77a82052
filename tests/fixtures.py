"""Test fixtures for trade records.

Most tests only care about one or two fields of a trade. ``make_trade`` fills
the rest with a valid GBP buy settling on a Wednesday so each test can override
just what it exercises.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from settlecash.model import Side, TradeRecord

DEFAULTS: dict[str, Any] = {
    "counterparty_name": "XYZ",
    "side": Side.BUY,
    "agreed_rate": Decimal("1"),
    "currency_code": "GBP",
    "instruction_date": "27 Feb 2017",
    "raw_settlement_date": "1 Mar 2017",
    "units": 1,
    "price_per_unit": Decimal("1"),
}


def trade_fields(**overrides: Any) -> dict[str, Any]:
    fields = dict(DEFAULTS)
    fields.update(overrides)
    return fields


def make_trade(**overrides: Any) -> TradeRecord:
    return TradeRecord(**trade_fields(**overrides))
