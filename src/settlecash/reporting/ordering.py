from __future__ import annotations

import bisect
from typing import Protocol

from settlecash.model import TradeRecord

from .events import OrderingEvent


class OrderingPolicy(Protocol):
    def insert(
        self, trades: list[TradeRecord], trade: TradeRecord
    ) -> OrderingEvent | None:  # pragma: no cover - protocol
        ...


class LiteralOrderingPolicy:
    """Append when the tail's date label sorts at or before the new one, else prepend.

    Labels are compared as text, so this is not a sort: "10 Mar 2017" sorts
    before "9 Mar 2017", and a prepend can land ahead of later dates. Such
    prepends are reported as an OrderingEvent.
    """

    def insert(
        self, trades: list[TradeRecord], trade: TradeRecord
    ) -> OrderingEvent | None:
        label = trade.settlement_date_label
        if not trades or trades[-1].settlement_date_label <= label:
            trades.append(trade)
            return None

        trades.insert(0, trade)
        following = trades[1]
        if trade.adjusted_settlement_date <= following.adjusted_settlement_date:
            return None
        return OrderingEvent(
            side=trade.side,
            settlement_date_label=label,
            next_label=following.settlement_date_label,
            message=(
                f"{trade.counterparty_name} settling {label} was placed ahead of "
                f"{following.settlement_date_label}"
            ),
        )


class ChronologicalOrderingPolicy:
    """Stable insert by adjusted settlement date; equal dates keep arrival order."""

    def insert(
        self, trades: list[TradeRecord], trade: TradeRecord
    ) -> OrderingEvent | None:
        bisect.insort_right(
            trades, trade, key=lambda t: t.adjusted_settlement_date
        )
        return None
