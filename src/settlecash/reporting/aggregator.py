from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from settlecash.model import Side, TradeRecord

from .events import EventRecorder, OrderingEvent
from .ordering import (
    ChronologicalOrderingPolicy,
    LiteralOrderingPolicy,
    OrderingPolicy,
)
from .report_formatter import (
    CASH_FLOW_LABELS,
    SettlementTotal,
    group_settlement_totals,
    render_report,
)

logger = logging.getLogger(__name__)


class CashFlowAggregator:
    """Bucket trades by cash direction, ordered by settlement date.

    Buys go to ``outgoing`` and sells to ``incoming``. The sequences only grow;
    their order is decided by the ordering policy at insertion time.
    """

    def __init__(
        self,
        *,
        ordering: Optional[OrderingPolicy] = None,
        literal_ordering: Optional[bool] = None,
        recorder: Optional[EventRecorder] = None,
    ) -> None:
        self.recorder = recorder or EventRecorder()
        self.literal_ordering = (
            bool(literal_ordering) if literal_ordering is not None else False
        )
        self._ordering = self._resolve_ordering(ordering)
        self._outgoing: list[TradeRecord] = []
        self._incoming: list[TradeRecord] = []

    def _resolve_ordering(self, policy: Optional[OrderingPolicy]) -> OrderingPolicy:
        if policy is not None:
            return policy
        if self.literal_ordering:
            return LiteralOrderingPolicy()
        return ChronologicalOrderingPolicy()

    @property
    def outgoing(self) -> tuple[TradeRecord, ...]:
        return tuple(self._outgoing)

    @property
    def incoming(self) -> tuple[TradeRecord, ...]:
        return tuple(self._incoming)

    @property
    def ordering_events(self) -> list[OrderingEvent]:
        return self.recorder.events

    def add(self, trade: TradeRecord) -> None:
        target = self._outgoing if trade.side is Side.BUY else self._incoming
        logger.debug(
            "Adding %s %s settling %s to %s",
            trade.side.name,
            trade.counterparty_name,
            trade.settlement_date_label,
            CASH_FLOW_LABELS[trade.side].lower(),
        )
        event = self._ordering.insert(target, trade)
        if event is not None:
            logger.warning("Out-of-order settlement: %s", event.message)
            self.recorder.record(event)

    def add_many(self, trades: Iterable[TradeRecord]) -> None:
        for trade in trades:
            self.add(trade)

    def totals(self, side: Side) -> list[SettlementTotal]:
        trades = self._outgoing if side is Side.BUY else self._incoming
        return group_settlement_totals(trades)

    def render(self) -> list[str]:
        """Outgoing subtotal lines, a blank line, then incoming subtotal lines."""
        return render_report(self._outgoing, self._incoming)
