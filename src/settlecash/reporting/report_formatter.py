"""Settlement totals per side and the text lines of the cash-flow report.

Totals are exact Decimals; each report line shows its amount quantised to two
decimal places with half-up rounding (``4344.00``, not ``4344``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from settlecash.model import Side, TradeRecord

from .money import add_money, format_amount

logger = logging.getLogger(__name__)

OUTGOING = "Outgoing"
INCOMING = "Incoming"

CASH_FLOW_LABELS: dict[Side, str] = {
    Side.BUY: OUTGOING,
    Side.SELL: INCOMING,
}


@dataclass(frozen=True)
class SettlementTotal:
    date_label: str
    total: Decimal
    trade_count: int


def group_settlement_totals(trades: Iterable[TradeRecord]) -> list[SettlementTotal]:
    """Sum notional values over runs of trades sharing a settlement date label.

    Only consecutive trades are merged; a label that reappears later starts a
    new group. Earlier groups are kept only when their total is non-zero. The
    final group is always emitted, so an empty sequence yields one group with
    an empty label and a zero total.
    """
    groups: list[SettlementTotal] = []
    current_label = ""
    running_total = Decimal("0")
    count = 0

    for trade in trades:
        label = trade.settlement_date_label
        if label == current_label:
            running_total = add_money(running_total, trade.notional_value)
            count += 1
            continue

        if running_total != 0:
            groups.append(SettlementTotal(current_label, running_total, count))
        current_label = label
        running_total = trade.notional_value
        count = 1

    groups.append(SettlementTotal(current_label, running_total, count))
    return groups


def format_total_line(label: str, total: SettlementTotal) -> str:
    return f"{label} total for {total.date_label} = {format_amount(total.total)}"


def render_totals(trades: Iterable[TradeRecord], label: str) -> list[str]:
    """Lines ``"<label> total for <date> = <amount>"``, one per settlement group."""
    groups = group_settlement_totals(trades)
    if not groups[-1].trade_count:
        logger.debug("No %s trades; emitting a zero total line", label.lower())
    return [format_total_line(label, g) for g in groups]


def render_report(
    outgoing: Sequence[TradeRecord], incoming: Sequence[TradeRecord]
) -> list[str]:
    """Outgoing lines, a blank separator line, then incoming lines."""
    return [
        *render_totals(outgoing, OUTGOING),
        "",
        *render_totals(incoming, INCOMING),
    ]
