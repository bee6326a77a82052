from .aggregator import CashFlowAggregator
from .events import EventRecorder, OrderingEvent
from .money import format_amount, quantize_money
from .ordering import (
    ChronologicalOrderingPolicy,
    LiteralOrderingPolicy,
    OrderingPolicy,
)
from .report_formatter import (
    INCOMING,
    OUTGOING,
    SettlementTotal,
    group_settlement_totals,
    render_report,
    render_totals,
)
from .report_sink import ReportSink, TextReportSink

__all__ = [
    "CashFlowAggregator",
    "EventRecorder",
    "OrderingEvent",
    "format_amount",
    "quantize_money",
    "ChronologicalOrderingPolicy",
    "LiteralOrderingPolicy",
    "OrderingPolicy",
    "INCOMING",
    "OUTGOING",
    "SettlementTotal",
    "group_settlement_totals",
    "render_report",
    "render_totals",
    "ReportSink",
    "TextReportSink",
]
