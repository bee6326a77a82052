from .model import Side, TradeRecord, ValidationError, build_trade
from .reporting import CashFlowAggregator

__all__ = [
    "Side",
    "TradeRecord",
    "ValidationError",
    "build_trade",
    "CashFlowAggregator",
]
