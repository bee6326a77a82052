from .trade import Side, TradeRecord, TradeResult, ValidationError, build_trade

__all__ = [
    "Side",
    "TradeRecord",
    "TradeResult",
    "ValidationError",
    "build_trade",
]
