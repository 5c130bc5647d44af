"""
Domain models and value objects.

Contains fundamental domain entities: Balance, TradeRequest, TradeResult.
"""

from src.core.domain.balance import Balance
from src.core.domain.trade import (
    LiquidatedEvent,
    TradeRequest,
    TradeResult,
    TraderFlag,
)

__all__ = [
    # Balance model
    "Balance",
    # Trade models
    "TradeRequest",
    "TradeResult",
    "TraderFlag",
    "LiquidatedEvent",
]
