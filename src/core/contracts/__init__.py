"""
Contract Validation Module

Модуль для валидации JSON контрактов ликвидации.
"""

from .validators import (
    ContractValidator,
    LiquidatedEventValidator,
    SchemaLoader,
    TradeRequestValidator,
    TradeResultValidator,
    validate_liquidated_event,
    validate_trade_request,
    validate_trade_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TradeRequestValidator",
    "TradeResultValidator",
    "LiquidatedEventValidator",
    # Functions
    "validate_trade_request",
    "validate_trade_result",
    "validate_liquidated_event",
]
