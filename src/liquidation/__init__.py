"""Liquidation — ядро расчёта ликвидации perpetual-позиций.

- Eligibility Checker: недообеспеченность по цене и min_collateral
- Settlement Calculator: ограниченный объём и пропорциональная margin
- LiquidationEngine: точка входа ядра
- LiquidationTrader: адаптер trade() с внешними коллабораторами
"""

from .eligibility import EligibilityChecker, EligibilityResult, is_collateralized, is_eligible
from .engine import LiquidationConfig, LiquidationEngine
from .errors import (
    AllOrNothingUnsatisfiableError,
    ArithmeticOverflowError,
    DirectionMismatchError,
    LiquidationRejected,
    NotEligibleError,
    PermissionDeniedError,
)
from .interfaces import BalanceStore, PermissionService, RiskParameterSource, ValuationRoutine
from .settlement import check_direction, settle
from .trader import LiquidationTrade, LiquidationTrader

__all__ = [
    "EligibilityChecker",
    "EligibilityResult",
    "is_eligible",
    "is_collateralized",
    "LiquidationConfig",
    "LiquidationEngine",
    "LiquidationRejected",
    "NotEligibleError",
    "AllOrNothingUnsatisfiableError",
    "DirectionMismatchError",
    "PermissionDeniedError",
    "ArithmeticOverflowError",
    "BalanceStore",
    "PermissionService",
    "RiskParameterSource",
    "ValuationRoutine",
    "check_direction",
    "settle",
    "LiquidationTrade",
    "LiquidationTrader",
]
