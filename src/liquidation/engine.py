"""Liquidation Engine — точка входа ядра ликвидации

Поток:
    (maker_balance, price, request)
        → EligibilityChecker (недообеспеченность при min_collateral)
        → settle (предусловия, объём, margin с округлением по направлению)
        → TradeResult с тегом LIQUIDATION

Engine не хранит состояния между вызовами и ничего не мутирует. Баланс
maker считается авторитетным снапшотом на время вызова; применение результата
и сериализацию по аккаунту выполняет вызывающая сторона.
"""

import logging
from dataclasses import dataclass

from src.core.domain.balance import Balance
from src.core.domain.trade import TradeRequest, TradeResult
from src.core.math.fixed_point import MAX_UINT256

from .eligibility import EligibilityChecker
from .errors import LiquidationRejected
from .interfaces import RiskParameterSource, ValuationRoutine
from .settlement import settle

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LiquidationConfig:
    """Конфигурация Liquidation Engine."""

    # Верхняя граница допустимой цены (фиксированная точка)
    max_price: int = MAX_UINT256

    # Логировать отказы на уровне INFO (иначе DEBUG)
    log_rejections: bool = True


# =============================================================================
# ENGINE
# =============================================================================


class LiquidationEngine:
    """Расчёт ликвидации maker по цене, заданной вызывающей стороной.

    Запрос считается уже авторизованным: проверка прав выполняется
    снаружи (см. LiquidationTrader).
    """

    def __init__(
        self,
        risk_params: RiskParameterSource,
        valuation: ValuationRoutine | None = None,
        config: LiquidationConfig | None = None,
    ):
        """Инициализация engine.

        Args:
            risk_params: источник min_collateral
            valuation: процедура оценки баланса (опционально)
            config: конфигурация (опционально, используется default)
        """
        self.config = config or LiquidationConfig()
        self.risk_params = risk_params
        self.checker = EligibilityChecker(valuation)

    def evaluate_liquidation(
        self,
        maker_balance: Balance,
        price: int,
        request: TradeRequest,
        principal: str | None = None,
    ) -> TradeResult:
        """Оценка и расчёт ликвидации.

        Args:
            maker_balance: снапшот баланса maker
            price: цена в фиксированной точке (0 < price <= config.max_price)
            request: запрос ликвидатора
            principal: уже авторизованный инициатор (только для логов)

        Returns:
            TradeResult с тегом TraderFlag.LIQUIDATION

        Raises:
            ValueError: price вне домена
            LiquidationRejected: нарушено предусловие ликвидации
            ArithmeticOverflowError: magnitudes вне домена
        """
        if price <= 0 or price > self.config.max_price:
            raise ValueError(f"price must be in (0, {self.config.max_price}], got {price}")

        min_collateral = self.risk_params.get_min_collateral()
        eligibility = self.checker.evaluate(maker_balance, price, min_collateral)

        try:
            result = settle(request, maker_balance, eligibility.is_undercollateralized)
        except LiquidationRejected as e:
            level = logging.INFO if self.config.log_rejections else logging.DEBUG
            logger.log(
                level,
                "Liquidation rejected (%s) principal=%s: %s; %s",
                e.reason, principal, e, eligibility.details,
            )
            raise

        logger.info(
            "Liquidation accepted: principal=%s position_amount=%d margin_amount=%d "
            "is_buy=%s requested=%d price=%d",
            principal, result.position_amount, result.margin_amount, result.is_buy,
            request.amount, price,
        )
        return result
