"""Liquidation Trader — адаптер trade() для диспетчера сделок биржи

Связывает ядро ликвидации с внешними коллабораторами:
1. Проверка прав sender действовать за taker (PermissionService)
2. Чтение баланса maker (BalanceStore)
3. Расчёт через LiquidationEngine
4. Формирование payload события LiquidatedEvent

Балансы здесь не мутируются: результат применяет диспетчер.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from src.core.contracts import validate_trade_request
from src.core.domain.trade import LiquidatedEvent, TradeRequest, TradeResult

from .engine import LiquidationConfig, LiquidationEngine
from .errors import PermissionDeniedError
from .interfaces import BalanceStore, PermissionService, RiskParameterSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiquidationTrade:
    """Результат trade(): TradeResult для диспетчера и payload события."""

    result: TradeResult
    event: LiquidatedEvent


class LiquidationTrader:
    """Точка входа trade() для ликвидаций.

    Коллабораторы внедряются в конструктор и не меняются после создания.
    """

    def __init__(
        self,
        balances: BalanceStore,
        permissions: PermissionService,
        risk_params: RiskParameterSource,
        config: LiquidationConfig | None = None,
    ):
        self.balances = balances
        self.permissions = permissions
        self.engine = LiquidationEngine(risk_params, config=config)

    def trade(
        self,
        sender: str,
        maker: str,
        taker: str,
        price: int,
        request: TradeRequest | Mapping[str, Any],
    ) -> LiquidationTrade:
        """Ликвидация maker по запросу taker.

        Args:
            sender: инициатор вызова
            maker: ликвидируемый аккаунт
            taker: аккаунт ликвидатора
            price: цена в фиксированной точке
            request: TradeRequest или dict по контракту trade_request

        Returns:
            LiquidationTrade (результат + payload события)

        Raises:
            jsonschema.ValidationError: dict не соответствует контракту
            PermissionDeniedError: sender не имеет прав за taker
            LiquidationRejected: отказ ядра ликвидации
        """
        if not self.permissions.has_permission(sender, taker):
            logger.warning(
                "Liquidation denied: sender=%s has no permissions for taker=%s",
                sender, taker,
            )
            raise PermissionDeniedError("Sender does not have permissions for the taker")

        if not isinstance(request, TradeRequest):
            payload = dict(request)
            validate_trade_request(payload)
            request = TradeRequest(**payload)

        maker_balance = self.balances.get_account_balance(maker)
        result = self.engine.evaluate_liquidation(maker_balance, price, request, principal=sender)
        taker_balance = self.balances.get_account_balance(taker)

        event = LiquidatedEvent(
            maker=maker,
            taker=taker,
            amount=result.position_amount,
            is_buy=result.is_buy,
            maker_balance=maker_balance,
            taker_balance=taker_balance,
        )
        logger.info(
            "Liquidated maker=%s taker=%s amount=%d is_buy=%s",
            maker, taker, event.amount, event.is_buy,
        )
        return LiquidationTrade(result=result, event=event)
