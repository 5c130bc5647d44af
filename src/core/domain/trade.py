"""
Trade — Модели запроса, результата и события ликвидационной сделки

Immutable Pydantic модели:
- TradeRequest: намерение ликвидатора (taker)
- TradeResult: итог расчёта для применения к обоим балансам
- LiquidatedEvent: payload события для off-chain наблюдения

TraderFlag — тег происхождения результата, по нему downstream-логика
расчётов и комиссий отличает ликвидацию от обычной сделки по ордерам.
"""

from enum import IntFlag

from pydantic import BaseModel, Field

from src.core.math.fixed_point import MAX_UINT256

from .balance import Balance


# =============================================================================
# ENUMS
# =============================================================================


class TraderFlag(IntFlag):
    """Тег происхождения результата сделки"""

    ORDERS = 1
    LIQUIDATION = 2
    DELEVERAGING = 4


# =============================================================================
# REQUEST / RESULT
# =============================================================================


class TradeRequest(BaseModel):
    """
    Запрос ликвидатора.

    is_buy — направление с точки зрения taker: True означает покупку,
    т.е. сокращение long-позиции maker.
    """

    amount: int = Field(..., ge=0, le=MAX_UINT256, description="Запрошенный объём закрытия")
    is_buy: bool = Field(..., description="Направление (taker покупает)")
    all_or_nothing: bool = Field(
        False, description="Запрос обязан исполниться полностью или отклоняется"
    )

    model_config = {"frozen": True}


class TradeResult(BaseModel):
    """
    Результат расчёта ликвидации.

    При is_buy maker отдаёт position_amount позиции и получает margin_amount
    margin; при продаже наоборот.
    """

    margin_amount: int = Field(..., ge=0, le=MAX_UINT256, description="Модуль перемещаемой margin")
    position_amount: int = Field(..., ge=0, le=MAX_UINT256, description="Модуль перемещаемой позиции")
    is_buy: bool = Field(..., description="Направление (эхо запроса)")
    trader_flags: TraderFlag = Field(..., description="Тег происхождения")

    model_config = {"frozen": True}

    @property
    def is_liquidation(self) -> bool:
        return bool(self.trader_flags & TraderFlag.LIQUIDATION)


# =============================================================================
# EVENT PAYLOAD
# =============================================================================


class LiquidatedEvent(BaseModel):
    """
    Payload события ликвидации.

    Ядро только формирует значения; эмиссию выполняет вызывающая сторона.
    Балансы — снапшоты до применения сделки.
    """

    maker: str = Field(..., min_length=1, description="Ликвидируемый аккаунт")
    taker: str = Field(..., min_length=1, description="Аккаунт ликвидатора")
    amount: int = Field(..., ge=0, description="Фактический объём закрытия")
    is_buy: bool = Field(..., description="Направление")
    maker_balance: Balance = Field(..., description="Баланс maker до сделки")
    taker_balance: Balance = Field(..., description="Баланс taker до сделки")

    model_config = {"frozen": True}
