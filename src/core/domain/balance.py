"""
Balance — Баланс аккаунта perpetual-контракта

Immutable Pydantic модель баланса аккаунта: margin и position хранятся как
беззнаковые модули плюс отдельный флаг знака (signed-magnitude).

Правило нуля: модуль 0 не имеет знака. Конструктор нормализует флаг знака
нулевого модуля в True, проверки направления трактуют нулевую позицию особо
(см. src.liquidation.settlement).
"""

from pydantic import BaseModel, Field, model_validator

from src.core.math.fixed_point import MAX_UINT120


# =============================================================================
# BALANCE MODEL
# =============================================================================


class Balance(BaseModel):
    """
    Снапшот баланса аккаунта.

    Immutable модель (frozen=True). Ядро ликвидации только читает баланс;
    применение результата сделки выполняет вызывающая сторона.
    """

    margin_is_positive: bool = Field(True, description="Знак margin (True → актив)")
    position_is_positive: bool = Field(True, description="Знак позиции (True → long)")
    margin: int = Field(0, ge=0, le=MAX_UINT120, description="Модуль margin")
    position: int = Field(0, ge=0, le=MAX_UINT120, description="Модуль позиции")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_zero_sign(cls, data):
        """Нулевой модуль всегда хранится с положительным знаком."""
        if isinstance(data, dict):
            data = dict(data)
            if data.get("margin", 0) == 0:
                data["margin_is_positive"] = True
            if data.get("position", 0) == 0:
                data["position_is_positive"] = True
        return data

    @classmethod
    def from_signed(cls, margin: int, position: int) -> "Balance":
        """
        Построение баланса из знаковых целых.

        Args:
            margin: Знаковый margin (отрицательный → обязательство)
            position: Знаковая позиция (отрицательная → short)

        Returns:
            Balance с модулями и флагами знака
        """
        return cls(
            margin_is_positive=margin >= 0,
            position_is_positive=position >= 0,
            margin=abs(margin),
            position=abs(position),
        )

    @property
    def signed_margin(self) -> int:
        return self.margin if self.margin_is_positive else -self.margin

    @property
    def signed_position(self) -> int:
        return self.position if self.position_is_positive else -self.position

    @property
    def is_position_zero(self) -> bool:
        return self.position == 0
