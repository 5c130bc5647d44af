"""Отказы ликвидации.

Каждое нарушение предусловия даёт отдельный типизированный отказ с
устойчивым кодом reason. Сообщение передаётся вызывающей стороне дословно,
чтобы ликвидатор видел конкретную причину ("maker is solvent" и т.п.).
"""

from src.core.math.fixed_point import ArithmeticOverflowError


class LiquidationRejected(Exception):
    """Базовый отказ запроса на ликвидацию."""

    reason = "liquidation_rejected"


class NotEligibleError(LiquidationRejected):
    """Maker не недообеспечен по данной цене."""

    reason = "maker_not_undercollateralized"


class AllOrNothingUnsatisfiableError(LiquidationRejected):
    """all_or_nothing установлен, а позиция maker меньше запрошенного объёма."""

    reason = "all_or_nothing_unsatisfiable"


class DirectionMismatchError(LiquidationRejected):
    """Направление запроса увеличило бы позицию maker."""

    reason = "direction_mismatch"


class PermissionDeniedError(LiquidationRejected):
    """Sender не имеет прав действовать от имени taker."""

    reason = "permission_denied"


__all__ = [
    "LiquidationRejected",
    "NotEligibleError",
    "AllOrNothingUnsatisfiableError",
    "DirectionMismatchError",
    "PermissionDeniedError",
    "ArithmeticOverflowError",
]
