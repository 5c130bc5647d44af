"""Settlement Calculator — расчёт объёма и margin ликвидации

Предусловия (каждое даёт отдельный отказ, без молчаливого clamp):
1. Maker недообеспечен → иначе NotEligibleError
2. all_or_nothing ⇒ position >= amount → иначе AllOrNothingUnsatisfiableError
3. is_buy == position_is_positive → иначе DirectionMismatchError

Расчёт:
    close_amount = min(amount, position)
    margin_amount = margin * close_amount / position
        is_buy (закрытие long)  → округление вверх
        sell   (закрытие short) → округление вниз

Округление выбрано так, чтобы оставшаяся часть аккаунта maker не стала
менее обеспеченной, чем при точном пропорциональном делении.
"""

from src.core.domain.balance import Balance
from src.core.domain.trade import TradeRequest, TradeResult, TraderFlag
from src.core.math.fixed_point import get_fraction, get_fraction_round_up

from .errors import (
    AllOrNothingUnsatisfiableError,
    DirectionMismatchError,
    NotEligibleError,
)


def check_direction(request: TradeRequest, maker_balance: Balance) -> bool:
    """Сокращает ли запрос позицию maker.

    Нулевая позиция не имеет знака: с ней согласован только нулевой объём
    (в любом направлении).
    """
    if maker_balance.is_position_zero:
        return request.amount == 0
    return request.is_buy == maker_balance.position_is_positive


def settle(request: TradeRequest, maker_balance: Balance, eligible: bool) -> TradeResult:
    """Расчёт результата ликвидации.

    Args:
        request: запрос ликвидатора
        maker_balance: снапшот баланса maker
        eligible: результат Eligibility Checker

    Returns:
        TradeResult с тегом TraderFlag.LIQUIDATION

    Raises:
        NotEligibleError, AllOrNothingUnsatisfiableError, DirectionMismatchError
    """
    if not eligible:
        raise NotEligibleError(
            "Cannot liquidate since maker is not undercollateralized"
        )

    if request.all_or_nothing and maker_balance.position < request.amount:
        raise AllOrNothingUnsatisfiableError(
            "allOrNothing is set and maker position is less than amount "
            f"(position={maker_balance.position}, amount={request.amount})"
        )

    if not check_direction(request, maker_balance):
        raise DirectionMismatchError(
            "liquidation must not increase maker's position size "
            f"(is_buy={request.is_buy}, "
            f"position_is_positive={maker_balance.position_is_positive}, "
            f"position={maker_balance.position})"
        )

    close_amount = min(request.amount, maker_balance.position)

    if close_amount == 0:
        margin_amount = 0
    elif request.is_buy:
        margin_amount = get_fraction_round_up(
            maker_balance.margin, close_amount, maker_balance.position
        )
    else:
        margin_amount = get_fraction(
            maker_balance.margin, close_amount, maker_balance.position
        )

    return TradeResult(
        margin_amount=margin_amount,
        position_amount=close_amount,
        is_buy=request.is_buy,
        trader_flags=TraderFlag.LIQUIDATION,
    )
