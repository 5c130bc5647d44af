"""
Balance Math — Оценка баланса по цене

Разложение знакового баланса на неотрицательные части:
- positive_value: margin (если актив) + стоимость long-позиции
- negative_value: margin (если обязательство) + стоимость short-позиции

Значения выражены в единицах BASE * token: margin умножается на BASE,
позиция на цену (цена уже в фиксированной точке). Деления нет, поэтому
потери точности нет.
"""

from typing import NamedTuple

from src.core.domain.balance import Balance
from src.core.math.fixed_point import BASE, checked_mul


class BalanceValue(NamedTuple):
    """Положительная и отрицательная части стоимости баланса."""

    positive: int
    negative: int


def get_positive_and_negative_value(balance: Balance, price: int) -> BalanceValue:
    """
    Оценка баланса по цене.

    Args:
        balance: Баланс аккаунта
        price: Цена в фиксированной точке (BASE == 1.0)

    Returns:
        BalanceValue(positive, negative), обе части неотрицательные

    Raises:
        ArithmeticOverflowError: Если стоимость позиции выходит за uint256

    Examples:
        >>> get_positive_and_negative_value(Balance.from_signed(-1000, 100), 5 * BASE)
        BalanceValue(positive=500000000000000000000, negative=1000000000000000000000)
    """
    positive = 0
    negative = 0

    margin_value = checked_mul(balance.margin, BASE)
    if balance.margin_is_positive:
        positive = margin_value
    else:
        negative = margin_value

    position_value = checked_mul(balance.position, price)
    if balance.position_is_positive:
        positive += position_value
    else:
        negative += position_value

    return BalanceValue(positive=positive, negative=negative)
