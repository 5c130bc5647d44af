"""Eligibility Checker — проверка недообеспеченности аккаунта

Аккаунт недообеспечен ⟺ positive * BASE < negative * min_collateral.

Оба произведения могут выйти за uint256 на больших позициях и ценах,
поэтому сравнение выполняется через расширенный компаратор mul_lt.
Неравенство строгое: ровно на минимальном коэффициенте аккаунт solvent.
"""

from dataclasses import dataclass

from src.core.domain.balance import Balance
from src.core.math.balance_math import get_positive_and_negative_value
from src.core.math.fixed_point import BASE, mul_lt

from .interfaces import ValuationRoutine


# =============================================================================
# FUNCTIONS
# =============================================================================


def is_eligible(
    balance: Balance,
    price: int,
    min_collateral_ratio: int,
    valuation: ValuationRoutine = get_positive_and_negative_value,
) -> bool:
    """Недообеспечен ли баланс по цене price.

    Args:
        balance: баланс maker
        price: цена в фиксированной точке
        min_collateral_ratio: минимальный коэффициент обеспечения (BASE == 1.0)
        valuation: процедура оценки баланса

    Returns:
        True если аккаунт можно ликвидировать
    """
    positive, negative = valuation(balance, price)
    return mul_lt(positive, BASE, negative, min_collateral_ratio)


def is_collateralized(
    balance: Balance,
    price: int,
    min_collateral_ratio: int,
    valuation: ValuationRoutine = get_positive_and_negative_value,
) -> bool:
    """Обратная проверка: positive * BASE >= negative * min_collateral."""
    return not is_eligible(balance, price, min_collateral_ratio, valuation)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EligibilityResult:
    """Результат проверки недообеспеченности."""

    is_undercollateralized: bool

    # Оценка баланса (BASE * token)
    positive_value: int
    negative_value: int

    min_collateral: int

    # Детали
    details: str


# =============================================================================
# CHECKER
# =============================================================================


class EligibilityChecker:
    """Проверка допустимости ликвидации по обеспечению.

    Процедура оценки баланса внедряется через конструктор; по умолчанию
    используется get_positive_and_negative_value.
    """

    def __init__(self, valuation: ValuationRoutine | None = None):
        self.valuation = valuation or get_positive_and_negative_value

    def evaluate(
        self,
        balance: Balance,
        price: int,
        min_collateral_ratio: int,
    ) -> EligibilityResult:
        """Оценка недообеспеченности maker.

        Returns:
            EligibilityResult с частями стоимости и итоговым флагом
        """
        positive, negative = self.valuation(balance, price)
        undercollateralized = mul_lt(positive, BASE, negative, min_collateral_ratio)

        return EligibilityResult(
            is_undercollateralized=undercollateralized,
            positive_value=positive,
            negative_value=negative,
            min_collateral=min_collateral_ratio,
            details=(
                f"Eligibility: positive={positive}, negative={negative}, "
                f"min_collateral={min_collateral_ratio}, "
                f"undercollateralized={undercollateralized}"
            ),
        )
