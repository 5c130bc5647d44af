"""Интерфейсы внешних коллабораторов ядра ликвидации.

Все коллабораторы синхронные и только читают состояние. Ссылки на них
передаются в конструктор и фиксируются на время жизни объекта.
"""

from typing import Callable, Protocol

from src.core.domain.balance import Balance
from src.core.math.balance_math import BalanceValue


class BalanceStore(Protocol):
    """Хранилище балансов аккаунтов."""

    def get_account_balance(self, account: str) -> Balance:
        ...


class PermissionService(Protocol):
    """Делегирование прав: может ли principal действовать за on_behalf_of."""

    def has_permission(self, principal: str, on_behalf_of: str) -> bool:
        ...


class RiskParameterSource(Protocol):
    """Источник глобальных риск-параметров."""

    def get_min_collateral(self) -> int:
        """Минимальный коэффициент обеспечения в фиксированной точке (BASE == 1.0)."""
        ...


# (balance, price) -> (positive_value, negative_value)
ValuationRoutine = Callable[[Balance, int], BalanceValue]
