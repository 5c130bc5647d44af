"""Тесты для Settlement Calculator

Покрытие:
- Предусловия: eligibility, all-or-nothing, направление
- Ограничение объёма позицией maker
- Округление margin по направлению (вверх при is_buy, вниз при продаже)
- Свойства: ограничение объёма, безопасность округления, направление
- Нулевая позиция / нулевой объём
"""

import itertools
import random
from fractions import Fraction

import pytest

from src.core.domain.balance import Balance
from src.core.domain.trade import TradeRequest, TradeResult, TraderFlag
from src.core.math.fixed_point import MAX_UINT120
from src.liquidation.errors import (
    AllOrNothingUnsatisfiableError,
    DirectionMismatchError,
    LiquidationRejected,
    NotEligibleError,
)
from src.liquidation.settlement import check_direction, settle


def apply_to_maker(balance: Balance, margin_delta, position_amount: int, is_buy: bool):
    """Helper: знаковые (margin, position) maker после сделки.

    margin_delta может быть Fraction (точное пропорциональное деление).
    """
    if is_buy:
        return balance.signed_margin + margin_delta, balance.signed_position - position_amount
    return balance.signed_margin - margin_delta, balance.signed_position + position_amount


def make_cases(seed: int, count: int):
    """Helper: детерминированный набор (margin, position, amount) для sweep-свойств."""
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        position = rng.choice([1, 3, 7, 100, rng.randint(1, 10**6), rng.randint(1, MAX_UINT120)])
        margin = rng.choice([0, 1, 999, rng.randint(1, 10**9), rng.randint(1, MAX_UINT120)])
        amount = rng.choice([0, 1, position // 3, position, position + 1, rng.randint(0, 2 * position)])
        cases.append((margin, position, amount))
    return cases


PROPERTY_CASES = make_cases(seed=20240611, count=60)


# =============================================================================
# PRECONDITIONS
# =============================================================================


class TestPreconditions:
    """Тесты предусловий settle"""

    def test_not_eligible_rejected(self):
        with pytest.raises(NotEligibleError, match="not undercollateralized"):
            settle(TradeRequest(amount=40, is_buy=True), Balance.from_signed(-1000, 100), eligible=False)

    def test_not_eligible_checked_first(self):
        """Ineligible maker отклоняется раньше прочих проверок"""
        request = TradeRequest(amount=150, is_buy=False, all_or_nothing=True)
        with pytest.raises(NotEligibleError):
            settle(request, Balance.from_signed(-1000, 100), eligible=False)

    def test_all_or_nothing_unsatisfiable(self):
        request = TradeRequest(amount=150, is_buy=True, all_or_nothing=True)
        with pytest.raises(AllOrNothingUnsatisfiableError, match="allOrNothing"):
            settle(request, Balance.from_signed(-1000, 100), eligible=True)

    def test_all_or_nothing_exact_amount_accepted(self):
        request = TradeRequest(amount=100, is_buy=True, all_or_nothing=True)
        result = settle(request, Balance.from_signed(-1000, 100), eligible=True)
        assert result.position_amount == 100
        assert result.margin_amount == 1000

    def test_direction_mismatch_short_maker_buy(self):
        """Short maker + is_buy увеличил бы позицию → отказ"""
        with pytest.raises(DirectionMismatchError, match="must not increase"):
            settle(TradeRequest(amount=40, is_buy=True), Balance.from_signed(1000, -100), eligible=True)

    def test_direction_mismatch_long_maker_sell(self):
        with pytest.raises(DirectionMismatchError):
            settle(TradeRequest(amount=40, is_buy=False), Balance.from_signed(-1000, 100), eligible=True)

    def test_rejections_share_base_class(self):
        for error in (NotEligibleError, AllOrNothingUnsatisfiableError, DirectionMismatchError):
            assert issubclass(error, LiquidationRejected)
        reasons = {e.reason for e in (NotEligibleError, AllOrNothingUnsatisfiableError, DirectionMismatchError)}
        assert len(reasons) == 3


# =============================================================================
# COMPUTATION
# =============================================================================


class TestSettlement:
    """Тесты расчёта объёма и margin"""

    def test_partial_long_liquidation(self):
        """margin=1000, long 100, amount=40 → 40 позиции, 400 margin"""
        result = settle(TradeRequest(amount=40, is_buy=True), Balance.from_signed(-1000, 100), eligible=True)
        assert result == TradeResult(
            margin_amount=400,
            position_amount=40,
            is_buy=True,
            trader_flags=TraderFlag.LIQUIDATION,
        )

    def test_over_large_request_capped(self):
        """Без all_or_nothing объём ограничивается позицией maker"""
        request = TradeRequest(amount=150, is_buy=True, all_or_nothing=False)
        result = settle(request, Balance.from_signed(-1000, 100), eligible=True)
        assert result.position_amount == 100
        assert result.margin_amount == 1000

    def test_buy_rounds_up(self):
        result = settle(TradeRequest(amount=1, is_buy=True), Balance.from_signed(-1000, 3), eligible=True)
        assert result.margin_amount == 334

    def test_sell_rounds_down(self):
        result = settle(TradeRequest(amount=1, is_buy=False), Balance.from_signed(1000, -3), eligible=True)
        assert result.margin_amount == 333

    def test_margin_sign_stripped(self):
        """Используется модуль margin независимо от её знака"""
        negative = settle(TradeRequest(amount=1, is_buy=False), Balance.from_signed(-1000, -3), eligible=True)
        positive = settle(TradeRequest(amount=1, is_buy=False), Balance.from_signed(1000, -3), eligible=True)
        assert negative.margin_amount == positive.margin_amount == 333

    def test_zero_amount(self):
        result = settle(TradeRequest(amount=0, is_buy=True), Balance.from_signed(-1000, 100), eligible=True)
        assert result.position_amount == 0
        assert result.margin_amount == 0

    def test_result_tagged_as_liquidation(self):
        result = settle(TradeRequest(amount=10, is_buy=False), Balance.from_signed(1000, -100), eligible=True)
        assert result.trader_flags == TraderFlag.LIQUIDATION
        assert result.is_liquidation


class TestZeroPosition:
    """Нулевая позиция не имеет знака"""

    @pytest.mark.parametrize("is_buy", [True, False])
    def test_zero_amount_against_zero_position_accepted(self, is_buy):
        result = settle(TradeRequest(amount=0, is_buy=is_buy), Balance.from_signed(-50, 0), eligible=True)
        assert result.position_amount == 0
        assert result.margin_amount == 0

    @pytest.mark.parametrize("is_buy", [True, False])
    def test_nonzero_amount_against_zero_position_rejected(self, is_buy):
        with pytest.raises(DirectionMismatchError):
            settle(TradeRequest(amount=1, is_buy=is_buy), Balance.from_signed(-50, 0), eligible=True)

    def test_all_or_nothing_checked_before_direction(self):
        request = TradeRequest(amount=1, is_buy=True, all_or_nothing=True)
        with pytest.raises(AllOrNothingUnsatisfiableError):
            settle(request, Balance.from_signed(-50, 0), eligible=True)

    def test_check_direction(self):
        assert check_direction(TradeRequest(amount=0, is_buy=False), Balance()) is True
        assert check_direction(TradeRequest(amount=5, is_buy=True), Balance()) is False
        assert check_direction(TradeRequest(amount=5, is_buy=True), Balance.from_signed(0, 5)) is True
        assert check_direction(TradeRequest(amount=5, is_buy=False), Balance.from_signed(0, 5)) is False


# =============================================================================
# PROPERTIES
# =============================================================================


class TestSettlementProperties:
    """Свойства на детерминированном наборе балансов и запросов"""

    @pytest.mark.parametrize("margin,position,amount", PROPERTY_CASES)
    @pytest.mark.parametrize("is_long", [True, False])
    def test_bounding(self, margin, position, amount, is_long):
        """position_amount <= позиции maker и <= запрошенного объёма"""
        balance = Balance.from_signed(-margin if is_long else margin, position if is_long else -position)
        result = settle(TradeRequest(amount=amount, is_buy=is_long), balance, eligible=True)
        assert result.position_amount <= balance.position
        assert result.position_amount <= amount
        assert result.position_amount == min(amount, position)
        assert result.margin_amount <= balance.margin

    @pytest.mark.parametrize("margin,position,amount", PROPERTY_CASES)
    @pytest.mark.parametrize(
        "margin_sign,is_long",
        [(-1, True), (1, False), (-1, False)],
        ids=["long-debt", "short-collateral", "short-debt"],
    )
    def test_rounding_never_worse_than_exact(self, margin, position, amount, margin_sign, is_long):
        """Округлённая margin maker после сделки >= точной; позиция совпадает

        При равной позиции это означает, что коэффициент обеспечения
        оставшейся части не хуже, чем при точном делении.
        """
        balance = Balance.from_signed(margin_sign * margin, position if is_long else -position)
        request = TradeRequest(amount=amount, is_buy=is_long)
        result = settle(request, balance, eligible=True)

        exact_margin_delta = Fraction(balance.margin * result.position_amount, balance.position)
        rounded = apply_to_maker(balance, result.margin_amount, result.position_amount, request.is_buy)
        exact = apply_to_maker(balance, exact_margin_delta, result.position_amount, request.is_buy)

        assert rounded[1] == exact[1]
        assert rounded[0] >= exact[0]
        assert abs(rounded[0] - exact[0]) < 1

    @pytest.mark.parametrize(
        "amount,all_or_nothing,is_buy,is_long",
        list(itertools.product([0, 50, 100, 101, 500], [True, False], [True, False], [True, False])),
    )
    def test_rejection_matrix(self, amount, all_or_nothing, is_buy, is_long):
        """all-or-nothing точность и принудительное направление"""
        balance = Balance.from_signed(-1000 if is_long else 1000, 100 if is_long else -100)
        request = TradeRequest(amount=amount, is_buy=is_buy, all_or_nothing=all_or_nothing)

        if all_or_nothing and amount > balance.position:
            with pytest.raises(AllOrNothingUnsatisfiableError):
                settle(request, balance, eligible=True)
        elif is_buy != is_long:
            with pytest.raises(DirectionMismatchError):
                settle(request, balance, eligible=True)
        else:
            result = settle(request, balance, eligible=True)
            assert result.position_amount == min(amount, 100)

    @pytest.mark.parametrize("amount", [0, 1, 100, 10**30])
    @pytest.mark.parametrize("eligible", [True, False])
    def test_direction_mismatch_always_rejects(self, amount, eligible):
        balance = Balance.from_signed(1000, -100)
        with pytest.raises(LiquidationRejected):
            settle(TradeRequest(amount=amount, is_buy=True), balance, eligible=eligible)
