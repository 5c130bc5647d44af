"""
Fixed Point — Целочисленная арифметика с фиксированной точкой

Модуль обеспечивает детерминированную арифметику для всех расчётов ликвидации:
- Масштаб фиксированной точки BASE (1e18) общий для цен и коэффициентов
- Проверка переполнения машинного слова (uint256) для одиночных произведений
- Дроби target * numerator / denominator с округлением вниз и вверх
- Расширенное (512-bit) сравнение произведений без переполнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только int, никаких float: округление задаётся явно
2. Произведение, вышедшее за границу слова → ArithmeticOverflowError
3. Деление на ноль никогда не возвращает значение → ArithmeticOverflowError
4. Сравнение произведений выполняется в 512 битах, переполнение невозможно
"""

from typing import Final

# =============================================================================
# МАСШТАБ И ГРАНИЦЫ СЛОВА
# =============================================================================

# Масштаб фиксированной точки: 1.0 == BASE
BASE: Final[int] = 10**18

# Граница модулей margin/position в Balance
MAX_UINT120: Final[int] = 2**120 - 1

# Граница цен, коэффициентов, объёмов и одиночных произведений
MAX_UINT256: Final[int] = 2**256 - 1

# Граница расширенных произведений (два операнда uint256)
MAX_UINT512: Final[int] = 2**512 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticOverflowError(ArithmeticError):
    """
    Аргументы вне допустимого домена арифметики.

    Возникает только при magnitudes за пределами слова или делении на ноль.
    В штатной работе не достижимо: домен Balance и цен ограничен заранее.
    """

    reason = "arithmetic_overflow"


# =============================================================================
# ПРОВЕРКИ ДОМЕНА
# =============================================================================


def check_word(value: int, name: str, limit: int = MAX_UINT256) -> int:
    """
    Проверка, что значение помещается в беззнаковое слово.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        limit: Максимально допустимое значение (default: MAX_UINT256)

    Returns:
        value без изменений

    Raises:
        ArithmeticOverflowError: Если value < 0 или value > limit
    """
    if value < 0 or value > limit:
        raise ArithmeticOverflowError(
            f"{name} out of range [0, {limit}], got {value}"
        )
    return value


def checked_mul(a: int, b: int, limit: int = MAX_UINT256) -> int:
    """
    Беззнаковое умножение с проверкой переполнения слова.

    Examples:
        >>> checked_mul(3, 4)
        12
        >>> checked_mul(2**255, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflowError: ...
    """
    check_word(a, "a", limit)
    check_word(b, "b", limit)
    return check_word(a * b, "product", limit)


# =============================================================================
# ДРОБИ
# =============================================================================


def _check_denominator(denominator: int) -> None:
    if denominator == 0:
        raise ArithmeticOverflowError("fraction denominator must be non-zero")


def get_fraction(target: int, numerator: int, denominator: int) -> int:
    """
    target * numerator / denominator с округлением вниз (floor).

    Args:
        target: Исходная величина (uint256)
        numerator: Числитель доли
        denominator: Знаменатель доли (не ноль)

    Returns:
        floor(target * numerator / denominator)

    Raises:
        ArithmeticOverflowError: При переполнении произведения или denominator == 0

    Examples:
        >>> get_fraction(1000, 1, 3)
        333
    """
    _check_denominator(denominator)
    return checked_mul(target, numerator) // denominator


def get_fraction_round_up(target: int, numerator: int, denominator: int) -> int:
    """
    target * numerator / denominator с округлением вверх (ceil).

    Если target == 0 или numerator == 0, результат 0 (denominator всё равно
    обязан быть ненулевым).

    Examples:
        >>> get_fraction_round_up(1000, 1, 3)
        334
        >>> get_fraction_round_up(1000, 40, 100)
        400
    """
    _check_denominator(denominator)
    if target == 0 or numerator == 0:
        return 0
    return (checked_mul(target, numerator) - 1) // denominator + 1


# =============================================================================
# РАСШИРЕННОЕ СРАВНЕНИЕ
# =============================================================================


def mul_lt(a: int, b: int, c: int, d: int) -> bool:
    """
    Сравнение a * b < c * d в расширенной (512-bit) арифметике.

    Каждый операнд обязан помещаться в uint256; тогда оба произведения
    помещаются в uint512 и сравнение всегда корректно.

    Args:
        a, b: Множители левой части
        c, d: Множители правой части

    Returns:
        True если a * b строго меньше c * d

    Raises:
        ArithmeticOverflowError: Если какой-либо операнд вне uint256
    """
    for name, value in (("a", a), ("b", b), ("c", c), ("d", d)):
        check_word(value, name)

    left = check_word(a * b, "left product", MAX_UINT512)
    right = check_word(c * d, "right product", MAX_UINT512)
    return left < right


def to_base(value: int) -> int:
    """Целое количество → фиксированная точка (value * BASE)."""
    return checked_mul(value, BASE)
