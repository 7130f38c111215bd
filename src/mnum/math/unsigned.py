"""
Unsigned Decimal — беззнаковая десятичная арифметика

Операнд — пара (integer, fraction) последовательностей цифр, представляющая
неотрицательное десятичное число. Знак на этом уровне не учитывается.

Правила выравнивания:
- Дробные части дополняются нулями справа (младшие разряды, значение не меняется)
- Перенос/заём дробной части передаётся в целую
- Деление масштабирует оба операнда на одну и ту же степень 10
  (дробные длины выравниваются), частное при этом не меняется
"""

from typing import Final, Sequence

from src.mnum.logging import get_logger
from src.mnum.math import digits

logger = get_logger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальное число дробных цифр истинного деления
TRUE_DIVISION_PRECISION: Final[int] = 20

Parts = tuple[list[int], list[int]]


# =============================================================================
# HELPERS
# =============================================================================


def split_scaled(product: Sequence[int], scale: int) -> Parts:
    """
    Разбиение масштабированной величины на целую и дробную части.

    Args:
        product: Цифры величины, умноженной на 10**scale
        scale: Число дробных разрядов

    Returns:
        (integer, fraction), обе части нормализованы

    Examples:
        >>> split_scaled([1, 2, 3, 4, 5], 2)
        ([1, 2, 3], [4, 5])
        >>> split_scaled([5], 2)
        ([0], [0, 5])
    """
    if scale == 0:
        return digits.normalize_leading(product), [0]
    if len(product) <= scale:
        product = digits.pad_left(product, scale + 1)
    point = len(product) - scale
    return (
        digits.normalize_leading(product[:point]),
        digits.normalize_trailing(product[point:]),
    )


def _to_scaled(integer: Sequence[int], fraction: Sequence[int], scale: int) -> list[int]:
    """Склейка integer+fraction в целую величину, умноженную на 10**scale."""
    significant = digits.significant_length(fraction)
    return list(integer) + digits.pad_right(list(fraction[:significant]), scale)


def _align_for_division(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
) -> tuple[list[int], list[int]]:
    """Приведение делимого и делителя к целым величинам с общим масштабом."""
    scale = max(digits.significant_length(x_fraction), digits.significant_length(y_fraction))
    return _to_scaled(x_integer, x_fraction, scale), _to_scaled(y_integer, y_fraction, scale)


def _validate_precision(precision: int) -> None:
    if precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def add(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
) -> Parts:
    """
    Сложение беззнаковых десятичных чисел.

    Дробные части выравниваются справа и складываются; перенос из дробной
    суммы становится входящим переносом целого сложения.

    Examples:
        >>> add([1, 2, 3], [4, 5], [1], [6])
        ([1, 2, 5], [0, 5])
    """
    size = max(len(x_fraction), len(y_fraction))
    fraction, carry = digits.add_aligned(
        digits.pad_right(x_fraction, size),
        digits.pad_right(y_fraction, size),
    )
    integer = digits.add(x_integer, y_integer, carry)
    return integer, digits.normalize_trailing(fraction)


def subtract(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
    comparison: int,
) -> Parts:
    """
    Вычитание модулей: |x - y|.

    Args:
        comparison: combined_compare(x, y); при -1 вычисляется y - x,
            при 0 результат — канонический ноль

    Returns:
        (integer, fraction) разности
    """
    if comparison == 0:
        return [0], [0]
    if comparison < 0:
        x_integer, x_fraction, y_integer, y_fraction = y_integer, y_fraction, x_integer, x_fraction

    size = max(len(x_fraction), len(y_fraction))
    fraction, borrow = digits.subtract_aligned(
        digits.pad_right(x_fraction, size),
        digits.pad_right(y_fraction, size),
    )
    integer = digits.subtract(
        x_integer,
        y_integer,
        digits.compare_magnitude(x_integer, y_integer),
        borrow,
    )
    return integer, digits.normalize_trailing(fraction)


def multiply(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
) -> Parts:
    """
    Умножение беззнаковых десятичных чисел.

    Обе величины склеиваются в целые (integer + fraction), перемножаются,
    и произведение разбивается по позиции суммарной дробной длины.

    Examples:
        >>> multiply([2], [0], [0], [5])
        ([1], [0])
    """
    if digits.is_zero(x_integer) and digits.is_zero(x_fraction):
        return [0], [0]
    if digits.is_zero(y_integer) and digits.is_zero(y_fraction):
        return [0], [0]
    if digits.is_zero(x_fraction) and digits.is_zero(y_fraction):
        return digits.multiply(x_integer, y_integer), [0]

    x_scale = digits.significant_length(x_fraction)
    y_scale = digits.significant_length(y_fraction)
    product = digits.multiply(
        _to_scaled(x_integer, x_fraction, x_scale),
        _to_scaled(y_integer, y_fraction, y_scale),
    )
    return split_scaled(product, x_scale + y_scale)


def divide_with_remainder(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
) -> tuple[list[int], list[int]]:
    """
    Деление с усечением: целое частное и остаток.

    Остаток выражен в общем масштабе операндов (умножен на 10**scale),
    для вызывающего кода значим только факт его равенства нулю.

    Raises:
        DivisionByZero: Если делитель равен нулю
    """
    dividend, divisor = _align_for_division(x_integer, x_fraction, y_integer, y_fraction)
    return digits.divide_with_remainder(dividend, divisor)


def true_divide(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
    precision: int = TRUE_DIVISION_PRECISION,
) -> Parts:
    """
    Истинное деление: десятичное частное.

    Сначала целое частное, затем деление продолжается в остаток, пока
    он не обнулится или не будет набрано precision дробных цифр.
    Если деление не точное, последняя дробная цифра увеличивается
    на единицу (с переносом в целую часть при необходимости).

    Args:
        precision: Максимальное число дробных цифр (default: 20)

    Returns:
        (integer, fraction) частного

    Raises:
        DivisionByZero: Если делитель равен нулю
        ValueError: Если precision <= 0

    Examples:
        >>> true_divide([7], [0], [2], [0])
        ([3], [5])
        >>> true_divide([1], [0], [3], [0], precision=4)
        ([0], [3, 3, 3, 4])
    """
    _validate_precision(precision)
    dividend, divisor = _align_for_division(x_integer, x_fraction, y_integer, y_fraction)
    quotient, remainder = digits.divide_with_remainder(dividend, divisor)
    if digits.is_zero(remainder):
        return quotient, [0]

    divisor = digits.normalize_leading(divisor)
    fraction: list[int] = []
    while len(fraction) < precision and not digits.is_zero(remainder):
        quotient_digit, remainder = digits.divide_step(remainder, 0, divisor)
        fraction.append(quotient_digit)

    if not digits.is_zero(remainder):
        logger.debug("true_division_rounded", precision=precision)
        fraction, carry = digits.add_aligned(fraction, digits.pad_left(digits.ONE, len(fraction)))
        if carry:
            quotient = digits.add(quotient, digits.ONE)

    return quotient, digits.normalize_trailing(fraction)


def power(integer: Sequence[int], fraction: Sequence[int], exponent: Sequence[int]) -> Parts:
    """
    Возведение в целую неотрицательную степень.

    При нулевой дробной части — степень целой последовательности;
    иначе степень склеенной величины с масштабом len(fraction) * exponent.

    Args:
        integer: Целая часть основания
        fraction: Дробная часть основания
        exponent: Показатель (только целые цифры)

    Examples:
        >>> power([1], [5], [2])
        ([2], [2, 5])
    """
    if digits.is_zero(fraction):
        return digits.power(integer, exponent), [0]
    scale = digits.significant_length(fraction)
    product = digits.power(_to_scaled(integer, fraction, scale), exponent)
    return split_scaled(product, scale * digits.to_int(exponent))
