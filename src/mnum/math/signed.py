"""
Signed Decimal — знаковая десятичная арифметика

Знак хранится отдельно от модуля (sign=True — отрицательное), поэтому
алгоритмы над модулями из unsigned остаются знаконезависимыми.

ПРАВИЛА ЗНАКА:
1. Сложение: одинаковые знаки → сумма модулей с тем же знаком;
   разные → разность модулей, знак у операнда с большим модулем
2. Вычитание: сложение с инвертированным вторым операндом
3. Умножение/деление: XOR знаков
4. Floor division: округление к минус бесконечности
5. Modulus: dividend - divisor * floor_quotient (знак следует делителю)
6. Степень: знак результата всегда равен знаку основания,
   чётность показателя не учитывается
7. Нулевой результат всегда неотрицателен
"""

from typing import NamedTuple

from src.mnum.errors import UnsupportedOperation
from src.mnum.logging import get_logger
from src.mnum.math import digits, unsigned
from src.mnum.math.unsigned import TRUE_DIVISION_PRECISION

logger = get_logger(__name__)


class SignedParts(NamedTuple):
    """Знаковое десятичное число: знак, целая и дробная части."""

    sign: bool
    integer: list[int]
    fraction: list[int]

    @property
    def is_zero(self) -> bool:
        return digits.is_zero(self.integer) and digits.is_zero(self.fraction)


def make_parts(sign: bool, integer: list[int], fraction: list[int]) -> SignedParts:
    """Сборка результата: ноль всегда неотрицателен."""
    if digits.is_zero(integer) and digits.is_zero(fraction):
        sign = False
    return SignedParts(sign, integer, fraction)


def negate(x: SignedParts) -> SignedParts:
    return SignedParts(not x.sign, x.integer, x.fraction)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(x: SignedParts, y: SignedParts) -> SignedParts:
    """
    Знаковое сложение.

    Examples:
        >>> add(SignedParts(False, [5], [0]), SignedParts(True, [7], [0]))
        SignedParts(sign=True, integer=[2], fraction=[0])
    """
    if x.sign == y.sign:
        integer, fraction = unsigned.add(x.integer, x.fraction, y.integer, y.fraction)
        return make_parts(x.sign, integer, fraction)

    comparison = digits.combined_compare(x.integer, x.fraction, y.integer, y.fraction)
    integer, fraction = unsigned.subtract(x.integer, x.fraction, y.integer, y.fraction, comparison)
    if comparison == 0:
        return make_parts(False, integer, fraction)
    return make_parts(x.sign if comparison > 0 else y.sign, integer, fraction)


def subtract(x: SignedParts, y: SignedParts) -> SignedParts:
    """Знаковое вычитание: x + (-y)."""
    return add(x, negate(y))


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def multiply(x: SignedParts, y: SignedParts) -> SignedParts:
    integer, fraction = unsigned.multiply(x.integer, x.fraction, y.integer, y.fraction)
    return make_parts(x.sign != y.sign, integer, fraction)


def true_divide(x: SignedParts, y: SignedParts, precision: int = TRUE_DIVISION_PRECISION) -> SignedParts:
    """
    Истинное деление с не более чем precision дробными цифрами.

    Raises:
        DivisionByZero: Если делитель равен нулю
    """
    integer, fraction = unsigned.true_divide(
        x.integer, x.fraction, y.integer, y.fraction, precision=precision
    )
    return make_parts(x.sign != y.sign, integer, fraction)


def truncate_divide(x: SignedParts, y: SignedParts) -> SignedParts:
    """
    Целочисленное деление с усечением к нулю.

    Raises:
        DivisionByZero: Если делитель равен нулю
    """
    quotient, _ = unsigned.divide_with_remainder(x.integer, x.fraction, y.integer, y.fraction)
    return make_parts(x.sign != y.sign, quotient, [0])


def floor_divide(x: SignedParts, y: SignedParts) -> SignedParts:
    """
    Floor division: округление частного к минус бесконечности.

    Одинаковые знаки → неотрицательное частное. Разные знаки и ненулевой
    остаток → модуль частного увеличивается на единицу.

    Raises:
        DivisionByZero: Если делитель равен нулю

    Examples:
        >>> floor_divide(SignedParts(True, [7], [0]), SignedParts(False, [2], [0]))
        SignedParts(sign=True, integer=[4], fraction=[0])
    """
    quotient, remainder = unsigned.divide_with_remainder(
        x.integer, x.fraction, y.integer, y.fraction
    )
    if x.sign == y.sign:
        return make_parts(False, quotient, [0])
    if not digits.is_zero(remainder):
        quotient = digits.add(quotient, digits.ONE)
    return make_parts(True, quotient, [0])


def floor_divmod(x: SignedParts, y: SignedParts) -> tuple[SignedParts, SignedParts]:
    """
    Floor-частное и остаток: remainder = dividend - divisor * quotient.

    Остаток имеет знак делителя (или равен нулю).

    Raises:
        DivisionByZero: Если делитель равен нулю
    """
    quotient = floor_divide(x, y)
    remainder = subtract(x, multiply(y, quotient))
    return quotient, remainder


def modulo(x: SignedParts, y: SignedParts) -> SignedParts:
    """Остаток floor division; знак следует делителю."""
    return floor_divmod(x, y)[1]


# =============================================================================
# СТЕПЕНЬ
# =============================================================================


def power(x: SignedParts, y: SignedParts, precision: int = TRUE_DIVISION_PRECISION) -> SignedParts:
    """
    Возведение в целую степень.

    Отрицательный показатель даёт обратную величину через истинное
    деление 1 / x**|y|. Знак результата — знак основания.

    Raises:
        UnsupportedOperation: Если показатель дробный
        DivisionByZero: Если основание ноль, а показатель отрицательный

    Examples:
        >>> power(SignedParts(False, [3], [0]), SignedParts(False, [0], [0]))
        SignedParts(sign=False, integer=[1], fraction=[0])
    """
    if not digits.is_zero(y.fraction):
        logger.debug(
            "fractional_exponent_rejected",
            exponent=f"{digits.to_string(y.integer)}.{digits.to_string(y.fraction)}",
        )
        raise UnsupportedOperation("can't power fractional exponent")

    integer, fraction = unsigned.power(x.integer, x.fraction, y.integer)
    if y.sign and not digits.is_zero(y.integer):
        integer, fraction = unsigned.true_divide([1], [0], integer, fraction, precision=precision)
    return make_parts(x.sign, integer, fraction)
