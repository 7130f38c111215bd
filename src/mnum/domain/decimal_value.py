"""
DecimalValue — десятичное число произвольной точности

Значение = (sign, integer, fraction):
- sign: True для отрицательных
- integer: цифры целой части, старшая первой, без ведущих нулей
- fraction: цифры после запятой (десятые первыми), без хвостовых нулей

Канонический ноль: integer=[0], fraction=[0]. Знак нуля не имеет смысла:
сравнения считают любой ноль неотрицательным, арифметика возвращает ноль
со sign=False.

Две возможности, собранные композицией:
- арифметическое значение (операторы, сравнения, конверсии) — этот класс
- последовательность цифр (find/insert/sort/...) — DigitSequenceView

Каждая бинарная операция существует в копирующей (x + y) и изменяющей
(x += y) форме; обе — тонкие входы в одну функцию модуля signed.
"""

import math
from typing import Callable, Optional, Sequence, Union

from src.mnum.domain.digit_sequence import DigitSequenceView
from src.mnum.domain.snapshot import DecimalSnapshot
from src.mnum.errors import InvalidLiteral, ValueOutOfRange
from src.mnum.logging import get_logger
from src.mnum.math import digits, signed
from src.mnum.math.signed import SignedParts
from src.mnum.math.unsigned import TRUE_DIVISION_PRECISION

logger = get_logger(__name__)

Operand = Union["DecimalValue", int, float, str]


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_literal(text: str) -> SignedParts:
    """
    Разбор десятичного литерала.

    Грамматика: [+-]? цифры ('.' цифры)?, хотя бы одна цифра всего.
    Допускаются "1." и ".5".

    Args:
        text: Строка литерала

    Returns:
        Нормализованные (sign, integer, fraction); у нуля sign=False

    Raises:
        InvalidLiteral: Пустая строка, нет цифр, лишняя точка или
            недопустимый символ

    Examples:
        >>> parse_literal("-012.340")
        SignedParts(sign=True, integer=[1, 2], fraction=[3, 4])
    """
    body = text
    sign = False
    if body[:1] in ("+", "-"):
        sign = body[0] == "-"
        body = body[1:]

    integer_text, point, fraction_text = body.partition(".")
    if not integer_text and not fraction_text:
        logger.debug("invalid_literal", literal=text)
        raise InvalidLiteral(f"Invalid number: {text!r}")

    try:
        integer = digits.from_string(integer_text)
        fraction = digits.from_string(fraction_text)
    except InvalidLiteral:
        logger.debug("invalid_literal", literal=text)
        raise

    return signed.make_parts(sign, digits.normalize_leading(integer), digits.normalize_trailing(fraction))


def _parse_float(number: float) -> SignedParts:
    """Best-effort: float через его текстовое представление."""
    if not math.isfinite(number):
        raise InvalidLiteral(f"can't convert non-finite float: {number!r}")
    text = repr(number)
    if "e" in text or "E" in text:
        raise InvalidLiteral("can't convert float with scientific notation")
    return parse_literal(text)


# =============================================================================
# DECIMAL VALUE
# =============================================================================


class DecimalValue:
    """
    Знаковое десятичное число произвольной точности.

    Construction:
        DecimalValue(42), DecimalValue("-3.14"), DecimalValue(0.5),
        DecimalValue(other) — копия,
        DecimalValue.from_digits(sign, integer, fraction) — сырая тройка.

    Примеры:
        >>> DecimalValue("123.45") + DecimalValue("1.6")
        DecimalValue('125.05')
        >>> DecimalValue(-7) // 2
        DecimalValue('-4')
    """

    # Изменяемое значение (как list): хеширование запрещено
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Operand = 0):
        if isinstance(value, DecimalValue):
            parts = SignedParts(value.sign, list(value.integer), list(value.fraction))
        elif isinstance(value, int):
            parts = SignedParts(value < 0, digits.from_int(abs(value)), [0])
        elif isinstance(value, str):
            parts = parse_literal(value)
        elif isinstance(value, float):
            parts = _parse_float(value)
        else:
            raise TypeError(
                f"unsupported type {type(value).__name__!r}, expected int, float, str or DecimalValue"
            )
        self.sign: bool = parts.sign
        self.integer: list[int] = parts.integer
        self.fraction: list[int] = parts.fraction
        self._digits = DigitSequenceView(self)

    @classmethod
    def from_digits(
        cls,
        sign: bool,
        integer: Sequence[int],
        fraction: Sequence[int] = (0,),
    ) -> "DecimalValue":
        """
        Сборка из сырой тройки (sign, integer, fraction).

        Обе части копируются и нормализуются, знак нуля сбрасывается.

        Raises:
            ValueOutOfRange: Если элемент не цифра [0, 9]
        """
        digits.validate_digits(integer)
        digits.validate_digits(fraction)
        return cls._from_parts(
            signed.make_parts(
                bool(sign),
                digits.normalize_leading(integer),
                digits.normalize_trailing(fraction),
            )
        )

    @classmethod
    def _from_parts(cls, parts: SignedParts) -> "DecimalValue":
        result = cls.__new__(cls)
        result.sign = parts.sign
        result.integer = list(parts.integer)
        result.fraction = list(parts.fraction)
        result._digits = DigitSequenceView(result)
        return result

    def _parts(self) -> SignedParts:
        return SignedParts(self.sign, self.integer, self.fraction)

    def _assign(self, parts: SignedParts) -> "DecimalValue":
        self.sign = parts.sign
        self.integer = list(parts.integer)
        self.fraction = list(parts.fraction)
        return self

    @staticmethod
    def _coerce(other: object) -> Optional["DecimalValue"]:
        """Операнд → DecimalValue; None для неподдерживаемых типов."""
        if isinstance(other, DecimalValue):
            return other
        if isinstance(other, (int, float, str)):
            return DecimalValue(other)
        return None

    def is_zero(self) -> bool:
        return digits.is_zero(self.integer) and digits.is_zero(self.fraction)

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def _compare(self, other: "DecimalValue") -> int:
        """
        Полный порядок: -1, 0, 1.

        Два нуля равны независимо от знака; иначе знак решает, а при
        равных знаках — сравнение модулей (инвертированное для отрицательных).
        """
        x_zero, y_zero = self.is_zero(), other.is_zero()
        if x_zero and y_zero:
            return 0
        x_negative = self.sign and not x_zero
        y_negative = other.sign and not y_zero
        if x_negative != y_negative:
            return -1 if x_negative else 1
        comparison = digits.combined_compare(self.integer, self.fraction, other.integer, other.fraction)
        return -comparison if x_negative else comparison

    def _compare_with(self, other: object, accept: Callable[[int], bool]):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return accept(self._compare(coerced))

    def __eq__(self, other: object):
        return self._compare_with(other, lambda c: c == 0)

    def __ne__(self, other: object):
        return self._compare_with(other, lambda c: c != 0)

    def __lt__(self, other: object):
        return self._compare_with(other, lambda c: c < 0)

    def __le__(self, other: object):
        return self._compare_with(other, lambda c: c <= 0)

    def __gt__(self, other: object):
        return self._compare_with(other, lambda c: c > 0)

    def __ge__(self, other: object):
        return self._compare_with(other, lambda c: c >= 0)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _binary(self, other: object, operation: Callable[[SignedParts, SignedParts], SignedParts]):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return DecimalValue._from_parts(operation(self._parts(), coerced._parts()))

    def _reflected(self, other: object, operation: Callable[[SignedParts, SignedParts], SignedParts]):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return DecimalValue._from_parts(operation(coerced._parts(), self._parts()))

    def _inplace(self, other: object, operation: Callable[[SignedParts, SignedParts], SignedParts]):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self._assign(operation(self._parts(), coerced._parts()))

    def __add__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.add)

    def __radd__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.add)

    def __iadd__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.add)

    def __sub__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.subtract)

    def __rsub__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.subtract)

    def __isub__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.subtract)

    def __mul__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.multiply)

    def __rmul__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.multiply)

    def __imul__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.multiply)

    def __truediv__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.true_divide)

    def __rtruediv__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.true_divide)

    def __itruediv__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.true_divide)

    def __floordiv__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.floor_divide)

    def __rfloordiv__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.floor_divide)

    def __ifloordiv__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.floor_divide)

    def __mod__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.modulo)

    def __rmod__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.modulo)

    def __imod__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.modulo)

    def __pow__(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.power)

    def __rpow__(self, other: Operand) -> "DecimalValue":
        return self._reflected(other, signed.power)

    def __ipow__(self, other: Operand) -> "DecimalValue":
        return self._inplace(other, signed.power)

    def __divmod__(self, other: Operand):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        quotient, remainder = signed.floor_divmod(self._parts(), coerced._parts())
        return DecimalValue._from_parts(quotient), DecimalValue._from_parts(remainder)

    def __rdivmod__(self, other: Operand):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return divmod(coerced, self)

    def divide(self, other: Operand, precision: int = TRUE_DIVISION_PRECISION) -> "DecimalValue":
        """
        Истинное деление с заданной точностью.

        Args:
            other: Делитель
            precision: Максимальное число дробных цифр (default: 20)

        Raises:
            DivisionByZero: Если делитель равен нулю
        """
        return self._binary(other, lambda x, y: signed.true_divide(x, y, precision=precision))

    def div(self, other: Operand) -> "DecimalValue":
        """Целочисленное деление с усечением к нулю."""
        return self._binary(other, signed.truncate_divide)

    def idiv(self, other: Operand) -> "DecimalValue":
        """Целочисленное деление с усечением к нулю (in place)."""
        return self._inplace(other, signed.truncate_divide)

    def pow(self, other: Operand) -> "DecimalValue":
        return self._binary(other, signed.power)

    def __pos__(self) -> "DecimalValue":
        return DecimalValue(self)

    def __neg__(self) -> "DecimalValue":
        return DecimalValue._from_parts(signed.make_parts(not self.sign, self.integer, self.fraction))

    def __abs__(self) -> "DecimalValue":
        return DecimalValue._from_parts(SignedParts(False, self.integer, self.fraction))

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def __int__(self) -> int:
        number = digits.to_int(self.integer)
        return -number if self.sign else number

    def __float__(self) -> float:
        return float(self.float_str())

    def as_int(self) -> "DecimalValue":
        """Целая часть (знак сохраняется)."""
        return DecimalValue._from_parts(SignedParts(self.sign, self.integer, [0]))

    int_part = as_int

    def as_float(self) -> "DecimalValue":
        """Дробная часть как 0.<fraction> (знак сохраняется)."""
        return DecimalValue._from_parts(SignedParts(self.sign, [0], self.fraction))

    def frac_part(self) -> "DecimalValue":
        """Цифры дробной части, прочитанные как целое."""
        return DecimalValue._from_parts(
            SignedParts(self.sign, digits.normalize_leading(self.fraction), [0])
        )

    def _render(self, always_fraction: bool) -> str:
        fraction_zero = digits.is_zero(self.fraction)
        prefix = "-" if self.sign and not self.is_zero() else ""
        text = prefix + digits.to_string(self.integer)
        if fraction_zero and not always_fraction:
            return text
        return f"{text}.{digits.to_string(self.fraction)}"

    def __str__(self) -> str:
        return self._render(always_fraction=False)

    def float_str(self) -> str:
        """Строка, всегда содержащая дробную часть: "5.0"."""
        return self._render(always_fraction=True)

    def __repr__(self) -> str:
        return f"DecimalValue('{self}')"

    def to_snapshot(self) -> DecimalSnapshot:
        """Неизменяемый снапшот для сериализации."""
        return DecimalSnapshot(sign=self.sign, integer=self.integer, fraction=self.fraction)

    @classmethod
    def from_snapshot(cls, snapshot: DecimalSnapshot) -> "DecimalValue":
        return cls.from_digits(snapshot.sign, snapshot.integer, snapshot.fraction)

    # =========================================================================
    # ПОСЛЕДОВАТЕЛЬНОСТЬ ЦИФР
    # =========================================================================

    def _to_digit(self, value: object) -> tuple[int, bool]:
        """
        Аргумент-цифра → (цифра, знак).

        Принимает int в [-9, 9] или однозначный DecimalValue без дробной части.

        Raises:
            ValueOutOfRange: Если значение не однозначная цифра
            TypeError: Для прочих типов
        """
        if isinstance(value, DecimalValue):
            if not digits.is_zero(value.fraction):
                raise ValueOutOfRange("DecimalValue must be non-fraction")
            if len(value.integer) != 1:
                raise ValueOutOfRange("DecimalValue must be single digit")
            return value.integer[0], value.sign
        if isinstance(value, int):
            if abs(value) > 9:
                raise ValueOutOfRange(f"int must be a single digit, got {value}")
            return abs(value), value < 0
        raise TypeError(f"unsupported digit type {type(value).__name__!r}, expected int or DecimalValue")

    def _digit_value(self, digit: int, sign: bool) -> "DecimalValue":
        return DecimalValue._from_parts(SignedParts(sign, [digit], [0]))

    def __len__(self) -> int:
        return len(self._digits)

    def int_len(self) -> int:
        return self._digits.integer_length()

    def frac_len(self) -> int:
        return self._digits.fraction_length()

    def __getitem__(self, index: int) -> "DecimalValue":
        return self._digit_value(self._digits.get(index), self.sign)

    def __setitem__(self, index: int, value: Union["DecimalValue", int]) -> None:
        digit, sign = self._to_digit(value)
        self._digits.set(index, digit, sign)

    def __delitem__(self, index: int) -> None:
        self._digits.erase(index)

    def geti(self, index: int) -> Optional["DecimalValue"]:
        """Цифра целой части или None вне диапазона."""
        digit = self._digits.get_integer(index)
        return None if digit is None else self._digit_value(digit, self.sign)

    def getf(self, index: int) -> Optional["DecimalValue"]:
        """Цифра дробной части или None вне диапазона."""
        digit = self._digits.get_fraction(index)
        return None if digit is None else self._digit_value(digit, self.sign)

    def find(self, value: Union["DecimalValue", int]) -> int:
        return self._digits.find(*self._to_digit(value))

    def rfind(self, value: Union["DecimalValue", int]) -> int:
        return self._digits.rfind(*self._to_digit(value))

    def index(self, value: Union["DecimalValue", int]) -> int:
        return self._digits.index(*self._to_digit(value))

    def count(self, value: Union["DecimalValue", int]) -> int:
        return self._digits.count(*self._to_digit(value))

    def insert(self, index: int, value: Union["DecimalValue", int]) -> None:
        digit, sign = self._to_digit(value)
        self._digits.insert(index, digit, sign)

    def erase(self, index: int) -> None:
        self._digits.erase(index)

    def pop(self, index: int = -1) -> "DecimalValue":
        return self._digit_value(self._digits.pop(index), False)

    def remove(self, value: Union["DecimalValue", int]) -> None:
        self._digits.remove(*self._to_digit(value))

    def clear(self) -> None:
        self._digits.clear()

    def reverse(self) -> None:
        """Разворот цифр целой и дробной частей (не числовая операция)."""
        self._digits.reverse()

    def sort(self) -> None:
        """Сортировка цифр целой и дробной частей (не числовая операция)."""
        self._digits.sort()

    def join(self, other: Operand) -> None:
        """Дописать цифры other к цифрам этого значения (in place)."""
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(f"unsupported type {type(other).__name__!r}")
        self._digits.join(coerced.sign, coerced.integer, coerced.fraction)

    def add(self, other: Operand) -> "DecimalValue":
        """Копия с дописанными цифрами other; не арифметическое сложение."""
        result = DecimalValue(self)
        result.join(other)
        return result

    def contains(self, other: Operand) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(f"unsupported type {type(other).__name__!r}")
        return self._digits.contains(coerced.integer, coerced.fraction)

    def __contains__(self, other: Operand) -> bool:
        return self.contains(other)
