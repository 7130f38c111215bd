"""
Digit Sequences — примитивы над последовательностями десятичных цифр

Последовательность цифр — список int в [0, 9], старшая цифра первой.
Все функции модуля чистые: аргументы не изменяются, результат — новый список.

ИНВАРИАНТЫ НОРМАЛИЗАЦИИ:
1. Целая часть: нет ведущих нулей, кроме единственной цифры [0]
2. Дробная часть: нет хвостовых нулей, кроме единственной цифры [0]
   (первая цифра дроби — десятые, её нельзя отбрасывать)
3. Пустая последовательность наружу не выходит — вместо неё [0]

Деление выполняется точно, в арифметике последовательностей цифр:
ограничения на разрядность делителя нет.
"""

from typing import Final, Sequence

from src.mnum.errors import DivisionByZero, InvalidLiteral, ValueOutOfRange
from src.mnum.logging import get_logger

logger = get_logger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

BASE: Final[int] = 10

DIGIT_CHARS: Final[str] = "0123456789"

ZERO: Final[tuple[int, ...]] = (0,)

ONE: Final[tuple[int, ...]] = (1,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_leading(digits: Sequence[int]) -> list[int]:
    """
    Удаление ведущих нулей (целая часть).

    Args:
        digits: Последовательность цифр (может быть пустой)

    Returns:
        Новый список без ведущих нулей; [0] для нуля и пустого входа

    Examples:
        >>> normalize_leading([0, 0, 1, 2])
        [1, 2]
        >>> normalize_leading([0, 0])
        [0]
        >>> normalize_leading([])
        [0]
    """
    for position, digit in enumerate(digits):
        if digit != 0:
            return list(digits[position:])
    return [0]


def normalize_trailing(digits: Sequence[int]) -> list[int]:
    """
    Удаление хвостовых нулей (дробная часть).

    Args:
        digits: Последовательность цифр (может быть пустой)

    Returns:
        Новый список без хвостовых нулей; [0] для нуля и пустого входа

    Examples:
        >>> normalize_trailing([0, 5, 0, 0])
        [0, 5]
        >>> normalize_trailing([])
        [0]
    """
    for position in range(len(digits) - 1, -1, -1):
        if digits[position] != 0:
            return list(digits[: position + 1])
    return [0]


def is_zero(digits: Sequence[int]) -> bool:
    """True если последовательность представляет ноль (или пуста)."""
    return not any(digits)


def significant_length(fraction: Sequence[int]) -> int:
    """Длина дробной части; 0 для канонического нуля."""
    return 0 if is_zero(fraction) else len(fraction)


def pad_left(digits: Sequence[int], size: int) -> list[int]:
    """Дополнение нулями слева до длины size."""
    return [0] * (size - len(digits)) + list(digits)


def pad_right(digits: Sequence[int], size: int) -> list[int]:
    """Дополнение нулями справа до длины size."""
    return list(digits) + [0] * (size - len(digits))


def validate_digits(digits: Sequence[int]) -> None:
    """
    Проверка, что каждый элемент — цифра в [0, 9].

    Raises:
        ValueOutOfRange: Если элемент не int или вне диапазона
    """
    for digit in digits:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueOutOfRange(f"digit must be an int in [0, 9], got {digit!r}")


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(x: Sequence[int], y: Sequence[int]) -> int:
    """
    Сравнение целых величин (без ведущих нулей).

    Более длинная последовательность больше; при равной длине —
    поразрядно слева направо.

    Returns:
        -1 если x < y, 0 если x == y, 1 если x > y

    Examples:
        >>> compare_magnitude([1, 0, 0], [9, 9])
        1
        >>> compare_magnitude([1, 2], [1, 3])
        -1
    """
    if len(x) != len(y):
        return 1 if len(x) > len(y) else -1
    x, y = list(x), list(y)
    if x == y:
        return 0
    return 1 if x > y else -1


def compare_fraction(x: Sequence[int], y: Sequence[int]) -> int:
    """
    Сравнение дробных частей.

    Недостающие младшие разряды считаются нулями, поэтому
    [5] и [5, 0] равны, а [5] больше [4, 9, 9].

    Returns:
        -1 если x < y, 0 если x == y, 1 если x > y
    """
    size = max(len(x), len(y))
    x, y = pad_right(x, size), pad_right(y, size)
    if x == y:
        return 0
    return 1 if x > y else -1


def combined_compare(
    x_integer: Sequence[int],
    x_fraction: Sequence[int],
    y_integer: Sequence[int],
    y_fraction: Sequence[int],
) -> int:
    """Сравнение величин: целые части, при равенстве — дробные."""
    comparison = compare_magnitude(x_integer, y_integer)
    if comparison != 0:
        return comparison
    return compare_fraction(x_fraction, y_fraction)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_aligned(x: Sequence[int], y: Sequence[int], carry: int = 0) -> tuple[list[int], int]:
    """
    Поразрядное сложение последовательностей одинаковой длины.

    Перенос из старшего разряда не расширяет результат, а возвращается
    отдельно — так дробная часть передаёт перенос в целую.

    Returns:
        (сумма той же длины, перенос 0 или 1)
    """
    assert len(x) == len(y), "operands must be aligned"
    result = [0] * len(x)
    for position in range(len(x) - 1, -1, -1):
        carry, result[position] = divmod(x[position] + y[position] + carry, BASE)
    return result, carry


def subtract_aligned(x: Sequence[int], y: Sequence[int], borrow: int = 0) -> tuple[list[int], int]:
    """
    Поразрядное вычитание последовательностей одинаковой длины.

    Returns:
        (разность той же длины, заём 0 или 1)
    """
    assert len(x) == len(y), "operands must be aligned"
    result = [0] * len(x)
    for position in range(len(x) - 1, -1, -1):
        difference = x[position] - y[position] - borrow
        borrow = 1 if difference < 0 else 0
        result[position] = difference + BASE * borrow
    return result, borrow


def add(x: Sequence[int], y: Sequence[int], carry: int = 0) -> list[int]:
    """
    Школьное сложение с выравниванием по младшему разряду.

    Длина результата — max(len(x), len(y)), либо на один больше
    при переносе из старшего разряда.

    Args:
        x: Первое слагаемое
        y: Второе слагаемое
        carry: Входящий перенос (из сложения дробных частей)

    Examples:
        >>> add([9, 9], [1])
        [1, 0, 0]
    """
    size = max(len(x), len(y))
    result, carry = add_aligned(pad_left(x, size), pad_left(y, size), carry)
    if carry:
        result.insert(0, carry)
    return normalize_leading(result)


def subtract(x: Sequence[int], y: Sequence[int], comparison: int, borrow: int = 0) -> list[int]:
    """
    Школьное вычитание модулей: |x - y|.

    Вызывающий код обязан передать результат сравнения x и y, чтобы
    промежуточные цифры не становились отрицательными.

    Args:
        x: Уменьшаемое
        y: Вычитаемое
        comparison: compare_magnitude(x, y); при -1 вычисляется y - x
        borrow: Входящий заём (из вычитания дробных частей)

    Returns:
        Разность без ведущих нулей

    Examples:
        >>> subtract([1, 0, 0], [1], 1)
        [9, 9]
        >>> subtract([3], [7], -1)
        [4]
    """
    if comparison == 0 and not borrow:
        return [0]
    if comparison < 0:
        x, y = y, x
    size = max(len(x), len(y))
    result, borrow = subtract_aligned(pad_left(x, size), pad_left(y, size), borrow)
    assert borrow == 0, "invalid subtraction"
    return normalize_leading(result)


# =============================================================================
# УМНОЖЕНИЕ И ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def multiply(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """
    Умножение столбиком.

    Каждое частичное произведение накапливается с переносом в буфер
    длины len(x) + len(y) со смещением, равным позиции цифры x.

    Examples:
        >>> multiply([1, 2], [1, 2])
        [1, 4, 4]
    """
    result = [0] * (len(x) + len(y))
    for i in range(len(x) - 1, -1, -1):
        if x[i] == 0:
            continue
        carry = 0
        for j in range(len(y) - 1, -1, -1):
            position = i + j + 1
            carry, result[position] = divmod(x[i] * y[j] + result[position] + carry, BASE)
        result[i] += carry
    return normalize_leading(result)


def power(base: Sequence[int], exponent: Sequence[int]) -> list[int]:
    """
    Возведение в целую степень повторным умножением.

    Показатель уменьшается на единицу на каждой итерации, поэтому время
    линейно по значению показателя, а не по числу его цифр.

    Args:
        base: Основание
        exponent: Показатель (целая последовательность цифр)

    Examples:
        >>> power([2], [1, 0])
        [1, 0, 2, 4]
        >>> power([7], [0])
        [1]
    """
    result = list(ONE)
    remaining = normalize_leading(exponent)
    while not is_zero(remaining):
        result = multiply(result, base)
        remaining = subtract(remaining, ONE, compare_magnitude(remaining, ONE))
    return result


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_step(remainder: Sequence[int], digit: int, divisor: Sequence[int]) -> tuple[int, list[int]]:
    """
    Один шаг деления столбиком.

    Сносит очередную цифру делимого к остатку и находит цифру частного
    повторным сравнением и вычитанием делителя (не более 9 раз).

    Args:
        remainder: Текущий остаток (< divisor)
        digit: Сносимая цифра
        divisor: Нормализованный ненулевой делитель

    Returns:
        (цифра частного, новый остаток)
    """
    current = normalize_leading(list(remainder) + [digit])
    quotient_digit = 0
    comparison = compare_magnitude(current, divisor)
    while comparison >= 0:
        current = subtract(current, divisor, comparison)
        quotient_digit += 1
        comparison = compare_magnitude(current, divisor)
    return quotient_digit, current


def divide_with_remainder(x: Sequence[int], y: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Деление столбиком с остатком (усечение к нулю).

    Args:
        x: Делимое
        y: Делитель

    Returns:
        (частное, остаток)

    Raises:
        DivisionByZero: Если делитель равен нулю

    Examples:
        >>> divide_with_remainder([7], [2])
        ([3], [1])
        >>> divide_with_remainder([1, 0, 0], [7])
        ([1, 4], [2])
    """
    if is_zero(y):
        logger.debug("division_by_zero", dividend=to_string(x))
        raise DivisionByZero("division by zero")
    divisor = normalize_leading(y)
    quotient: list[int] = []
    remainder = [0]
    for digit in x:
        quotient_digit, remainder = divide_step(remainder, digit, divisor)
        quotient.append(quotient_digit)
    return normalize_leading(quotient), remainder


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_string(digits: Sequence[int]) -> str:
    """Последовательность цифр → строка символов '0'-'9'."""
    return "".join(DIGIT_CHARS[digit] for digit in digits)


def from_string(text: str) -> list[int]:
    """
    Строка символов '0'-'9' → последовательность цифр (без нормализации).

    Raises:
        InvalidLiteral: Если встречен символ вне '0'-'9'
    """
    result = []
    for char in text:
        position = DIGIT_CHARS.find(char)
        if position == -1:
            raise InvalidLiteral(f"Invalid number: unexpected character {char!r}")
        result.append(position)
    return result


def from_int(number: int) -> list[int]:
    """
    Неотрицательное целое → последовательность цифр.

    Raises:
        ValueError: Если number отрицательное
    """
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    if number < BASE:
        return [number]
    result = []
    while number > 0:
        number, digit = divmod(number, BASE)
        result.append(digit)
    result.reverse()
    return result


def to_int(digits: Sequence[int]) -> int:
    """Последовательность цифр → неотрицательное целое."""
    number = 0
    for digit in digits:
        number = number * BASE + digit
    return number
