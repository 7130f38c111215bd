"""
DigitSequenceView — значение как изменяемая последовательность цифр

Логическая последовательность: цифры целой части (индексы 0..len(integer)-1),
затем цифры дробной части (индексы продолжаются). Канонически нулевая дробная
часть индексов не даёт: последовательность «заканчивается» на целой части.

ВАЖНО: reverse() и sort() переставляют цифры без учёта числового смысла
(сортировка цифр 31 даёт 13). Это операции над цифрами, не арифметика.

После каждой мутации затронутая часть нормализуется заново, а ставший
нулём результат теряет знак.
Знак цифры участвует в поиске: цифра со знаком, отличным от знака
значения, не совпадает ни с одной позицией.
"""

from typing import TYPE_CHECKING, Iterator, Optional, Sequence

from src.mnum.errors import IndexOutOfRange, NotFound
from src.mnum.math import digits

if TYPE_CHECKING:
    from src.mnum.domain.decimal_value import DecimalValue


class DigitSequenceView:
    """
    Последовательные операции над цифрами DecimalValue.

    Композиция, а не наследование: арифметика живёт в DecimalValue,
    а этот объект работает напрямую с его полями sign/integer/fraction.
    """

    def __init__(self, value: "DecimalValue"):
        self._value = value

    # =========================================================================
    # ДЛИНА И ИНДЕКСЫ
    # =========================================================================

    def __len__(self) -> int:
        return len(self._value.integer) + self.fraction_length()

    def integer_length(self) -> int:
        return len(self._value.integer)

    def fraction_length(self) -> int:
        return digits.significant_length(self._value.fraction)

    def _logical(self) -> Iterator[int]:
        yield from self._value.integer
        if self.fraction_length():
            yield from self._value.fraction

    def check_index(self, index: int) -> int:
        """
        Приведение индекса (включая отрицательный) к позиции.

        Raises:
            IndexOutOfRange: Если индекс вне последовательности
        """
        size = len(self)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexOutOfRange(f"index out of range: {index}")
        return position

    # =========================================================================
    # ЧТЕНИЕ
    # =========================================================================

    def get(self, index: int) -> int:
        position = self.check_index(index)
        integer = self._value.integer
        if position < len(integer):
            return integer[position]
        return self._value.fraction[position - len(integer)]

    def get_integer(self, index: int) -> Optional[int]:
        """Цифра целой части по индексу или None."""
        return _get_or_none(self._value.integer, index)

    def get_fraction(self, index: int) -> Optional[int]:
        """Цифра дробной части по индексу или None."""
        return _get_or_none(self._value.fraction, index)

    def find(self, digit: int, sign: bool) -> int:
        """Первая позиция цифры; -1 если нет или знак не совпадает."""
        if sign != self._value.sign:
            return -1
        for position, current in enumerate(self._logical()):
            if current == digit:
                return position
        return -1

    def rfind(self, digit: int, sign: bool) -> int:
        """Последняя позиция цифры; -1 если нет или знак не совпадает."""
        if sign != self._value.sign:
            return -1
        logical = list(self._logical())
        for position in range(len(logical) - 1, -1, -1):
            if logical[position] == digit:
                return position
        return -1

    def index(self, digit: int, sign: bool) -> int:
        """
        Первая позиция цифры.

        Raises:
            NotFound: Если цифра отсутствует или знак не совпадает
        """
        if sign != self._value.sign:
            raise NotFound("value and digit signs do not match")
        position = self.find(digit, sign)
        if position == -1:
            raise NotFound(f"value not found: {digit}")
        return position

    def count(self, digit: int, sign: bool) -> int:
        if sign != self._value.sign:
            return 0
        return sum(1 for current in self._logical() if current == digit)

    def contains(self, integer: Sequence[int], fraction: Sequence[int]) -> bool:
        """
        Вхождение цифр другого значения (знак не учитывается).

        Без дробной части: цифры integer образуют непрерывный участок
        целой части либо ненулевой дробной. С дробной частью: integer
        входит в целую часть И fraction входит в дробную.
        """
        own_integer, own_fraction = self._value.integer, self._value.fraction
        if digits.is_zero(fraction):
            return _contains_run(integer, own_integer) or (
                self.fraction_length() > 0 and _contains_run(integer, own_fraction)
            )
        return _contains_run(integer, own_integer) and _contains_run(fraction, own_fraction)

    # =========================================================================
    # МУТАЦИИ
    # =========================================================================

    def set(self, index: int, digit: int, sign: bool) -> None:
        """Запись цифры; знак значения переключается знаком цифры (XOR)."""
        position = self.check_index(index)
        value = self._value
        value.sign = value.sign != sign
        if position < len(value.integer):
            value.integer[position] = digit
            value.integer = digits.normalize_leading(value.integer)
        else:
            value.fraction[position - len(value.integer)] = digit
            value.fraction = digits.normalize_trailing(value.fraction)
        self._clear_zero_sign()

    def insert(self, index: int, digit: int, sign: bool) -> None:
        """
        Вставка цифры перед логическим индексом (семантика list.insert).

        Отрицательный индекс отсчитывается с конца; индекс до начала —
        вставка в позицию 0; индекс за концом — добавление в конец
        (в дробную часть, если она ненулевая, иначе в целую).
        """
        value = self._value
        size = len(self)
        position = index + size if index < 0 else index
        if position < 0:
            position = 0

        if position < len(value.integer):
            value.integer.insert(position, digit)
            value.integer = digits.normalize_leading(value.integer)
        elif position < size:
            value.fraction.insert(position - len(value.integer), digit)
            value.fraction = digits.normalize_trailing(value.fraction)
        elif self.fraction_length():
            value.fraction.append(digit)
            value.fraction = digits.normalize_trailing(value.fraction)
        else:
            value.integer.append(digit)
            value.integer = digits.normalize_leading(value.integer)
        value.sign = value.sign != sign
        self._clear_zero_sign()

    def erase(self, index: int) -> None:
        position = self.check_index(index)
        value = self._value
        if position < len(value.integer):
            del value.integer[position]
            value.integer = digits.normalize_leading(value.integer)
        else:
            del value.fraction[position - len(value.integer)]
            value.fraction = digits.normalize_trailing(value.fraction)
        self._clear_zero_sign()

    def _clear_zero_sign(self) -> None:
        value = self._value
        if digits.is_zero(value.integer) and digits.is_zero(value.fraction):
            value.sign = False

    def pop(self, index: int = -1) -> int:
        digit = self.get(index)
        self.erase(index)
        return digit

    def remove(self, digit: int, sign: bool) -> None:
        """
        Удаление первого вхождения цифры.

        Raises:
            NotFound: Если цифра отсутствует или знак не совпадает
        """
        self.erase(self.index(digit, sign))

    def clear(self) -> None:
        value = self._value
        value.sign = False
        value.integer = [0]
        value.fraction = [0]

    def reverse(self) -> None:
        """Разворот целой и дробной частей по отдельности (не числовая операция)."""
        value = self._value
        value.integer = digits.normalize_leading(value.integer[::-1])
        value.fraction = digits.normalize_trailing(value.fraction[::-1])

    def sort(self) -> None:
        """Сортировка цифр целой и дробной частей по отдельности (не числовая операция)."""
        value = self._value
        value.integer = digits.normalize_leading(sorted(value.integer))
        value.fraction = digits.normalize_trailing(sorted(value.fraction))

    def join(self, sign: bool, integer: Sequence[int], fraction: Sequence[int]) -> None:
        """
        Конкатенация цифр другого значения (не арифметическое сложение).

        Цифры целой части дописываются к целой, дробной — к дробной.
        Нулевая целая часть дописывается только у значения-нуля; нулевая
        дробная не дописывается. Знак — логическое ИЛИ знаков.
        """
        value = self._value
        integer_zero = digits.is_zero(integer)
        fraction_zero = digits.is_zero(fraction)
        if not integer_zero or fraction_zero:
            value.integer = digits.normalize_leading(value.integer + list(integer))
        if not fraction_zero:
            own = value.fraction if self.fraction_length() else []
            value.fraction = digits.normalize_trailing(own + list(fraction))
        value.sign = value.sign or sign


def _get_or_none(part: Sequence[int], index: int) -> Optional[int]:
    position = index + len(part) if index < 0 else index
    if not 0 <= position < len(part):
        return None
    return part[position]


def _contains_run(needle: Sequence[int], haystack: Sequence[int]) -> bool:
    """True если needle — непрерывный участок haystack."""
    size = len(needle)
    return any(
        list(haystack[start : start + size]) == list(needle)
        for start in range(len(haystack) - size + 1)
    )
