"""
Ошибки арифметического ядра.

Каждая ошибка — проблема входных данных вызывающего кода, поэтому
ядро не делает повторов и не восстанавливается: условие поднимается
сразу в точке обнаружения.

Классы дополнительно наследуют встроенные исключения Python, чтобы
вызывающий код мог ловить их идиоматично (ZeroDivisionError, ValueError,
IndexError).
"""


class MNumError(Exception):
    """Базовая ошибка mnum."""


class DivisionByZero(MNumError, ZeroDivisionError):
    """
    Делитель имеет нулевую величину.

    Поднимается для /, //, %, divmod, div и их in-place форм,
    а также для возведения нуля в отрицательную степень.
    """


class InvalidLiteral(MNumError, ValueError):
    """Строка не является десятичным литералом (пустая или недопустимый символ)."""


class UnsupportedOperation(MNumError, ValueError):
    """Операция не поддерживается (дробный показатель степени)."""


class ValueOutOfRange(MNumError, ValueError):
    """Значение цифры вне диапазона [0, 9]."""


class IndexOutOfRange(ValueOutOfRange, IndexError):
    """Индекс вне логической последовательности цифр."""


class NotFound(MNumError, ValueError):
    """Искомая цифра отсутствует (index/remove)."""
