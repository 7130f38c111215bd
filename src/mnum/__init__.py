"""
mnum — десятичные числа произвольной точности на массивах цифр.

Слои (каждый зависит только от нижележащего):
- math.digits — примитивы над последовательностями цифр
- math.unsigned — беззнаковая десятичная арифметика (целая + дробная части)
- math.signed — знаковая арифметика поверх беззнаковой
- domain — публичный тип DecimalValue
"""

from src.mnum.domain.decimal_value import DecimalValue
from src.mnum.errors import (
    DivisionByZero,
    IndexOutOfRange,
    InvalidLiteral,
    MNumError,
    NotFound,
    UnsupportedOperation,
    ValueOutOfRange,
)

__all__ = [
    "DecimalValue",
    # Errors
    "MNumError",
    "DivisionByZero",
    "InvalidLiteral",
    "UnsupportedOperation",
    "ValueOutOfRange",
    "IndexOutOfRange",
    "NotFound",
]
