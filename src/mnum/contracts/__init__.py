"""
Contract Validation Module

Валидация JSON контракта сериализованных значений mnum.
"""

from .validators import (
    DecimalValueValidator,
    load_decimal_value_schema,
    validate_decimal_value,
)

__all__ = [
    # Classes
    "DecimalValueValidator",
    # Functions
    "load_decimal_value_schema",
    "validate_decimal_value",
]
