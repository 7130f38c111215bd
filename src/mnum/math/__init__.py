"""
Арифметическое ядро mnum.

Три слоя над последовательностями десятичных цифр:
digits (примитивы) → unsigned (пары integer/fraction) → signed (знак).
"""

# Digit sequence primitives
from src.mnum.math.digits import (
    combined_compare,
    compare_fraction,
    compare_magnitude,
    divide_with_remainder,
    from_int,
    from_string,
    is_zero,
    multiply,
    normalize_leading,
    normalize_trailing,
    power,
    to_int,
    to_string,
    validate_digits,
)

# Unsigned decimal arithmetic
from src.mnum.math.unsigned import TRUE_DIVISION_PRECISION

# Signed decimal arithmetic
from src.mnum.math.signed import SignedParts, make_parts

__all__ = [
    # Digits — normalization
    "normalize_leading",
    "normalize_trailing",
    "is_zero",
    "validate_digits",
    # Digits — comparison
    "compare_magnitude",
    "compare_fraction",
    "combined_compare",
    # Digits — arithmetic
    "multiply",
    "divide_with_remainder",
    "power",
    # Digits — conversion
    "from_int",
    "from_string",
    "to_int",
    "to_string",
    # Unsigned — constants
    "TRUE_DIVISION_PRECISION",
    # Signed — types
    "SignedParts",
    "make_parts",
]
