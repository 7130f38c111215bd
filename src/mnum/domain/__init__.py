"""
Domain models and value objects.

Contains the public DecimalValue type, its digit-sequence capability and
the serializable snapshot.
"""

from src.mnum.domain.decimal_value import DecimalValue, parse_literal
from src.mnum.domain.digit_sequence import DigitSequenceView
from src.mnum.domain.snapshot import DecimalSnapshot

__all__ = [
    # Value type
    "DecimalValue",
    "parse_literal",
    # Sequence capability
    "DigitSequenceView",
    # Serialization
    "DecimalSnapshot",
]
