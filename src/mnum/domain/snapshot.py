"""
DecimalSnapshot — неизменяемый снапшот десятичного значения

Immutable Pydantic модель для сериализации DecimalValue.
Полная совместимость с JSON Schema (contracts/schema/decimal_value.json).
"""

from pydantic import BaseModel, Field, field_validator

from src.mnum.math import digits


class DecimalSnapshot(BaseModel):
    """
    Сериализуемая тройка (sign, integer, fraction).

    Цифры проверяются на диапазон [0, 9], обе части нормализуются:
    ведущие нули целой части и хвостовые нули дробной удаляются.
    """

    sign: bool = Field(default=False, description="True для отрицательного значения")
    integer: tuple[int, ...] = Field(
        default=(0,), min_length=1, description="Цифры целой части, старшая первой"
    )
    fraction: tuple[int, ...] = Field(
        default=(0,), min_length=1, description="Цифры дробной части, десятые первыми"
    )

    model_config = {"frozen": True}

    @field_validator("integer", "fraction")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка, что каждый элемент — цифра [0, 9]."""
        for digit in v:
            if not 0 <= digit <= 9:
                raise ValueError(f"digit {digit} out of range [0, 9]")
        return v

    @field_validator("integer")
    @classmethod
    def normalize_integer(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        return tuple(digits.normalize_leading(v))

    @field_validator("fraction")
    @classmethod
    def normalize_fraction(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        return tuple(digits.normalize_trailing(v))

    def is_zero(self) -> bool:
        return digits.is_zero(self.integer) and digits.is_zero(self.fraction)
