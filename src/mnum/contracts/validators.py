"""
JSON Schema контракт decimal_value

Валидация сериализованных значений (DecimalSnapshot.model_dump(mode="json"))
согласно schema/decimal_value.json. Использует библиотеку jsonschema.

Схема описывает форму данных; нормализацию хвостовых нулей дробной части
выполняет DecimalSnapshot, а не контракт.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

from jsonschema import Draft202012Validator, ValidationError

SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "decimal_value.json"


@lru_cache(maxsize=1)
def load_decimal_value_schema() -> Dict[str, Any]:
    """Загрузка схемы decimal_value (кэшируется)."""
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


class DecimalValueValidator:
    """
    Валидатор decimal_value контракта.

    Схема проходит meta-валидацию при создании валидатора.

    Raises:
        SchemaError: Если переданная схема не соответствует Draft 2020-12
    """

    def __init__(self, schema: Dict[str, Any] | None = None):
        self.schema = load_decimal_value_schema() if schema is None else schema
        Draft202012Validator.check_schema(self.schema)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


def validate_decimal_value(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного значения.

    Args:
        data: Данные для валидации (например, snapshot.model_dump(mode="json"))

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DecimalValueValidator().validate(data)
