"""
BigIntegerState — Сериализуемый снапшот BigInteger

Immutable Pydantic модель значения BigInteger.
Полная совместимость с JSON Schema (contracts/schema/big_integer.json).

Пример:
    {"negative": true, "digits": "12345"}  # -12345
"""

from pydantic import BaseModel, Field, model_validator


class BigIntegerState(BaseModel):
    """
    Снапшот значения BigInteger.

    digits — модуль в канонической десятичной форме (старший разряд первым,
    без ведущих нулей). Отрицательный ноль запрещён.
    """

    negative: bool = Field(..., description="Строго отрицательное значение")
    digits: str = Field(
        ...,
        min_length=1,
        pattern=r"^(0|[1-9][0-9]*)$",
        description="Модуль в канонической десятичной форме",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigIntegerState":
        """Ноль не может быть отрицательным."""
        if self.negative and self.digits == "0":
            raise ValueError("Zero cannot be negative")
        return self
