"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованного BigInteger.
"""

from .validators import (
    BigIntegerStateValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_integer_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerStateValidator",
    # Functions
    "validate_big_integer_state",
]
