"""
Domain models and value objects.

Contains the BigInteger value type, its string parser and serialized state.
"""

from src.core.domain.big_integer import BigInteger
from src.core.domain.parsing import (
    DEFAULT_PARSE_CONFIG,
    NEGATIVE_SIGN,
    BigIntegerParseError,
    InvalidDigitError,
    InvalidFormatError,
    ParseConfig,
    parse_decimal,
)
from src.core.domain.state import BigIntegerState

__all__ = [
    # BigInteger
    "BigInteger",
    # Parsing
    "DEFAULT_PARSE_CONFIG",
    "NEGATIVE_SIGN",
    "ParseConfig",
    "parse_decimal",
    # Parsing — Exceptions
    "BigIntegerParseError",
    "InvalidFormatError",
    "InvalidDigitError",
    # Serialized state
    "BigIntegerState",
]
