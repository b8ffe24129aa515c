"""
Parsing — Разбор десятичной строки в разряды BigInteger

Формат входа:
    [-]DIGITS
где DIGITS — только ASCII-цифры 0..9. Ведущие нули допустимы и
отбрасываются при нормализации. "-0" даёт неотрицательный ноль.

Ошибки:
- InvalidFormatError: пустая строка (или превышен ParseConfig.max_digits)
- InvalidDigitError: символ вне 0..9 после необязательного знака

Ошибка разбора всегда синхронна: частично построенный объект наружу
не выходит.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.math.digits import is_zero_magnitude, strip_leading_zeros

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Маркер отрицательного числа (допускается только первым символом)
NEGATIVE_SIGN: Final[str] = "-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntegerParseError(ValueError):
    """Базовая ошибка разбора строкового представления BigInteger."""


class InvalidFormatError(BigIntegerParseError):
    """Строка не может быть числом целиком: пустая или слишком длинная."""


class InvalidDigitError(BigIntegerParseError):
    """
    Символ вне ASCII 0..9 после необязательного знака.

    Attributes:
        character: Первый найденный недопустимый символ
        position: Индекс символа во входной строке
    """

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Invalid digit {character!r} at position {position}"
        )
        self.character = character
        self.position = position


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParseConfig:
    """Конфигурация разбора строк.

    max_digits ограничивает количество символов-разрядов (без знака).
    None — без ограничения.
    """

    max_digits: int | None = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits < 1:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_PARSE_CONFIG: Final[ParseConfig] = ParseConfig()


# =============================================================================
# PARSER
# =============================================================================


def parse_decimal(value: str, config: ParseConfig | None = None) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки.

    Строка сканируется с конца к маркеру знака; разряды складываются
    младшим первым. Первый встреченный недопустимый символ прерывает
    разбор.

    Args:
        value: Входная строка
        config: Конфигурация разбора (default: DEFAULT_PARSE_CONFIG)

    Returns:
        (is_negative, digits) — digits нормализованы, у нуля is_negative=False

    Raises:
        InvalidFormatError: Пустая строка или превышен max_digits
        InvalidDigitError: Недопустимый символ

    Examples:
        >>> parse_decimal("-0120")
        (True, [0, 2, 1])
        >>> parse_decimal("-0")
        (False, [0])
    """
    config = config or DEFAULT_PARSE_CONFIG

    if not value:
        logger.debug("Rejected empty string input")
        raise InvalidFormatError("Invalid input string: empty")

    start = 0
    negative = False
    if value[0] == NEGATIVE_SIGN:
        negative = True
        start = 1

    if config.max_digits is not None and len(value) - start > config.max_digits:
        logger.debug(
            "Rejected input with %d digits (max_digits=%d)",
            len(value) - start,
            config.max_digits,
        )
        raise InvalidFormatError(
            f"Input has {len(value) - start} digits, "
            f"limit is {config.max_digits}"
        )

    digits: list[int] = []
    for position in range(len(value) - 1, start - 1, -1):
        char = value[position]
        if not "0" <= char <= "9":
            logger.debug("Rejected %r: invalid digit at position %d", value, position)
            raise InvalidDigitError(char, position)
        digits.append(ord(char) - ord("0"))

    strip_leading_zeros(digits)

    # Ноль никогда не бывает отрицательным ("-0", "-000", "-")
    if is_zero_magnitude(digits):
        negative = False

    return negative, digits
