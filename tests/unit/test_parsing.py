"""
Тесты для разбора десятичных строк

Проверяет:
1. Корректный разбор знака и разрядов
2. Нормализацию ведущих нулей и "-0"
3. InvalidFormatError / InvalidDigitError
4. ParseConfig.max_digits
"""

import logging

import pytest

from src.core.domain.parsing import (
    DEFAULT_PARSE_CONFIG,
    BigIntegerParseError,
    InvalidDigitError,
    InvalidFormatError,
    ParseConfig,
    parse_decimal,
)


# =============================================================================
# ТЕСТЫ КОРРЕКТНОГО ВХОДА
# =============================================================================


class TestParseDecimalValid:
    """Разбор валидных строк"""

    def test_positive(self) -> None:
        assert parse_decimal("120") == (False, [0, 2, 1])

    def test_negative(self) -> None:
        assert parse_decimal("-45") == (True, [5, 4])

    def test_leading_zeros_stripped(self) -> None:
        """Ведущие нули отбрасываются"""
        assert parse_decimal("000123") == (False, [3, 2, 1])
        assert parse_decimal("-0007") == (True, [7])

    def test_zero(self) -> None:
        assert parse_decimal("0") == (False, [0])
        assert parse_decimal("0000") == (False, [0])

    def test_negative_zero_is_non_negative(self) -> None:
        """'-0' никогда не даёт отрицательный ноль"""
        assert parse_decimal("-0") == (False, [0])
        assert parse_decimal("-000") == (False, [0])

    def test_sign_only_is_zero(self) -> None:
        """Только знак: разрядов нет → ноль"""
        assert parse_decimal("-") == (False, [0])


# =============================================================================
# ТЕСТЫ ОШИБОК
# =============================================================================


class TestParseDecimalErrors:
    """Разбор невалидных строк"""

    def test_empty_string(self) -> None:
        with pytest.raises(InvalidFormatError, match="empty"):
            parse_decimal("")

    def test_letters(self) -> None:
        """Первый недопустимый символ при сканировании с конца"""
        with pytest.raises(InvalidDigitError) as exc_info:
            parse_decimal("abc123")
        assert exc_info.value.character == "c"
        assert exc_info.value.position == 2

    @pytest.mark.parametrize(
        "text",
        ["+5", "1 000", "12.5", "1e10", "--1", "1-", " 7", "٣", "0x1F"],
    )
    def test_non_digit_characters(self, text: str) -> None:
        with pytest.raises(InvalidDigitError):
            parse_decimal(text)

    def test_error_hierarchy(self) -> None:
        """Обе ошибки — ValueError через BigIntegerParseError"""
        assert issubclass(InvalidFormatError, BigIntegerParseError)
        assert issubclass(InvalidDigitError, BigIntegerParseError)
        assert issubclass(BigIntegerParseError, ValueError)

    def test_error_message(self) -> None:
        with pytest.raises(InvalidDigitError, match="Invalid digit 'x' at position 1"):
            parse_decimal("1x1")

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отказ разбора пишется в DEBUG лог"""
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.parsing"):
            with pytest.raises(InvalidFormatError):
                parse_decimal("")
        assert "empty" in caplog.text


# =============================================================================
# ТЕСТЫ КОНФИГУРАЦИИ
# =============================================================================


class TestParseConfig:
    """Тесты ParseConfig"""

    def test_default_is_unbounded(self) -> None:
        assert DEFAULT_PARSE_CONFIG.max_digits is None
        assert parse_decimal("1" * 5000)[1] == [1] * 5000

    def test_max_digits_accepts_boundary(self) -> None:
        config = ParseConfig(max_digits=3)
        assert parse_decimal("999", config) == (False, [9, 9, 9])
        assert parse_decimal("-999", config) == (True, [9, 9, 9])

    def test_max_digits_exceeded(self) -> None:
        config = ParseConfig(max_digits=3)
        with pytest.raises(InvalidFormatError, match="limit is 3"):
            parse_decimal("1000", config)

    def test_invalid_max_digits(self) -> None:
        with pytest.raises(ValueError, match="max_digits must be positive"):
            ParseConfig(max_digits=0)

    def test_config_is_frozen(self) -> None:
        config = ParseConfig(max_digits=10)
        with pytest.raises(AttributeError):
            config.max_digits = 20  # type: ignore[misc]
