"""
Tests for BigIntegerState and the big_integer JSON Schema contract

Комплексное тестирование сериализованного представления:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и pattern
- Запрет отрицательного нуля (Pydantic и JSON Schema)
- Интеграция Pydantic модели, схемы и BigInteger
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    BigIntegerStateValidator,
    SchemaLoader,
    validate_big_integer_state,
)
from src.core.domain import BigInteger, BigIntegerState


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_state():
    """Валидный big_integer для тестирования."""
    return {"negative": True, "digits": "9223372036854775808"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_loads_and_caches(self):
        loader = SchemaLoader()
        schema = loader.load_schema("big_integer")
        assert schema["title"] == "BigIntegerState"
        assert loader.load_schema("big_integer") is schema

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# JSON SCHEMA CONTRACT
# =============================================================================


class TestBigIntegerContract:
    """Тесты big_integer.json"""

    def test_valid_state(self, valid_state):
        validate_big_integer_state(valid_state)
        assert BigIntegerStateValidator().is_valid(valid_state)

    def test_zero(self):
        validate_big_integer_state({"negative": False, "digits": "0"})

    def test_missing_required(self, valid_state):
        del valid_state["digits"]
        with pytest.raises(ValidationError):
            validate_big_integer_state(valid_state)

    def test_wrong_type(self, valid_state):
        valid_state["negative"] = "yes"
        with pytest.raises(ValidationError):
            validate_big_integer_state(valid_state)

    @pytest.mark.parametrize("digits", ["", "007", "-5", "12a", "1 2"])
    def test_non_canonical_digits(self, valid_state, digits):
        valid_state["digits"] = digits
        assert not BigIntegerStateValidator().is_valid(valid_state)

    def test_negative_zero_rejected(self):
        with pytest.raises(ValidationError):
            validate_big_integer_state({"negative": True, "digits": "0"})

    def test_extra_fields_rejected(self, valid_state):
        valid_state["radix"] = 10
        assert not BigIntegerStateValidator().is_valid(valid_state)

    def test_iter_errors(self):
        errors = list(BigIntegerStateValidator().iter_errors({"digits": "00"}))
        assert len(errors) >= 2


# =============================================================================
# PYDANTIC MODEL
# =============================================================================


class TestBigIntegerState:
    """Тесты BigIntegerState"""

    def test_valid(self, valid_state):
        state = BigIntegerState(**valid_state)
        assert state.negative is True
        assert state.digits == "9223372036854775808"

    def test_frozen(self, valid_state):
        state = BigIntegerState(**valid_state)
        with pytest.raises(PydanticValidationError):
            state.digits = "1"

    def test_negative_zero_rejected(self):
        with pytest.raises(PydanticValidationError, match="Zero cannot be negative"):
            BigIntegerState(negative=True, digits="0")

    @pytest.mark.parametrize("digits", ["", "00", "-1", "1.0"])
    def test_non_canonical_digits(self, digits):
        with pytest.raises(PydanticValidationError):
            BigIntegerState(negative=False, digits=digits)


# =============================================================================
# INTEGRATION
# =============================================================================


class TestStateIntegration:
    """BigInteger ↔ BigIntegerState ↔ JSON Schema"""

    @pytest.mark.parametrize("text", ["0", "1", "-1", "-9223372036854775808", "1" * 200])
    def test_round_trip(self, text):
        value = BigInteger(text)
        state = value.to_state()
        assert BigInteger.from_state(state) == value
        assert str(BigInteger.from_state(state)) == text

    def test_dump_matches_schema(self):
        state = BigInteger("-120").to_state()
        payload = state.model_dump()
        assert payload == {"negative": True, "digits": "120"}
        validate_big_integer_state(payload)

    def test_json_round_trip(self):
        state = BigInteger("-120").to_state()
        restored = BigIntegerState.model_validate_json(state.model_dump_json())
        assert BigInteger.from_state(restored) == BigInteger(-120)
