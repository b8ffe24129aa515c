"""
BigInteger — Знаковое целое произвольной точности

Знаковая обёртка над беззнаковой арифметикой src.core.math.digits:
- Конструкторы: ноль, из int, из десятичной строки, копия
- Сложение / вычитание / умножение / отрицание
- Сравнения (<, ==, производные <=, >, >=, !=)
- Инкремент / декремент (pre- и post-формы)
- Канонический рендеринг в строку

Хранение:
    _digits: list[int] — десятичные разряды, младший первым, нормализованы
    _negative: bool   — True только для строго отрицательных значений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль никогда не отрицательный (включая "-0", -ноль, a - a)
2. Нет старших нулей, кроме значения [0]
3. Экземпляры не разделяют _digits между собой (copy — глубокая)
4. In-place операции (+=, -=, *=, инкременты) сначала вычисляют новое
   значение, затем заменяют storage получателя; другие экземпляры
   не затрагиваются

Экземпляры изменяемы через in-place операции, поэтому не hashable.
"""

from typing import Any, Sequence

from src.core.domain.parsing import ParseConfig, parse_decimal
from src.core.domain.state import BigIntegerState
from src.core.math.digits import (
    add_digits,
    digits_from_int,
    is_zero_magnitude,
    multiply_digits,
    render_digits,
    subtract_digits,
)


def _by_length(
    first: Sequence[int], second: Sequence[int]
) -> tuple[Sequence[int], Sequence[int]]:
    """Упорядочить (не короче, не длиннее) для add_digits."""
    if len(first) >= len(second):
        return first, second
    return second, first


class BigInteger:
    """
    Целое число произвольной точности в десятичном представлении.

    Examples:
        >>> str(BigInteger("123456789") * BigInteger("987654321"))
        '121932631112635269'
        >>> str(BigInteger(-5) + 5)
        '0'
    """

    __slots__ = ("_digits", "_negative")

    # Изменяемый тип: hash запрещён
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: "int | str | BigInteger | None" = None):
        """
        Универсальный конструктор.

        Args:
            value: None (ноль), int, десятичная строка или другой BigInteger

        Raises:
            InvalidFormatError: Пустая строка
            InvalidDigitError: Недопустимый символ в строке
            TypeError: Неподдерживаемый тип аргумента
        """
        self._digits: list[int]
        self._negative: bool

        if value is None:
            self._set_parts(False, [0])
        elif isinstance(value, BigInteger):
            self._set_parts(value._negative, list(value._digits))
        elif isinstance(value, bool):
            raise TypeError("BigInteger cannot be constructed from bool")
        elif isinstance(value, int):
            self._set_parts(value < 0, digits_from_int(abs(value)))
        elif isinstance(value, str):
            self._set_parts(*parse_decimal(value))
        else:
            raise TypeError(
                f"BigInteger cannot be constructed from {type(value).__name__}"
            )

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """Конструктор из int (полный диапазон int64 и шире)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_string(cls, value: str, config: ParseConfig | None = None) -> "BigInteger":
        """
        Конструктор из десятичной строки с явной конфигурацией разбора.

        Args:
            value: Строка вида [-]DIGITS
            config: Конфигурация разбора (ограничение длины и т.п.)

        Raises:
            InvalidFormatError: Пустая строка или превышен max_digits
            InvalidDigitError: Недопустимый символ
        """
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        return cls._from_parts(*parse_decimal(value, config))

    @classmethod
    def from_state(cls, state: BigIntegerState) -> "BigInteger":
        """Восстановление из сериализованного снапшота."""
        _, digits = parse_decimal(state.digits)
        return cls._from_parts(state.negative, digits)

    @classmethod
    def _from_parts(cls, negative: bool, digits: list[int]) -> "BigInteger":
        """Сборка из уже нормализованных разрядов; digits переходит во владение."""
        instance = cls.__new__(cls)
        instance._set_parts(negative, digits)
        return instance

    def _set_parts(self, negative: bool, digits: list[int]) -> None:
        self._digits = digits
        # Ноль всегда неотрицательный
        self._negative = negative and not is_zero_magnitude(digits)

    def _assign(self, other: "BigInteger") -> None:
        """Заменить storage получателя значением other (свежий list)."""
        self._set_parts(other._negative, list(other._digits))

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def digits(self) -> tuple[int, ...]:
        """Разряды модуля, младший первым (read-only копия)."""
        return tuple(self._digits)

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "BigInteger") -> "BigInteger":
        """
        Сложение.

        Одинаковые знаки: сумма модулей, общий знак.
        Разные знаки: a + b == a - (-b).
        """
        if self._negative == other._negative:
            larger, smaller = _by_length(self._digits, other._digits)
            return self._from_parts(self._negative, add_digits(larger, smaller))
        return self.subtract(other.negate())

    def subtract(self, other: "BigInteger") -> "BigInteger":
        """
        Вычитание.

        Порядок вычитания модулей и знак результата выбираются по полному
        сравнению значений, а не только по количеству разрядов:
        - оба отрицательные: self <= other → -(|self| - |other|),
          иначе +(|other| - |self|)
        - оба неотрицательные: self >= other → +(|self| - |other|),
          иначе -(|other| - |self|)
        - разные знаки: сумма модулей со знаком self
        """
        if self._negative == other._negative:
            if self._negative:
                if self.less_equal(other):
                    return self._from_parts(True, subtract_digits(self._digits, other._digits))
                return self._from_parts(False, subtract_digits(other._digits, self._digits))

            if self.greater_equal(other):
                return self._from_parts(False, subtract_digits(self._digits, other._digits))
            return self._from_parts(True, subtract_digits(other._digits, self._digits))

        larger, smaller = _by_length(self._digits, other._digits)
        return self._from_parts(self._negative, add_digits(larger, smaller))

    def multiply(self, other: "BigInteger") -> "BigInteger":
        """Умножение: знак — XOR знаков, модуль — умножение в столбик."""
        return self._from_parts(
            self._negative != other._negative,
            multiply_digits(self._digits, other._digits),
        )

    def negate(self) -> "BigInteger":
        """Смена знака; -0 == 0 (неотрицательный)."""
        return self._from_parts(not self._negative, list(self._digits))

    def copy(self) -> "BigInteger":
        """Независимая копия значения."""
        return BigInteger(self)

    # =========================================================================
    # ИНКРЕМЕНТ / ДЕКРЕМЕНТ
    # =========================================================================

    def pre_increment(self) -> "BigInteger":
        """++x: self += 1, возвращает self."""
        self._assign(self.add(BigInteger(1)))
        return self

    def post_increment(self) -> "BigInteger":
        """x++: возвращает снапшот значения до инкремента."""
        snapshot = self.copy()
        self.pre_increment()
        return snapshot

    def pre_decrement(self) -> "BigInteger":
        """--x: self -= 1, возвращает self."""
        self._assign(self.subtract(BigInteger(1)))
        return self

    def post_decrement(self) -> "BigInteger":
        """x--: возвращает снапшот значения до декремента."""
        snapshot = self.copy()
        self.pre_decrement()
        return snapshot

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def equals(self, other: "BigInteger") -> bool:
        """Равенство: совпадают знак и все разряды (оба нормализованы)."""
        return self._negative == other._negative and self._digits == other._digits

    def less_than(self, other: "BigInteger") -> bool:
        """
        Строгое "меньше".

        1. Разные знаки: отрицательное меньше
        2. Разное количество разрядов: больше разрядов — больше модуль;
           для неотрицательных это большее значение, для отрицательных меньшее
        3. Равная длина: сравнение со старшего разряда; для отрицательных
           смысл сравнения инвертирован
        """
        if self._negative != other._negative:
            return self._negative

        if len(self._digits) != len(other._digits):
            shorter = len(self._digits) < len(other._digits)
            return shorter != self._negative

        for mine, theirs in zip(reversed(self._digits), reversed(other._digits)):
            if mine != theirs:
                return (mine < theirs) != self._negative

        return False

    def less_equal(self, other: "BigInteger") -> bool:
        return self.less_than(other) or self.equals(other)

    def greater_than(self, other: "BigInteger") -> bool:
        return not self.less_equal(other)

    def greater_equal(self, other: "BigInteger") -> bool:
        return not self.less_than(other)

    def compare(self, other: "BigInteger") -> int:
        """Трёхзначное сравнение: -1, 0 или 1."""
        if self.less_than(other):
            return -1
        if self.equals(other):
            return 0
        return 1

    # =========================================================================
    # РЕНДЕРИНГ / КОНВЕРСИЯ
    # =========================================================================

    def to_string(self) -> str:
        """Каноническая десятичная строка: [-]DIGITS без ведущих нулей."""
        sign = "-" if self._negative else ""
        return sign + render_digits(self._digits)

    def to_state(self) -> BigIntegerState:
        """Сериализуемый снапшот значения."""
        return BigIntegerState(negative=self._negative, digits=render_digits(self._digits))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self._digits):
            value = value * 10 + digit
        return -value if self._negative else value

    def __bool__(self) -> bool:
        return not self.is_zero

    def __copy__(self) -> "BigInteger":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "BigInteger":
        return self.copy()

    # =========================================================================
    # ОПЕРАТОРЫ PYTHON
    # =========================================================================

    @staticmethod
    def _coerce(value: Any) -> "BigInteger | None":
        """BigInteger или int → BigInteger; иначе None (NotImplemented)."""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInteger(value)
        return None

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __add__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.multiply(self)

    def __iadd__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._assign(self.add(operand))
        return self

    def __isub__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._assign(self.subtract(operand))
        return self

    def __imul__(self, other: Any) -> "BigInteger":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._assign(self.multiply(operand))
        return self

    def __eq__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.equals(operand)

    def __ne__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self.equals(operand)

    def __lt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.less_than(operand)

    def __le__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.less_equal(operand)

    def __gt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.greater_than(operand)

    def __ge__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.greater_equal(operand)
