"""
Digits — Беззнаковая арифметика над десятичными разрядами

Модуль реализует арифметику модулей (magnitude) для BigInteger:
- Нормализация (удаление старших нулей)
- Разложение неотрицательного int на разряды
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow), larger - smaller
- Умножение "в столбик"
- Рендеринг в десятичную строку

Представление: list[int], каждый элемент — одна десятичная цифра 0..9,
младший разряд первым. Ноль — ровно [0].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции нормализован: нет старших нулей, кроме [0]
2. Входные последовательности никогда не мутируются
3. Результат — всегда новый list, не разделяющий storage со входами
4. Модуль ничего не знает о знаке
"""

from typing import Final, Sequence

# =============================================================================
# CONSTANTS
# =============================================================================

# Основание системы счисления (одна десятичная цифра на элемент)
DIGIT_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """
    Удаление старших (most-significant) нулей in-place.

    Пример: [0, 0, 1, 0, 0] (число 100 с лишними нулями) → [0, 0, 1].
    Пустая последовательность превращается в [0].

    Args:
        digits: Разряды, младший первым (мутируется)

    Returns:
        Тот же list после нормализации
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Проверка нормализованного модуля на ноль."""
    return len(digits) == 1 and digits[0] == 0


def digits_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int на десятичные разряды.

    Повторное деление на DIGIT_BASE, младший разряд первым.

    Args:
        value: Неотрицательное целое

    Returns:
        Нормализованный список разрядов (0 → [0])

    Raises:
        ValueError: Если value отрицательный

    Examples:
        >>> digits_from_int(0)
        [0]
        >>> digits_from_int(1203)
        [3, 0, 2, 1]
    """
    if value < 0:
        raise ValueError(f"Magnitude must be non-negative, got {value}")

    if value == 0:
        return [0]

    digits: list[int] = []
    while value > 0:
        value, digit = divmod(value, DIGIT_BASE)
        digits.append(digit)
    return digits


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_digits(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Вызывающий код передаёт первым операнд, который НЕ короче второго.
    Числовое соотношение значений не важно, важна только длина.

    Алгоритм:
    1. Поразрядно складываем общие разряды + carry
    2. Протягиваем carry через оставшиеся разряды larger
    3. Если carry остался — добавляем старший разряд

    Args:
        larger: Разряды операнда с длиной >= len(smaller)
        smaller: Разряды второго операнда

    Returns:
        Нормализованная сумма модулей

    Examples:
        >>> add_digits([9, 9, 9], [1])
        [0, 0, 0, 1]
    """
    result: list[int] = []
    carry = 0

    for i in range(len(smaller)):
        carry, digit = divmod(larger[i] + smaller[i] + carry, DIGIT_BASE)
        result.append(digit)

    for i in range(len(smaller), len(larger)):
        carry, digit = divmod(larger[i] + carry, DIGIT_BASE)
        result.append(digit)

    if carry:
        result.append(carry)

    return strip_leading_zeros(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_digits(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Вычитание модулей с заёмом: larger - smaller.

    ПРЕДУСЛОВИЕ: larger >= smaller численно. Проверку выполняет
    вызывающий код (сравнение BigInteger), здесь она не повторяется.

    После исчерпания разрядов smaller заём вычитается из оставшихся
    разрядов larger. Старшие нули, возникшие при заёме (1000 - 1),
    удаляются нормализацией.

    Args:
        larger: Разряды уменьшаемого (численно >= smaller)
        smaller: Разряды вычитаемого

    Returns:
        Нормализованная разность модулей

    Examples:
        >>> subtract_digits([0, 0, 0, 1], [1])
        [9, 9, 9]
    """
    result: list[int] = []
    borrow = 0

    for i in range(len(larger)):
        diff = larger[i] - borrow
        if i < len(smaller):
            diff -= smaller[i]

        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return strip_leading_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_digits(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Умножение модулей "в столбик".

    Буфер результата длины len(left) + len(right), заполненный нулями.
    Для каждого разряда i из left проходим все j из right:
        acc = left[i] * right[j] + result[i + j] + carry
        result[i + j] = acc % 10, carry = acc // 10
    Остаток carry после прохода по j кладётся в result[i + len(right)].

    Args:
        left: Разряды первого множителя
        right: Разряды второго множителя

    Returns:
        Нормализованное произведение модулей

    Examples:
        >>> multiply_digits([2, 1], [2, 1])
        [4, 4, 1]
    """
    result = [0] * (len(left) + len(right))

    for i, left_digit in enumerate(left):
        carry = 0
        for j, right_digit in enumerate(right):
            carry, result[i + j] = divmod(
                left_digit * right_digit + result[i + j] + carry, DIGIT_BASE
            )
        result[i + len(right)] += carry

    return strip_leading_zeros(result)


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def render_digits(digits: Sequence[int]) -> str:
    """Разряды (младший первым) → десятичная строка, старший разряд первым."""
    return "".join(str(digit) for digit in reversed(digits))
