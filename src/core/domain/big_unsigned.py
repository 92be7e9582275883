"""
BigUnsigned — Каноническое хранилище беззнакового двоичного числа

Immutable Pydantic модель: последовательность битов (MSB-first) произвольной длины.
Все арифметические модули (src.core.math) принимают и возвращают только BigUnsigned.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет ведущих нулевых битов, кроме значения ноль
2. Ноль представлен ровно одним битом (0,) со сброшенным знаком
3. Длина всегда >= 1
4. Каждое значение нормализуется при создании (model_validator mode="before")

Знак (negative) зарезервирован: парсер его записывает, формат отображения
его печатает, но ни одна арифметическая операция его не использует.
"""

from typing import Any, Final, Sequence

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# CONSTANTS
# =============================================================================

# Каноническое представление нуля
ZERO_BITS: Final[tuple[int, ...]] = (0,)

# Каноническое представление единицы
ONE_BITS: Final[tuple[int, ...]] = (1,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_bits(bits: Sequence[int]) -> tuple[int, ...]:
    """
    Каноническая форма последовательности битов.

    Ищет первый единичный бит со стороны MSB и отбрасывает всё до него.
    Если единичных битов нет (включая пустую последовательность) → (0,).

    Args:
        bits: Биты MSB-first (каждый 0 или 1)

    Returns:
        Нормализованный кортеж битов

    Raises:
        ValueError: Если встречен бит, отличный от 0 и 1

    Examples:
        >>> normalize_bits([0, 0, 1, 1])
        (1, 1)
        >>> normalize_bits([0, 0, 0])
        (0,)
        >>> normalize_bits([])
        (0,)
    """
    for position, bit in enumerate(bits):
        if bit not in (0, 1):
            raise ValueError(f"bit at position {position} must be 0 or 1, got {bit!r}")

    for index, bit in enumerate(bits):
        if bit == 1:
            return tuple(int(b) for b in bits[index:])

    return ZERO_BITS


# =============================================================================
# MODEL
# =============================================================================


class BigUnsigned(BaseModel):
    """
    Беззнаковое целое произвольной точности в двоичном представлении.

    Экземпляры неизменяемы: операции никогда не модифицируют операнды,
    а всегда возвращают новое значение.
    """

    bits: tuple[int, ...] = Field(
        default=ZERO_BITS, min_length=1, description="Биты, MSB-first"
    )
    negative: bool = Field(
        default=False, description="Зарезервированный знак (не участвует в арифметике)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """Нормализация на входе: каждый конструктор выдаёт каноническую форму."""
        if not isinstance(data, dict):
            return data

        bits = normalize_bits(tuple(data.get("bits", ZERO_BITS)))
        negative = bool(data.get("negative", False))

        # Ноль всегда неотрицательный
        if bits == ZERO_BITS:
            negative = False

        return {**data, "bits": bits, "negative": negative}

    @property
    def length(self) -> int:
        """Количество битов."""
        return len(self.bits)

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        return sign + "".join(str(bit) for bit in self.bits)


# =============================================================================
# КОНСТРУКТОРЫ И HELPERS
# =============================================================================


def zero() -> BigUnsigned:
    """Канонический ноль."""
    return BigUnsigned(bits=ZERO_BITS)


def one() -> BigUnsigned:
    return BigUnsigned(bits=ONE_BITS)


def normalize(value: BigUnsigned) -> BigUnsigned:
    """
    Нормализация значения (идемпотентна).

    Args:
        value: Исходное значение

    Returns:
        Новое значение в канонической форме
    """
    return BigUnsigned(bits=value.bits, negative=value.negative)


def copy(value: BigUnsigned) -> BigUnsigned:
    """Независимая копия значения."""
    return BigUnsigned(bits=value.bits, negative=value.negative)


def magnitude(value: BigUnsigned) -> BigUnsigned:
    """Модуль значения: те же биты, знак сброшен."""
    return BigUnsigned(bits=value.bits)


def is_zero(value: BigUnsigned) -> bool:
    return value.bits == ZERO_BITS


def is_even(value: BigUnsigned) -> bool:
    """True если младший бит равен 0 (ноль тоже чётный)."""
    return value.bits[-1] == 0


def from_native(number: int) -> BigUnsigned:
    """
    Кодирование неотрицательного native int в BigUnsigned.

    Args:
        number: Неотрицательное целое

    Returns:
        BigUnsigned с тем же значением

    Raises:
        ValueError: Если number < 0
    """
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")

    bits: list[int] = []
    while number:
        bits.append(number & 1)
        number >>= 1
    bits.reverse()

    return BigUnsigned(bits=tuple(bits))


def to_native(value: BigUnsigned) -> int:
    """
    Декодирование модуля значения в native int (знак игнорируется).

    Examples:
        >>> to_native(BigUnsigned(bits=(1, 0, 1, 1, 0)))
        22
    """
    result = 0
    for bit in value.bits:
        result = (result << 1) | bit
    return result
