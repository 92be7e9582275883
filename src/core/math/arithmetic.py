"""
Adder / Subtractor — Сложение и вычитание с распространением переноса/заёма

Обе операции идут от младшего бита к старшему; недостающие старшие биты
более короткого операнда считаются нулями. Результат всегда неотрицательный
и нормализованный.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add всегда успешна, длина буфера = max(len) + 1 под финальный перенос
2. subtract требует a >= b, иначе NegativeResultError
3. absolute_difference не имеет предусловия (max - min)
"""

from src.core.domain.big_unsigned import BigUnsigned
from src.core.domain.errors import NegativeResultError
from src.core.math.comparison import less_than


def _bit_from_lsb(value: BigUnsigned, offset: int) -> int:
    """Бит на позиции offset от младшего; вне длины → 0."""
    index = value.length - 1 - offset
    return value.bits[index] if index >= 0 else 0


def add(a: BigUnsigned, b: BigUnsigned) -> BigUnsigned:
    """
    Сложение a + b (ripple-carry).

    Examples:
        >>> from src.core.math import parse
        >>> str(add(parse("10110"), parse("1101")))
        '100011'
    """
    width = max(a.length, b.length)
    result = [0] * (width + 1)
    carry = 0

    for offset in range(width):
        total = _bit_from_lsb(a, offset) + _bit_from_lsb(b, offset) + carry
        result[width - offset] = total % 2
        carry = total // 2

    result[0] = carry
    return BigUnsigned(bits=tuple(result))


def subtract(a: BigUnsigned, b: BigUnsigned) -> BigUnsigned:
    """
    Вычитание a - b (ripple-borrow).

    Args:
        a: Уменьшаемое
        b: Вычитаемое (должно быть <= a)

    Returns:
        Разность a - b

    Raises:
        NegativeResultError: Если a < b

    Examples:
        >>> from src.core.math import parse
        >>> str(subtract(parse("10110"), parse("1101")))
        '1001'
    """
    if less_than(a, b):
        raise NegativeResultError(f"cannot subtract {b} from smaller value {a}")

    width = a.length
    result = [0] * width
    borrow = 0

    for offset in range(width):
        diff = _bit_from_lsb(a, offset) - _bit_from_lsb(b, offset) - borrow
        if diff < 0:
            diff += 2
            borrow = 1
        else:
            borrow = 0
        result[width - 1 - offset] = diff

    return BigUnsigned(bits=tuple(result))


def absolute_difference(a: BigUnsigned, b: BigUnsigned) -> BigUnsigned:
    """|a - b|: порядок операндов выбирается через Comparator."""
    if less_than(a, b):
        return subtract(b, a)
    return subtract(a, b)
