"""
Shifter — Умножение и деление на степень двойки

shift_left добавляет n нулевых битов со стороны LSB (×2^n),
shift_right отбрасывает n младших битов (÷2^n, остаток теряется).
Тривиальные случаи (n <= 0, ноль) возвращают модуль операнда (знак сброшен).
"""

from src.core.domain.big_unsigned import BigUnsigned, is_zero, magnitude, zero


def shift_left(value: BigUnsigned, n: int) -> BigUnsigned:
    """
    value × 2^n.

    Examples:
        >>> from src.core.math import parse
        >>> str(shift_left(parse("101101000"), 3))
        '101101000000'
    """
    if n <= 0 or is_zero(value):
        return magnitude(value)

    return BigUnsigned(bits=value.bits + (0,) * n)


def shift_right(value: BigUnsigned, n: int) -> BigUnsigned:
    """
    value ÷ 2^n (целочисленно).

    Examples:
        >>> from src.core.math import parse
        >>> str(shift_right(parse("101101000"), 3))
        '101101'
        >>> str(shift_right(parse("101"), 3))
        '0'
    """
    if n <= 0:
        return magnitude(value)

    if n >= value.length:
        return zero()

    return BigUnsigned(bits=value.bits[:-n])


def count_trailing_zeros(value: BigUnsigned) -> int:
    """Количество младших нулевых битов (для нуля → 0)."""
    if is_zero(value):
        return 0

    count = 0
    for bit in reversed(value.bits):
        if bit == 1:
            break
        count += 1
    return count
