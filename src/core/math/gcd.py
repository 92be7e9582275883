"""
GCD Engine — Бинарный алгоритм Штейна

Использует только сдвиги, сравнение и вычитание — без деления.

Алгоритм:
    gcd(0, b) = b, gcd(a, 0) = a
    k = min(tz(a), tz(b))            общий множитель 2^k
    x = a >> tz(a), y = b >> tz(b)   оба нечётные
    пока y != 0:
        y >>= tz(y)                  y нечётный
        если x > y: x, y = y, x      x <= y
        y = y - x                    y чётный (или ноль)
    результат: x << k

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перед вычитанием x <= y, поэтому вычитание всегда определено
2. x нечётный на протяжении всего цикла
"""

import logging

from src.core.domain.big_unsigned import BigUnsigned, is_even, is_zero, magnitude
from src.core.math.arithmetic import absolute_difference
from src.core.math.comparison import less_than
from src.core.math.shifts import count_trailing_zeros, shift_left, shift_right

logger = logging.getLogger(__name__)


def binary_gcd(a: BigUnsigned, b: BigUnsigned) -> BigUnsigned:
    """
    Наибольший общий делитель gcd(a, b).

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        gcd(a, b); gcd(0, 0) = 0

    Examples:
        >>> from src.core.math import parse
        >>> str(binary_gcd(parse("110000"), parse("10010")))
        '110'
    """
    if is_zero(a):
        return magnitude(b)
    if is_zero(b):
        return magnitude(a)

    kx = count_trailing_zeros(a)
    ky = count_trailing_zeros(b)
    k = min(kx, ky)

    x = shift_right(a, kx)
    y = shift_right(b, ky)

    while is_even(x):
        x = shift_right(x, 1)

    iterations = 0
    while not is_zero(y):
        y = shift_right(y, count_trailing_zeros(y))

        if less_than(y, x):
            x, y = y, x

        y = absolute_difference(y, x)
        iterations += 1

    logger.debug("binary_gcd: %d iterations, common power of two k=%d", iterations, k)
    return shift_left(x, k)
