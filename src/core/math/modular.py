"""
Modular Arithmetic — Редукция, умножение и возведение в степень по модулю

Модуль строит всю модульную арифметику только из сдвигов, сравнений,
сложения и вычитания над BigUnsigned:
- mod: выравнивающий shift-and-subtract (замена длинного деления)
- mul_mod: double-and-add с редукцией на каждом шаге
- exp_mod: square-and-multiply с показателем в native 64-bit счётчике

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модуль, равный нулю → DivisionByZeroError
2. Показатель длиннее EXPONENT_MAX_BITS → ExponentTooLargeError
3. x mod 1 = 0 для любого x
4. Все промежуточные значения mul_mod/exp_mod < modulus
"""

import logging
from typing import Final

from src.core.domain.big_unsigned import (
    BigUnsigned,
    is_even,
    is_zero,
    magnitude,
    one,
    to_native,
    zero,
)
from src.core.domain.errors import DivisionByZeroError, ExponentTooLargeError
from src.core.math.arithmetic import add, subtract
from src.core.math.comparison import compare, less_than
from src.core.math.shifts import shift_left, shift_right

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Граница native-моста для показателя степени (unsigned 64-bit)
EXPONENT_MAX_BITS: Final[int] = 64


# =============================================================================
# MODULAR REDUCER
# =============================================================================


def mod(a: BigUnsigned, b: BigUnsigned) -> BigUnsigned:
    """
    Остаток a mod b.

    Для k от len(a) - len(b) до 0: если остаток >= (b << k), вычесть (b << k).
    Ранний выход, как только остаток стал нулём.

    Args:
        a: Делимое
        b: Модуль (не ноль)

    Returns:
        a mod b

    Raises:
        DivisionByZeroError: Если b == 0

    Examples:
        >>> from src.core.math import parse
        >>> str(mod(parse("101101000"), parse("11000")))
        '0'
    """
    if is_zero(b):
        raise DivisionByZeroError(f"cannot reduce {a} modulo zero")

    if less_than(a, b):
        return magnitude(a)

    remainder = magnitude(a)
    max_shift = a.length - b.length

    for k in range(max_shift, -1, -1):
        if is_zero(remainder):
            break

        aligned = shift_left(b, k)
        if not less_than(remainder, aligned):
            remainder = subtract(remainder, aligned)

    return remainder


# =============================================================================
# MODULAR MULTIPLIER
# =============================================================================


def mul_mod(x: BigUnsigned, y: BigUnsigned, modulus: BigUnsigned) -> BigUnsigned:
    """
    (x * y) mod modulus методом double-and-add.

    Биты y просматриваются от младшего: при единичном бите текущее
    удвоение x добавляется в аккумулятор; x удваивается, y делится на 2.

    Raises:
        DivisionByZeroError: Если modulus == 0
    """
    if is_zero(modulus):
        raise DivisionByZeroError(f"cannot multiply modulo zero ({x} * {y})")

    accumulator = zero()
    addend = mod(x, modulus)
    multiplier = y

    while not is_zero(multiplier):
        if not is_even(multiplier):
            accumulator = mod(add(accumulator, addend), modulus)

        addend = mod(shift_left(addend, 1), modulus)
        multiplier = shift_right(multiplier, 1)

    return accumulator


# =============================================================================
# MODULAR EXPONENTIATOR
# =============================================================================


def exponent_to_native(exponent: BigUnsigned, max_bits: int = EXPONENT_MAX_BITS) -> int:
    """
    Мост показателя степени в native unsigned счётчик.

    Args:
        exponent: Показатель степени
        max_bits: Ширина native-слова (default: EXPONENT_MAX_BITS)

    Returns:
        Показатель как int в диапазоне [0, 2^max_bits)

    Raises:
        ExponentTooLargeError: Если длина показателя > max_bits
    """
    if exponent.length > max_bits:
        raise ExponentTooLargeError(
            f"exponent has {exponent.length} bits, native bridge holds at most {max_bits}"
        )
    return to_native(exponent)


def exp_mod(base: BigUnsigned, exponent: BigUnsigned, modulus: BigUnsigned) -> BigUnsigned:
    """
    (base ^ exponent) mod modulus методом square-and-multiply.

    Порядок проверок:
    1. modulus == 0 → DivisionByZeroError
    2. modulus == 1 → ноль
    3. exponent длиннее EXPONENT_MAX_BITS → ExponentTooLargeError

    Последнее возведение в квадрат пропускается: после старшего бита
    показателя оно уже не нужно.

    Examples:
        >>> from src.core.math import parse
        >>> str(exp_mod(parse("101"), parse("1101"), parse("10111")))
        '10101'
    """
    if is_zero(modulus):
        raise DivisionByZeroError(f"cannot exponentiate modulo zero ({base} ^ {exponent})")

    if compare(modulus, one()) == 0:
        return zero()

    counter = exponent_to_native(exponent)

    result = one()
    power = mod(base, modulus)
    squarings = 0

    while counter:
        if counter & 1:
            result = mul_mod(result, power, modulus)

        counter >>= 1
        if counter:
            power = mul_mod(power, power, modulus)
            squarings += 1

    logger.debug("exp_mod: %d-bit exponent, %d squarings", exponent.length, squarings)
    return result
