"""
Comparator — Сравнение BigUnsigned

Корректность опирается на каноническую форму: без ведущих нулей
более короткое значение всегда меньше.
"""

from src.core.domain.big_unsigned import BigUnsigned


def equal(a: BigUnsigned, b: BigUnsigned) -> bool:
    """
    Равенство: совпадают длина, знак и каждый бит.

    Examples:
        >>> from src.core.math import parse
        >>> equal(parse("0011"), parse("11"))
        True
    """
    if a.length != b.length or a.negative != b.negative:
        return False

    for bit_a, bit_b in zip(a.bits, b.bits):
        if bit_a != bit_b:
            return False

    return True


def compare(a: BigUnsigned, b: BigUnsigned) -> int:
    """
    Сравнение модулей (знак игнорируется).

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|
    """
    if a.length != b.length:
        return -1 if a.length < b.length else 1

    for bit_a, bit_b in zip(a.bits, b.bits):
        if bit_a != bit_b:
            return -1 if bit_a < bit_b else 1

    return 0


def less_than(a: BigUnsigned, b: BigUnsigned) -> bool:
    """Строго меньше по модулю; равные значения → False."""
    return compare(a, b) < 0
