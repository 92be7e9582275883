"""
Parser — Двоичный литерал ↔ BigUnsigned

Формат литерала:
- необязательные ведущие пробельные символы
- необязательный знак '+' или '-' (записывается, но не участвует в арифметике)
- любая смесь символов '0', '1' и пробельных символов

Любой другой символ → InvalidDigitError. Литерал без цифр → канонический ноль.
Ведущие нули допустимы и удаляются нормализацией.

Формат отображения: '-' только для отрицательного знака, затем биты MSB-first.
"""

from src.core.domain.big_unsigned import BigUnsigned
from src.core.domain.errors import InvalidDigitError

SIGN_CHARACTERS = "+-"
DIGIT_CHARACTERS = "01"


def parse(text: str) -> BigUnsigned:
    """
    Разбор двоичного литерала.

    Args:
        text: Литерал, например "  -0010 1101"

    Returns:
        Нормализованный BigUnsigned

    Raises:
        InvalidDigitError: Если встречен недопустимый символ

    Examples:
        >>> str(parse("0011"))
        '11'
        >>> str(parse("-101"))
        '-101'
        >>> str(parse("   "))
        '0'
    """
    negative = False
    sign_allowed = True
    bits: list[int] = []

    for position, character in enumerate(text):
        if character.isspace():
            continue

        if character in SIGN_CHARACTERS and sign_allowed:
            negative = character == "-"
            sign_allowed = False
            continue

        if character not in DIGIT_CHARACTERS:
            raise InvalidDigitError(character, position)

        bits.append(1 if character == "1" else 0)
        sign_allowed = False

    return BigUnsigned(bits=tuple(bits), negative=negative)


def format_binary(value: BigUnsigned) -> str:
    """Формат отображения значения."""
    return str(value)
