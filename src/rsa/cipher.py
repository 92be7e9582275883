"""
RSA Demonstration Layer — шифрование и расшифрование

Прямое применение модульного возведения в степень:
    encrypt(M, e, n) = M^e mod n
    decrypt(C, d, n) = C^d mod n

Без padding, без проверки размера ключа, без проверки простоты.
"""

import logging

from src.core.domain.big_unsigned import BigUnsigned
from src.core.math.comparison import less_than
from src.core.math.modular import exp_mod

logger = logging.getLogger(__name__)


def encrypt(message: BigUnsigned, e: BigUnsigned, n: BigUnsigned) -> BigUnsigned:
    """
    Шифрование сообщения публичным ключом (e, n).

    Args:
        message: Открытый текст как число (ожидается message < n)
        e: Публичная экспонента
        n: Модуль p*q

    Returns:
        Шифротекст message^e mod n

    Raises:
        DivisionByZeroError: Если n == 0
        ExponentTooLargeError: Если e длиннее 64 бит
    """
    if not less_than(message, n):
        logger.warning(
            "message %s is not smaller than modulus %s: decryption yields message mod n",
            message,
            n,
        )
    return exp_mod(message, e, n)


def decrypt(cipher: BigUnsigned, d: BigUnsigned, n: BigUnsigned) -> BigUnsigned:
    """Расшифрование шифротекста приватным ключом (d, n): cipher^d mod n."""
    return exp_mod(cipher, d, n)
