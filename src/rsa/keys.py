"""
RSA Keys — Вывод ключей в native 64-bit арифметике

Ключевой материал (n, φ, d) вычисляется в обычных целых Python, ограниченных
native-словом NATIVE_WORD_BITS, и только затем перекодируется в BigUnsigned.
Двоичное ядро получает уже проверенные экспоненты.

Формулы:
    n = p * q
    φ = (p - 1) * (q - 1)
    d = e^(-1) mod φ       (расширенный алгоритм Евклида)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(e, φ) == 1, иначе RSAKeyDerivationError
2. n, e, d помещаются в NATIVE_WORD_BITS
3. Проверки простоты p и q нет (параметры задаёт вызывающий)
"""

import logging
from typing import Any, Dict, Final

from pydantic import BaseModel, Field

from src.core.contracts import validate_rsa_keypair, validate_rsa_public_key
from src.core.domain.big_unsigned import BigUnsigned, from_native
from src.core.math.parser import format_binary, parse
from src.rsa.cipher import decrypt, encrypt

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Ширина native-слова для вывода ключей
NATIVE_WORD_BITS: Final[int] = 64

# Максимальное значение native-слова (unsigned)
NATIVE_WORD_MAX: Final[int] = (1 << NATIVE_WORD_BITS) - 1

# Версия JSON контракта ключей
KEY_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RSAKeyDerivationError(ValueError):
    """Некорректные параметры RSA: e не взаимно прост с φ, переполнение слова и т.п."""

    pass


# =============================================================================
# NATIVE ARITHMETIC
# =============================================================================


def native_gcd(a: int, b: int) -> int:
    """Алгоритм Евклида над native int."""
    while b:
        a, b = b, a % b
    return a


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """
    Расширенный алгоритм Евклида.

    Returns:
        (g, x, y) такие, что a*x + b*y == g == gcd(a, b)

    Examples:
        >>> extended_euclid(17, 3120)
        (1, -367, 2)
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    return old_r, old_x, old_y


def mod_inverse(value: int, modulus: int) -> int:
    """
    Обратный элемент value^(-1) mod modulus.

    Raises:
        RSAKeyDerivationError: Если gcd(value, modulus) != 1
    """
    g, x, _ = extended_euclid(value, modulus)
    if g != 1:
        raise RSAKeyDerivationError(
            f"{value} has no inverse modulo {modulus} (gcd={g})"
        )
    return x % modulus


# =============================================================================
# KEY MODELS
# =============================================================================


class RSAPublicKey(BaseModel):
    """Публичный ключ (n, e)."""

    n: BigUnsigned = Field(..., description="Модуль p*q")
    e: BigUnsigned = Field(..., description="Публичная экспонента")

    model_config = {"frozen": True}

    def encrypt(self, message: BigUnsigned) -> BigUnsigned:
        return encrypt(message, self.e, self.n)

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в rsa_public_key контракт."""
        return {
            "schema_version": KEY_SCHEMA_VERSION,
            "n": format_binary(self.n),
            "e": format_binary(self.e),
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "RSAPublicKey":
        """
        Загрузка из rsa_public_key контракта.

        Raises:
            ValidationError (jsonschema): Если данные не соответствуют схеме
        """
        validate_rsa_public_key(data)
        return cls(n=parse(data["n"]), e=parse(data["e"]))


class RSAPrivateKey(BaseModel):
    """Приватный ключ (n, d)."""

    n: BigUnsigned = Field(..., description="Модуль p*q")
    d: BigUnsigned = Field(..., description="Приватная экспонента")

    model_config = {"frozen": True}

    def decrypt(self, cipher: BigUnsigned) -> BigUnsigned:
        return decrypt(cipher, self.d, self.n)


class RSAKeyPair(BaseModel):
    """Пара ключей, выведенная из (p, q, e)."""

    public: RSAPublicKey
    private: RSAPrivateKey

    model_config = {"frozen": True}

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в rsa_keypair контракт (двоичные литералы)."""
        return {
            "schema_version": KEY_SCHEMA_VERSION,
            "n": format_binary(self.public.n),
            "e": format_binary(self.public.e),
            "d": format_binary(self.private.d),
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "RSAKeyPair":
        """
        Загрузка из rsa_keypair контракта.

        Raises:
            ValidationError (jsonschema): Если данные не соответствуют схеме
        """
        validate_rsa_keypair(data)
        n = parse(data["n"])
        return cls(
            public=RSAPublicKey(n=n, e=parse(data["e"])),
            private=RSAPrivateKey(n=n, d=parse(data["d"])),
        )


# =============================================================================
# KEY DERIVATION
# =============================================================================


def _require_native(value: int, name: str) -> None:
    if value > NATIVE_WORD_MAX:
        raise RSAKeyDerivationError(
            f"{name}={value} does not fit in a {NATIVE_WORD_BITS}-bit native word"
        )


def derive_keypair(p: int, q: int, e: int) -> RSAKeyPair:
    """
    Вывод пары ключей RSA из простых p, q и публичной экспоненты e.

    Args:
        p: Первый простой множитель (простота не проверяется)
        q: Второй простой множитель, q != p
        e: Публичная экспонента, 1 < e < φ, gcd(e, φ) == 1

    Returns:
        RSAKeyPair с n, e, d, перекодированными в BigUnsigned

    Raises:
        RSAKeyDerivationError: При некорректных параметрах

    Examples:
        >>> pair = derive_keypair(61, 53, 17)
        >>> str(pair.private.d)  # 2753
        '101011000001'
    """
    if p < 2 or q < 2:
        raise RSAKeyDerivationError(f"p and q must be >= 2, got p={p}, q={q}")
    if p == q:
        raise RSAKeyDerivationError(f"p and q must differ, got p=q={p}")

    n = p * q
    _require_native(n, "n")

    phi = (p - 1) * (q - 1)
    if not 1 < e < phi:
        raise RSAKeyDerivationError(f"e must satisfy 1 < e < phi={phi}, got e={e}")

    if native_gcd(e, phi) != 1:
        raise RSAKeyDerivationError(f"e={e} is not coprime with phi={phi}")

    d = mod_inverse(e, phi)
    logger.debug("derived RSA key pair: n=%d, e=%d, d=%d", n, e, d)

    modulus = from_native(n)
    return RSAKeyPair(
        public=RSAPublicKey(n=modulus, e=from_native(e)),
        private=RSAPrivateKey(n=modulus, d=from_native(d)),
    )
