"""RSA — демонстрационное шифрование поверх двоичного ядра.

- Вывод ключей в native 64-bit арифметике (keys)
- encrypt/decrypt как модульное возведение в степень (cipher)
"""

from .cipher import decrypt, encrypt
from .keys import (
    NATIVE_WORD_BITS,
    RSAKeyDerivationError,
    RSAKeyPair,
    RSAPrivateKey,
    RSAPublicKey,
    derive_keypair,
    extended_euclid,
    mod_inverse,
    native_gcd,
)

__all__ = [
    "NATIVE_WORD_BITS",
    "RSAKeyDerivationError",
    "RSAKeyPair",
    "RSAPrivateKey",
    "RSAPublicKey",
    "decrypt",
    "derive_keypair",
    "encrypt",
    "extended_euclid",
    "mod_inverse",
    "native_gcd",
]
