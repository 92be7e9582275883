"""
Тесты для RSA Demonstration Layer и вывода ключей

Проверяет:
1. Native арифметику: gcd, расширенный Евклид, обратный элемент
2. derive_keypair и его отказы (RSAKeyDerivationError)
3. encrypt/decrypt как exp_mod, round trip на сообщениях < n
4. Сериализацию ключей в JSON контракт и обратно
"""

import pytest
from jsonschema import ValidationError

from src.core.domain import ExponentTooLargeError, from_native, to_native
from src.core.math import exp_mod, parse
from src.rsa import (
    NATIVE_WORD_BITS,
    RSAKeyDerivationError,
    RSAKeyPair,
    RSAPublicKey,
    decrypt,
    derive_keypair,
    encrypt,
    extended_euclid,
    mod_inverse,
    native_gcd,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def textbook_keypair():
    """Классический пример: p=61, q=53, e=17 → n=3233, d=2753."""
    return derive_keypair(61, 53, 17)


# =============================================================================
# ТЕСТЫ: Native arithmetic
# =============================================================================


class TestNativeArithmetic:
    """Тесты native_gcd / extended_euclid / mod_inverse."""

    def test_native_gcd(self):
        assert native_gcd(48, 18) == 6
        assert native_gcd(17, 3120) == 1
        assert native_gcd(0, 5) == 5

    @pytest.mark.parametrize("a, b", [(17, 3120), (240, 46), (65537, 3220), (1, 1)])
    def test_extended_euclid_bezout(self, a, b):
        """a*x + b*y == gcd(a, b)."""
        g, x, y = extended_euclid(a, b)
        assert g == native_gcd(a, b)
        assert a * x + b * y == g

    def test_mod_inverse(self):
        assert mod_inverse(17, 3120) == 2753
        assert (3 * mod_inverse(3, 11)) % 11 == 1

    def test_mod_inverse_missing(self):
        with pytest.raises(RSAKeyDerivationError, match="no inverse"):
            mod_inverse(6, 9)


# =============================================================================
# ТЕСТЫ: Key derivation
# =============================================================================


class TestDeriveKeypair:
    """Тесты derive_keypair."""

    def test_textbook_values(self, textbook_keypair):
        assert to_native(textbook_keypair.public.n) == 3233
        assert to_native(textbook_keypair.public.e) == 17
        assert to_native(textbook_keypair.private.d) == 2753
        assert textbook_keypair.private.n == textbook_keypair.public.n

    def test_exponent_not_coprime(self):
        """gcd(e, φ) != 1 → отказ."""
        # φ = 60 * 52 = 3120, gcd(15, 3120) = 15
        with pytest.raises(RSAKeyDerivationError, match="not coprime"):
            derive_keypair(61, 53, 15)

    def test_exponent_out_of_range(self):
        with pytest.raises(RSAKeyDerivationError, match="1 < e"):
            derive_keypair(61, 53, 1)
        with pytest.raises(RSAKeyDerivationError, match="1 < e"):
            derive_keypair(61, 53, 3120)

    def test_invalid_primes(self):
        with pytest.raises(RSAKeyDerivationError, match=">= 2"):
            derive_keypair(1, 53, 17)
        with pytest.raises(RSAKeyDerivationError, match="must differ"):
            derive_keypair(61, 61, 17)

    def test_modulus_overflows_native_word(self):
        """n должен помещаться в 64 бита."""
        p = 2**61 - 1
        q = 2**31 - 1
        with pytest.raises(RSAKeyDerivationError, match=f"{NATIVE_WORD_BITS}-bit"):
            derive_keypair(p, q, 65537)

    def test_large_native_keys(self):
        """Ключи у границы 64 бит (простые Мерсенна 2^31-1 и 2^19-1)."""
        p, q, e = 2**31 - 1, 2**19 - 1, 65537
        keypair = derive_keypair(p, q, e)
        phi = (p - 1) * (q - 1)
        assert (e * to_native(keypair.private.d)) % phi == 1


# =============================================================================
# ТЕСТЫ: Encrypt / decrypt
# =============================================================================


class TestCipher:
    """Тесты encrypt / decrypt."""

    def test_encrypt_is_exp_mod(self, textbook_keypair):
        message = from_native(65)
        n = textbook_keypair.public.n
        e = textbook_keypair.public.e
        assert encrypt(message, e, n) == exp_mod(message, e, n)

    def test_textbook_cipher(self, textbook_keypair):
        """65^17 mod 3233 = 2790."""
        cipher = textbook_keypair.public.encrypt(from_native(65))
        assert to_native(cipher) == 2790
        assert to_native(textbook_keypair.private.decrypt(cipher)) == 65

    @pytest.mark.parametrize("message", [0, 1, 2, 42, 1000, 3232])
    def test_round_trip(self, textbook_keypair, message):
        public = textbook_keypair.public
        private = textbook_keypair.private
        cipher = encrypt(from_native(message), public.e, public.n)
        assert to_native(decrypt(cipher, private.d, private.n)) == message

    def test_round_trip_larger_key(self):
        keypair = derive_keypair(2**31 - 1, 2**19 - 1, 65537)
        message = from_native(123456789012)
        cipher = keypair.public.encrypt(message)
        assert keypair.private.decrypt(cipher) == message

    def test_message_not_below_modulus(self, textbook_keypair, caplog):
        """message >= n: предупреждение, результат — message mod n."""
        message = from_native(3233 + 65)
        with caplog.at_level("WARNING"):
            cipher = textbook_keypair.public.encrypt(message)
        assert "not smaller than modulus" in caplog.text
        assert to_native(textbook_keypair.private.decrypt(cipher)) == 65

    def test_exponent_bridge_limit(self):
        """Экспонента длиннее 64 бит отвергается ядром."""
        with pytest.raises(ExponentTooLargeError):
            encrypt(from_native(5), from_native(2**70), from_native(3233))


# =============================================================================
# ТЕСТЫ: Key contracts
# =============================================================================


class TestKeyContracts:
    """Тесты to_contract / from_contract."""

    def test_keypair_contract(self, textbook_keypair):
        data = textbook_keypair.to_contract()
        assert data == {
            "schema_version": "1",
            "n": "110010100001",
            "e": "10001",
            "d": "101011000001",
        }

    def test_keypair_round_trip(self, textbook_keypair):
        restored = RSAKeyPair.from_contract(textbook_keypair.to_contract())
        assert restored == textbook_keypair

    def test_public_key_round_trip(self, textbook_keypair):
        data = textbook_keypair.public.to_contract()
        assert set(data) == {"schema_version", "n", "e"}
        assert RSAPublicKey.from_contract(data) == textbook_keypair.public

    def test_literals_with_padding_accepted(self):
        """Ведущие нули и пробелы допустимы, нормализуются при загрузке."""
        data = {"schema_version": "1", "n": "0000 1100 1010 0001", "e": "10001"}
        key = RSAPublicKey.from_contract(data)
        assert to_native(key.n) == 3233
        assert key.n == parse("110010100001")

    def test_invalid_literal_rejected(self):
        data = {"schema_version": "1", "n": "3233", "e": "10001"}
        with pytest.raises(ValidationError):
            RSAPublicKey.from_contract(data)

    def test_missing_private_exponent_rejected(self):
        data = {"schema_version": "1", "n": "110010100001", "e": "10001"}
        with pytest.raises(ValidationError):
            RSAKeyPair.from_contract(data)
