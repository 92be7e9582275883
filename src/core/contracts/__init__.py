"""
Contract Validation Module

Модуль для валидации JSON контрактов ключевого материала RSA.
"""

from .validators import (
    ContractValidator,
    RSAKeyPairValidator,
    RSAPublicKeyValidator,
    SchemaLoader,
    ValidationError,
    validate_rsa_keypair,
    validate_rsa_public_key,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RSAKeyPairValidator",
    "RSAPublicKeyValidator",
    # Exceptions
    "ValidationError",
    # Functions
    "validate_rsa_keypair",
    "validate_rsa_public_key",
]
