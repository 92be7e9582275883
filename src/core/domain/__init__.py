"""
Domain models and value objects.

Contains the canonical BigUnsigned value and the typed failure model.
"""

from src.core.domain.big_unsigned import (
    ONE_BITS,
    ZERO_BITS,
    BigUnsigned,
    copy,
    from_native,
    is_even,
    is_zero,
    magnitude,
    normalize,
    normalize_bits,
    one,
    to_native,
    zero,
)
from src.core.domain.errors import (
    BigBinaryError,
    DivisionByZeroError,
    ExponentTooLargeError,
    FailureKind,
    InvalidDigitError,
    NegativeResultError,
    OperationResult,
    checked,
)

__all__ = [
    # BigUnsigned model
    "ONE_BITS",
    "ZERO_BITS",
    "BigUnsigned",
    "copy",
    "from_native",
    "is_even",
    "is_zero",
    "magnitude",
    "normalize",
    "normalize_bits",
    "one",
    "to_native",
    "zero",
    # Failures
    "BigBinaryError",
    "DivisionByZeroError",
    "ExponentTooLargeError",
    "FailureKind",
    "InvalidDigitError",
    "NegativeResultError",
    "OperationResult",
    "checked",
]
