"""
Failures — Типизированные ошибки ядра и tagged result

Каждая ошибка ядра — подкласс BigBinaryError с собственным FailureKind.
Операции ядра бросают исключение в месте нарушения предусловия;
checked() превращает его в OperationResult и пишет диагностику в лог.

Так «законный ноль» никогда не смешивается с «произошла ошибка»:
- OperationResult.ok различает успех и отказ
- OperationResult.value_or_zero() даёт legacy-поведение (ноль при отказе)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from src.core.domain.big_unsigned import BigUnsigned, zero

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class FailureKind(str, Enum):
    """Вид отказа операции ядра."""

    INVALID_DIGIT = "INVALID_DIGIT"
    NEGATIVE_RESULT = "NEGATIVE_RESULT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    EXPONENT_TOO_LARGE = "EXPONENT_TOO_LARGE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigBinaryError(ValueError):
    """Базовая ошибка двоичной арифметики."""

    kind: FailureKind


class InvalidDigitError(BigBinaryError):
    """Недопустимый символ в двоичном литерале."""

    kind = FailureKind.INVALID_DIGIT

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"invalid character {character!r} at position {position}: "
            f"only '0', '1', whitespace and a leading sign are allowed"
        )


class NegativeResultError(BigBinaryError):
    """Вычитание A - B при A < B (результат не представим без знака)."""

    kind = FailureKind.NEGATIVE_RESULT


class DivisionByZeroError(BigBinaryError):
    """Модуль (делитель) равен нулю."""

    kind = FailureKind.DIVISION_BY_ZERO


class ExponentTooLargeError(BigBinaryError):
    """Показатель степени не помещается в native 64-bit счётчик."""

    kind = FailureKind.EXPONENT_TOO_LARGE


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции ядра: значение либо именованный отказ."""

    ok: bool
    value: Optional[BigUnsigned]
    failure: Optional[FailureKind]

    # Диагностика
    details: str

    def value_or_zero(self) -> BigUnsigned:
        """Значение при успехе, канонический ноль при отказе."""
        if self.ok and self.value is not None:
            return self.value
        return zero()

    @classmethod
    def success(cls, value: BigUnsigned) -> "OperationResult":
        return cls(ok=True, value=value, failure=None, details="")

    @classmethod
    def from_error(cls, error: BigBinaryError) -> "OperationResult":
        return cls(ok=False, value=None, failure=error.kind, details=str(error))


def checked(operation: Callable[..., BigUnsigned], *args, **kwargs) -> OperationResult:
    """
    Выполнение операции ядра с перехватом типизированных ошибок.

    Args:
        operation: Операция ядра (parse, subtract, mod, exp_mod, ...)
        *args, **kwargs: Аргументы операции

    Returns:
        OperationResult.success(value) или OperationResult с failure

    Examples:
        >>> from src.core.math import parse, subtract
        >>> checked(subtract, parse("1"), parse("10")).failure
        <FailureKind.NEGATIVE_RESULT: 'NEGATIVE_RESULT'>
    """
    try:
        value = operation(*args, **kwargs)
    except BigBinaryError as error:
        name = getattr(operation, "__name__", repr(operation))
        logger.warning("%s failed (%s): %s", name, error.kind.value, error)
        return OperationResult.from_error(error)

    return OperationResult.success(value)
