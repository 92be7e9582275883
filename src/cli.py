"""
BigBinary CLI entry point.

Консоль поверх двоичного ядра: демонстрационный сценарий, арифметика,
PGCD, модульные операции и toy RSA. Ввод — двоичные литералы (MSB-first),
ключи RSA выводятся из native p, q, e.
"""

import json
import logging
import sys
from dataclasses import dataclass

import typer

from src.core.domain import BigUnsigned, OperationResult, checked, from_native, to_native
from src.core.math import (
    add,
    binary_gcd,
    equal,
    exp_mod,
    less_than,
    mod,
    parse,
    shift_left,
    shift_right,
    subtract,
)
from src.rsa import RSAKeyDerivationError, derive_keypair

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RSADemoConfig:
    """Параметры по умолчанию для команды rsa."""

    p: int = 61
    q: int = 53
    e: int = 17
    message: int = 65


DEFAULT_RSA_DEMO = RSADemoConfig()


# =============================================================================
# APP
# =============================================================================


app = typer.Typer(
    name="bigbinary",
    help="Arbitrary-precision unsigned binary arithmetic and a toy RSA demo",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Настройка логирования для всех команд."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_literal(text: str, name: str) -> BigUnsigned:
    """Разбор литерала; при ошибке — диагностика и выход с кодом 1."""
    result = checked(parse, text)
    if not result.ok:
        typer.echo(f"Error: {name}: {result.details}", err=True)
        raise typer.Exit(1)
    return result.value_or_zero()


def _show(label: str, result: OperationResult) -> bool:
    """Печать результата; отказ уходит в stderr. Возвращает result.ok."""
    if result.ok:
        typer.echo(f"{label} = {result.value}")
    else:
        typer.echo(f"{label}: {result.failure.value} ({result.details})", err=True)
    return result.ok


# =============================================================================
# COMMANDS
# =============================================================================


@app.command()
def demo() -> None:
    """Демонстрационный сценарий: сложение, вычитание, нормализация, ноль."""
    a = parse("10110")
    b = parse("1101")

    typer.echo(f"A = {a}")
    typer.echo(f"B = {b}")
    typer.echo(f"Equal(A, B) = {int(equal(a, b))}")
    typer.echo(f"A < B ? {int(less_than(a, b))}")
    typer.echo(f"A + B = {add(a, b)}")
    typer.echo(f"A - B = {subtract(a, b)}")

    typer.echo("--- normalization ---")
    c = parse("0011")
    e = parse("11")
    typer.echo(f"C (0011) = {c}")
    typer.echo(f"E (11)   = {e}")
    typer.echo(f"0011 == 11 ? {int(equal(c, e))}")

    typer.echo("--- zero ---")
    z1 = parse("0000")
    z2 = BigUnsigned()
    typer.echo(f"Z1 (0000) = {z1}")
    typer.echo(f"Z2 (init) = {z2}")
    typer.echo(f"0000 == 0 ? {int(equal(z1, z2))}")


@app.command()
def arith(
    a: str = typer.Argument(..., help="First binary literal"),
    b: str = typer.Argument(..., help="Second binary literal"),
    shift: int = typer.Option(0, "--shift", "-s", help="Also shift A left/right by N bits"),
) -> None:
    """Сравнение, сумма и разность двух литералов."""
    left = _read_literal(a, "A")
    right = _read_literal(b, "B")

    typer.echo(f"A = {left} ({to_native(left)})")
    typer.echo(f"B = {right} ({to_native(right)})")
    typer.echo(f"A == B ? {int(equal(left, right))}")
    typer.echo(f"A < B ? {int(less_than(left, right))}")
    ok = _show("A + B", checked(add, left, right))
    ok = _show("A - B", checked(subtract, left, right)) and ok

    if shift > 0:
        ok = _show(f"A << {shift}", checked(shift_left, left, shift)) and ok
        ok = _show(f"A >> {shift}", checked(shift_right, left, shift)) and ok

    if not ok:
        raise typer.Exit(1)


@app.command()
def gcd(
    a: str = typer.Argument(..., help="First binary literal"),
    b: str = typer.Argument(..., help="Second binary literal"),
) -> None:
    """PGCD двух литералов (алгоритм Штейна)."""
    left = _read_literal(a, "A")
    right = _read_literal(b, "B")
    _show("gcd(A, B)", checked(binary_gcd, left, right))


@app.command(name="mod")
def mod_command(
    a: str = typer.Argument(..., help="Dividend binary literal"),
    b: str = typer.Argument(..., help="Modulus binary literal"),
) -> None:
    """Остаток A mod B."""
    left = _read_literal(a, "A")
    right = _read_literal(b, "B")
    if not _show("A mod B", checked(mod, left, right)):
        raise typer.Exit(1)


@app.command()
def expmod(
    base: str = typer.Argument(..., help="Base binary literal"),
    exponent: str = typer.Argument(..., help="Exponent binary literal (at most 64 bits)"),
    modulus: str = typer.Argument(..., help="Modulus binary literal"),
) -> None:
    """Модульное возведение в степень M^exp mod n."""
    m = _read_literal(base, "M")
    e = _read_literal(exponent, "exp")
    n = _read_literal(modulus, "mod")
    if not _show("M^exp mod n", checked(exp_mod, m, e, n)):
        raise typer.Exit(1)


@app.command()
def rsa(
    p: int = typer.Option(DEFAULT_RSA_DEMO.p, help="First prime (native integer)"),
    q: int = typer.Option(DEFAULT_RSA_DEMO.q, help="Second prime (native integer)"),
    e: int = typer.Option(DEFAULT_RSA_DEMO.e, help="Public exponent (native integer)"),
    message: int = typer.Option(DEFAULT_RSA_DEMO.message, help="Message (native integer < n)"),
    as_json: bool = typer.Option(False, "--json", help="Print the key pair contract as JSON"),
) -> None:
    """Toy RSA: вывод ключей, шифрование и расшифрование сообщения."""
    try:
        keypair = derive_keypair(p, q, e)
    except RSAKeyDerivationError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(1)

    if message < 0:
        typer.echo(f"Error: message must be non-negative, got {message}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(keypair.to_contract(), indent=2))

    plain = from_native(message)
    cipher = checked(keypair.public.encrypt, plain)
    if not cipher.ok:
        _show("cipher", cipher)
        raise typer.Exit(1)
    recovered = checked(keypair.private.decrypt, cipher.value)

    typer.echo(f"n = {keypair.public.n} ({to_native(keypair.public.n)})")
    typer.echo(f"e = {keypair.public.e} ({e})")
    typer.echo(f"d = {keypair.private.d} ({to_native(keypair.private.d)})")
    typer.echo(f"message = {plain} ({message})")
    typer.echo(f"cipher = {cipher.value} ({to_native(cipher.value)})")
    if not _show("decrypted", recovered):
        raise typer.Exit(1)


# Entry point for setuptools
def main() -> None:
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
