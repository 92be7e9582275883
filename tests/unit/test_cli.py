"""
Тесты для BigBinary CLI

Проверяет команды demo, arith, gcd, mod, expmod, rsa через typer CliRunner.
"""

import json

import pytest
from typer.testing import CliRunner

from src.cli import DEFAULT_RSA_DEMO, RSADemoConfig, app


@pytest.fixture
def runner():
    return CliRunner()


class TestDemo:
    """Тесты демонстрационного сценария."""

    def test_demo_output(self, runner):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "A = 10110" in result.output
        assert "B = 1101" in result.output
        assert "Equal(A, B) = 0" in result.output
        assert "A < B ? 0" in result.output
        assert "A + B = 100011" in result.output
        assert "A - B = 1001" in result.output
        assert "0011 == 11 ? 1" in result.output
        assert "0000 == 0 ? 1" in result.output


class TestArith:
    """Тесты команды arith."""

    def test_sum_and_difference(self, runner):
        result = runner.invoke(app, ["arith", "10110", "1101"])
        assert result.exit_code == 0
        assert "A + B = 100011" in result.output
        assert "A - B = 1001" in result.output

    def test_negative_difference_fails(self, runner):
        """Отказ вычитания — диагностика и код выхода 1, остальные строки печатаются."""
        result = runner.invoke(app, ["arith", "1101", "10110"])
        assert result.exit_code == 1
        assert "A + B = 100011" in result.output
        assert "A - B: NEGATIVE_RESULT" in result.output
        assert "A - B =" not in result.output

    def test_shift_option(self, runner):
        result = runner.invoke(app, ["arith", "101101000", "1", "--shift", "3"])
        assert result.exit_code == 0
        assert "A << 3 = 101101000000" in result.output
        assert "A >> 3 = 101101" in result.output

    def test_invalid_literal(self, runner):
        result = runner.invoke(app, ["arith", "10a", "1"])
        assert result.exit_code == 1


class TestNumberTheory:
    """Тесты команд gcd, mod, expmod."""

    def test_gcd(self, runner):
        result = runner.invoke(app, ["gcd", "110000", "10010"])
        assert result.exit_code == 0
        assert "gcd(A, B) = 110" in result.output

    def test_mod(self, runner):
        result = runner.invoke(app, ["mod", "101101000", "11000"])
        assert result.exit_code == 0
        assert "A mod B = 0" in result.output

    def test_mod_by_zero(self, runner):
        result = runner.invoke(app, ["mod", "101", "0"])
        assert result.exit_code == 1
        assert "DIVISION_BY_ZERO" in result.output

    def test_expmod(self, runner):
        result = runner.invoke(app, ["expmod", "101", "1101", "10111"])
        assert result.exit_code == 0
        assert "M^exp mod n = 10101" in result.output

    def test_expmod_exponent_too_large(self, runner):
        result = runner.invoke(app, ["expmod", "101", "1" * 65, "10111"])
        assert result.exit_code == 1
        assert "EXPONENT_TOO_LARGE" in result.output


class TestRSA:
    """Тесты команды rsa."""

    def test_defaults(self):
        assert DEFAULT_RSA_DEMO == RSADemoConfig(p=61, q=53, e=17, message=65)

    def test_default_round_trip(self, runner):
        result = runner.invoke(app, ["rsa"])
        assert result.exit_code == 0
        assert "n = 110010100001 (3233)" in result.output
        assert "d = 101011000001 (2753)" in result.output
        assert "cipher = 101011100110 (2790)" in result.output
        assert "decrypted = 1000001" in result.output

    def test_json_contract(self, runner):
        result = runner.invoke(app, ["rsa", "--json"])
        assert result.exit_code == 0
        start = result.output.index("{")
        end = result.output.index("}") + 1
        data = json.loads(result.output[start:end])
        assert data["n"] == "110010100001"
        assert data["d"] == "101011000001"

    def test_bad_exponent(self, runner):
        result = runner.invoke(app, ["rsa", "--e", "15"])
        assert result.exit_code == 1

    def test_negative_message(self, runner):
        result = runner.invoke(app, ["rsa", "--message", "-5"])
        assert result.exit_code == 1
