"""
Core math modules для BigBinary

Двоичная арифметика произвольной точности над BigUnsigned.
"""

# Parser
from src.core.math.parser import format_binary, parse

# Comparator
from src.core.math.comparison import compare, equal, less_than

# Adder / Subtractor
from src.core.math.arithmetic import absolute_difference, add, subtract

# Shifter
from src.core.math.shifts import count_trailing_zeros, shift_left, shift_right

# GCD Engine
from src.core.math.gcd import binary_gcd

# Modular arithmetic
from src.core.math.modular import (
    EXPONENT_MAX_BITS,
    exp_mod,
    exponent_to_native,
    mod,
    mul_mod,
)

__all__ = [
    # Parser
    "format_binary",
    "parse",
    # Comparator
    "compare",
    "equal",
    "less_than",
    # Adder / Subtractor
    "absolute_difference",
    "add",
    "subtract",
    # Shifter
    "count_trailing_zeros",
    "shift_left",
    "shift_right",
    # GCD Engine
    "binary_gcd",
    # Modular arithmetic — Constants
    "EXPONENT_MAX_BITS",
    # Modular arithmetic — Functions
    "exp_mod",
    "exponent_to_native",
    "mod",
    "mul_mod",
]
