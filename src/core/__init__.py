"""
Core value model, binary arithmetic primitives, and contracts.

This module contains the foundational building blocks that are independent
of the RSA demonstration layer and the console.
"""
