"""Small numeric helpers shared across qbloch."""

from .complex_math import (
    DISPLAY_EPSILON,
    add,
    argument,
    exp,
    expi,
    format_complex,
    modulus,
    mul,
    scale,
    sub,
)

__all__ = [
    "DISPLAY_EPSILON",
    "add",
    "sub",
    "mul",
    "scale",
    "modulus",
    "argument",
    "exp",
    "expi",
    "format_complex",
]
