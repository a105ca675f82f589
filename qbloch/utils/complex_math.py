"""Complex arithmetic helpers used to build and display qubit amplitudes."""

from __future__ import annotations

import cmath
import math

DISPLAY_EPSILON = 1e-10


def add(a: complex, b: complex) -> complex:
    return complex(a) + complex(b)


def sub(a: complex, b: complex) -> complex:
    return complex(a) - complex(b)


def mul(a: complex, b: complex) -> complex:
    return complex(a) * complex(b)


def scale(z: complex, s: float) -> complex:
    """Multiply ``z`` by the real factor ``s``."""
    return complex(z.real * s, z.imag * s)


def modulus(z: complex) -> float:
    return abs(complex(z))


def argument(z: complex) -> float:
    """Phase of ``z`` in (-π, π]."""
    return cmath.phase(complex(z))


def exp(z: complex) -> complex:
    """Complex exponential e^z."""
    z = complex(z)
    r = math.exp(z.real)
    return complex(r * math.cos(z.imag), r * math.sin(z.imag))


def expi(angle: float) -> complex:
    """Unit phasor e^{i·angle}."""
    return exp(complex(0.0, angle))


def format_complex(
    z: complex,
    precision: int = 3,
    epsilon: float = DISPLAY_EPSILON,
) -> str:
    """
    Render a complex coefficient for the state label.

    Rules:
        - an imaginary part below ``epsilon`` is dropped and only the real
          part is shown (``1.000``, ``0.000``);
        - a real part below ``epsilon`` is dropped when the imaginary part
          is present (``0.707i``);
        - an imaginary part of exactly +1 or -1 (within ``epsilon``) is
          written as bare ``i`` / ``-i``.

    Parameters
    ----------
    z:
        Coefficient to format.
    precision:
        Number of decimals.
    epsilon:
        Suppression threshold for each component.

    Returns
    -------
    str
        Human-readable coefficient, e.g. ``"0.500 - 0.500i"``.
    """
    real = z.real
    imag = z.imag

    if abs(imag) < epsilon:
        if abs(real) < epsilon:
            real = 0.0
        return f"{real:.{precision}f}"

    real_str = "" if abs(real) < epsilon else f"{real:.{precision}f}"
    if abs(imag - 1.0) < epsilon:
        imag_str = "i"
    elif abs(imag + 1.0) < epsilon:
        imag_str = "-i"
    else:
        imag_str = f"{imag:.{precision}f}i"

    if not real_str:
        return imag_str
    if imag > 0:
        return f"{real_str} + {imag_str}"
    return f"{real_str} - {imag_str[1:]}"
