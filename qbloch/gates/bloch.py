"""Gate actions written directly on the Bloch angles.

Each gate maps ``(theta, phi)`` to a new ``(theta, phi)`` without building
a matrix. The results are targets for the transition animator; nothing
here mutates a :class:`~qbloch.state.QubitState`.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Optional, Tuple

from qbloch.logging import get_logger
from qbloch.state.qubit import TWO_PI, normalize_phi

logger = get_logger(__name__)

Angles = Tuple[float, float]
GateFn = Callable[[float, float], Angles]

POLE_TOLERANCE = 1e-10


def pauli_x(theta: float, phi: float) -> Angles:
    """Bit flip: θ → π − θ, φ → (φ + π) mod 2π."""
    return math.pi - theta, (phi + math.pi) % TWO_PI


def pauli_y(theta: float, phi: float) -> Angles:
    """Half turn about Y: θ → π − θ, φ → (π − φ) mod 2π."""
    return math.pi - theta, normalize_phi(math.pi - phi)


def pauli_z(theta: float, phi: float) -> Angles:
    """Phase flip: θ unchanged, φ → (φ + π) mod 2π."""
    return theta, (phi + math.pi) % TWO_PI


def hadamard(theta: float, phi: float, pole_tolerance: float = POLE_TOLERANCE) -> Angles:
    """
    Hadamard: swap the X and Z Bloch components and negate Y.

    The two poles map exactly, |0⟩ → |+⟩ = (π/2, 0) and |1⟩ → |−⟩ = (π/2, π),
    so the common ground → plus path never goes through ``acos``/``atan2``.
    """
    if abs(theta) < pole_tolerance:
        return math.pi / 2.0, 0.0
    if abs(theta - math.pi) < pole_tolerance:
        return math.pi / 2.0, math.pi

    sin_theta = math.sin(theta)
    x = sin_theta * math.cos(phi)
    y = sin_theta * math.sin(phi)
    z = math.cos(theta)

    x2, y2, z2 = z, -y, x

    new_theta = math.acos(min(max(z2, -1.0), 1.0))
    new_phi = normalize_phi(math.atan2(y2, x2))
    return new_theta, new_phi


GATES: Dict[str, GateFn] = {
    "x": pauli_x,
    "y": pauli_y,
    "z": pauli_z,
    "h": hadamard,
}


def gate_target(
    gate_id: str,
    theta: float,
    phi: float,
    pole_tolerance: float = POLE_TOLERANCE,
) -> Optional[Angles]:
    """
    Look up a gate by id and apply it to ``(theta, phi)``.

    Ids are matched case-insensitively. Unknown ids return None so the
    caller can ignore the request.
    """
    key = str(gate_id).lower()
    if key not in GATES:
        logger.debug("Ignoring unknown gate id %r", gate_id)
        return None
    if key == "h":
        return hadamard(theta, phi, pole_tolerance=pole_tolerance)
    return GATES[key](theta, phi)
