"""Gate engine: Bloch-angle gate rules, named presets and matrix forms."""

from .bloch import (
    GATES,
    POLE_TOLERANCE,
    Angles,
    GateFn,
    gate_target,
    hadamard,
    pauli_x,
    pauli_y,
    pauli_z,
)
from .presets import PRESETS, preset_target
from .standard import (
    GATE_MATRICES,
    H,
    I,
    X,
    Y,
    Z,
    apply_gate_matrix,
    is_unitary,
)

__all__ = [
    "Angles",
    "GateFn",
    "POLE_TOLERANCE",
    "GATES",
    "pauli_x",
    "pauli_y",
    "pauli_z",
    "hadamard",
    "gate_target",
    "PRESETS",
    "preset_target",
    "GATE_MATRICES",
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "apply_gate_matrix",
    "is_unitary",
]
