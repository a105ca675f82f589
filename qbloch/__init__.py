"""qbloch - single-qubit Bloch sphere state model and transition engine."""

__version__ = "0.1.0"

# Animation
from .animation import (
    AnimatorState,
    EasingFn,
    TransitionAnimator,
    TransitionRequest,
    ease_out_cubic,
    linear_easing,
    sample_easing,
)

# Configuration
from .config import VisualizerConfig

# Diagnostics
from .diagnostics import (
    assert_normalized,
    bloch_vector,
    debug_context,
    fidelity,
    is_debug_enabled,
    set_debug_enabled,
    state_norm,
)

# Gates and presets
from .gates import (
    GATE_MATRICES,
    GATES,
    PRESETS,
    H,
    I,
    X,
    Y,
    Z,
    apply_gate_matrix,
    gate_target,
    hadamard,
    is_unitary,
    pauli_x,
    pauli_y,
    pauli_z,
    preset_target,
)

# Measurement
from .measurement import MeasurementSimulator, make_generator

# Runtime
from .runtime import ScheduledCall, Scheduler

# Session
from .session import BlochSession

# State
from .state import QubitState, RenderFrame, Renderer, clamp_theta, normalize_phi

__all__ = [
    # Version
    "__version__",
    # State
    "QubitState",
    "RenderFrame",
    "Renderer",
    "clamp_theta",
    "normalize_phi",
    # Gates
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
    # Animation
    "AnimatorState",
    "TransitionRequest",
    "TransitionAnimator",
    "EasingFn",
    "ease_out_cubic",
    "linear_easing",
    "sample_easing",
    # Measurement
    "MeasurementSimulator",
    "make_generator",
    # Runtime
    "Scheduler",
    "ScheduledCall",
    # Session
    "BlochSession",
    # Configuration
    "VisualizerConfig",
    # Diagnostics
    "state_norm",
    "assert_normalized",
    "fidelity",
    "bloch_vector",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
