"""Diagnostics and debugging utilities for qbloch."""

from .core import (
    assert_normalized,
    bloch_vector,
    fidelity,
    state_norm,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "state_norm",
    "assert_normalized",
    "fidelity",
    "bloch_vector",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
