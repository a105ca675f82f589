"""Qubit state model and renderer payload."""

from .frame import RenderFrame, Renderer
from .qubit import TWO_PI, QubitState, clamp_theta, normalize_phi

__all__ = [
    "TWO_PI",
    "QubitState",
    "clamp_theta",
    "normalize_phi",
    "RenderFrame",
    "Renderer",
]
