"""Animated transitions between qubit states."""

from .animator import AnimatorState, TransitionAnimator, TransitionRequest
from .easing import EasingFn, ease_out_cubic, linear_easing, sample_easing

__all__ = [
    "AnimatorState",
    "TransitionRequest",
    "TransitionAnimator",
    "EasingFn",
    "ease_out_cubic",
    "linear_easing",
    "sample_easing",
]
