"""Projective Z-basis measurement of the session qubit."""

from __future__ import annotations

import math
from typing import Optional

import torch

from qbloch.animation.animator import TransitionAnimator
from qbloch.logging import get_logger
from qbloch.state.qubit import QubitState

logger = get_logger(__name__)

# Pole each outcome collapses to, as (theta, phi)
COLLAPSE_TARGETS = {
    0: (0.0, 0.0),
    1: (math.pi, 0.0),
}


def make_generator(seed: Optional[int] = None) -> torch.Generator:
    """
    Create the RNG used for measurement draws.

    A given seed makes outcomes reproducible; ``None`` seeds from OS
    entropy.
    """
    generator = torch.Generator(device="cpu")
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(int(seed))
    return generator


class MeasurementSimulator:
    """
    Samples a Born-rule outcome and collapses the state onto a pole.

    Probabilities are read fresh from the state on every call, so a state
    sitting on |0⟩ always measures 0 and one on |1⟩ always measures 1.

    Parameters
    ----------
    state:
        State to measure.
    animator:
        Animator that carries out the collapse transition.
    duration_ms:
        Length of the collapse transition.
    generator:
        Optional RNG. Defaults to one seeded from OS entropy.
    """

    def __init__(
        self,
        state: QubitState,
        animator: TransitionAnimator,
        duration_ms: float = 1000.0,
        generator: Optional[torch.Generator] = None,
    ) -> None:
        self.state = state
        self.animator = animator
        self.duration_ms = duration_ms
        self.generator = generator if generator is not None else make_generator()

    def sample(self) -> int:
        """Draw one outcome without touching the state."""
        p0, _ = self.state.probabilities()
        draw = torch.rand(1, generator=self.generator, dtype=torch.float64).item()
        return 0 if draw < p0 else 1

    def measure(self) -> int:
        """
        Sample an outcome and request the collapse transition.

        The collapse follows the animator's single-flight rule: if a
        transition is already running, the outcome is still returned but
        the state is not moved.
        """
        outcome = self.sample()
        target_theta, target_phi = COLLAPSE_TARGETS[outcome]
        accepted = self.animator.request_transition(target_theta, target_phi, self.duration_ms)
        if accepted:
            logger.info("Measured |%d⟩", outcome)
        else:
            logger.info("Measured |%d⟩; collapse dropped while animating", outcome)
        return outcome
