"""Frame-driven interpolation between two qubit states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import torch

from qbloch.animation.easing import EasingFn, ease_out_cubic, sample_easing
from qbloch.logging import get_logger
from qbloch.state.qubit import QubitState

logger = get_logger(__name__)


class AnimatorState(Enum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass(frozen=True)
class TransitionRequest:
    """
    One accepted move from a start point to a target on the sphere.

    Args:
        from_theta: Polar angle when the transition was accepted.
        from_phi: Azimuthal angle when the transition was accepted.
        to_theta: Target polar angle.
        to_phi: Target azimuthal angle.
        duration_ms: Transition length in milliseconds.
    """

    from_theta: float
    from_phi: float
    to_theta: float
    to_phi: float
    duration_ms: float

    def angles_at(self, weight: float) -> Tuple[float, float]:
        """
        Linear blend of the raw angles at interpolation weight ``weight``.

        φ is blended as a plain number, so a move from 350° to 10° sweeps
        back through 180° instead of crossing the 0/360° seam.
        """
        theta = self.from_theta + (self.to_theta - self.from_theta) * weight
        phi = self.from_phi + (self.to_phi - self.from_phi) * weight
        return theta, phi


class TransitionAnimator:
    """
    Two-state (IDLE / ANIMATING) driver that eases a :class:`QubitState`
    toward a target, one frame at a time.

    At most one transition is in flight. A request made while animating is
    dropped; it is neither queued nor merged, and an accepted transition
    cannot be cancelled.

    The caller owns the clock and calls :meth:`tick` once per frame with
    the time elapsed since the previous frame.

    Parameters
    ----------
    state:
        The state written on every tick.
    easing:
        Progress-to-weight curve. Defaults to :func:`ease_out_cubic`.
    """

    def __init__(self, state: QubitState, easing: EasingFn = ease_out_cubic) -> None:
        self.state = state
        self.easing = easing
        self._status = AnimatorState.IDLE
        self._request: Optional[TransitionRequest] = None
        self._elapsed_ms = 0.0

    @property
    def status(self) -> AnimatorState:
        return self._status

    @property
    def is_animating(self) -> bool:
        return self._status is AnimatorState.ANIMATING

    @property
    def active_request(self) -> Optional[TransitionRequest]:
        return self._request

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def request_transition(
        self,
        target_theta: float,
        target_phi: float,
        duration_ms: float,
    ) -> bool:
        """
        Start moving toward ``(target_theta, target_phi)``.

        Returns
        -------
        bool
            True if the transition was accepted, False if it was dropped
            because another one is in flight.

        Raises
        ------
        ValueError
            If ``duration_ms`` is negative.
        """
        if duration_ms < 0.0:
            raise ValueError(f"duration_ms must be non-negative, got {duration_ms}.")

        if self.is_animating:
            logger.debug(
                "Dropping transition to (%.4f, %.4f): another transition is in flight",
                target_theta,
                target_phi,
            )
            return False

        self._request = TransitionRequest(
            from_theta=self.state.theta,
            from_phi=self.state.phi,
            to_theta=float(target_theta),
            to_phi=float(target_phi),
            duration_ms=float(duration_ms),
        )
        self._elapsed_ms = 0.0
        self._status = AnimatorState.ANIMATING
        logger.debug("Accepted transition %s", self._request)
        return True

    def progress(self) -> float:
        """Fraction of the active transition completed, in [0, 1]."""
        if self._request is None:
            return 0.0
        if self._request.duration_ms == 0.0:
            return 1.0
        return min(max(self._elapsed_ms / self._request.duration_ms, 0.0), 1.0)

    def tick(self, delta_ms: float) -> bool:
        """
        Advance the active transition by ``delta_ms`` and write the state.

        Negative deltas count as zero. On the frame where progress reaches
        1 the state lands exactly on the target and the animator goes back
        to IDLE.

        Returns
        -------
        bool
            True if the state was written this frame.
        """
        if not self.is_animating:
            return False

        self._elapsed_ms += max(float(delta_ms), 0.0)
        progress = self.progress()
        request = self._request

        if progress >= 1.0:
            self.state.set_angles(request.to_theta, request.to_phi)
            self._status = AnimatorState.IDLE
            self._request = None
            logger.debug("Transition finished at (%.4f, %.4f)", request.to_theta, request.to_phi)
            return True

        theta, phi = request.angles_at(self.easing(progress))
        self.state.set_angles(theta, phi)
        return True

    def preview(self, request: TransitionRequest, num_frames: int) -> torch.Tensor:
        """
        Sample the trajectory of ``request`` without touching the state.

        Parameters
        ----------
        request:
            Transition to sample.
        num_frames:
            Number of samples on a uniform progress grid (>= 2).

        Returns
        -------
        torch.Tensor
            Float64 tensor of shape (num_frames, 2) holding (θ, φ) per frame.
        """
        weights = sample_easing(self.easing, num_frames)
        start = torch.tensor([request.from_theta, request.from_phi], dtype=torch.float64)
        target = torch.tensor([request.to_theta, request.to_phi], dtype=torch.float64)
        return start + (target - start) * weights.unsqueeze(-1)
