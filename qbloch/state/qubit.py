"""Single-qubit pure state parameterized by its Bloch sphere angles."""

from __future__ import annotations

import math
from typing import Optional, Tuple

import torch

from qbloch.diagnostics.core import assert_normalized
from qbloch.diagnostics.debug_mode import is_debug_enabled
from qbloch.logging import get_logger
from qbloch.state.frame import RenderFrame
from qbloch.utils.complex_math import DISPLAY_EPSILON, expi, format_complex, scale

logger = get_logger(__name__)

TWO_PI = 2.0 * math.pi


def clamp_theta(theta: float) -> float:
    """Clamp a polar angle into [0, π]."""
    return min(max(float(theta), 0.0), math.pi)


def normalize_phi(phi: float) -> float:
    """Wrap an azimuthal angle into [0, 2π)."""
    wrapped = math.fmod(float(phi), TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # fmod of a tiny negative value plus 2π can round up to exactly 2π
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


class QubitState:
    """
    Pure qubit state |ψ⟩ = cos(θ/2)|0⟩ + e^{iφ} sin(θ/2)|1⟩.

    Only the two angles are stored; direction, amplitudes and probabilities
    are derived on demand. θ is kept in [0, π] and φ in [0, 2π). At the
    poles φ carries no physical meaning but is still stored.

    Parameters
    ----------
    theta:
        Initial polar angle in radians. Defaults to 0 (the |0⟩ state).
    phi:
        Initial azimuthal angle in radians. Defaults to 0.
    display_precision:
        Number of decimals used by :meth:`format_state`.
    display_epsilon:
        Coefficient components below this magnitude are left out of
        :meth:`format_state`.
    """

    def __init__(
        self,
        theta: float = 0.0,
        phi: float = 0.0,
        display_precision: int = 3,
        display_epsilon: float = DISPLAY_EPSILON,
    ) -> None:
        self._theta = 0.0
        self._phi = 0.0
        self.display_precision = display_precision
        self.display_epsilon = display_epsilon
        self.set_angles(theta, phi)

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def phi(self) -> float:
        return self._phi

    def __repr__(self) -> str:
        return f"QubitState(theta={self._theta!r}, phi={self._phi!r})"

    def set_angles(self, theta: float, phi: float) -> None:
        """
        Assign both angles, normalizing instead of rejecting.

        θ is clamped into [0, π]; φ is wrapped into [0, 2π). A non-finite
        angle leaves the corresponding stored value unchanged.
        """
        if math.isfinite(theta):
            self._theta = clamp_theta(theta)
        else:
            logger.warning("Ignoring non-finite theta %r", theta)

        if math.isfinite(phi):
            self._phi = normalize_phi(phi)
        else:
            logger.warning("Ignoring non-finite phi %r", phi)

    def set_angles_degrees(self, theta_degrees: float, phi_degrees: float) -> None:
        """Slider-facing variant of :meth:`set_angles`."""
        self.set_angles(math.radians(theta_degrees), math.radians(phi_degrees))

    def angles(self) -> Tuple[float, float]:
        return self._theta, self._phi

    def angles_degrees(self) -> Tuple[float, float]:
        """Current (θ, φ) in degrees, for syncing slider positions."""
        return math.degrees(self._theta), math.degrees(self._phi)

    def direction(self) -> Tuple[float, float, float]:
        """Unit Bloch vector (sinθ cosφ, sinθ sinφ, cosθ)."""
        sin_theta = math.sin(self._theta)
        return (
            sin_theta * math.cos(self._phi),
            sin_theta * math.sin(self._phi),
            math.cos(self._theta),
        )

    def amplitudes(self) -> Tuple[complex, complex]:
        """Amplitude pair (α, β) = (cos(θ/2), e^{iφ} sin(θ/2))."""
        half = self._theta / 2.0
        alpha = complex(math.cos(half), 0.0)
        beta = scale(expi(self._phi), math.sin(half))
        return alpha, beta

    def probabilities(self) -> Tuple[float, float]:
        """Born-rule probabilities (p0, p1) = (cos²(θ/2), sin²(θ/2))."""
        half = self._theta / 2.0
        return math.cos(half) ** 2, math.sin(half) ** 2

    def statevector(self) -> torch.Tensor:
        """
        Amplitudes as a complex128 tensor of shape (2,).

        In debug mode the norm of the result is checked.
        """
        alpha, beta = self.amplitudes()
        psi = torch.tensor([alpha, beta], dtype=torch.complex128)
        if is_debug_enabled():
            assert_normalized(psi)
        return psi

    def format_state(self) -> str:
        """Render the state as ``|ψ⟩ = α|0⟩ + (β)|1⟩``."""
        alpha, beta = self.amplitudes()
        alpha_str = format_complex(alpha, self.display_precision, self.display_epsilon)
        beta_str = format_complex(beta, self.display_precision, self.display_epsilon)
        return f"|ψ⟩ = {alpha_str}|0⟩ + ({beta_str})|1⟩"

    def snapshot(self) -> RenderFrame:
        """Bundle the renderer-facing view of the current angles."""
        return RenderFrame(
            direction=self.direction(),
            probabilities=self.probabilities(),
            label=self.format_state(),
        )

    def copy(self) -> "QubitState":
        return QubitState(
            self._theta,
            self._phi,
            display_precision=self.display_precision,
            display_epsilon=self.display_epsilon,
        )

    @classmethod
    def from_statevector(
        cls,
        psi: torch.Tensor,
        atol: float = 1e-12,
        display_precision: int = 3,
        display_epsilon: Optional[float] = None,
    ) -> "QubitState":
        """
        Build a state from a statevector, discarding the global phase.

        The vector is renormalized first, so any non-zero 2-vector is
        accepted.

        Parameters
        ----------
        psi:
            Complex tensor of shape (2,).
        atol:
            Amplitude magnitude under which the relative phase is treated
            as undefined and φ is set to 0.

        Raises
        ------
        ValueError
            If ``psi`` does not have shape (2,) or has zero norm.
        """
        if psi.shape != (2,):
            raise ValueError(f"psi must have shape (2,), got {tuple(psi.shape)}")

        psi = psi.to(dtype=torch.complex128)
        norm = torch.linalg.vector_norm(psi).item()
        if norm == 0.0:
            raise ValueError("Statevector has zero norm.")
        psi = psi / norm

        a = complex(psi[0].item())
        b = complex(psi[1].item())
        mag_a = min(abs(a), 1.0)
        theta = 2.0 * math.acos(mag_a)

        if abs(a) < atol or abs(b) < atol:
            phi = 0.0
        else:
            phi = math.atan2(b.imag, b.real) - math.atan2(a.imag, a.real)

        return cls(
            theta,
            phi,
            display_precision=display_precision,
            display_epsilon=DISPLAY_EPSILON if display_epsilon is None else display_epsilon,
        )
