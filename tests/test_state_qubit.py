"""Tests for the QubitState model."""

import math

import numpy as np
import pytest
import torch

from qbloch.diagnostics import bloch_vector, debug_context
from qbloch.state import QubitState, RenderFrame, normalize_phi


def test_initial_state_is_ground():
    """A new state sits on |0⟩."""
    state = QubitState()
    assert state.angles() == (0.0, 0.0)
    assert state.probabilities() == (1.0, 0.0)
    assert state.direction() == pytest.approx((0.0, 0.0, 1.0))


def test_theta_is_clamped():
    """θ outside [0, π] is clamped, never rejected."""
    state = QubitState()
    state.set_angles(-0.5, 0.0)
    assert state.theta == 0.0
    state.set_angles(4.0, 0.0)
    assert state.theta == math.pi


def test_phi_is_wrapped():
    """φ is wrapped into [0, 2π), including negative inputs."""
    state = QubitState()
    state.set_angles(1.0, -math.pi / 2)
    assert state.phi == pytest.approx(3 * math.pi / 2)
    state.set_angles(1.0, 5 * math.pi)
    assert state.phi == pytest.approx(math.pi)
    state.set_angles(1.0, 2 * math.pi)
    assert state.phi == 0.0


def test_normalize_phi_never_returns_two_pi():
    """Tiny negative angles wrap below 2π."""
    value = normalize_phi(-1e-20)
    assert 0.0 <= value < 2 * math.pi


def test_non_finite_angles_keep_previous_value():
    """NaN or inf leaves the stored angle untouched."""
    state = QubitState(1.0, 2.0)
    state.set_angles(float("nan"), float("inf"))
    assert state.angles() == (1.0, 2.0)


def test_degrees_round_trip():
    """Degree setters and getters agree."""
    state = QubitState()
    state.set_angles_degrees(90.0, 270.0)
    assert state.theta == pytest.approx(math.pi / 2)
    assert state.phi == pytest.approx(3 * math.pi / 2)
    theta_deg, phi_deg = state.angles_degrees()
    assert theta_deg == pytest.approx(90.0)
    assert phi_deg == pytest.approx(270.0)


def test_probabilities_sum_to_one_on_grid():
    """p0 + p1 = 1 and p0 = cos²(θ/2) for θ across [0, π]."""
    state = QubitState()
    for theta in np.linspace(0.0, math.pi, 181):
        state.set_angles(float(theta), 0.3)
        p0, p1 = state.probabilities()
        assert abs(p0 + p1 - 1.0) < 1e-9
        assert p0 == math.cos(float(theta) / 2) ** 2


def test_direction_is_unit_length(rng):
    """The Cartesian direction is a unit vector for random angles."""
    state = QubitState()
    for theta, phi in zip(rng.uniform(0, math.pi, 50), rng.uniform(0, 2 * math.pi, 50)):
        state.set_angles(float(theta), float(phi))
        x, y, z = state.direction()
        assert x * x + y * y + z * z == pytest.approx(1.0)


def test_amplitudes_right_state():
    """(π/2, π/2) has α = 1/√2 and β = i/√2."""
    state = QubitState(math.pi / 2, math.pi / 2)
    alpha, beta = state.amplitudes()
    s = 1.0 / math.sqrt(2.0)
    assert alpha == pytest.approx(complex(s, 0.0))
    assert beta.real == pytest.approx(0.0, abs=1e-12)
    assert beta.imag == pytest.approx(s)


def test_format_state_ground():
    """|0⟩ renders as (1.000, 0.000)."""
    assert QubitState().format_state() == "|ψ⟩ = 1.000|0⟩ + (0.000)|1⟩"


def test_format_state_right():
    """At (π/2, π/2) β has no real part and a purely imaginary coefficient."""
    label = QubitState(math.pi / 2, math.pi / 2).format_state()
    assert label == "|ψ⟩ = 0.707|0⟩ + (0.707i)|1⟩"


def test_format_state_unit_imaginary():
    """A unit-magnitude imaginary β renders as bare i or -i."""
    assert QubitState(math.pi, math.pi / 2).format_state() == "|ψ⟩ = 0.000|0⟩ + (i)|1⟩"
    assert QubitState(math.pi, 3 * math.pi / 2).format_state() == "|ψ⟩ = 0.000|0⟩ + (-i)|1⟩"


def test_format_state_minus_and_diagonal():
    """Negative real and mixed coefficients render with signs."""
    assert QubitState(math.pi / 2, math.pi).format_state() == "|ψ⟩ = 0.707|0⟩ + (-0.707)|1⟩"
    assert (
        QubitState(math.pi / 2, 7 * math.pi / 4).format_state()
        == "|ψ⟩ = 0.707|0⟩ + (0.500 - 0.500i)|1⟩"
    )


def test_statevector_matches_amplitudes():
    """statevector() packs the amplitudes into a complex128 tensor."""
    state = QubitState(1.2, 0.4)
    psi = state.statevector()
    assert psi.shape == (2,)
    assert psi.dtype == torch.complex128
    alpha, beta = state.amplitudes()
    assert complex(psi[0].item()) == pytest.approx(alpha)
    assert complex(psi[1].item()) == pytest.approx(beta)


def test_statevector_bloch_vector_matches_direction():
    """The Bloch vector of the statevector equals direction()."""
    state = QubitState(2.1, 4.0)
    vec = bloch_vector(state.statevector())
    assert torch.allclose(
        vec, torch.tensor(state.direction(), dtype=torch.float64), atol=1e-12
    )


def test_statevector_in_debug_mode():
    """Debug mode checks the norm without complaint for valid states."""
    with debug_context(True):
        psi = QubitState(0.7, 1.1).statevector()
    assert psi.shape == (2,)


def test_from_statevector_discards_global_phase():
    """A globally phased |+i⟩ maps back to (π/2, π/2)."""
    s = 1.0 / math.sqrt(2.0)
    phase = complex(math.cos(0.3), math.sin(0.3))
    psi = torch.tensor([s * phase, 1j * s * phase], dtype=torch.complex128)
    state = QubitState.from_statevector(psi)
    assert state.theta == pytest.approx(math.pi / 2)
    assert state.phi == pytest.approx(math.pi / 2)


def test_from_statevector_renormalizes():
    """Unnormalized input is scaled to unit norm."""
    psi = torch.tensor([0.0, 3.0], dtype=torch.complex128)
    state = QubitState.from_statevector(psi)
    assert state.theta == pytest.approx(math.pi)
    assert state.phi == 0.0


def test_from_statevector_rejects_bad_input():
    """Wrong shapes and zero vectors raise ValueError."""
    with pytest.raises(ValueError, match="shape"):
        QubitState.from_statevector(torch.zeros(3, dtype=torch.complex128))
    with pytest.raises(ValueError, match="zero norm"):
        QubitState.from_statevector(torch.zeros(2, dtype=torch.complex128))


def test_snapshot():
    """snapshot() bundles direction, probabilities and label."""
    state = QubitState(math.pi / 2, 0.0)
    frame = state.snapshot()
    assert isinstance(frame, RenderFrame)
    assert frame.direction == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)
    assert frame.probabilities == pytest.approx((0.5, 0.5))
    assert frame.label == state.format_state()


def test_copy_is_independent():
    """copy() returns a separate state with the same angles."""
    state = QubitState(1.0, 2.0)
    clone = state.copy()
    clone.set_angles(0.0, 0.0)
    assert state.angles() == (1.0, 2.0)
