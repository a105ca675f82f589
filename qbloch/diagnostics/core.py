"""Diagnostic checks for single-qubit statevectors."""

from __future__ import annotations

import torch


def _check_single_qubit(state: torch.Tensor, fn_name: str) -> None:
    if state.dim() < 1 or state.shape[-1] != 2:
        raise ValueError(
            f"{fn_name} requires a single-qubit state with last dimension 2, "
            f"got shape {tuple(state.shape)}."
        )


def state_norm(state: torch.Tensor) -> torch.Tensor:
    """
    Compute the L2 norm of a statevector.

    Parameters
    ----------
    state:
        Complex tensor with shape (..., 2).

    Returns
    -------
    torch.Tensor
        Real tensor with shape (...) holding the norm of each state.
    """
    _check_single_qubit(state, "state_norm")
    norm_sq = (state.conj() * state).sum(dim=-1).real
    return torch.sqrt(norm_sq)


def assert_normalized(state: torch.Tensor, atol: float = 1e-9) -> None:
    """
    Assert that a statevector has unit norm.

    Parameters
    ----------
    state:
        Complex tensor with shape (..., 2).
    atol:
        Absolute tolerance for ``|norm - 1|``.

    Raises
    ------
    ValueError
        If the norm is non-finite or differs from 1 by more than ``atol``.
    """
    norms = state_norm(state)
    if not torch.all(torch.isfinite(norms)):
        raise ValueError("State norm contains non-finite values.")

    if not torch.allclose(norms, torch.ones_like(norms), atol=atol, rtol=0.0):
        raise ValueError(
            f"State is not normalized within tolerance {atol}. "
            f"Norms found: {norms.detach().cpu().tolist()}"
        )


def fidelity(state_a: torch.Tensor, state_b: torch.Tensor) -> torch.Tensor:
    """
    Overlap ``|<a|b>|^2`` of two pure states.

    Insensitive to global phase, so two statevectors describing the same
    Bloch point give 1.
    """
    if state_a.shape != state_b.shape:
        raise ValueError("fidelity expects tensors with the same shape.")
    inner = (state_a.conj() * state_b).sum(dim=-1)
    return inner.abs() ** 2


def bloch_vector(state: torch.Tensor) -> torch.Tensor:
    """
    Compute the Bloch vector (x, y, z) of a pure single-qubit state.

    For ``|psi> = [a, b]``:

        x = 2 Re(a* b)
        y = 2 Im(a* b)
        z = |a|^2 - |b|^2

    Parameters
    ----------
    state:
        Complex tensor with shape (..., 2).

    Returns
    -------
    torch.Tensor
        Real tensor of shape (..., 3).
    """
    _check_single_qubit(state, "bloch_vector")

    a = state[..., 0]
    b = state[..., 1]
    coherence = a.conj() * b

    x = 2.0 * coherence.real
    y = 2.0 * coherence.imag
    z = (a.abs() ** 2) - (b.abs() ** 2)

    return torch.stack([x, y, z], dim=-1)
