"""Matrix forms of the supported single-qubit gates."""

from __future__ import annotations

import math
from typing import Callable, Dict

import torch


def _resolve(dtype: torch.dtype | None, device: torch.device | None):
    if dtype is None:
        dtype = torch.complex128
    if device is None:
        device = torch.device("cpu")
    return dtype, device


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Identity gate.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor.
    """
    dtype, device = _resolve(dtype, device)
    return torch.eye(2, dtype=dtype, device=device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-X gate (bit flip)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Y gate."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, -1.0j], [1.0j, 0.0]], dtype=dtype, device=device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Z gate (phase flip)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, -1.0]], dtype=dtype, device=device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Hadamard gate."""
    dtype, device = _resolve(dtype, device)
    sqrt2_inv = 1.0 / math.sqrt(2.0)
    return torch.tensor(
        [[sqrt2_inv, sqrt2_inv], [sqrt2_inv, -sqrt2_inv]], dtype=dtype, device=device
    )


GATE_MATRICES: Dict[str, Callable[..., torch.Tensor]] = {
    "x": X,
    "y": Y,
    "z": Z,
    "h": H,
}


def apply_gate_matrix(matrix: torch.Tensor, psi: torch.Tensor) -> torch.Tensor:
    """
    Apply a (2, 2) gate to a single-qubit statevector.

    Args:
        matrix: Gate matrix of shape (2, 2).
        psi: Statevector of shape (2,).

    Returns:
        The new statevector ``matrix @ psi``, in the promoted dtype.

    Raises:
        ValueError: If either tensor has the wrong shape.
    """
    if matrix.shape != (2, 2):
        raise ValueError(f"matrix must have shape (2, 2), got {tuple(matrix.shape)}")
    if psi.shape != (2,):
        raise ValueError(f"psi must have shape (2,), got {tuple(psi.shape)}")

    dtype = torch.promote_types(matrix.dtype, psi.dtype)
    return torch.matmul(matrix.to(dtype), psi.to(dtype))


def is_unitary(matrix: torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check whether ``matrix`` satisfies U†U = I within ``atol``.
    """
    if matrix.shape[-1] != matrix.shape[-2]:
        return False

    product = torch.matmul(matrix.conj().transpose(-1, -2), matrix)
    identity = torch.eye(matrix.shape[-1], dtype=matrix.dtype, device=matrix.device)
    return bool(torch.all(torch.abs(product - identity) < atol).item())
