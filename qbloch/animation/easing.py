"""Easing curves mapping animation progress to interpolation weight."""

from __future__ import annotations

from typing import Callable

import torch

EasingFn = Callable[[float], float]
"""
An EasingFn takes progress p in [0, 1] and returns a weight in [0, 1] with
e(0) = 0 and e(1) = 1.
"""


def ease_out_cubic(progress: float) -> float:
    """1 − (1 − p)^3: fast start, gentle arrival."""
    return 1.0 - (1.0 - progress) ** 3


def linear_easing(progress: float) -> float:
    return progress


def sample_easing(
    easing: EasingFn,
    num_steps: int,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Evaluate an easing curve on the uniform grid p_k = k / (num_steps - 1).

    Parameters
    ----------
    easing:
        Curve to sample.
    num_steps:
        Number of grid points (>= 2).
    device:
        Optional device for the returned tensor.

    Returns
    -------
    torch.Tensor
        Float64 tensor of shape (num_steps,).

    Raises
    ------
    ValueError
        If num_steps < 2 or the curve misses either endpoint by more than
        1e-9.
    """
    if num_steps < 2:
        raise ValueError("num_steps must be at least 2.")

    if device is None:
        device = torch.device("cpu")

    grid = torch.arange(num_steps, dtype=torch.float64) / float(num_steps - 1)
    weights = torch.tensor(
        [easing(float(p)) for p in grid], dtype=torch.float64, device=device
    )

    if abs(weights[0].item()) > 1e-9:
        raise ValueError(f"easing must return e(0) ≈ 0, got {weights[0].item()}.")
    if abs(weights[-1].item() - 1.0) > 1e-9:
        raise ValueError(f"easing must return e(1) ≈ 1, got {weights[-1].item()}.")

    return weights
