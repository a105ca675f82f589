"""Tests for easing curves."""

import pytest
import torch

from qbloch.animation import ease_out_cubic, linear_easing, sample_easing


def test_ease_out_cubic_endpoints_and_midpoint():
    """e(0) = 0, e(1) = 1 and e(0.5) = 0.875."""
    assert ease_out_cubic(0.0) == 0.0
    assert ease_out_cubic(1.0) == 1.0
    assert ease_out_cubic(0.5) == pytest.approx(0.875)


def test_ease_out_cubic_is_monotone():
    """The curve never decreases."""
    weights = sample_easing(ease_out_cubic, num_steps=101)
    assert torch.all(weights[1:] >= weights[:-1])


def test_ease_out_cubic_runs_ahead_of_linear():
    """Ease-out is ahead of linear progress everywhere inside (0, 1)."""
    cubic = sample_easing(ease_out_cubic, num_steps=11)
    linear = sample_easing(linear_easing, num_steps=11)
    assert torch.all(cubic[1:-1] > linear[1:-1])


def test_sample_easing_shape_and_dtype():
    """Samples form a float64 vector on the requested grid."""
    weights = sample_easing(linear_easing, num_steps=5)
    assert weights.shape == (5,)
    assert weights.dtype == torch.float64
    assert torch.allclose(weights, torch.tensor([0.0, 0.25, 0.5, 0.75, 1.0], dtype=torch.float64))


def test_sample_easing_invalid_num_steps():
    """Fewer than two steps is rejected."""
    with pytest.raises(ValueError, match="num_steps must be at least 2"):
        sample_easing(linear_easing, 1)


def test_sample_easing_rejects_bad_endpoints():
    """Curves that miss either endpoint are rejected."""
    with pytest.raises(ValueError, match="e\\(0\\)"):
        sample_easing(lambda p: p + 0.1, 5)
    with pytest.raises(ValueError, match="e\\(1\\)"):
        sample_easing(lambda p: 0.5 * p, 5)
