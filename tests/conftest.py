"""Pytest configuration and shared fixtures for qbloch tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A fresh debug-mode flag for every test
"""

import os

import numpy as np
import pytest
import torch

from qbloch.diagnostics import debug_mode


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG seeded from TEST_RNG_SEED (default 0)."""
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch generator seeded from TEST_RNG_SEED."""
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch RNGs before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Restore the debug flag after tests that toggle it."""
    prev = debug_mode.is_debug_enabled()
    yield
    debug_mode.set_debug_enabled(prev)
