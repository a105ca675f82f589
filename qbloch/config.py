"""Tunable settings for a Bloch sphere session."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRANSITION_ENV_VAR = "QBLOCH_TRANSITION_MS"
_MEASURE_DELAY_ENV_VAR = "QBLOCH_MEASURE_DELAY_MS"
_SEED_ENV_VAR = "QBLOCH_SEED"


@dataclass(frozen=True)
class VisualizerConfig:
    """
    Configuration for a :class:`~qbloch.session.BlochSession`.

    Args:
        transition_duration_ms: Length of every animated transition
            (gates, presets, reset, measurement collapse). Defaults to 1000.
        measurement_delay_ms: Artificial delay before a measurement result
            is delivered. Defaults to 1000.
        pole_tolerance: Distance from θ = 0 or θ = π under which the
            Hadamard rule uses its exact pole mapping. Defaults to 1e-10.
        display_epsilon: Magnitude under which a coefficient component is
            dropped from the state label. Defaults to 1e-10.
        display_precision: Number of decimals in the state label.
            Defaults to 3.
        seed: Seed for the measurement RNG. None draws from OS entropy.
    """

    transition_duration_ms: float = 1000.0
    measurement_delay_ms: float = 1000.0
    pole_tolerance: float = 1e-10
    display_epsilon: float = 1e-10
    display_precision: int = 3
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            ValueError: If a duration or delay is negative, a tolerance is
                not positive, or the precision is negative.
        """
        if self.transition_duration_ms < 0.0:
            raise ValueError(
                f"transition_duration_ms must be non-negative, got {self.transition_duration_ms}."
            )
        if self.measurement_delay_ms < 0.0:
            raise ValueError(
                f"measurement_delay_ms must be non-negative, got {self.measurement_delay_ms}."
            )
        if self.pole_tolerance <= 0.0:
            raise ValueError(f"pole_tolerance must be positive, got {self.pole_tolerance}.")
        if self.display_epsilon <= 0.0:
            raise ValueError(f"display_epsilon must be positive, got {self.display_epsilon}.")
        if self.display_precision < 0:
            raise ValueError(
                f"display_precision must be non-negative, got {self.display_precision}."
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VisualizerConfig":
        """
        Build a configuration from environment variables.

        Reads ``QBLOCH_TRANSITION_MS``, ``QBLOCH_MEASURE_DELAY_MS`` and
        ``QBLOCH_SEED``; unset variables keep their defaults.

        Raises:
            ValueError: If a variable is set but does not parse, or the
                resulting configuration is invalid.
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        if _TRANSITION_ENV_VAR in environ:
            kwargs["transition_duration_ms"] = float(environ[_TRANSITION_ENV_VAR])
        if _MEASURE_DELAY_ENV_VAR in environ:
            kwargs["measurement_delay_ms"] = float(environ[_MEASURE_DELAY_ENV_VAR])
        if _SEED_ENV_VAR in environ:
            kwargs["seed"] = int(environ[_SEED_ENV_VAR])

        return cls(**kwargs)
