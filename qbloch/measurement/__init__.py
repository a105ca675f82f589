"""Measurement simulation for the session qubit."""

from .simulator import COLLAPSE_TARGETS, MeasurementSimulator, make_generator

__all__ = [
    "COLLAPSE_TARGETS",
    "MeasurementSimulator",
    "make_generator",
]
