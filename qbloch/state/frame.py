"""Payload handed to renderers on every state change."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple


@dataclass(frozen=True)
class RenderFrame:
    """
    Everything a renderer needs to draw one frame.

    Args:
        direction: Unit Bloch vector (x, y, z) along which the state arrow
            is drawn.
        probabilities: Measurement probabilities (p0, p1).
        label: Formatted state string, shown verbatim.
    """

    direction: Tuple[float, float, float]
    probabilities: Tuple[float, float]
    label: str


class Renderer(Protocol):
    """Callable that consumes a :class:`RenderFrame`."""

    def __call__(self, frame: RenderFrame) -> None:
        ...
