"""Named single-qubit states and their Bloch angles."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from qbloch.logging import get_logger

logger = get_logger(__name__)

# id -> (theta, phi) in radians
PRESETS: Mapping[str, Tuple[float, float]] = MappingProxyType(
    {
        "ground": (0.0, 0.0),  # |0⟩
        "excited": (math.pi, 0.0),  # |1⟩
        "plus": (math.pi / 2.0, 0.0),  # |+⟩
        "minus": (math.pi / 2.0, math.pi),  # |−⟩
        "right": (math.pi / 2.0, math.pi / 2.0),  # |+i⟩
        "left": (math.pi / 2.0, 3.0 * math.pi / 2.0),  # |−i⟩
    }
)


def preset_target(preset_id: str) -> Optional[Tuple[float, float]]:
    """Return the angles of a named state, or None for an unknown id."""
    angles = PRESETS.get(str(preset_id).lower())
    if angles is None:
        logger.debug("Ignoring unknown preset id %r", preset_id)
    return angles
