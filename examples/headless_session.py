"""Drive a Bloch sphere session without a GUI.

Applies a short gate sequence, measures, and prints the state label after
every completed transition.

Usage:
    python examples/headless_session.py
"""

from __future__ import annotations

import math

from qbloch import BlochSession, RenderFrame, VisualizerConfig

FRAME_MS = 1000.0 / 60.0


def main() -> None:
    config = VisualizerConfig(
        transition_duration_ms=300.0,
        measurement_delay_ms=200.0,
        seed=1234,
    )
    frames: list[RenderFrame] = []
    session = BlochSession(config, renderer=frames.append)

    print(f"Start: {session.frame().label}")

    for gate in ["h", "z", "h", "y", "h"]:
        session.apply_gate(gate)
        n = session.run_until_idle(FRAME_MS)
        frame = session.frame()
        theta_deg, phi_deg = session.state.angles_degrees()
        p0, p1 = frame.probabilities
        print(
            f"After {gate.upper()} ({n} frames): {frame.label}  "
            f"θ={theta_deg:.1f}° φ={phi_deg:.1f}°  P(0)={p0:.3f} P(1)={p1:.3f}"
        )

    outcomes = []
    session.measure(outcomes.append)
    session.run_until_idle(FRAME_MS)
    print(f"Measurement outcome: |{outcomes[0]}⟩ -> {session.frame().label}")

    session.set_angles(90.0, 45.0)
    x, y, z = session.frame().direction
    print(f"Slider set to θ=90°, φ=45°: direction=({x:.3f}, {y:.3f}, {z:.3f})")
    assert math.isclose(x * x + y * y + z * z, 1.0, rel_tol=1e-9)

    print(f"Frames rendered: {len(frames)}")


if __name__ == "__main__":
    main()
