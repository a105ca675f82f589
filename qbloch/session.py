"""Control surface tying the state, gates, animator and measurement together."""

from __future__ import annotations

from typing import Callable, List, Optional

import torch

from qbloch.animation.animator import TransitionAnimator
from qbloch.animation.easing import EasingFn, ease_out_cubic
from qbloch.config import VisualizerConfig
from qbloch.gates.bloch import gate_target
from qbloch.gates.presets import preset_target
from qbloch.logging import get_logger
from qbloch.measurement.simulator import MeasurementSimulator, make_generator
from qbloch.runtime.scheduler import ScheduledCall, Scheduler
from qbloch.state.frame import RenderFrame, Renderer
from qbloch.state.qubit import QubitState

logger = get_logger(__name__)

OutcomeCallback = Callable[[int], None]


class BlochSession:
    """
    One interactive Bloch sphere session.

    Owns a single :class:`QubitState` and the components that move it.
    UI glue calls the control methods; the render loop calls :meth:`tick`
    once per frame; renderers receive a :class:`RenderFrame` whenever the
    state changes.

    Interactive input never raises: unknown preset or gate ids are
    ignored and requests made during an animation are dropped.

    Parameters
    ----------
    config:
        Session settings. Defaults to ``VisualizerConfig()``.
    renderer:
        Optional first renderer callback.
    generator:
        Optional RNG for measurements. Defaults to one seeded from
        ``config.seed``.
    easing:
        Animation curve. Defaults to cubic ease-out.

    Example
    -------
    >>> session = BlochSession(VisualizerConfig(seed=7))
    >>> session.apply_gate("h")
    True
    >>> for _ in range(60):
    ...     session.tick(1000 / 60)
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        renderer: Optional[Renderer] = None,
        generator: Optional[torch.Generator] = None,
        easing: EasingFn = ease_out_cubic,
    ) -> None:
        self.config = config if config is not None else VisualizerConfig()
        self.state = QubitState(
            display_precision=self.config.display_precision,
            display_epsilon=self.config.display_epsilon,
        )
        self.animator = TransitionAnimator(self.state, easing=easing)
        self.simulator = MeasurementSimulator(
            self.state,
            self.animator,
            duration_ms=self.config.transition_duration_ms,
            generator=generator if generator is not None else make_generator(self.config.seed),
        )
        self.scheduler = Scheduler()
        self._renderers: List[Renderer] = []
        self._pending_measurement: Optional[ScheduledCall] = None
        self.last_outcome: Optional[int] = None

        if renderer is not None:
            self.add_renderer(renderer)

    # Renderer wiring

    def add_renderer(self, renderer: Renderer) -> None:
        """Register a renderer and send it the current frame."""
        self._renderers.append(renderer)
        self._emit_to(renderer, self.frame())

    def remove_renderer(self, renderer: Renderer) -> None:
        if renderer in self._renderers:
            self._renderers.remove(renderer)

    def frame(self) -> RenderFrame:
        return self.state.snapshot()

    def _emit_to(self, renderer: Renderer, frame: RenderFrame) -> None:
        try:
            renderer(frame)
        except Exception:
            logger.exception("Renderer %r failed", renderer)

    def _notify(self) -> None:
        if not self._renderers:
            return
        frame = self.frame()
        for renderer in list(self._renderers):
            self._emit_to(renderer, frame)

    # Control contract

    def set_angles(self, theta_degrees: float, phi_degrees: float) -> None:
        """Slider input: write the angles immediately."""
        self.state.set_angles_degrees(theta_degrees, phi_degrees)
        self._notify()

    def _transition_to(self, theta: float, phi: float) -> bool:
        return self.animator.request_transition(
            theta, phi, self.config.transition_duration_ms
        )

    def apply_preset(self, preset_id: str) -> bool:
        """
        Animate to a named state.

        Returns True if a transition was started; False for an unknown id
        or while another transition is running.
        """
        target = preset_target(preset_id)
        if target is None:
            return False
        return self._transition_to(*target)

    def apply_gate(self, gate_id: str) -> bool:
        """
        Animate the effect of gate ``gate_id`` (``x``, ``y``, ``z`` or ``h``).

        The target is computed from the angles at the moment of the call.
        """
        target = gate_target(
            gate_id,
            self.state.theta,
            self.state.phi,
            pole_tolerance=self.config.pole_tolerance,
        )
        if target is None:
            return False
        return self._transition_to(*target)

    def reset(self) -> bool:
        """Animate back to |0⟩."""
        return self.apply_preset("ground")

    @property
    def is_measuring(self) -> bool:
        call = self._pending_measurement
        return call is not None and not (call.cancelled or call.done)

    def cancel_measurement(self) -> bool:
        """Cancel the pending measurement. Returns False if none was pending."""
        call = self._pending_measurement
        self._pending_measurement = None
        if call is None:
            return False
        return self.scheduler.cancel(call)

    def measure(self, callback: Optional[OutcomeCallback] = None) -> Optional[ScheduledCall]:
        """
        Schedule a measurement after the configured delay.

        When it fires, the outcome is drawn from the probabilities at that
        moment, the collapse transition is requested, :attr:`last_outcome`
        is updated and ``callback(outcome)`` is called.

        Returns
        -------
        ScheduledCall or None
            Handle of the pending measurement, or None if one is already
            pending.
        """
        if self.is_measuring:
            logger.debug("Ignoring measure request: measurement already pending")
            return None

        def _deliver() -> None:
            self._pending_measurement = None
            outcome = self.simulator.measure()
            self.last_outcome = outcome
            if callback is not None:
                callback(outcome)

        self._pending_measurement = self.scheduler.call_later(
            self.config.measurement_delay_ms, _deliver
        )
        return self._pending_measurement

    def tick(self, delta_ms: float) -> bool:
        """
        Advance one frame.

        Due deferred callbacks run first, then the animator moves, so a
        collapse requested by a measurement firing on this frame already
        advances by ``delta_ms``.

        Returns
        -------
        bool
            True if the state changed this frame.
        """
        self.scheduler.advance(delta_ms)
        changed = self.animator.tick(delta_ms)
        if changed:
            self._notify()
        return changed

    def run_until_idle(self, frame_ms: float = 1000.0 / 60.0, max_frames: int = 10_000) -> int:
        """
        Tick until no transition or measurement is pending.

        Intended for headless use and scripting.

        Returns
        -------
        int
            Number of frames ticked.

        Raises
        ------
        ValueError
            If ``frame_ms`` is not positive.
        """
        if frame_ms <= 0.0:
            raise ValueError(f"frame_ms must be positive, got {frame_ms}.")
        frames = 0
        while (self.animator.is_animating or self.is_measuring) and frames < max_frames:
            self.tick(frame_ms)
            frames += 1
        return frames
