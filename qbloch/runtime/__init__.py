"""Frame-clock runtime helpers."""

from .scheduler import ScheduledCall, Scheduler

__all__ = ["ScheduledCall", "Scheduler"]
