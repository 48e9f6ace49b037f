"""
Window Snapshot

Immutable copy of one stat window, safe to hand to another thread.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowSnapshot:
    """Point-in-time copy of a rolling sample window."""
    capacity: int
    samples: tuple[float, ...]  # oldest first
    latest: float
    current: float
    min: float
    max: float
    average: float

    def to_dict(self) -> dict:
        return {
            "capacity": self.capacity,
            "latest": self.latest,
            "current": self.current,
            "min": self.min,
            "max": self.max,
            "average": self.average,
            "samples": list(self.samples),
        }
