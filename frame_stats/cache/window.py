"""
Rolling Sample Window

Fixed-size ring buffer of float samples for one stat. The buffer is
allocated full of zeros and never shrinks or grows; recording a sample
overwrites the oldest slot.

Aggregates (average, min, max) are computed over every slot, including
slots that have not been written yet. Until the window has filled once,
those zeros pull average and min toward zero.
"""

from __future__ import annotations

from typing import Callable, Iterator

from ..schemas import WindowSnapshot


class RollingSampleWindow:
    """
    Ring buffer with min/max/average over the last ``capacity`` samples.

    Two accessors read single slots and are easy to confuse:
    - latest(): the sample recorded most recently
    - current(): the slot the next record() will overwrite, i.e. the
      oldest sample once the window has wrapped
    """

    __slots__ = ("_capacity", "_samples", "_cursor")

    def __init__(self, capacity: int = 125) -> None:
        """
        Initialize a zero-filled window.

        Args:
            capacity: Number of samples kept (must be > 0)

        Raises:
            ValueError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Sample window capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._samples: list[float] = [0.0] * capacity
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def record(self, value: float) -> None:
        """Write a sample at the cursor and advance it, wrapping at capacity."""
        self._samples[self._cursor] = float(value)

        self._cursor += 1
        if self._cursor >= self._capacity:
            self._cursor = 0

    def latest(self) -> float:
        """Most recently recorded sample (0.0 before the first record)."""
        return self._samples[self._cursor - 1]

    def current(self) -> float:
        """Sample at the cursor, which the next record() will overwrite."""
        return self._samples[self._cursor]

    def iter_samples(self) -> Iterator[float]:
        """
        Yield all samples, oldest first.

        Starts at the cursor and wraps around, so each call walks the
        window as it is at that moment.
        """
        index = self._cursor
        for _ in range(self._capacity):
            yield self._samples[index]

            index += 1
            if index == self._capacity:
                index = 0

    def __iter__(self) -> Iterator[float]:
        return self.iter_samples()

    def for_each(self, visitor: Callable[[float], None]) -> None:
        """Call ``visitor`` with every sample, oldest first."""
        for sample in self.iter_samples():
            visitor(sample)

    def samples(self) -> list[float]:
        """Ordered copy of the window, oldest first."""
        return list(self.iter_samples())

    def slots(self) -> list[float]:
        """
        Copy of the backing slots in storage order, slot 0 first.

        Unlike samples(), this is not rotated to the cursor, so it shows
        which slot each record() wrote to.
        """
        return list(self._samples)

    def average(self) -> float:
        return sum(self._samples) / self._capacity

    def min(self) -> float:
        return min(self._samples)

    def max(self) -> float:
        return max(self._samples)

    def view(self) -> SampleWindowView:
        """Read-only handle onto this window."""
        return SampleWindowView(self)

    def snapshot(self) -> WindowSnapshot:
        return WindowSnapshot(
            capacity=self._capacity,
            samples=tuple(self.iter_samples()),
            latest=self.latest(),
            current=self.current(),
            min=self.min(),
            max=self.max(),
            average=self.average(),
        )

    def __repr__(self) -> str:
        return f"RollingSampleWindow(capacity={self._capacity}, latest={self.latest()!r})"


class SampleWindowView:
    """
    Read-only view of a RollingSampleWindow.

    Reflects later records into the underlying window; use snapshot()
    for a frozen copy.
    """

    __slots__ = ("_window",)

    def __init__(self, window: RollingSampleWindow) -> None:
        self._window = window

    @property
    def capacity(self) -> int:
        return self._window.capacity

    def __len__(self) -> int:
        return len(self._window)

    def latest(self) -> float:
        return self._window.latest()

    def current(self) -> float:
        return self._window.current()

    def iter_samples(self) -> Iterator[float]:
        return self._window.iter_samples()

    def __iter__(self) -> Iterator[float]:
        return self._window.iter_samples()

    def for_each(self, visitor: Callable[[float], None]) -> None:
        self._window.for_each(visitor)

    def samples(self) -> list[float]:
        return self._window.samples()

    def average(self) -> float:
        return self._window.average()

    def min(self) -> float:
        return self._window.min()

    def max(self) -> float:
        return self._window.max()

    def snapshot(self) -> WindowSnapshot:
        return self._window.snapshot()

    def __repr__(self) -> str:
        return f"SampleWindowView({self._window!r})"
