"""
Metric Sample Router

Consumes frame events and keeps one RollingSampleWindow per stat.
Each frame, every tracked stat's extractor is run against the frame and
the result is recorded into that stat's window. Windows are created the
first time a stat produces a value and live as long as the router.

Frames must be delivered once each and in order; the router does not
detect duplicates or reordering, and latest() is only meaningful if
the feed honours that.
"""

from __future__ import annotations

import logging
import threading
from typing import Mapping, Optional, Protocol

from ..config.settings import DEFAULT_SAMPLE_SIZE
from ..metrics import metrics
from ..schemas import DisplayablePerformanceStat, FrameData, WindowSnapshot
from .extractors import DEFAULT_EXTRACTORS, StatExtractor
from .window import RollingSampleWindow, SampleWindowView

logger = logging.getLogger("frame_stats.cache")


class PerformanceDataConsumer(Protocol):
    """Receiver of frame events from a FrameFeed."""

    def on_monitoring_start(self) -> None: ...

    def on_frame(self, frame: FrameData) -> None: ...

    def on_monitoring_stop(self) -> None: ...


class MetricSampleRouter:
    """
    Caches recent samples for each tracked stat.

    Implements PerformanceDataConsumer. Reads and writes share one
    re-entrant lock, so a UI or exporter thread may query while the
    frame thread records.
    """

    def __init__(
        self,
        extractors: Mapping[DisplayablePerformanceStat, StatExtractor] = DEFAULT_EXTRACTORS,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        metrics_enabled: bool = False,
    ) -> None:
        """
        Initialize the router.

        Args:
            extractors: Rule per stat for pulling its value out of a frame
            sample_size: Capacity of every window this router creates
            metrics_enabled: Mirror latest values into Prometheus gauges

        Raises:
            ValueError: If sample_size is not a positive integer
        """
        if isinstance(sample_size, bool) or not isinstance(sample_size, int) or sample_size <= 0:
            raise ValueError(f"Sample size must be a positive integer, got {sample_size!r}")

        self._extractors = dict(extractors)
        self.sample_size = sample_size
        self.metrics_enabled = metrics_enabled
        self._windows: dict[DisplayablePerformanceStat, RollingSampleWindow] = {}
        self._lock = threading.RLock()
        self._active = False
        self._frames_processed = 0

    @property
    def tracked_stats(self) -> tuple[DisplayablePerformanceStat, ...]:
        return tuple(self._extractors)

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def frames_processed(self) -> int:
        return self._frames_processed

    # =========================================================================
    # PerformanceDataConsumer
    # =========================================================================

    def on_monitoring_start(self) -> None:
        """Clear all windows and begin accepting frames."""
        with self._lock:
            if self._active:
                logger.warning("Stat router already started; ignoring start request")
                return

            self._windows.clear()
            self._frames_processed = 0
            self._active = True

        if self.metrics_enabled:
            metrics.windows.set(0)
        logger.info("Stat router started tracking %d stats", len(self._extractors))

    def on_frame(self, frame: FrameData) -> None:
        """
        Record one frame into every tracked stat's window.

        Stats whose extractor returns None for this frame are skipped.
        """
        recorded: list[tuple[DisplayablePerformanceStat, float]] = []

        with self._lock:
            for stat, extract in self._extractors.items():
                value = extract(frame)
                if value is None:
                    continue
                self._record_stat(stat, value)
                recorded.append((stat, value))

            self._frames_processed += 1
            window_count = len(self._windows)

        if self.metrics_enabled:
            metrics.frames_total.inc()
            metrics.windows.set(window_count)
            for stat, value in recorded:
                metrics.latest.labels(stat=stat.value).set(value)

    def on_monitoring_stop(self) -> None:
        """Stop accepting frames. Cached windows stay readable."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            frames = self._frames_processed

        logger.info("Stat router stopped after %d frames", frames)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_latest_value(self, stat: DisplayablePerformanceStat) -> float:
        """Latest cached value for the stat, or 0.0 if never observed."""
        with self._lock:
            window = self._windows.get(stat)
            if window is None:
                return 0.0
            return window.latest()

    def get_window(self, stat: DisplayablePerformanceStat) -> Optional[SampleWindowView]:
        """
        Read-only view of the stat's window, or None if never observed.

        Use this for min/max/average or to iterate samples, e.g. to draw
        an FPS graph over time.
        """
        with self._lock:
            window = self._windows.get(stat)
            if window is None:
                return None
            return window.view()

    def snapshot(self, stat: DisplayablePerformanceStat) -> Optional[WindowSnapshot]:
        """Frozen copy of the stat's window, or None if never observed."""
        with self._lock:
            window = self._windows.get(stat)
            if window is None:
                return None
            return window.snapshot()

    def observed_stats(self) -> list[DisplayablePerformanceStat]:
        """Stats that have a window, in the order they were first seen."""
        with self._lock:
            return list(self._windows)

    def snapshot_all(self) -> dict[DisplayablePerformanceStat, WindowSnapshot]:
        """Frozen copies of every window, all taken between the same two frames."""
        with self._lock:
            return {stat: window.snapshot() for stat, window in self._windows.items()}

    def publish_metrics(self) -> None:
        """Push min/max/average of every window into Prometheus gauges."""
        if not self.metrics_enabled:
            return

        snapshots = self.snapshot_all()

        for stat, snap in snapshots.items():
            metrics.min.labels(stat=stat.value).set(snap.min)
            metrics.max.labels(stat=stat.value).set(snap.max)
            metrics.average.labels(stat=stat.value).set(snap.average)
        metrics.windows.set(len(snapshots))

    def _record_stat(self, stat: DisplayablePerformanceStat, value: float) -> None:
        window = self._windows.get(stat)
        if window is None:
            window = RollingSampleWindow(self.sample_size)
            self._windows[stat] = window
            logger.debug("Created %d-sample window for %s", self.sample_size, stat.value)
        window.record(value)
