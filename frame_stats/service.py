"""
Performance Stat Service

Host-facing entry point. The host creates one service per session,
calls start() when stat collection should begin and stop() when it
should end. Between start() and the next start(), display code reads
cached stats through get_cached_stat() and get_cached_stat_data().
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .cache import DEFAULT_EXTRACTORS, MetricSampleRouter, SampleWindowView, StatExtractor
from .config import Settings, get_settings
from .feed import FrameFeed
from .metrics import setup_metrics
from .schemas import DisplayablePerformanceStat

logger = logging.getLogger("frame_stats.service")


class PerformanceStatService:
    """
    Owns the stat router for the lifetime of a monitoring session.

    stop() unsubscribes from the feed but keeps the router, so the last
    values stay readable until the service is started again.
    """

    def __init__(
        self,
        feed: FrameFeed,
        settings: Optional[Settings] = None,
        extractors: Optional[Mapping[DisplayablePerformanceStat, StatExtractor]] = None,
    ) -> None:
        self.feed = feed
        self.settings = settings or get_settings()
        self.extractors = extractors if extractors is not None else DEFAULT_EXTRACTORS
        self._router: Optional[MetricSampleRouter] = None

    @property
    def is_running(self) -> bool:
        return self._router is not None and self._router in self.feed.consumers

    @property
    def router(self) -> Optional[MetricSampleRouter]:
        return self._router

    def start(self) -> None:
        """Create a fresh router and subscribe it to the feed."""
        if self.is_running:
            logger.warning("Performance stat service already running")
            return

        self._router = MetricSampleRouter(
            extractors=self.extractors,
            sample_size=self.settings.stats_sample_size,
            metrics_enabled=self.settings.metrics_enabled,
        )
        if self.settings.metrics_enabled:
            setup_metrics(self.settings)
        self.feed.add_consumer(self._router)
        logger.info(
            "Performance stat service started (sample_size=%d)",
            self.settings.stats_sample_size,
        )

    def stop(self) -> None:
        """Unsubscribe from the feed, keeping cached values readable."""
        if not self.is_running:
            return
        self.feed.remove_consumer(self._router)
        logger.info("Performance stat service stopped")

    def get_cached_stat(self, stat: DisplayablePerformanceStat) -> float:
        """Latest cached value for the stat, or 0.0 if unavailable."""
        if self._router is None:
            return 0.0
        return self._router.get_latest_value(stat)

    def get_cached_stat_data(self, stat: DisplayablePerformanceStat) -> Optional[SampleWindowView]:
        """Read-only window for the stat, or None if unavailable."""
        if self._router is None:
            return None
        return self._router.get_window(stat)

    def snapshot_all(self) -> dict[str, dict]:
        """JSON-ready snapshot of every observed stat, keyed by stat name."""
        if self._router is None:
            return {}
        return {
            stat.value: snap.to_dict()
            for stat, snap in self._router.snapshot_all().items()
        }

    def publish_metrics(self) -> None:
        """
        Update window aggregate gauges.

        Called periodically by the host (e.g. once a second), not per frame.
        """
        if self._router is None:
            return
        self._router.publish_metrics()
