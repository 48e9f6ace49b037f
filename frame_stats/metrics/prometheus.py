"""
Prometheus Metrics

Mirrors cached frame stats into Prometheus so they can be scraped
alongside the host's other metrics:
- Per-stat latest value (updated every frame)
- Per-stat min/max/average over the window (updated on publish)
- Frame and window counts
"""

import logging

from prometheus_client import Counter, Gauge, start_http_server

from ..config import Settings, get_settings

logger = logging.getLogger("frame_stats.metrics")


class FrameStatMetrics:
    """
    Container for all Prometheus metrics.

    Organized by category:
    - Ingest metrics
    - Stat value metrics
    """

    def __init__(self):
        """Initialize all metrics."""

        # =====================================================================
        # Ingest Metrics
        # =====================================================================
        self.frames_total = Counter(
            "frame_stats_frames_total",
            "Total number of frames processed by the stat cache",
        )

        self.windows = Gauge(
            "frame_stats_windows",
            "Number of stats with an allocated sample window",
        )

        # =====================================================================
        # Stat Value Metrics
        # =====================================================================
        self.latest = Gauge(
            "frame_stats_latest",
            "Most recent sample recorded for the stat",
            labelnames=["stat"],
        )

        self.min = Gauge(
            "frame_stats_min",
            "Minimum sample in the stat window",
            labelnames=["stat"],
        )

        self.max = Gauge(
            "frame_stats_max",
            "Maximum sample in the stat window",
            labelnames=["stat"],
        )

        self.average = Gauge(
            "frame_stats_average",
            "Average over the full stat window",
            labelnames=["stat"],
        )


# Global metrics instance
metrics = FrameStatMetrics()


_exporter_started = False


def setup_metrics(settings: Settings | None = None) -> bool:
    """
    Setup Prometheus metrics server.

    Starts HTTP server on configured port to expose metrics. The server
    lives for the rest of the process, so later calls are no-ops.

    Args:
        settings: Settings to read; defaults to get_settings()

    Returns:
        True if the exporter is running after the call
    """
    global _exporter_started

    if _exporter_started:
        return True
    settings = settings or get_settings()
    if not (settings.metrics_enabled and settings.metrics_external_enabled):
        return False

    try:
        start_http_server(settings.metrics_port)
    except OSError as e:
        logger.warning("Failed to start metrics server: %s", e)
        return False

    _exporter_started = True
    logger.info("Metrics server started on port %d", settings.metrics_port)
    return True
