"""
Frame Feed

In-process publisher the host pushes one FrameData into per frame.
Consumers are told when charting starts and stops for them, and get
every frame published in between, in publish order.
"""

from __future__ import annotations

import logging

from .cache import PerformanceDataConsumer
from .schemas import FrameData

logger = logging.getLogger("frame_stats.feed")


class FrameFeed:
    """Fan-out of frame events to registered consumers."""

    def __init__(self) -> None:
        self._consumers: list[PerformanceDataConsumer] = []

    @property
    def consumers(self) -> tuple[PerformanceDataConsumer, ...]:
        return tuple(self._consumers)

    def add_consumer(self, consumer: PerformanceDataConsumer) -> None:
        """Register a consumer and start charting for it."""
        if consumer in self._consumers:
            return
        self._consumers.append(consumer)
        consumer.on_monitoring_start()
        logger.debug("Added frame consumer %s", type(consumer).__name__)

    def remove_consumer(self, consumer: PerformanceDataConsumer) -> None:
        """Unregister a consumer and stop charting for it."""
        if consumer not in self._consumers:
            return
        self._consumers.remove(consumer)
        consumer.on_monitoring_stop()
        logger.debug("Removed frame consumer %s", type(consumer).__name__)

    def publish(self, frame: FrameData) -> None:
        """Deliver a frame to every registered consumer."""
        for consumer in tuple(self._consumers):
            consumer.on_frame(frame)
