"""Rolling per-frame performance stat cache."""

from .cache import MetricSampleRouter, RollingSampleWindow
from .feed import FrameFeed
from .schemas import DisplayablePerformanceStat, FrameData
from .service import PerformanceStatService

__all__ = [
    "DisplayablePerformanceStat",
    "FrameData",
    "FrameFeed",
    "MetricSampleRouter",
    "PerformanceStatService",
    "RollingSampleWindow",
]
