# Data schemas for frame stats
from .stats import DisplayablePerformanceStat
from .frames import FrameData, NetworkStats, LatencyMarkers
from .windows import WindowSnapshot

__all__ = [
    # Stats
    "DisplayablePerformanceStat",
    # Frames
    "FrameData",
    "NetworkStats",
    "LatencyMarkers",
    # Windows
    "WindowSnapshot",
]
