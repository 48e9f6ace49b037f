# Stat Cache Module
from .window import RollingSampleWindow, SampleWindowView
from .extractors import DEFAULT_EXTRACTORS, StatExtractor
from .router import MetricSampleRouter, PerformanceDataConsumer

__all__ = [
    "RollingSampleWindow",
    "SampleWindowView",
    "DEFAULT_EXTRACTORS",
    "StatExtractor",
    "MetricSampleRouter",
    "PerformanceDataConsumer",
]
