"""
Stat Extractors

Maps each DisplayablePerformanceStat to the rule that pulls its value
out of a FrameData. The router takes this table as a constructor
argument, so hosts with a different telemetry schema pass their own.

An extractor returns None when the frame carries no value for the stat
(offline play has no ping, for example); the router skips the stat for
that frame instead of recording a zero.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

from ..schemas import DisplayablePerformanceStat, FrameData

StatExtractor = Callable[[FrameData], Optional[float]]


def client_fps(frame: FrameData) -> float:
    if frame.true_delta_seconds == 0.0:
        return 0.0
    return 1.0 / frame.true_delta_seconds


def _packet_size(bytes_per_second: float, packets_per_second: float) -> float:
    """Average bytes per packet; 0.0 when no packets were sent."""
    if packets_per_second <= 0.0:
        return 0.0
    return bytes_per_second / packets_per_second


def packet_size_incoming(frame: FrameData) -> Optional[float]:
    if frame.network is None:
        return None
    return _packet_size(frame.network.in_bytes_per_second, frame.network.in_packets_per_second)


def packet_size_outgoing(frame: FrameData) -> Optional[float]:
    if frame.network is None:
        return None
    return _packet_size(frame.network.out_bytes_per_second, frame.network.out_packets_per_second)


def _network_field(name: str) -> StatExtractor:
    def extract(frame: FrameData) -> Optional[float]:
        if frame.network is None:
            return None
        return getattr(frame.network, name)

    extract.__name__ = f"network_{name}"
    return extract


def _latency_field(name: str) -> StatExtractor:
    def extract(frame: FrameData) -> Optional[float]:
        if frame.latency is None:
            return None
        return getattr(frame.latency, name)

    extract.__name__ = f"latency_{name}"
    return extract


DEFAULT_EXTRACTORS: Mapping[DisplayablePerformanceStat, StatExtractor] = MappingProxyType({
    # Frame rate
    DisplayablePerformanceStat.CLIENT_FPS: client_fps,
    DisplayablePerformanceStat.SERVER_FPS: lambda frame: frame.server_fps,

    # Frame timing
    DisplayablePerformanceStat.IDLE_TIME: lambda frame: frame.idle_seconds,
    DisplayablePerformanceStat.FRAME_TIME: lambda frame: frame.true_delta_seconds,
    DisplayablePerformanceStat.FRAME_TIME_GAME_THREAD: lambda frame: frame.game_thread_time_seconds,
    DisplayablePerformanceStat.FRAME_TIME_RENDER_THREAD: lambda frame: frame.render_thread_time_seconds,
    DisplayablePerformanceStat.FRAME_TIME_RHI_THREAD: lambda frame: frame.rhi_thread_time_seconds,
    DisplayablePerformanceStat.FRAME_TIME_GPU: lambda frame: frame.gpu_time_seconds,

    # Network
    DisplayablePerformanceStat.PING: lambda frame: frame.ping_ms,
    DisplayablePerformanceStat.PACKET_LOSS_INCOMING: _network_field("in_packets_lost_pct"),
    DisplayablePerformanceStat.PACKET_LOSS_OUTGOING: _network_field("out_packets_lost_pct"),
    DisplayablePerformanceStat.PACKET_RATE_INCOMING: _network_field("in_packets_per_second"),
    DisplayablePerformanceStat.PACKET_RATE_OUTGOING: _network_field("out_packets_per_second"),
    DisplayablePerformanceStat.PACKET_SIZE_INCOMING: packet_size_incoming,
    DisplayablePerformanceStat.PACKET_SIZE_OUTGOING: packet_size_outgoing,

    # Input latency markers
    DisplayablePerformanceStat.LATENCY_TOTAL: _latency_field("total_ms"),
    DisplayablePerformanceStat.LATENCY_GAME: _latency_field("game_ms"),
    DisplayablePerformanceStat.LATENCY_RENDER: _latency_field("render_ms"),
})
