"""
Pytest Configuration and Fixtures - Frame Stats

Provides shared fixtures for stat cache tests.
"""

import pytest

from frame_stats.config import Settings
from frame_stats.feed import FrameFeed
from frame_stats.schemas import FrameData, LatencyMarkers, NetworkStats


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (no infrastructure)")


@pytest.fixture
def stat_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, stats_sample_size=4)


@pytest.fixture
def feed() -> FrameFeed:
    return FrameFeed()


@pytest.fixture
def offline_frame() -> FrameData:
    """
    A 60 FPS frame with no server connection.
    """
    return FrameData(
        true_delta_seconds=0.016,
        idle_seconds=0.002,
        game_thread_time_seconds=0.008,
        render_thread_time_seconds=0.007,
        rhi_thread_time_seconds=0.005,
        gpu_time_seconds=0.011,
    )


@pytest.fixture
def online_frame() -> FrameData:
    """
    A 50 FPS frame while connected to a server, with latency markers.
    """
    return FrameData(
        true_delta_seconds=0.02,
        idle_seconds=0.001,
        game_thread_time_seconds=0.012,
        render_thread_time_seconds=0.009,
        rhi_thread_time_seconds=0.006,
        gpu_time_seconds=0.014,
        server_fps=30.0,
        ping_ms=42.0,
        network=NetworkStats(
            in_packets_lost_pct=1.5,
            out_packets_lost_pct=0.5,
            in_packets_per_second=40.0,
            out_packets_per_second=20.0,
            in_bytes_per_second=8000.0,
            out_bytes_per_second=1000.0,
        ),
        latency=LatencyMarkers(total_ms=55.0, game_ms=20.0, render_ms=25.0),
    )
