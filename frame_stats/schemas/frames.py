"""
Frame Event Schemas

One FrameData is published per rendered frame by the host's
telemetry feed. Timing fields are always present; network and
latency blocks are only filled in when the host has that data
(e.g. no network block while playing offline).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NetworkStats(BaseModel):
    """
    Connection statistics sampled for the frame.

    Only present while the host has an active server connection.
    """
    model_config = ConfigDict(frozen=True)

    in_packets_lost_pct: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Incoming packets lost, percent"
    )
    out_packets_lost_pct: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Outgoing packets lost, percent"
    )
    in_packets_per_second: float = Field(default=0.0, ge=0.0)
    out_packets_per_second: float = Field(default=0.0, ge=0.0)
    in_bytes_per_second: float = Field(default=0.0, ge=0.0)
    out_bytes_per_second: float = Field(default=0.0, ge=0.0)


class LatencyMarkers(BaseModel):
    """Input-to-display latency markers, in milliseconds."""
    model_config = ConfigDict(frozen=True)

    total_ms: float = Field(default=0.0, ge=0.0)
    game_ms: float = Field(default=0.0, ge=0.0)
    render_ms: float = Field(default=0.0, ge=0.0)


class FrameData(BaseModel):
    """
    Raw measurements for one frame.

    All timings are wall-clock seconds spent on that frame.
    """
    model_config = ConfigDict(frozen=True)

    true_delta_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Real time elapsed since the previous frame"
    )
    idle_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Time spent waiting for the frame rate limiter"
    )
    game_thread_time_seconds: float = Field(default=0.0, ge=0.0)
    render_thread_time_seconds: float = Field(default=0.0, ge=0.0)
    rhi_thread_time_seconds: float = Field(default=0.0, ge=0.0)
    gpu_time_seconds: float = Field(default=0.0, ge=0.0)

    server_fps: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Tick rate reported by the server, if connected"
    )
    ping_ms: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Round trip time to the server, if connected"
    )

    network: Optional[NetworkStats] = None
    latency: Optional[LatencyMarkers] = None
