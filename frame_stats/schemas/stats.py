"""
Displayable Performance Stats

Identifiers for every stat the cache can track. Values are stable strings
so they can be used directly as Prometheus label values and JSON keys.
"""

from enum import Enum


class DisplayablePerformanceStat(str, Enum):
    """
    Performance stats that can be cached and displayed.

    Frame timings are in seconds, network rates are per second,
    packet sizes are in bytes and latency markers are in milliseconds.
    """
    # Frame rate
    CLIENT_FPS = "client_fps"
    SERVER_FPS = "server_fps"

    # Frame timing
    IDLE_TIME = "idle_time"
    FRAME_TIME = "frame_time"
    FRAME_TIME_GAME_THREAD = "frame_time_game_thread"
    FRAME_TIME_RENDER_THREAD = "frame_time_render_thread"
    FRAME_TIME_RHI_THREAD = "frame_time_rhi_thread"
    FRAME_TIME_GPU = "frame_time_gpu"

    # Network
    PING = "ping"
    PACKET_LOSS_INCOMING = "packet_loss_incoming"
    PACKET_LOSS_OUTGOING = "packet_loss_outgoing"
    PACKET_RATE_INCOMING = "packet_rate_incoming"
    PACKET_RATE_OUTGOING = "packet_rate_outgoing"
    PACKET_SIZE_INCOMING = "packet_size_incoming"
    PACKET_SIZE_OUTGOING = "packet_size_outgoing"

    # Input latency markers
    LATENCY_TOTAL = "latency_total"
    LATENCY_GAME = "latency_game"
    LATENCY_RENDER = "latency_render"
