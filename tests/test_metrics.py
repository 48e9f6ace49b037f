"""
Metrics Exporter Tests

Tests for starting the standalone Prometheus HTTP exporter.
"""

import logging

import pytest

from frame_stats import FrameFeed, PerformanceStatService
from frame_stats.config import Settings
from frame_stats.metrics import prometheus


pytestmark = pytest.mark.unit


@pytest.fixture
def started_ports(monkeypatch):
    """Replace the HTTP exporter with a recorder and reset its started flag."""
    ports = []
    monkeypatch.setattr(prometheus, "start_http_server", ports.append)
    monkeypatch.setattr(prometheus, "_exporter_started", False)
    return ports


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_exporter_started_when_enabled(started_ports):
    settings = _settings(metrics_enabled=True, metrics_external_enabled=True, metrics_port=9555)

    assert prometheus.setup_metrics(settings) is True
    assert started_ports == [9555]


def test_exporter_started_once(started_ports):
    settings = _settings(metrics_enabled=True, metrics_external_enabled=True)

    prometheus.setup_metrics(settings)
    prometheus.setup_metrics(settings)

    assert len(started_ports) == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"metrics_enabled": False, "metrics_external_enabled": True},
        {"metrics_enabled": True, "metrics_external_enabled": False},
    ],
)
def test_exporter_skipped_when_disabled(started_ports, overrides):
    assert prometheus.setup_metrics(_settings(**overrides)) is False
    assert started_ports == []


def test_bind_failure_logs_warning(monkeypatch, caplog):
    def port_in_use(port):
        raise OSError("Address already in use")

    monkeypatch.setattr(prometheus, "start_http_server", port_in_use)
    monkeypatch.setattr(prometheus, "_exporter_started", False)
    settings = _settings(metrics_enabled=True, metrics_external_enabled=True)

    with caplog.at_level(logging.WARNING, logger="frame_stats.metrics"):
        assert prometheus.setup_metrics(settings) is False

    assert "Failed to start metrics server" in caplog.text
    assert prometheus._exporter_started is False


def test_service_start_launches_exporter(started_ports):
    settings = _settings(metrics_enabled=True, metrics_external_enabled=True, metrics_port=9556)
    service = PerformanceStatService(FrameFeed(), settings=settings)

    service.start()

    assert started_ports == [9556]


def test_service_start_without_metrics(started_ports):
    service = PerformanceStatService(FrameFeed(), settings=_settings(metrics_external_enabled=True))

    service.start()

    assert started_ports == []
