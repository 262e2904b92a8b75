"""Tests for the process-wide alert sink."""
from __future__ import annotations

import pytest

from seedforge import alerts
from seedforge.alerts import FatalSeedError, LoggingAlertSink, Severity, default_sink
from seedforge.config import settings
from seedforge.normalize import normalize_from_vector
from seedforge.state import SeedState


@pytest.fixture
def fresh_default(monkeypatch):
    monkeypatch.setattr(alerts, "_default", None)
    return monkeypatch


def test_default_sink_continues_with_fallback(fresh_default) -> None:
    fresh_default.setattr(settings, "stop_on_failure", False)
    assert normalize_from_vector([]) == SeedState(3, 17)
    assert default_sink().failures == 1


def test_default_sink_stops_when_configured(fresh_default) -> None:
    fresh_default.setattr(settings, "stop_on_failure", True)
    with pytest.raises(FatalSeedError, match="empty seed vector"):
        normalize_from_vector([])
    assert default_sink().failures == 1


def test_default_sink_is_shared(fresh_default) -> None:
    assert default_sink() is default_sink()


def test_warnings_never_stop(caplog) -> None:
    sink = LoggingAlertSink(stop_on_failure=True)
    with caplog.at_level("WARNING", logger="seedforge.alerts"):
        sink.alert(Severity.WARNING, "seed reused")
    assert sink.counts[Severity.WARNING] == 1
    assert "seed reused" in caplog.text
