"""Alert reporting for unrecoverable seed input."""
from __future__ import annotations

import enum
import logging
from collections import Counter
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class Severity(str, enum.Enum):
    WARNING = "warning"
    ERROR = "error"
    FAILURE = "failure"


_LOG_LEVELS = {
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FAILURE: logging.CRITICAL,
}


class FatalSeedError(RuntimeError):
    """Raised by a sink configured to stop on failure alerts."""


class AlertSink(Protocol):
    def alert(self, severity: Severity, message: str) -> None:
        ...


class LoggingAlertSink:
    """Log alerts and keep a per-severity count.

    With ``stop_on_failure`` enabled a ``FAILURE`` alert raises
    :class:`FatalSeedError` once it has been logged; otherwise the caller
    continues with its fallback value.
    """

    def __init__(self, stop_on_failure: bool = False, log: Optional[logging.Logger] = None) -> None:
        self.stop_on_failure = stop_on_failure
        self.counts: Counter = Counter()
        self._log = log or logger

    def alert(self, severity: Severity, message: str) -> None:
        self.counts[severity] += 1
        self._log.log(_LOG_LEVELS[severity], "%s: %s", severity.value.upper(), message)
        if severity is Severity.FAILURE and self.stop_on_failure:
            raise FatalSeedError(message)

    @property
    def failures(self) -> int:
        return self.counts[Severity.FAILURE]


_default: Optional[LoggingAlertSink] = None


def default_sink() -> LoggingAlertSink:
    global _default
    if _default is None:
        from seedforge.config import settings

        _default = LoggingAlertSink(stop_on_failure=settings.stop_on_failure)
    return _default


def resolve_sink(alert: Optional[AlertSink]) -> AlertSink:
    return alert if alert is not None else default_sink()
