from __future__ import annotations

from typing import List, Tuple

import pytest

from seedforge.alerts import Severity


class RecordingSink:
    def __init__(self) -> None:
        self.alerts: List[Tuple[Severity, str]] = []

    def alert(self, severity: Severity, message: str) -> None:
        self.alerts.append((severity, message))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
