import time

import pytest

FIXED_NOW = 1700000000


@pytest.fixture
def fixed_now(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr(time, "time", lambda: FIXED_NOW + 0.75)
    return FIXED_NOW
