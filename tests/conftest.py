from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _production_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests opt in to development mode explicitly."""
    monkeypatch.delenv("NODE_ENV", raising=False)
