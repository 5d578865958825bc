import pytest

from verdict.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("VERDICT_REPR_LIMIT", raising=False)
    monkeypatch.delenv("VERDICT_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
