import pytest


@pytest.fixture(autouse=True)
def _isolate_agent_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a GT_AGENT from the developer's shell out of tests."""
    monkeypatch.delenv("GT_AGENT", raising=False)
