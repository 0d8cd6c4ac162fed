import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Ensure host environment switches do not leak into tests.
    """
    monkeypatch.delenv("FROMASYNC_DEBUG", raising=False)
