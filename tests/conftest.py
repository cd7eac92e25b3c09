import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "BITCOIN_API_URL",
        "BITCOIN_API_USER",
        "BITCOIN_API_PASSWORD",
        "BITCOIN_API_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
