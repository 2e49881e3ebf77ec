import pytest

ENV_VARS = ("BCI_AK", "BCI_SK", "BCI_PUBLIC_API_URL", "BCI_TRADE_API_URL", "BCI_TIMEOUT", "BCI_RAISE_ON_ERROR")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without BCI_* variables and outside any directory holding a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv first so the variable is restored (or removed) on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path
