import pytest

from user_error.config import reset_config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config file and color env vars out of every test."""
    for var in ("NO_COLOR", "FORCE_COLOR", "USER_ERROR_COLOR", "USER_ERROR_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    reset_config()
    yield
    reset_config()
