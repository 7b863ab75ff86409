"""Tests for environment-driven settings."""

from unittest.mock import patch

import pytest

from simplywallst.infrastructure.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    SnowflakeSettings,
)


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.delenv("SIMPLYWALLST_ENDPOINT", raising=False)
    monkeypatch.delenv("SIMPLYWALLST_TIMEOUT", raising=False)
    with patch("simplywallst.infrastructure.config.load_dotenv") as load:
        yield load


class TestSnowflakeSettings:
    def test_defaults(self):
        settings = SnowflakeSettings.from_env()
        assert settings.endpoint == DEFAULT_ENDPOINT
        assert settings.timeout == DEFAULT_TIMEOUT

    def test_reads_dotenv_first(self, _no_dotenv):
        SnowflakeSettings.from_env()
        _no_dotenv.assert_called_once()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SIMPLYWALLST_ENDPOINT", "http://localhost/{exchange}/{ticker}")
        monkeypatch.setenv("SIMPLYWALLST_TIMEOUT", "2.5")
        settings = SnowflakeSettings.from_env()
        assert settings.endpoint == "http://localhost/{exchange}/{ticker}"
        assert settings.timeout == 2.5

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("SIMPLYWALLST_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="SIMPLYWALLST_TIMEOUT"):
            SnowflakeSettings.from_env()
