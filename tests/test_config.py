"""Tests for environment-driven settings."""
import pytest

from orbitwatch.config import DEFAULT_SOURCE_URL, DEFAULT_UPSTREAM_URL, load_settings

_VARS = (
    "ORBITWATCH_SOURCE_URL",
    "ORBITWATCH_UPSTREAM_URL",
    "ORBITWATCH_PROXY_HOST",
    "ORBITWATCH_PROXY_PORT",
    "ORBITWATCH_HTTP_TIMEOUT",
    "ORBITWATCH_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:

    def test_defaults(self):
        s = load_settings()
        assert s.source_url == DEFAULT_SOURCE_URL
        assert s.upstream_url == DEFAULT_UPSTREAM_URL
        assert s.proxy_port == 3000
        assert s.http_timeout == 10.0
        assert s.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ORBITWATCH_PROXY_PORT", "8080")
        monkeypatch.setenv("ORBITWATCH_HTTP_TIMEOUT", "2.5")
        monkeypatch.setenv("ORBITWATCH_LOG_LEVEL", "debug")
        s = load_settings()
        assert s.proxy_port == 8080
        assert s.http_timeout == 2.5
        assert s.log_level == "DEBUG"

    def test_bad_port_names_variable(self, monkeypatch):
        monkeypatch.setenv("ORBITWATCH_PROXY_PORT", "three thousand")
        with pytest.raises(ValueError, match="ORBITWATCH_PROXY_PORT"):
            load_settings()
