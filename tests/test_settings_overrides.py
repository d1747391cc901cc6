from __future__ import annotations

import pytest

from cli.config import load_config
from settings import DEFAULT_TIMEOUT, DEFAULT_URL_TEMPLATE, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_apply_without_environment(monkeypatch) -> None:
    for name in ("PURPLEAIR_URL_TEMPLATE", "PURPLEAIR_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.sensor_url_template == DEFAULT_URL_TEMPLATE
    assert settings.request_timeout == DEFAULT_TIMEOUT
    assert settings.log_level == "INFO"


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("PURPLEAIR_URL_TEMPLATE", " http://mirror.local/json?show={sensor_id} ")
    monkeypatch.setenv("PURPLEAIR_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.sensor_url_template == "http://mirror.local/json?show={sensor_id}"
    assert settings.request_timeout == 2.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["", "abc", "0", "-3"])
def test_invalid_timeout_falls_back(monkeypatch, value: str) -> None:
    monkeypatch.setenv("PURPLEAIR_TIMEOUT_SECONDS", value)

    assert get_settings().request_timeout == DEFAULT_TIMEOUT


def test_cli_options_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("PURPLEAIR_TIMEOUT_SECONDS", "9")

    assert load_config().timeout == 9.0
    config = load_config(url_template="http://other/{sensor_id}", timeout=1.5)
    assert config.url_template == "http://other/{sensor_id}"
    assert config.timeout == 1.5
