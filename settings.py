from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


DEFAULT_URL_TEMPLATE = "https://www.purpleair.com/json?show={sensor_id}"
DEFAULT_TIMEOUT = 5.0

_URL_TEMPLATE_ENV = "PURPLEAIR_URL_TEMPLATE"
_TIMEOUT_ENV = "PURPLEAIR_TIMEOUT_SECONDS"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    sensor_url_template: str
    request_timeout: float
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_timeout(default: float) -> float:
    value = os.getenv(_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        sensor_url_template=_read_str_env(_URL_TEMPLATE_ENV, DEFAULT_URL_TEMPLATE),
        request_timeout=_read_timeout(DEFAULT_TIMEOUT),
        log_level=_read_log_level("INFO"),
    )
