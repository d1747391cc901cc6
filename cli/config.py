from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from settings import get_settings


@dataclass(frozen=True)
class CLIConfig:
    url_template: str
    timeout: float


def load_config(
    url_template: Optional[str] = None,
    timeout: Optional[float] = None,
) -> CLIConfig:
    """Merge command line overrides over the environment settings."""
    settings = get_settings()
    if timeout is None or timeout <= 0:
        timeout = settings.request_timeout
    return CLIConfig(
        url_template=url_template or settings.sensor_url_template,
        timeout=timeout,
    )
