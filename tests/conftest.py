from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from services.client import SensorClient

TEST_URL_TEMPLATE = "https://sensors.test/json?show={sensor_id}"

DEFAULT_STATS = {"v": 10.0, "v1": 20.0, "v2": 30.0, "v3": 35.0, "v4": 40.0, "v5": 50.0, "v6": 60.0}


def _build_payload(
    sensor_id: int = 12345,
    label: str = "Backyard",
    stats: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "mapVersion": "0.1",
        "results": [
            {
                "ID": sensor_id,
                "Label": label,
                "Stats": json.dumps(stats if stats is not None else DEFAULT_STATS),
            }
        ],
    }


@pytest.fixture()
def build_payload() -> Callable[..., Dict[str, Any]]:
    return _build_payload


class StubProvider:
    """Records requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = json.dumps(_build_payload()).encode("utf-8")
        self.error: Optional[Exception] = None

    def respond_with(self, payload: Any, status_code: int = 200) -> None:
        self.body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    def client(self, timeout: float = 5.0) -> SensorClient:
        return SensorClient(
            url_template=TEST_URL_TEMPLATE,
            timeout=timeout,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture()
def provider() -> StubProvider:
    return StubProvider()
