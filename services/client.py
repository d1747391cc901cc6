"""HTTP access to the PurpleAir sensor endpoint."""

from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Optional

import httpx

from models.sensors import SensorResponse
from services.decoder import decode_sensor_response
from services.errors import FetchError
from settings import get_settings

logger = logging.getLogger(__name__)


class SensorClient:
    """Fetches and decodes one sensor document per call.

    A fresh ``httpx.AsyncClient`` is opened for every request, so instances
    hold no connections and can be shared between concurrent commands.
    """

    def __init__(
        self,
        url_template: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url_template = url_template
        self.timeout = timeout
        self._transport = transport

    def build_url(self, sensor_id: int) -> str:
        return self.url_template.format(sensor_id=int(sensor_id))

    async def fetch_sensor(self, sensor_id: int) -> SensorResponse:
        """Fetch the provider document for ``sensor_id``.

        Raises:
            FetchError: on connection failures, timeouts and non-2xx responses.
            DecodeError: if the body is not a valid sensor document.
        """
        url = self.build_url(sensor_id)
        start_time = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning(
                "Sensor request rejected",
                extra={"sensor_id": sensor_id, "url": url, "status_code": status_code},
            )
            raise FetchError(sensor_id, f"provider answered with status {status_code}", status_code) from exc
        except httpx.TimeoutException as exc:
            logger.warning("Sensor request timed out", extra={"sensor_id": sensor_id, "url": url})
            raise FetchError(sensor_id, "request timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Sensor request failed: %s", exc, extra={"sensor_id": sensor_id, "url": url}
            )
            raise FetchError(sensor_id, str(exc) or exc.__class__.__name__) from exc

        elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            "Fetched sensor data",
            extra={"sensor_id": sensor_id, "status_code": response.status_code, "elapsed_ms": elapsed_ms},
        )
        return decode_sensor_response(response.content)


@lru_cache
def build_default_client() -> SensorClient:
    """Factory that wires the client with the configured endpoint."""
    settings = get_settings()
    return SensorClient(
        url_template=settings.sensor_url_template,
        timeout=settings.request_timeout,
    )
