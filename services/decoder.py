"""Decoding of provider payloads into sensor documents."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from models.sensors import SensorResponse
from services.errors import DecodeError, DecodeErrorKind

logger = logging.getLogger(__name__)

_STATS_FIELD = "Stats"


def decode_sensor_response(body: Union[bytes, str]) -> SensorResponse:
    """Parse a provider body, including the string-encoded ``Stats`` documents.

    Raises:
        DecodeError: if any part of the document is malformed or incomplete.
    """
    try:
        return SensorResponse.model_validate_json(body)
    except ValidationError as exc:
        error = _to_decode_error(exc.errors()[0])
        logger.warning(
            "Rejected sensor payload: %s",
            error.detail,
            extra={"error_kind": error.kind.value, "location": error.location or None},
        )
        raise error from exc


def _to_decode_error(error: Mapping[str, Any]) -> DecodeError:
    location = tuple(error["loc"])
    return DecodeError(
        kind=_classify(location, error["type"]),
        location=".".join(str(part) for part in location),
        detail=error["msg"],
    )


def _classify(location: tuple, error_type: str) -> DecodeErrorKind:
    # Locations follow the document: (), ("results",), ("results", i),
    # ("results", i, field) and ("results", i, "Stats", key) for the inner stats.
    if not location:
        return DecodeErrorKind.malformed_document
    if len(location) == 1:
        return DecodeErrorKind.invalid_results
    if len(location) == 2:
        return DecodeErrorKind.invalid_record
    if len(location) == 3 and error_type == "missing":
        return DecodeErrorKind.missing_field
    if location[2] != _STATS_FIELD:
        return DecodeErrorKind.invalid_field
    if len(location) == 3 and error_type == "json_type":
        return DecodeErrorKind.stats_not_string
    if len(location) == 3 and error_type == "json_invalid":
        return DecodeErrorKind.stats_invalid_json
    return DecodeErrorKind.invalid_stats
