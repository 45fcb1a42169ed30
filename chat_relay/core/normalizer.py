"""Validation of raw relay payloads into ``ChatRequest`` values."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from chat_relay.core.exceptions import ChatRequestValidationError
from chat_relay.providers.base import ChatRequest

logger = logging.getLogger("relay.normalizer")


def _error_locations(exc: ValidationError) -> list[str]:
    locations = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        if location not in locations:
            locations.append(location)
    return locations


def normalize_request(raw: Any) -> ChatRequest:
    """Validate the caller's payload, passing its values through untouched."""
    try:
        return ChatRequest.model_validate(raw)
    except ValidationError as exc:
        fields = _error_locations(exc)
        # Only locations are logged; input values may carry the API key.
        logger.info(
            "Rejected chat request",
            extra={"event": "request_invalid", "fields": fields},
        )
        raise ChatRequestValidationError(fields) from exc


__all__ = ["normalize_request"]
