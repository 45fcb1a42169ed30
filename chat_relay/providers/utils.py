"""Helper utilities for interpreting upstream responses."""

from __future__ import annotations

from typing import Any

import httpx

MAX_ERROR_DETAIL_LENGTH = 300


def status_line(response: httpx.Response) -> str:
    return f"HTTP {response.status_code}: {response.reason_phrase}"


def body_snippet(response: httpx.Response) -> str:
    """Return the stripped text body cut to ``MAX_ERROR_DETAIL_LENGTH`` characters."""

    text = getattr(response, "text", None) or ""
    return text.strip()[:MAX_ERROR_DETAIL_LENGTH]


def parse_json_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, raising ``ValueError`` if it is not JSON."""

    if not response.content:
        raise ValueError("Empty response body")
    return response.json()


def extract_error_object(response: httpx.Response, data: Any) -> dict[str, Any]:
    """Pull the vendor's ``error`` object out of a decoded error body."""

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        if isinstance(error.get("message"), str):
            return error
        return {**error, "message": status_line(response)}
    if isinstance(error, str) and error:
        return {"message": error}
    return {"message": status_line(response)}


__all__ = [
    "MAX_ERROR_DETAIL_LENGTH",
    "body_snippet",
    "extract_error_object",
    "parse_json_body",
    "status_line",
]
