"""Relay API routes."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from chat_relay.core.exceptions import (
    ChatRequestValidationError,
    UpstreamHttpError,
    UpstreamMalformedBodyError,
    UpstreamUnreachableError,
)
from chat_relay.core.normalizer import normalize_request
from chat_relay.router.dispatcher import dispatch_chat, registry

logger = logging.getLogger("relay.api")

router = APIRouter(prefix="/api")


CHAT_REQUEST_EXAMPLES = {
    "openai": {
        "summary": "OpenAI adapter",
        "value": {
            "apiKey": "sk-...",
            "model": "gpt-4.1",
            "messages": [
                {"role": "system", "content": "You are a helpful assistant."},
                {"role": "user", "content": "Reply with a JSON object listing three colors."},
            ],
            "temperature": 1,
            "maxTokens": 2048,
            "responseFormat": "json_object",
        },
    },
    "anthropic": {
        "summary": "Anthropic adapter",
        "value": {
            "apiKey": "sk-ant-...",
            "model": "claude-sonnet-4-20250514",
            "messages": [
                {"role": "system", "content": "Be terse."},
                {"role": "user", "content": "Hi"},
            ],
            "temperature": 0.5,
            "maxTokens": 100,
        },
    },
    "deepseek": {
        "summary": "Deepseek adapter",
        "value": {
            "apiKey": "sk-...",
            "model": "deepseek-chat",
            "messages": [{"role": "user", "content": "Hello!"}],
            "temperature": 0.7,
            "maxTokens": 512,
            "responseFormat": "text",
        },
    },
}


def _error_response(status_code: int, error: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


@router.post(
    "/chat",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {"type": "object"},
                    "examples": CHAT_REQUEST_EXAMPLES,
                }
            },
        }
    },
)
async def relay_chat(request: Request) -> Response:
    try:
        raw = await request.json()
    except ValueError:
        raw = None

    try:
        chat_request = normalize_request(raw)
    except ChatRequestValidationError as exc:
        return _error_response(400, {"message": exc.message})

    try:
        body = await dispatch_chat(chat_request)
    except UpstreamHttpError as exc:
        return _error_response(exc.status_code, exc.error)
    except UpstreamMalformedBodyError as exc:
        return _error_response(exc.status_code, exc.to_error())
    except UpstreamUnreachableError:
        return _error_response(500, {"message": "Internal server error"})

    return Response(content=body, media_type="application/json")


@router.get("/models")
def list_models() -> dict:
    """Return the model catalog grouped by provider, in routing order."""
    return {"providers": registry.catalog()}
