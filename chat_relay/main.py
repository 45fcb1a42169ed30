"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from chat_relay.api import chat
from chat_relay.logging import configure_logging, get_request_id
from chat_relay.middleware.request_context import RequestContextMiddleware
from chat_relay.router.dispatcher import registry

configure_logging()

logger = logging.getLogger("relay.app")

app = FastAPI(
    title="Chat Relay",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    openapi_url="/api/openapi.json",
)
app.include_router(chat.router)
app.add_middleware(RequestContextMiddleware)


@app.on_event("startup")
def on_startup() -> None:
    logger.info(
        "Provider routing ready",
        extra={
            "event": "startup",
            "providers": [adapter.provider_id for adapter in registry.adapters()],
        },
    )


@app.get("/api/docs", response_class=HTMLResponse)
def swagger_ui() -> HTMLResponse:
    return get_swagger_ui_html(
        openapi_url="/api/openapi.json",
        title="Chat Relay API",
    )


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={
            "event": "request_error",
            "path": request.url.path,
            "request_id": get_request_id(),
        },
    )
    return JSONResponse(
        status_code=500,
        content={"error": {"message": "Internal server error"}},
    )
