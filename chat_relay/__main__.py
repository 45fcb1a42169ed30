"""CLI entry point for running the relay with the default dev settings."""

from __future__ import annotations

import os

import uvicorn


def _env(*names: str, default: str) -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def main() -> None:
    """Serve the relay, honoring the UVICORN_* (or bare HOST/PORT/RELOAD) overrides."""
    host = _env("UVICORN_HOST", "HOST", default="127.0.0.1")
    port = int(_env("UVICORN_PORT", "PORT", default="3001"))
    reload_enabled = _env("UVICORN_RELOAD", "RELOAD", default="true").lower() == "true"

    uvicorn.run(
        "chat_relay.main:app",
        host=host,
        port=port,
        reload=reload_enabled,
        log_level=_env("LOG_LEVEL", default="warning").lower(),
    )


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    main()
