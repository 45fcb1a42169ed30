"""Anthropic provider adapter."""

from __future__ import annotations

from typing import Any

from .base import DEFAULT_SYSTEM_PROMPT, ChatRequest, ProviderAdapter

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(ProviderAdapter):
    provider_id = "anthropic"
    model_prefixes = ("claude-",)

    def build_payload(self, request: ChatRequest) -> dict[str, Any]:
        # The Messages API takes the system prompt as a top-level string and has
        # no response_format, so the caller's preference is dropped here.
        system = next(
            (message.content for message in request.messages if message.role == "system"),
            DEFAULT_SYSTEM_PROMPT,
        )
        return {
            "model": request.model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": request.message_dicts(role="user"),
            "system": system,
        }

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }
