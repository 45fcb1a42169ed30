"""Deepseek provider adapter."""

from __future__ import annotations

from typing import Any

from .base import ChatRequest, ProviderAdapter


class DeepseekProvider(ProviderAdapter):
    provider_id = "deepseek"
    model_prefixes = ("deepseek-",)

    def build_payload(self, request: ChatRequest) -> dict[str, Any]:
        # Same shape as OpenAI, but Deepseek still names the limit max_tokens.
        payload: dict[str, Any] = {
            "model": request.model,
            "messages": request.message_dicts(),
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.response_format is not None:
            payload["response_format"] = {"type": request.response_format}
        return payload

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
