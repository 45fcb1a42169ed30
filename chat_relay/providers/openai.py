"""OpenAI provider adapter."""

from __future__ import annotations

from typing import Any

from .base import ChatRequest, ProviderAdapter


class OpenAIProvider(ProviderAdapter):
    provider_id = "openai"
    catch_all = True

    def can_handle(self, model: str) -> bool:
        return True

    def build_payload(self, request: ChatRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": request.model,
            "messages": request.message_dicts(),
            "temperature": request.temperature,
            "max_completion_tokens": request.max_tokens,
        }
        if request.response_format is not None:
            payload["response_format"] = {"type": request.response_format}
        return payload

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
