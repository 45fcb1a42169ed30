"""Provider selection and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, cast

import httpx

from chat_relay.core.config import AppConfig, load_config
from chat_relay.core.exceptions import (
    NoProviderMatchedError,
    ProviderConfigurationError,
    UpstreamHttpError,
    UpstreamMalformedBodyError,
    UpstreamUnreachableError,
)
from chat_relay.providers.anthropic import AnthropicProvider
from chat_relay.providers.base import ChatRequest, ProviderAdapter
from chat_relay.providers.deepseek import DeepseekProvider
from chat_relay.providers.openai import OpenAIProvider
from chat_relay.providers.utils import (
    body_snippet,
    extract_error_object,
    parse_json_body,
    status_line,
)

logger = logging.getLogger("relay.dispatcher")

INVALID_JSON_MESSAGE = "Invalid JSON response from LLM provider"


class ProviderRegistry:
    """Ordered prefix-matching adapters plus a separate catch-all slot.

    The default adapter is never part of the ordered list, so it cannot
    shadow a more specific adapter regardless of configuration order.
    """

    _adapter_map: dict[str, type[ProviderAdapter]] = {
        "anthropic": AnthropicProvider,
        "deepseek": DeepseekProvider,
        "openai": OpenAIProvider,
    }

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()
        self._adapters: list[ProviderAdapter] = []
        self._default: ProviderAdapter | None = None

        for provider in self._config.providers:
            adapter_cls = self._adapter_map.get(provider.id)
            if not adapter_cls:
                raise ProviderConfigurationError(f"No adapter for provider '{provider.id}'")
            adapter = adapter_cls(provider)
            if provider.id == self._config.default_provider:
                if not adapter.catch_all:
                    raise ProviderConfigurationError(
                        f"Default provider '{provider.id}' does not accept arbitrary models"
                    )
                self._default = adapter
            elif adapter.catch_all:
                raise ProviderConfigurationError(
                    f"Catch-all provider '{provider.id}' must be the default provider"
                )
            else:
                self._adapters.append(adapter)

        if self._default is None:
            raise NoProviderMatchedError(self._config.default_provider)

    @property
    def default(self) -> ProviderAdapter:
        return cast(ProviderAdapter, self._default)

    def adapters(self) -> Iterable[ProviderAdapter]:
        """Yield adapters in evaluation order, the default last."""
        yield from self._adapters
        yield self.default

    def select(self, model: str) -> ProviderAdapter:
        for adapter in self._adapters:
            if adapter.can_handle(model):
                return adapter
        return self.default

    def catalog(self) -> list[dict[str, Any]]:
        providers = {provider.id: provider for provider in self._config.providers}
        return [
            {
                "id": adapter.provider_id,
                "name": providers[adapter.provider_id].name,
                "default": adapter is self.default,
                "model_prefixes": list(adapter.model_prefixes),
                "models": list(providers[adapter.provider_id].models),
            }
            for adapter in self.adapters()
        ]


registry = ProviderRegistry()


def _read_upstream(adapter: ProviderAdapter, response: httpx.Response) -> bytes:
    if response.is_success:
        try:
            parse_json_body(response)
        except ValueError as exc:
            logger.warning(
                "Upstream returned malformed success body",
                extra={
                    "event": "upstream_malformed_body",
                    "provider": adapter.provider_id,
                    "status_code": response.status_code,
                    "snippet": body_snippet(response),
                },
            )
            raise UpstreamMalformedBodyError(
                adapter.provider_id, 502, INVALID_JSON_MESSAGE
            ) from exc
        return response.content

    try:
        data = parse_json_body(response)
    except ValueError:
        snippet = body_snippet(response)
        logger.warning(
            "Upstream returned malformed error body",
            extra={
                "event": "upstream_malformed_body",
                "provider": adapter.provider_id,
                "status_code": response.status_code,
                "snippet": snippet,
            },
        )
        raise UpstreamMalformedBodyError(
            adapter.provider_id,
            response.status_code,
            status_line(response),
            details=snippet or None,
        ) from None

    error = extract_error_object(response, data)
    logger.warning(
        "Upstream returned error",
        extra={
            "event": "upstream_error",
            "provider": adapter.provider_id,
            "status_code": response.status_code,
            "error_message": error.get("message"),
        },
    )
    raise UpstreamHttpError(adapter.provider_id, response.status_code, error)


async def dispatch_chat(request: ChatRequest) -> bytes:
    """Send the request to the adapter owning its model and return the upstream body."""

    adapter = registry.select(request.model)
    logger.info(
        "Dispatching chat request",
        extra={
            "event": "chat_dispatch",
            "provider": adapter.provider_id,
            "model": request.model,
        },
    )

    try:
        response = await adapter.dispatch(request)
    except UpstreamUnreachableError:
        logger.exception(
            "Upstream unreachable",
            extra={
                "event": "upstream_unreachable",
                "provider": adapter.provider_id,
                "model": request.model,
            },
        )
        raise

    return _read_upstream(adapter, response)


__all__ = ["INVALID_JSON_MESSAGE", "ProviderRegistry", "dispatch_chat", "registry"]
