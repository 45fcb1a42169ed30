"""Provider adapter interfaces."""

from __future__ import annotations

from typing import Any, Literal, Optional

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from chat_relay.core.config import ProviderModel
from chat_relay.core.exceptions import UpstreamUnreachableError

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user"]
    content: StrictStr


class ChatRequest(BaseModel):
    """Generic chat request as submitted by the playground form."""

    model_config = ConfigDict(frozen=True)

    api_key: StrictStr = Field(min_length=1, validation_alias=AliasChoices("apiKey", "api_key"))
    model: StrictStr = Field(min_length=1)
    messages: tuple[ChatMessage, ...]
    temperature: float
    max_tokens: StrictInt = Field(
        gt=0,
        validation_alias=AliasChoices("maxTokens", "max_completion_tokens", "max_tokens"),
    )
    response_format: Optional[Literal["text", "json_object"]] = Field(
        default=None,
        validation_alias=AliasChoices("responseFormat", "response_format"),
    )

    @field_validator("temperature", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("temperature must be a number")
        return value

    @field_validator("response_format", mode="before")
    @classmethod
    def _unwrap_format_object(cls, value: Any) -> Any:
        # The form posts OpenAI's {"type": ...} object; bare strings are accepted too.
        if isinstance(value, dict):
            return value.get("type")
        return value

    def message_dicts(self, role: str | None = None) -> list[dict[str, str]]:
        return [
            message.model_dump()
            for message in self.messages
            if role is None or message.role == role
        ]


class ProviderAdapter:
    """Abstract provider adapter.

    Adapters are stateless apart from their endpoint configuration. A
    subclass declares the model prefixes it claims and shapes the vendor
    payload and headers; ``dispatch`` performs exactly one POST and hands
    back the raw ``httpx.Response`` for the dispatcher to interpret.
    """

    provider_id: str
    model_prefixes: tuple[str, ...] = ()
    catch_all: bool = False

    def __init__(self, config: ProviderModel) -> None:
        self._config = config
        self._url = f"{config.base_url.rstrip('/')}{config.endpoint_path}"

    @property
    def url(self) -> str:
        return self._url

    def can_handle(self, model: str) -> bool:
        return bool(self.model_prefixes) and model.startswith(self.model_prefixes)

    def build_payload(self, request: ChatRequest) -> dict[str, Any]:
        raise NotImplementedError

    def build_headers(self, api_key: str) -> dict[str, str]:
        raise NotImplementedError

    async def dispatch(self, request: ChatRequest) -> httpx.Response:
        payload = self.build_payload(request)
        headers = self.build_headers(request.api_key)

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                return await client.post(self._url, json=payload, headers=headers)
        except httpx.RequestError as exc:
            raise UpstreamUnreachableError(self.provider_id) from exc
