"""Custom exception types."""

from __future__ import annotations

from typing import Any, Sequence


class RelayError(Exception):
    """Base class for errors raised while relaying a chat request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ChatRequestValidationError(RelayError):
    """Raised when the caller's payload is missing or mistypes a required field."""

    def __init__(self, fields: Sequence[str] = ()) -> None:
        super().__init__("Missing required fields")
        self.fields = list(fields)


class UpstreamError(RelayError):
    """Raised when the upstream vendor call does not produce a usable reply."""

    def __init__(self, provider_id: str, message: str, status_code: int) -> None:
        super().__init__(message)
        self.provider_id = provider_id
        self.status_code = status_code


class UpstreamHttpError(UpstreamError):
    """Raised when the upstream answers with a non-success status."""

    def __init__(self, provider_id: str, status_code: int, error: dict[str, Any]) -> None:
        super().__init__(provider_id, str(error.get("message", "")), status_code)
        self.error = error


class UpstreamMalformedBodyError(UpstreamError):
    """Raised when the upstream body cannot be parsed as JSON."""

    def __init__(
        self,
        provider_id: str,
        status_code: int,
        message: str,
        details: str | None = None,
    ) -> None:
        super().__init__(provider_id, message, status_code)
        self.details = details

    def to_error(self) -> dict[str, Any]:
        error: dict[str, Any] = {"message": self.message}
        if self.details:
            error["details"] = self.details
        return error


class UpstreamUnreachableError(UpstreamError):
    """Raised when the upstream call fails before a response is received."""

    def __init__(self, provider_id: str, message: str = "Provider request failed") -> None:
        super().__init__(provider_id, message, 500)


class ProviderConfigurationError(RelayError):
    """Raised when the adapter registry cannot be built from configuration."""


class NoProviderMatchedError(ProviderConfigurationError):
    """Raised when no catch-all adapter is registered to receive unmatched models."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"Default provider '{provider_id}' is not configured")
        self.provider_id = provider_id
