import pytest
from pydantic import ValidationError

from chat_relay.core.exceptions import ChatRequestValidationError
from chat_relay.core.normalizer import normalize_request
from chat_relay.providers.base import ChatMessage

REQUIRED_FIELDS = ("apiKey", "model", "messages", "temperature", "maxTokens")


def _payload(**overrides):
    payload = {
        "apiKey": "k",
        "model": "gpt-4.1",
        "messages": [
            {"role": "system", "content": "Be terse."},
            {"role": "user", "content": "Hi"},
        ],
        "temperature": 0.5,
        "maxTokens": 100,
    }
    payload.update(overrides)
    return payload


def test_normalize_request_passes_values_through():
    request = normalize_request(_payload())

    assert request.api_key == "k"
    assert request.model == "gpt-4.1"
    assert request.messages == (
        ChatMessage(role="system", content="Be terse."),
        ChatMessage(role="user", content="Hi"),
    )
    assert request.temperature == 0.5
    assert request.max_tokens == 100
    assert request.response_format is None


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_normalize_request_rejects_missing_field(field):
    payload = _payload()
    del payload[field]

    with pytest.raises(ChatRequestValidationError) as excinfo:
        normalize_request(payload)

    assert excinfo.value.message == "Missing required fields"
    assert excinfo.value.fields


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("apiKey", 123),
        ("apiKey", ""),
        ("model", None),
        ("messages", "hello"),
        ("messages", [{"role": "assistant", "content": "hi"}]),
        ("messages", [{"role": "user", "content": 5}]),
        ("temperature", "0.5"),
        ("temperature", True),
        ("maxTokens", "100"),
        ("maxTokens", 1.5),
        ("maxTokens", 0),
        ("responseFormat", "yaml"),
    ],
)
def test_normalize_request_rejects_wrong_types(field, value):
    with pytest.raises(ChatRequestValidationError):
        normalize_request(_payload(**{field: value}))


@pytest.mark.parametrize("raw", [None, [], "text", 42])
def test_normalize_request_rejects_non_object_bodies(raw):
    with pytest.raises(ChatRequestValidationError):
        normalize_request(raw)


def test_normalize_request_accepts_integer_temperature():
    request = normalize_request(_payload(temperature=1))

    assert request.temperature == 1


def test_normalize_request_accepts_form_field_names():
    payload = _payload(response_format={"type": "json_object"}, max_completion_tokens=2048)
    del payload["maxTokens"]

    request = normalize_request(payload)

    assert request.max_tokens == 2048
    assert request.response_format == "json_object"


def test_normalize_request_accepts_bare_response_format():
    request = normalize_request(_payload(responseFormat="text"))

    assert request.response_format == "text"


def test_chat_request_is_immutable():
    request = normalize_request(_payload())

    with pytest.raises(ValidationError):
        request.model = "other"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        request.messages[0].content = "changed"  # type: ignore[misc]


def test_rejection_logs_fields_but_not_values(caplog):
    caplog.set_level("INFO", logger="relay.normalizer")

    with pytest.raises(ChatRequestValidationError):
        normalize_request(_payload(apiKey="sk-secret-value", maxTokens="lots"))

    record = next(r for r in caplog.records if getattr(r, "event", None) == "request_invalid")
    assert record.fields == ["maxTokens"]
    assert "sk-secret-value" not in caplog.text
