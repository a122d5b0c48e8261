from __future__ import annotations

import json as _json

import httpx
import pytest

from hotel_voice_assistant.core.errors import (
    ExternalServiceError,
    ServiceUnavailableError,
    ValidationFailedError,
)
from hotel_voice_assistant.server.core.config import VapiAssistantConfig, VapiConfig
from hotel_voice_assistant.server.services.vapi_client import (
    VapiClient,
    extract_transcript,
    get_assistant_config,
    resolve_assistant_id,
    resolve_language,
)

BASE_URL = "http://mock-vapi"

CALL = {
    "id": "call-1",
    "status": "ended",
    "artifact": {
        "messages": [
            {"role": "system", "message": "You are a hotel assistant"},
            {"role": "bot", "message": "Hello, how can I help?"},
            {"role": "user", "message": "Room 201, a burger please"},
            {"role": "tool_calls", "message": "..."},
        ]
    },
}


def _mock_transport(seen: list) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "POST" and request.url.path == "/call":
            body = _json.loads(request.content.decode("utf-8"))
            return httpx.Response(201, json={"id": "call-1", "assistantId": body["assistantId"]})
        if request.method == "GET" and request.url.path == "/call/call-1":
            return httpx.Response(200, json=CALL)
        if request.method == "DELETE" and request.url.path == "/call/call-1":
            return httpx.Response(200, json={"id": "call-1", "status": "ended"})
        if request.method == "DELETE" and request.url.path == "/call/empty":
            return httpx.Response(204)
        if request.url.path == "/call/list":
            return httpx.Response(200, json=[])
        return httpx.Response(404, json={"message": "Call not found"})

    return httpx.MockTransport(handler)


@pytest.fixture
def seen() -> list:
    return []


@pytest.fixture
def vapi(seen) -> VapiClient:
    client = httpx.AsyncClient(transport=_mock_transport(seen), base_url=BASE_URL)
    return VapiClient(BASE_URL, api_key="sk-test", default_assistant_id="asst-en", client=client)


@pytest.fixture
def vapi_config() -> VapiConfig:
    return VapiConfig(
        public_key="pk-default",
        assistant_id="asst-en",
        languages={"fr": VapiAssistantConfig(assistant_id="asst-fr"), "ko": VapiAssistantConfig(public_key="pk-ko")},
    )


@pytest.mark.parametrize("raw,expected", [("FR", "fr"), (" ko ", "ko"), ("de", "en"), (None, "en"), ("", "en")])
def test_resolve_language(raw, expected):
    assert resolve_language(raw) == expected


class TestAssistantConfig:
    def test_language_override(self, vapi_config):
        config = get_assistant_config("fr", vapi_config)

        assert config.language == "fr"
        assert config.assistant_id == "asst-fr"
        assert config.public_key == "pk-default"

    def test_partial_override_falls_back(self, vapi_config):
        config = get_assistant_config("ko", vapi_config)

        assert config.public_key == "pk-ko"
        assert config.assistant_id == "asst-en"

    def test_unconfigured(self):
        with pytest.raises(ServiceUnavailableError):
            get_assistant_config("en", VapiConfig())

    def test_resolve_assistant_id(self, vapi_config):
        assert resolve_assistant_id("fr", vapi_config) == "asst-fr"
        assert resolve_assistant_id("zh", vapi_config) == "asst-en"
        assert resolve_assistant_id("fr", VapiConfig()) is None


def test_extract_transcript_keeps_user_and_assistant():
    messages = extract_transcript(CALL)

    assert [(m.role, m.content) for m in messages] == [
        ("assistant", "Hello, how can I help?"),
        ("user", "Room 201, a burger please"),
    ]


def test_extract_transcript_prefers_top_level_messages():
    call = {"messages": [{"role": "assistant", "content": "Hi"}], "artifact": {"messages": [{"role": "user", "message": "x"}]}}

    assert [m.content for m in extract_transcript(call)] == ["Hi"]


class TestVapiClient:
    async def test_start_call(self, vapi, seen):
        data = await vapi.start_call(" +84901234567 ")

        assert data["id"] == "call-1"
        request = seen[0]
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert _json.loads(request.content) == {"assistantId": "asst-en", "customer": {"number": "+84901234567"}}

    async def test_start_call_with_explicit_assistant(self, vapi):
        data = await vapi.start_call("+1555", assistant_id="asst-fr")

        assert data["assistantId"] == "asst-fr"

    async def test_start_call_requires_number(self, vapi, seen):
        with pytest.raises(ValidationFailedError):
            await vapi.start_call("  ")
        assert seen == []

    async def test_start_call_without_assistant(self, seen):
        client = httpx.AsyncClient(transport=_mock_transport(seen), base_url=BASE_URL)
        vapi = VapiClient(BASE_URL, api_key="sk-test", client=client)

        with pytest.raises(ServiceUnavailableError):
            await vapi.start_call("+1555")

    async def test_missing_api_key(self, seen):
        client = httpx.AsyncClient(transport=_mock_transport(seen), base_url=BASE_URL)
        vapi = VapiClient(BASE_URL, default_assistant_id="asst-en", client=client)

        with pytest.raises(ServiceUnavailableError):
            await vapi.get_call("call-1")
        assert seen == []

    async def test_end_call(self, vapi):
        assert (await vapi.end_call("call-1"))["status"] == "ended"

    async def test_empty_body_is_empty_dict(self, vapi):
        assert await vapi.end_call("empty") == {}

    async def test_upstream_error(self, vapi):
        with pytest.raises(ExternalServiceError) as exc_info:
            await vapi.get_call("missing")

        err = exc_info.value
        assert err.status_code == 502
        assert err.upstream_status == 404
        assert "Call not found" in err.details
        assert err.message == "Failed to retrieve call details. Please try again later."

    async def test_non_object_call_rejected(self, vapi):
        with pytest.raises(ExternalServiceError):
            await vapi.get_call("list")

    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        vapi = VapiClient(BASE_URL, api_key="sk-test", default_assistant_id="asst-en", client=client)

        with pytest.raises(ExternalServiceError) as exc_info:
            await vapi.start_call("+1555")
        assert exc_info.value.upstream_status is None

    async def test_get_call_transcript(self, vapi):
        messages = await vapi.get_call_transcript("call-1")

        assert [m.role for m in messages] == ["assistant", "user"]

    async def test_from_settings(self):
        config = VapiConfig(api_key="sk-x", base_url="http://mock-vapi/", assistant_id="asst-1", timeout=5)

        vapi = VapiClient.from_settings(config)
        try:
            assert vapi.base_url == "http://mock-vapi"
            assert vapi.api_key == "sk-x"
            assert vapi.default_assistant_id == "asst-1"
        finally:
            await vapi.aclose()
