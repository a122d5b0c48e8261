"""
Vapi Client Service.

Async REST client for the Vapi voice platform (start, end and inspect calls)
plus the helpers that pick the assistant for a guest's language and reduce a
call record to its user and assistant lines.
"""

from __future__ import annotations

from typing import Any, AsyncGenerator, Dict, List, Optional

import httpx

from hotel_voice_assistant.core.errors import (
    ExternalServiceError,
    ServiceUnavailableError,
    ValidationFailedError,
)
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.io.vapi import AssistantConfigRead, TranscriptMessage
from hotel_voice_assistant.server.core.config import VapiConfig, settings
from hotel_voice_assistant.server.core.constant import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

logger = get_logger(__name__)

_ROLE_MAP = {"user": "user", "bot": "assistant", "assistant": "assistant"}


def resolve_language(raw: Optional[str]) -> str:
    """Normalize a requested language code; unsupported values fall back to ``en``."""
    code = (raw or "").strip().lower()
    return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def get_assistant_config(language: Optional[str], config: Optional[VapiConfig] = None) -> AssistantConfigRead:
    """
    Public key and assistant id for the browser SDK.

    Per-language overrides win; missing values fall back to the defaults.

    Raises:
        ServiceUnavailableError: No public key or assistant id is configured.
    """
    cfg = config or settings.vapi
    lang = resolve_language(language)
    override = cfg.languages.get(lang)
    public_key = (override.public_key if override else None) or cfg.public_key
    assistant_id = (override.assistant_id if override else None) or cfg.assistant_id
    if not public_key or not assistant_id:
        raise ServiceUnavailableError("Voice assistant is not configured", details={"language": lang})
    return AssistantConfigRead(language=lang, public_key=public_key, assistant_id=assistant_id)


def resolve_assistant_id(language: Optional[str], config: Optional[VapiConfig] = None) -> Optional[str]:
    """Assistant id for a language, falling back to the default; None when neither is set."""
    cfg = config or settings.vapi
    override = cfg.languages.get(resolve_language(language))
    return (override.assistant_id if override else None) or cfg.assistant_id


def extract_transcript(call: Dict[str, Any]) -> List[TranscriptMessage]:
    """Pull ``user``/``assistant`` lines from a call's ``messages`` or ``artifact.messages``."""
    raw = call.get("messages")
    if not raw:
        artifact = call.get("artifact") or {}
        raw = artifact.get("messages") if isinstance(artifact, dict) else None
    messages: List[TranscriptMessage] = []
    for item in raw or []:
        if not isinstance(item, dict):
            continue
        role = _ROLE_MAP.get(str(item.get("role", "")).lower())
        content = item.get("message") or item.get("content")
        if role is None or not content:
            continue
        messages.append(TranscriptMessage(role=role, content=str(content)))
    return messages


class VapiClient:
    """
    Thin async HTTP client for the Vapi.ai REST API.

    Responsibilities:
    - start_call
    - end_call
    - get_call
    - get_call_transcript

    Upstream failures surface as ``ExternalServiceError`` with a message that
    is safe to show guests; the raw upstream body goes to ``details``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        default_assistant_id: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.default_assistant_id = default_assistant_id
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, config: Optional[VapiConfig] = None, *, client: Optional[httpx.AsyncClient] = None) -> "VapiClient":
        cfg = config or settings.vapi
        return cls(
            cfg.base_url,
            api_key=cfg.api_key,
            default_assistant_id=cfg.assistant_id,
            timeout=cfg.timeout,
            client=client,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise ServiceUnavailableError("Vapi API key is not configured")
        return {"Content-Type": "application/json", "Authorization": f"Bearer {self.api_key}"}

    async def _request(self, method: str, path: str, *, public_message: str, json: Any = None) -> Any:
        headers = self._headers()
        url = f"{self.base_url}{path}"
        try:
            logger.debug("VapiClient: %s %s", method, url)
            r = await self._client.request(method, url, headers=headers, json=json)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Vapi %s %s failed: %s %s", method, path, e.response.status_code, e.response.text[:500])
            raise ExternalServiceError(
                public_message,
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Vapi %s %s transport error: %s", method, path, e)
            raise ExternalServiceError(public_message, details=str(e)) from e
        if not r.content:
            return {}
        try:
            return r.json()
        except ValueError as e:
            raise ExternalServiceError(public_message, status_code=r.status_code, details=r.text) from e

    async def start_call(self, phone_number: str, assistant_id: Optional[str] = None) -> Dict[str, Any]:
        number = (phone_number or "").strip()
        if not number:
            raise ValidationFailedError("Phone number is required")
        assistant = assistant_id or self.default_assistant_id
        if not assistant:
            raise ServiceUnavailableError("Voice assistant is not configured")
        payload = {"assistantId": assistant, "customer": {"number": number}}
        data = await self._request(
            "POST", "/call", json=payload, public_message="Failed to initiate call. Please try again later."
        )
        logger.info("Vapi call started: %s", data.get("id") if isinstance(data, dict) else None)
        return data

    async def end_call(self, call_id: str) -> Dict[str, Any]:
        data = await self._request(
            "DELETE", f"/call/{call_id}", public_message="Failed to end call. Please try again later."
        )
        logger.info("Vapi call ended: %s", call_id)
        return data

    async def get_call(self, call_id: str) -> Dict[str, Any]:
        data = await self._request(
            "GET", f"/call/{call_id}", public_message="Failed to retrieve call details. Please try again later."
        )
        if not isinstance(data, dict):
            raise ExternalServiceError("Failed to retrieve call details. Please try again later.", details=data)
        return data

    async def get_call_transcript(self, call_id: str) -> List[TranscriptMessage]:
        call = await self.get_call(call_id)
        messages = extract_transcript(call)
        logger.debug("Vapi call %s transcript: %d messages", call_id, len(messages))
        return messages


async def get_vapi_client() -> AsyncGenerator[VapiClient, None]:
    """Dependency yielding a client built from settings; closed after the request."""
    client = VapiClient.from_settings()
    try:
        yield client
    finally:
        await client.aclose()
