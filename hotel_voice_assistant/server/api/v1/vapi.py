"""
Vapi Integration Endpoints.

This module exposes:
- the browser SDK configuration (public key and assistant id per language)
- staff-only proxies for the Vapi call REST API
- the server-URL webhook Vapi posts call events to

Webhook events handled:
- ``transcript`` with ``transcriptType == "final"``: stored as a transcript line
- ``end-of-call-report``: stored as a call summary and pushed to staff dashboards
Everything else is acknowledged and ignored.
"""

import hmac
from typing import Any, Dict, Optional

from fastapi import APIRouter, Header, Request

from hotel_voice_assistant.core.errors import AuthenticationError, ValidationFailedError
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.domain import TranscriptRole
from hotel_voice_assistant.core.models.io.vapi import (
    AssistantConfigRead,
    CallTranscriptRead,
    StartCallRequest,
    WebhookAck,
)
from hotel_voice_assistant.server.core.config import settings
from hotel_voice_assistant.server.services.call_records import format_duration
from hotel_voice_assistant.server.services.deps import CallRecordServiceDep, StaffDep, VapiClientDep
from hotel_voice_assistant.server.services.vapi_client import get_assistant_config, resolve_assistant_id

logger = get_logger(__name__)
router = APIRouter()

_WEBHOOK_ROLES = {"user": TranscriptRole.user, "assistant": TranscriptRole.assistant, "bot": TranscriptRole.assistant}


@router.get(
    "/vapi/config",
    response_model=AssistantConfigRead,
    summary="Assistant Configuration",
    description="Public key and assistant id the browser SDK should use for a language.",
    responses={503: {"description": "Voice assistant is not configured"}},
)
async def assistant_config(language: Optional[str] = None):
    return get_assistant_config(language)


@router.post(
    "/vapi/calls",
    summary="Start Outbound Call",
    description="Ask Vapi to call a phone number with the configured assistant. Staff only.",
    responses={502: {"description": "Vapi request failed"}},
)
async def start_call(call_in: StartCallRequest, client: VapiClientDep, _staff: StaffDep) -> Dict[str, Any]:
    return await client.start_call(call_in.phone_number, resolve_assistant_id(call_in.language))


@router.delete(
    "/vapi/calls/{call_id}",
    summary="End Call",
    responses={502: {"description": "Vapi request failed"}},
)
async def end_call(call_id: str, client: VapiClientDep, _staff: StaffDep) -> Dict[str, Any]:
    return await client.end_call(call_id)


@router.get(
    "/vapi/calls/{call_id}",
    summary="Get Call",
    responses={502: {"description": "Vapi request failed"}},
)
async def get_call(call_id: str, client: VapiClientDep, _staff: StaffDep) -> Dict[str, Any]:
    return await client.get_call(call_id)


@router.get(
    "/vapi/calls/{call_id}/transcript",
    response_model=CallTranscriptRead,
    summary="Get Call Transcript",
    description="Guest and assistant lines of a call as recorded by Vapi.",
    responses={502: {"description": "Vapi request failed"}},
)
async def get_call_transcript(call_id: str, client: VapiClientDep, _staff: StaffDep) -> CallTranscriptRead:
    return CallTranscriptRead(messages=await client.get_call_transcript(call_id))


def _check_webhook_secret(received: Optional[str]) -> None:
    expected = settings.vapi.webhook_secret
    if not expected:
        return
    if not received or not hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Rejected Vapi webhook with a missing or wrong secret")
        raise AuthenticationError("Invalid webhook secret")


def _call_id(message: Dict[str, Any], body: Dict[str, Any]) -> str:
    for source in (message, body):
        call = source.get("call")
        if isinstance(call, dict) and call.get("id"):
            return str(call["id"])
    return str(message.get("callId") or body.get("callId") or "unknown")


@router.post(
    "/vapi/webhook",
    response_model=WebhookAck,
    summary="Vapi Webhook",
    description="Receiver for Vapi server-URL events.",
    responses={401: {"description": "Invalid webhook secret"}},
)
async def vapi_webhook(
    request: Request,
    records: CallRecordServiceDep,
    x_vapi_secret: Optional[str] = Header(default=None),
) -> WebhookAck:
    _check_webhook_secret(x_vapi_secret)
    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationFailedError("Webhook body must be JSON") from e
    if not isinstance(body, dict):
        raise ValidationFailedError("Webhook body must be a JSON object")

    message = body.get("message") if isinstance(body.get("message"), dict) else body
    event_type = message.get("type")
    call_id = _call_id(message, body)
    stored: Dict[str, Any] = {}

    if event_type == "transcript" and message.get("transcriptType") == "final":
        role = _WEBHOOK_ROLES.get(str(message.get("role", "")).lower())
        content = message.get("transcript")
        if role is not None and content:
            transcript = await records.add_transcript(call_id, role, content)
            stored["transcript_id"] = transcript.id
    elif event_type == "end-of-call-report":
        analysis = message.get("analysis") if isinstance(message.get("analysis"), dict) else {}
        summary_text = message.get("summary") or analysis.get("summary")
        if summary_text:
            summary = await records.store_summary(
                call_id,
                summary_text,
                duration=format_duration(message.get("durationSeconds")),
            )
            stored["summary_id"] = summary.id
        else:
            logger.info(f"End-of-call report for {call_id} carried no summary")
    else:
        logger.debug(f"Ignoring Vapi webhook event '{event_type}' for call {call_id}")

    return WebhookAck(type=event_type, stored=stored)
