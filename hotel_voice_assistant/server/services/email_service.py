"""
Call Summary E-mail Service.

Renders a call summary as HTML and sends it to hotel staff through Resend.
The Resend SDK is synchronous, so the send runs in a worker thread.
"""

from __future__ import annotations

import asyncio
from html import escape
from typing import Any, Optional

import resend

from hotel_voice_assistant.core.errors import (
    ExternalServiceError,
    ServiceUnavailableError,
    ValidationFailedError,
)
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.io.notifications import CallDetailsPayload, EmailSendResult
from hotel_voice_assistant.server.core.config import EmailConfig, settings

logger = get_logger(__name__)


def build_subject(details: CallDetailsPayload) -> str:
    subject = f"Call Summary - Room {details.room_number}"
    if details.order_reference:
        subject = f"{subject} ({details.order_reference})"
    return subject


def render_call_summary_html(details: CallDetailsPayload) -> str:
    """Render the call summary e-mail body; every guest-supplied value is HTML-escaped."""
    if details.service_requests:
        items = "".join(f"<li>{escape(item)}</li>" for item in details.service_requests)
        requests_html = f"<ul>{items}</ul>"
    else:
        requests_html = "<p>No service requests</p>"

    reference_html = ""
    if details.order_reference:
        reference_html = f"<p><strong>Order reference:</strong> {escape(details.order_reference)}</p>"

    summary = escape(details.summary).replace("\n", "<br>") if details.summary else "No summary available"

    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #2c3e50;">Call Summary</h2>
        <div style="background: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <p><strong>Room:</strong> {escape(details.room_number)}</p>
            <p><strong>Time:</strong> {details.timestamp.strftime('%Y-%m-%d %H:%M:%S')}</p>
            <p><strong>Duration:</strong> {escape(details.duration or 'Unknown')}</p>
            {reference_html}
        </div>
        <h3>Summary</h3>
        <p>{summary}</p>
        <h3>Service requests</h3>
        {requests_html}
    </div>
    """


class EmailService:
    def __init__(self, config: Optional[EmailConfig] = None) -> None:
        self.config = config or settings.email

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def _send_sync(self, params: dict) -> Any:
        resend.api_key = self.config.resend_api_key
        return resend.Emails.send(params)

    async def send_call_summary(self, details: CallDetailsPayload, to_email: Optional[str] = None) -> EmailSendResult:
        """
        Send a call summary e-mail.

        Raises:
            ServiceUnavailableError: Resend is not configured.
            ValidationFailedError: No recipient given and no default configured.
            ExternalServiceError: Resend rejected the message.
        """
        if not self.is_configured:
            raise ServiceUnavailableError("Email service not configured")
        recipient = to_email or self.config.default_recipient
        if not recipient:
            raise ValidationFailedError("Recipient e-mail address is required")

        params = {
            "from": self.config.sender,
            "to": [recipient],
            "subject": build_subject(details),
            "html": render_call_summary_html(details),
        }
        logger.info(f"Sending call summary for room {details.room_number} to {recipient}")
        try:
            result = await asyncio.to_thread(self._send_sync, params)
        except Exception as e:
            logger.error(f"Could not send call summary email: {e}")
            raise ExternalServiceError("Failed to send email", details=str(e)) from e

        message_id = result.get("id") if isinstance(result, dict) else getattr(result, "id", None)
        logger.info(f"Call summary email sent: {message_id}")
        return EmailSendResult(success=True, message_id=message_id)


def get_email_service() -> EmailService:
    return EmailService()
