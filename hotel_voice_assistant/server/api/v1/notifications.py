"""
Notification Endpoints.

Sends the end-of-call summary e-mail to hotel staff.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from hotel_voice_assistant.core.errors import ExternalServiceError, ServiceUnavailableError
from hotel_voice_assistant.core.models.io.notifications import CallSummaryEmailRequest, EmailSendResult
from hotel_voice_assistant.server.services.deps import EmailServiceDep

router = APIRouter()


@router.post(
    "/send-call-summary-email",
    response_model=EmailSendResult,
    summary="Send Call Summary E-mail",
    description="Render a call summary and e-mail it through Resend.",
    responses={
        502: {"model": EmailSendResult, "description": "The e-mail provider rejected the message"},
        503: {"model": EmailSendResult, "description": "E-mail is not configured"},
    },
)
async def send_call_summary_email(email_in: CallSummaryEmailRequest, mailer: EmailServiceDep):
    try:
        return await mailer.send_call_summary(email_in.call_details, email_in.to_email)
    except ServiceUnavailableError as e:
        return JSONResponse(status_code=503, content=EmailSendResult(success=False, error=e.message).model_dump())
    except ExternalServiceError as e:
        return JSONResponse(status_code=502, content=EmailSendResult(success=False, error=e.message).model_dump())
