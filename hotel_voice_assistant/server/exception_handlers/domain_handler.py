"""
Domain Error Handler.

Turns ``HotelAssistantError`` subclasses into JSON responses with the status
code each error class declares.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from hotel_voice_assistant.core.errors import ExternalServiceError, HotelAssistantError
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.monitoring import log_error

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: HotelAssistantError) -> JSONResponse:
    """
    Render a domain error as ``{message, detail, error_type}``.

    Upstream details of ``ExternalServiceError`` are logged but never returned.
    """
    detail = exc.details
    if isinstance(exc, ExternalServiceError):
        logger.warning(
            f"External service failure in {request.method} {request.url.path}: {exc.message} "
            f"(upstream status {exc.upstream_status})"
        )
        log_error(type(exc).__name__, exc.message, {"path": request.url.path, "upstream_status": exc.upstream_status})
        detail = None
    elif exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.debug(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "detail": detail,
            "error_type": type(exc).__name__,
        },
    )
