"""Domain error types.

Purpose:
- Give services and repositories typed failures that do not depend on FastAPI.
- Carry enough context (status code, details) for the exception handlers in
  ``hotel_voice_assistant.server.exception_handlers`` to build a response.

Usage:
- Raise ``NotFoundError`` when a looked-up record does not exist.
- Raise ``InvalidStatusError`` when a status value is outside its vocabulary.
- Catch ``ExternalServiceError`` around Vapi or e-mail calls and inspect
  ``status_code`` / ``details``.
"""

from __future__ import annotations

from typing import Any, Optional


class HotelAssistantError(Exception):
    """Base error for the hotel voice assistant.

    Args:
        message: Human-readable error description.
        details: Optional structured context, safe to return to clients.
    """

    status_code: int = 500

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(HotelAssistantError):
    """Raised when an entity cannot be found by its identifier."""

    status_code = 404

    def __init__(self, entity: str, identifier: Any) -> None:
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class ValidationFailedError(HotelAssistantError):
    """Raised when input passes schema validation but violates a domain rule."""

    status_code = 400


class InvalidStatusError(ValidationFailedError):
    """Raised when a status is not part of the allowed vocabulary."""

    def __init__(self, status: str, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid status '{status}'",
            details={"allowed": allowed},
        )
        self.status = status
        self.allowed = allowed


class AuthenticationError(HotelAssistantError):
    """Raised when a request carries no credentials or wrong credentials."""

    status_code = 401


class AuthorizationError(HotelAssistantError):
    """Raised when a token is present but invalid or expired."""

    status_code = 403


class ConfigurationError(HotelAssistantError):
    """Raised when a required setting (e.g. JWT secret) is missing."""

    status_code = 500


class ServiceUnavailableError(HotelAssistantError):
    """Raised when an optional integration is not configured."""

    status_code = 503


class ExternalServiceError(HotelAssistantError):
    """Raised when Vapi or the e-mail provider fails.

    Args:
        message: Sanitized message suitable for clients.
        status_code: Upstream HTTP status code, if any.
        details: Upstream body or exception text, for logs.
    """

    status_code = 502

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message, details=details)
        self.upstream_status = status_code
