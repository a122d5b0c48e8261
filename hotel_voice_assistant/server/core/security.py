"""
Staff Authentication Helpers.

This module hashes staff passwords, issues and verifies JWT access tokens,
and provides the FastAPI dependency that guards staff-only endpoints.

Tokens are accepted from three places, in order:
1. ``Authorization: Bearer <token>`` header
2. ``token`` cookie
3. ``token`` query parameter (mobile browsers that drop headers on redirects)
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Request

from hotel_voice_assistant.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)
from hotel_voice_assistant.core.logging_config import get_logger

from .config import settings
from .constant import TOKEN_COOKIE_NAME

logger = get_logger(__name__)

PASSWORD_SCHEME = "pbkdf2_sha256"
PASSWORD_ITERATIONS = 260_000


def hash_password(password: str, *, iterations: int = PASSWORD_ITERATIONS) -> str:
    """
    Hash a password with PBKDF2-SHA256 and a random salt.

    Returns:
        ``pbkdf2_sha256$<iterations>$<salt>$<hash>`` with base64 salt and hash.
    """
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return "$".join(
        [
            PASSWORD_SCHEME,
            str(iterations),
            base64.b64encode(salt).decode("ascii"),
            base64.b64encode(digest).decode("ascii"),
        ]
    )


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against an encoding produced by ``hash_password``; malformed encodings never match."""
    try:
        scheme, iterations, salt_b64, digest_b64 = encoded.split("$")
        if scheme != PASSWORD_SCHEME:
            return False
        salt = base64.b64decode(salt_b64)
        expected = base64.b64decode(digest_b64)
        rounds = int(iterations)
    except (ValueError, TypeError):
        return False
    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(candidate, expected)


def _require_secret() -> str:
    secret = settings.auth.jwt_secret
    if not secret:
        logger.error("JWT secret is not configured (AUTH__JWT_SECRET)")
        raise ConfigurationError("Internal server error")
    return secret


def create_access_token(subject: str | int, username: str, extra: Optional[Dict[str, Any]] = None) -> str:
    """
    Issue a signed access token.

    Args:
        subject: User id, stored as ``sub``
        username: Stored as ``username`` for display and logging
        extra: Additional claims

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    claims: Dict[str, Any] = {
        "sub": str(subject),
        "username": username,
        "iat": now,
        "exp": now + timedelta(minutes=settings.auth.access_token_expire_minutes),
    }
    if extra:
        claims.update(extra)
    return jwt.encode(claims, _require_secret(), algorithm=settings.auth.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify a token and return its claims.

    Raises:
        AuthorizationError: The token is expired or its signature is invalid.
        ConfigurationError: No JWT secret is configured.
    """
    secret = _require_secret()
    try:
        return jwt.decode(token, secret, algorithms=[settings.auth.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise AuthorizationError("Invalid or expired token", details=str(e)) from e
    except jwt.InvalidTokenError as e:
        raise AuthorizationError("Invalid or expired token", details=str(e)) from e


def extract_token(request: Request) -> Optional[str]:
    """Find the access token in the header, cookie or query string, in that order."""
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1].strip()
        if token:
            return token

    cookie_token = request.cookies.get(TOKEN_COOKIE_NAME)
    if cookie_token:
        return cookie_token

    return request.query_params.get("token") or None


async def get_current_staff(request: Request) -> Dict[str, Any]:
    """
    FastAPI dependency guarding staff-only endpoints.

    Returns:
        The verified token claims.

    Raises:
        AuthenticationError: No token was supplied (401).
        AuthorizationError: The token is invalid or expired (403).
    """
    token = extract_token(request)
    if not token:
        logger.debug(f"No staff token on {request.method} {request.url.path}")
        raise AuthenticationError(
            "Missing or invalid authorization token",
            details="Please provide a valid token via Authorization header, cookie or query parameter",
        )
    claims = decode_access_token(token)
    request.state.staff = claims
    return claims
