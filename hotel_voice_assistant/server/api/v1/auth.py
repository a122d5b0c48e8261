"""
Staff Authentication Endpoints.

Login for the staff dashboard. The issued token is returned in the body and
also set as an httponly cookie so browser sessions survive page reloads.
"""

from fastapi import APIRouter, Response

from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.io.auth import LoginRequest, LoginResponse, StaffUserRead
from hotel_voice_assistant.server.core.config import settings
from hotel_voice_assistant.server.core.constant import TOKEN_COOKIE_NAME
from hotel_voice_assistant.server.core.security import create_access_token
from hotel_voice_assistant.server.services.deps import RepositoriesDep
from hotel_voice_assistant.server.services.staff_accounts import authenticate

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "/staff/login",
    response_model=LoginResponse,
    summary="Staff Login",
    description="Exchange staff credentials for an access token.",
    responses={401: {"description": "Invalid username or password"}},
)
async def login(credentials: LoginRequest, response: Response, repos: RepositoriesDep) -> LoginResponse:
    user = await authenticate(repos.users, credentials.username, credentials.password)
    token = create_access_token(user.id, user.username)
    response.set_cookie(
        key=TOKEN_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.auth.cookie_secure,
        max_age=settings.auth.access_token_expire_minutes * 60,
    )
    logger.info(f"Staff '{user.username}' logged in")
    return LoginResponse(token=token, user=StaffUserRead.model_validate(user))
