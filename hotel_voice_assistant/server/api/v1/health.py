"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version, database
check) used for monitoring and deployment verification.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from hotel_voice_assistant import __version__
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.server.core import constant
from hotel_voice_assistant.server.core.config import settings
from hotel_voice_assistant.server.services.deps import SessionDep, StaffDep
from hotel_voice_assistant.server.services.realtime import now_iso

logger = get_logger(__name__)
router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a status indicator, the deployment environment, the server time and
    whether a database URL is configured.
    """
    return {
        "status": "ok",
        "environment": settings.environment,
        "time": now_iso(),
        "hasDB": "url" in settings.database.model_fields_set,
    }


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    return {"version": __version__, "schema_version": constant.SCHEMA_VERSION}


@router.get(
    "/db-test",
    summary="Database Check",
    description="Run a trivial query against the database. Staff only.",
    responses={500: {"description": "Database unreachable"}},
)
async def db_test(session: SessionDep, _staff: StaffDep):
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database check failed: {e}")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})
    return {"success": True}
