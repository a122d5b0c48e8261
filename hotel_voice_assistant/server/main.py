"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_voice_assistant import __version__
from hotel_voice_assistant.core.database import async_session_maker, init_db
from hotel_voice_assistant.core.logging_config import get_logger, setup_logging
from hotel_voice_assistant.core.monitoring import initialize_logfire

from .api.v1 import (
    auth,
    health,
    notifications,
    orders,
    realtime,
    references,
    staff_requests,
    summaries,
    transcripts,
    vapi,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware
from .services.staff_accounts import ensure_default_staff

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables and seeds the staff account on startup. A database
    failure is logged and the server starts anyway so health checks stay up.
    """
    try:
        logger.info("Starting up Hotel Voice Assistant Server...")
        await init_db()
        async with async_session_maker() as session:
            await ensure_default_staff(session)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down Hotel Voice Assistant Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Hotel Voice Assistant Server API

    Backend for the hotel voice concierge: guest orders, call transcripts and
    summaries, the staff dashboard, real-time updates and the Vapi.ai webhook.
    """,
    version=__version__,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, prefix=constant.API_PREFIX, tags=["health"])
app.include_router(auth.router, prefix=constant.API_PREFIX, tags=["auth"])
app.include_router(transcripts.router, prefix=constant.API_PREFIX, tags=["transcripts"])
app.include_router(orders.router, prefix=constant.API_PREFIX, tags=["orders"])
app.include_router(summaries.router, prefix=constant.API_PREFIX, tags=["summaries"])
app.include_router(staff_requests.router, prefix=constant.API_PREFIX, tags=["staff-requests"])
app.include_router(vapi.router, prefix=constant.API_PREFIX, tags=["vapi"])
app.include_router(notifications.router, prefix=constant.API_PREFIX, tags=["notifications"])
app.include_router(references.router, prefix=constant.API_PREFIX, tags=["references"])
app.include_router(realtime.router, tags=["realtime"])
