"""Unit tests for the process-wide engine and session dependency."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_voice_assistant.core.database import engine, get_session, init_db


def test_engine_uses_configured_url():
    assert engine.url.drivername == "sqlite+aiosqlite"


async def test_init_db_then_session_can_query():
    await init_db()

    gen = get_session()
    session = await gen.__anext__()
    try:
        assert isinstance(session, AsyncSession)
        result = await session.execute(text("SELECT count(*) FROM orders"))
        assert result.scalar_one() == 0
    finally:
        await gen.aclose()
