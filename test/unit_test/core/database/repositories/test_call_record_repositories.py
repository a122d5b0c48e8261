"""Unit tests for transcript, call summary, user and reference repositories."""

from __future__ import annotations

from datetime import timedelta

from hotel_voice_assistant.core.database.base import utc_now
from hotel_voice_assistant.core.database.entities import (
    CallSummary,
    ReferenceItem,
    Transcript,
    User,
)


class TestTranscriptRepository:
    async def test_get_by_call_id_oldest_first(self, repos):
        now = utc_now()
        late = await repos.transcripts.create(Transcript(call_id="c1", role="assistant", content="Sure", timestamp=now))
        early = await repos.transcripts.create(
            Transcript(call_id="c1", role="user", content="A burger please", timestamp=now - timedelta(seconds=5))
        )
        await repos.transcripts.create(Transcript(call_id="c2", role="user", content="Other call"))

        result = await repos.transcripts.get_by_call_id("c1")

        assert [t.id for t in result] == [early.id, late.id]

    async def test_default_timestamp_is_aware_utc(self, repos):
        transcript = await repos.transcripts.create(Transcript(call_id="c1", role="user", content="Hello"))

        stored = (await repos.transcripts.get_by_call_id("c1"))[0]

        assert transcript.timestamp.utcoffset() == timedelta(0)
        assert stored.timestamp.utcoffset() == timedelta(0)

    async def test_unknown_call_is_empty(self, repos):
        assert await repos.transcripts.get_by_call_id("nope") == []


class TestCallSummaryRepository:
    async def test_get_by_call_id_returns_latest(self, repos):
        now = utc_now()
        await repos.summaries.create(CallSummary(call_id="c1", content="old", timestamp=now - timedelta(minutes=1)))
        latest = await repos.summaries.create(CallSummary(call_id="c1", content="new", timestamp=now))

        assert (await repos.summaries.get_by_call_id("c1")).id == latest.id

    async def test_get_by_call_id_missing(self, repos):
        assert await repos.summaries.get_by_call_id("missing") is None

    async def test_get_recent_window_newest_first(self, repos):
        now = utc_now()
        inside_old = await repos.summaries.create(
            CallSummary(call_id="a", content="a", timestamp=now - timedelta(hours=2))
        )
        inside_new = await repos.summaries.create(
            CallSummary(call_id="b", content="b", timestamp=now - timedelta(minutes=10))
        )
        await repos.summaries.create(CallSummary(call_id="c", content="c", timestamp=now - timedelta(hours=30)))

        result = await repos.summaries.get_recent(24, now=now)

        assert [s.id for s in result] == [inside_new.id, inside_old.id]

    async def test_get_recent_accepts_naive_reference_time(self, repos):
        now = utc_now()
        fresh = await repos.summaries.create(CallSummary(call_id="a", content="a", timestamp=now))

        result = await repos.summaries.get_recent(1, now=now.replace(tzinfo=None))

        assert [s.id for s in result] == [fresh.id]


class TestUserRepository:
    async def test_get_by_username(self, repos):
        await repos.users.create(User(username="night-desk", password_hash="x"))

        assert (await repos.users.get_by_username("night-desk")).username == "night-desk"
        assert await repos.users.get_by_username("Night-Desk") is None


class TestReferenceRepository:
    async def test_upsert_inserts_then_overwrites(self, repos):
        await repos.references.upsert(
            ReferenceItem(id="menu", type="image", title="Menu", url="https://cdn/menu.png", keywords=["menu"])
        )
        created_at = (await repos.references.get_by_id("menu")).created_at

        updated = await repos.references.upsert(
            ReferenceItem(id="menu", type="document", title="Dinner menu", url="https://cdn/menu.pdf", keywords=["dinner"])
        )

        assert updated.title == "Dinner menu"
        assert updated.keywords == ["dinner"]
        assert updated.created_at == created_at
        assert len(await repos.references.all()) == 1

    async def test_all_in_insertion_order(self, repos):
        now = utc_now()
        await repos.references.create(
            ReferenceItem(id="b", type="link", title="B", url="u-b", created_at=now - timedelta(minutes=1))
        )
        await repos.references.create(ReferenceItem(id="a", type="link", title="A", url="u-a", created_at=now))

        assert [item.id for item in await repos.references.all()] == ["b", "a"]
