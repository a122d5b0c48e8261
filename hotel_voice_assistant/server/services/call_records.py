"""
Call Records Service.

Stores transcript lines and end-of-call summaries, whether they arrive from
the guest client or from the Vapi server webhook.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, List, Optional

from hotel_voice_assistant.core.database.base import as_utc, utc_now
from hotel_voice_assistant.core.database.entities import CallSummary, Transcript
from hotel_voice_assistant.core.database.repositories import RepositoryBundle
from hotel_voice_assistant.core.errors import NotFoundError, ValidationFailedError
from hotel_voice_assistant.core.logging_config import get_logger
from hotel_voice_assistant.core.models.domain import TranscriptRole
from hotel_voice_assistant.server.core.constant import (
    RECENT_SUMMARIES_MAX_HOURS,
    RECENT_SUMMARIES_MIN_HOURS,
)

from .realtime import ConnectionManager

logger = get_logger(__name__)

# "room 203", "Room #1204", "phòng 305", "chambre 12", "номер 45", "203호"
ROOM_PATTERNS = [
    re.compile(r"\b(?:room|rm|phòng|phong|chambre|zimmer|habitación|номер|комната)\s*(?:no\.?|number|số|#)?\s*:?\s*(\d{1,5})\b", re.IGNORECASE),
    re.compile(r"(\d{1,5})\s*(?:호|号房|號房)"),
]


def extract_room_number(content: str) -> Optional[str]:
    """Pull a room number out of free text, or return None."""
    for pattern in ROOM_PATTERNS:
        match = pattern.search(content or "")
        if match:
            return match.group(1)
    return None


def format_duration(seconds: Any) -> Optional[str]:
    """Render a call length in seconds as ``mm:ss``; unparseable values give None."""
    if seconds is None:
        return None
    try:
        total = max(int(round(float(seconds))), 0)
    except (TypeError, ValueError):
        return None
    return f"{total // 60:02d}:{total % 60:02d}"


def _timestamp_or_now(value: Optional[datetime]) -> datetime:
    return utc_now() if value is None else as_utc(value)


class CallRecordService:
    def __init__(self, repos: RepositoryBundle, realtime: Optional[ConnectionManager] = None) -> None:
        self.repos = repos
        self.realtime = realtime

    async def add_transcript(self, call_id: str, role: TranscriptRole, content: str) -> Transcript:
        if not content or not content.strip():
            raise ValidationFailedError("Transcript content must not be empty")
        transcript = await self.repos.transcripts.create(
            Transcript(call_id=call_id, role=role.value, content=content)
        )
        logger.debug(f"Stored {role.value} transcript line for call {call_id}")
        return transcript

    async def transcripts_for_call(self, call_id: str) -> List[Transcript]:
        return await self.repos.transcripts.get_by_call_id(call_id)

    async def store_summary(
        self,
        call_id: str,
        content: str,
        *,
        room_number: Optional[str] = None,
        duration: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> CallSummary:
        """
        Persist a call summary.

        When ``room_number`` is not given it is looked up in the summary text.
        Staff dashboards are told about the new summary through the realtime
        channel when one is attached.
        """
        room = room_number or extract_room_number(content)
        summary = await self.repos.summaries.create(
            CallSummary(
                call_id=call_id,
                content=content,
                room_number=room,
                duration=duration,
                timestamp=_timestamp_or_now(timestamp),
            )
        )
        logger.info(f"Stored summary for call {call_id} (room {room or 'unknown'})")
        if self.realtime is not None:
            await self.realtime.broadcast_staff_data_change(
                "call_summary",
                {"callId": call_id, "summaryId": summary.id, "roomNumber": room},
            )
        return summary

    async def summary_for_call(self, call_id: str) -> CallSummary:
        summary = await self.repos.summaries.get_by_call_id(call_id)
        if summary is None:
            raise NotFoundError("Call summary", call_id)
        return summary

    async def recent_summaries(self, hours: int) -> List[CallSummary]:
        """
        Summaries from the last ``hours`` hours, newest first.

        Raises:
            ValidationFailedError: ``hours`` is outside 1..168.
        """
        if not RECENT_SUMMARIES_MIN_HOURS <= hours <= RECENT_SUMMARIES_MAX_HOURS:
            raise ValidationFailedError(
                f"hours must be between {RECENT_SUMMARIES_MIN_HOURS} and {RECENT_SUMMARIES_MAX_HOURS}",
                details={"hours": hours},
            )
        return await self.repos.summaries.get_recent(hours)
