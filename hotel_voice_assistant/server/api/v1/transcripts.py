"""
Transcript Endpoints.

Store and read back the line-by-line conversation of a call.
"""

from typing import List

from fastapi import APIRouter

from hotel_voice_assistant.core.models.io.transcripts import TranscriptCreate, TranscriptRead
from hotel_voice_assistant.server.services.deps import CallRecordServiceDep

router = APIRouter()


@router.post(
    "/transcripts",
    response_model=TranscriptRead,
    status_code=201,
    summary="Store Transcript Line",
    description="Append one utterance (guest or assistant) to a call transcript.",
)
async def create_transcript(transcript_in: TranscriptCreate, records: CallRecordServiceDep):
    return await records.add_transcript(transcript_in.call_id, transcript_in.role, transcript_in.content)


@router.get(
    "/transcripts/{call_id}",
    response_model=List[TranscriptRead],
    summary="Get Call Transcript",
    description="All stored lines of a call, oldest first. Unknown calls yield an empty list.",
)
async def get_transcripts(call_id: str, records: CallRecordServiceDep):
    return await records.transcripts_for_call(call_id)
