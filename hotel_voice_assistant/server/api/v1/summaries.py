"""
Call Summary Endpoints.
"""

from fastapi import APIRouter

from hotel_voice_assistant.core.models.io.summaries import (
    CallSummaryCreate,
    CallSummaryRead,
    RecentSummaries,
)
from hotel_voice_assistant.server.services.deps import CallRecordServiceDep

router = APIRouter()


@router.post(
    "/store-summary",
    response_model=CallSummaryRead,
    status_code=201,
    summary="Store Call Summary",
    description="Store the summary produced at the end of a call. The room number is read from the text when not given.",
)
async def store_summary(summary_in: CallSummaryCreate, records: CallRecordServiceDep):
    return await records.store_summary(
        summary_in.call_id,
        summary_in.content,
        room_number=summary_in.room_number,
        duration=summary_in.duration,
        timestamp=summary_in.timestamp,
    )


@router.get(
    "/summaries/recent/{hours}",
    response_model=RecentSummaries,
    summary="Recent Call Summaries",
    description="Summaries from the last `hours` hours (1-168), newest first.",
    responses={400: {"description": "hours out of range"}},
)
async def recent_summaries(hours: int, records: CallRecordServiceDep) -> RecentSummaries:
    summaries = await records.recent_summaries(hours)
    return RecentSummaries(
        count=len(summaries),
        summaries=[CallSummaryRead.model_validate(s) for s in summaries],
        timeframe=f"{hours} hours",
    )


@router.get(
    "/summaries/{call_id}",
    response_model=CallSummaryRead,
    summary="Get Call Summary",
    responses={404: {"description": "No summary for this call"}},
)
async def get_summary(call_id: str, records: CallRecordServiceDep):
    return await records.summary_for_call(call_id)
