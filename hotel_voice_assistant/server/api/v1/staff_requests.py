"""
Staff Request Endpoints.

Dashboard API for the requests raised by guest orders. Every endpoint
requires a staff token.
"""

from typing import List, Optional

from fastapi import APIRouter

from hotel_voice_assistant.core.models.io.staff_requests import (
    StaffMessageCreate,
    StaffMessageRead,
    StaffRequestDetail,
    StaffRequestRead,
    StaffRequestStatusUpdate,
)
from hotel_voice_assistant.server.services.deps import StaffDep, StaffRequestServiceDep

router = APIRouter()


@router.get(
    "/staff/requests",
    response_model=List[StaffRequestRead],
    summary="List Staff Requests",
    description="Requests, newest first, optionally filtered by status and room.",
)
async def list_requests(
    requests: StaffRequestServiceDep,
    _staff: StaffDep,
    status: Optional[str] = None,
    room_number: Optional[str] = None,
):
    return await requests.search(status=status, room_number=room_number)


@router.get(
    "/staff/requests/{request_id}",
    response_model=StaffRequestDetail,
    summary="Get Staff Request",
    responses={404: {"description": "Request not found"}},
)
async def get_request(request_id: int, requests: StaffRequestServiceDep, _staff: StaffDep) -> StaffRequestDetail:
    request = await requests.get(request_id)
    messages = await requests.messages(request_id)
    detail = StaffRequestDetail.model_validate(request)
    detail.messages = [StaffMessageRead.model_validate(m) for m in messages]
    return detail


@router.patch(
    "/staff/requests/{request_id}/status",
    response_model=StaffRequestRead,
    summary="Update Staff Request Status",
    description="Move a request to a new status. A system message records the change.",
    responses={400: {"description": "Invalid status"}, 404: {"description": "Request not found"}},
)
async def update_request_status(
    request_id: int,
    update: StaffRequestStatusUpdate,
    requests: StaffRequestServiceDep,
    _staff: StaffDep,
):
    return await requests.update_status(request_id, update.status)


@router.get(
    "/staff/requests/{request_id}/messages",
    response_model=List[StaffMessageRead],
    summary="List Request Messages",
    description="Message thread of a request, oldest first.",
    responses={404: {"description": "Request not found"}},
)
async def list_messages(request_id: int, requests: StaffRequestServiceDep, _staff: StaffDep):
    return await requests.messages(request_id)


@router.post(
    "/staff/requests/{request_id}/messages",
    response_model=StaffMessageRead,
    status_code=201,
    summary="Post Request Message",
    responses={404: {"description": "Request not found"}},
)
async def create_message(
    request_id: int,
    message_in: StaffMessageCreate,
    requests: StaffRequestServiceDep,
    _staff: StaffDep,
):
    return await requests.add_message(request_id, message_in.content)
