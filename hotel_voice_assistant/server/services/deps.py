"""
Request Dependencies.

Annotated FastAPI dependencies shared by the API routers.
"""

from typing import Annotated, Any, Dict

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_voice_assistant.core.database import get_session
from hotel_voice_assistant.core.database.repositories import RepositoryBundle, build_repositories
from hotel_voice_assistant.server.core.security import get_current_staff

from .call_records import CallRecordService
from .email_service import EmailService, get_email_service
from .order_service import OrderService
from .realtime import ConnectionManager, get_connection_manager
from .staff_service import StaffRequestService
from .vapi_client import VapiClient, get_vapi_client

SessionDep = Annotated[AsyncSession, Depends(get_session)]
ConnectionManagerDep = Annotated[ConnectionManager, Depends(get_connection_manager)]
StaffDep = Annotated[Dict[str, Any], Depends(get_current_staff)]
VapiClientDep = Annotated[VapiClient, Depends(get_vapi_client)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]


def get_repositories(session: SessionDep) -> RepositoryBundle:
    return build_repositories(session)


RepositoriesDep = Annotated[RepositoryBundle, Depends(get_repositories)]


def get_order_service(repos: RepositoriesDep, realtime: ConnectionManagerDep) -> OrderService:
    return OrderService(repos, realtime)


def get_staff_request_service(repos: RepositoriesDep, realtime: ConnectionManagerDep) -> StaffRequestService:
    return StaffRequestService(repos, realtime)


def get_call_record_service(repos: RepositoriesDep, realtime: ConnectionManagerDep) -> CallRecordService:
    return CallRecordService(repos, realtime)


OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
StaffRequestServiceDep = Annotated[StaffRequestService, Depends(get_staff_request_service)]
CallRecordServiceDep = Annotated[CallRecordService, Depends(get_call_record_service)]
