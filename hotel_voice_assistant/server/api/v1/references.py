"""
Reference Material Endpoints.

Images, documents and links the assistant can show while a guest talks about
something (a menu, the spa brochure, a map).
"""

from typing import Dict, List

from fastapi import APIRouter

from hotel_voice_assistant.core.database.entities import ReferenceItem
from hotel_voice_assistant.core.models.io.references import ReferenceItemCreate, ReferenceItemIO
from hotel_voice_assistant.server.services.deps import RepositoriesDep
from hotel_voice_assistant.server.services.reference_search import match_references

router = APIRouter()


@router.post(
    "/references",
    response_model=ReferenceItemCreate,
    status_code=201,
    summary="Store Reference",
    description="Insert a reference, or replace the one stored under the same id.",
)
async def upsert_reference(item_in: ReferenceItemCreate, repos: RepositoriesDep):
    item = await repos.references.upsert(
        ReferenceItem(
            id=item_in.id,
            type=item_in.type.value,
            title=item_in.title,
            url=item_in.url,
            description=item_in.description,
            keywords=list(item_in.keywords),
        )
    )
    return ReferenceItemCreate.model_validate(item)


@router.get(
    "/references",
    response_model=Dict[str, ReferenceItemIO],
    summary="Reference Map",
    description="Every stored reference keyed by its id.",
)
async def list_references(repos: RepositoriesDep) -> Dict[str, ReferenceItemIO]:
    return {item.id: ReferenceItemIO.model_validate(item) for item in await repos.references.all()}


@router.get(
    "/references/search",
    response_model=List[ReferenceItemIO],
    summary="Search References",
    description="References whose keywords appear in `content`, without duplicate urls.",
)
async def search_references(content: str, repos: RepositoriesDep):
    return match_references(await repos.references.all(), content)
