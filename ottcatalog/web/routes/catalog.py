"""
Routes catalogue : /catalog/{type}/{id}.json et /catalog/{type}/{id}/{extra}.json.
"""

from typing import Optional

from fastapi import APIRouter, Request

from ...core.value_objects.content_type import ContentType
from ..deps import get_container

router = APIRouter()


async def _catalog(request: Request, content_type: str, catalog_id: str, extra: Optional[str] = None):
    parsed = ContentType.parse(content_type)
    if parsed is None:
        return {"metas": []}
    items = await get_container(request).catalog_service().get_catalog(parsed, catalog_id, extra)
    return {"metas": [item.to_dict() for item in items]}


@router.get("/catalog/{content_type}/{catalog_id}.json")
async def catalog(request: Request, content_type: str, catalog_id: str):
    return await _catalog(request, content_type, catalog_id)


@router.get("/catalog/{content_type}/{catalog_id}/{extra}.json")
async def catalog_with_extra(request: Request, content_type: str, catalog_id: str, extra: str):
    return await _catalog(request, content_type, catalog_id, extra)
