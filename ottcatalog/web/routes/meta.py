"""
Route meta : /meta/{type}/{id}.json.
"""

from fastapi import APIRouter, Request

from ...core.value_objects.content_type import ContentType
from ..deps import get_container

router = APIRouter()


@router.get("/meta/{content_type}/{item_id}.json")
async def meta(request: Request, content_type: str, item_id: str):
    parsed = ContentType.parse(content_type)
    if parsed is None:
        return {"meta": None}
    item = await get_container(request).meta_service().get_meta(parsed, item_id)
    return {"meta": item.to_dict() if item else None}
