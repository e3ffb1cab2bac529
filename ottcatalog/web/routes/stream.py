"""
Route stream : /stream/{type}/{id}.json.

Pour une serie, l'identifiant porte la saison et l'episode ("tt9544034:2:5").
"""

from fastapi import APIRouter, Request

from ...core.value_objects.content_type import ContentType
from ..deps import get_container

router = APIRouter()


@router.get("/stream/{content_type}/{item_id}.json")
async def stream(request: Request, content_type: str, item_id: str):
    parsed = ContentType.parse(content_type)
    if parsed is None:
        return {"streams": []}
    streams = await get_container(request).stream_service().get_streams(parsed, item_id)
    return {"streams": [s.to_dict() for s in streams]}
