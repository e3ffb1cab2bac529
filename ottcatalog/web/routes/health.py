"""
Route de santé.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..deps import app_version

router = APIRouter()


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
