"""
Routes du manifeste et de la page d'accueil.
"""

from fastapi import APIRouter, Request

from ...services.manifest import build_manifest
from ..deps import app_version, get_container, templates

router = APIRouter()


def _manifest(request: Request) -> dict:
    container = get_container(request)
    settings = container.config()
    return build_manifest(
        container.catalog_service().catalogs,
        version=app_version,
        streams_enabled=settings.streams_enabled,
    )


@router.get("/manifest.json")
async def manifest(request: Request):
    """Manifeste de l'add-on."""
    return _manifest(request)


@router.get("/")
async def landing(request: Request):
    """Page d'accueil avec lien d'installation, ou le manifeste si désactivée."""
    manifest_data = _manifest(request)
    if not get_container(request).config().landing_page:
        return manifest_data

    manifest_url = str(request.url_for("manifest"))
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "manifest": manifest_data,
            "manifest_url": manifest_url,
            "install_url": "stremio://" + manifest_url.split("://", 1)[-1],
        },
    )
