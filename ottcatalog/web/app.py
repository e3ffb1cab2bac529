"""
Application FastAPI de l'add-on.

Initialise l'application web avec le Container DI, configure CORS et
l'en-tête Cache-Control, et monte les routes du protocole Stremio.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger

from ..container import Container, close_clients
from .deps import app_version
from .routes.catalog import router as catalog_router
from .routes.health import router as health_router
from .routes.manifest import router as manifest_router
from .routes.meta import router as meta_router
from .routes.stream import router as stream_router

CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Accept", "X-Requested-With"]
CACHE_CONTROL = "public, max-age=3600"


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI (un nouveau Container si absent)
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Ferme les clients HTTP à l'arrêt."""
        yield
        await close_clients(app.state.container)

    app = FastAPI(title="OttCatalog", version=app_version, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    @app.middleware("http")
    async def protocol_headers(request: Request, call_next):
        """Toute requête OPTIONS répond 200 ; les réponses JSON sont cachables."""
        if request.method == "OPTIONS":
            return Response(
                status_code=200,
                headers={
                    "Access-Control-Allow-Origin": "*",
                    "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
                    "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
                },
            )
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["Cache-Control"] = CACHE_CONTROL
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Erreur non gérée sur {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    app.include_router(manifest_router)
    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(meta_router)
    app.include_router(stream_router)
    return app


app = create_app()
