"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 et l'accès au Container DI depuis les routes.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..container import Container

_WEB_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version disponible dans tous les templates
app_version = __version__
templates.env.globals["app_version"] = f"OttCatalog v{app_version}"


def get_container(request: Request) -> Container:
    """Container DI attaché à l'application."""
    return request.app.state.container
