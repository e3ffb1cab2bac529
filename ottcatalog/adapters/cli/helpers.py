"""
Briques communes aux commandes CLI : console Rich, mise en sourdine
de loguru pendant les rendus, et gestion du cycle de vie du container.
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

from ottcatalog.container import Container, close_clients

console = Console()


@contextmanager
def suppress_loguru():
    """Coupe les logs du package ottcatalog le temps d'un rendu Rich."""
    loguru_logger.disable("ottcatalog")
    try:
        yield
    finally:
        loguru_logger.enable("ottcatalog")


def with_container(func):
    """
    Fournit un Container neuf comme premier argument d'une commande async.

    Les clients httpx ouverts par la commande sont fermes en sortie,
    y compris sur exception.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        try:
            return await func(container, *args, **kwargs)
        finally:
            await close_clients(container)
    return wrapper
