"""
Point d'entrée CLI de OttCatalog.

Commandes typer : diagnostic des sources, inspection HTML, serveur uvicorn.
Le logging est configure dans le callback, avant chaque commande.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import diagnose, fetch_html, providers
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="ottcatalog",
    help="Add-on Stremio de catalogues OTT indiens",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs DEBUG sur la console"),
    ] = False,
) -> None:
    """OttCatalog - catalogues OTT indiens pour Stremio."""
    settings = get_config()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(diagnose)
app.command(name="fetch-html")(fetch_html)
app.command()(providers)


def get_config() -> Settings:
    """Settings partages par le container du module."""
    return container.config()


@app.command()
def info() -> None:
    """Resume la configuration effective (plateformes, TMDB, debrid)."""
    config = get_config()
    typer.echo(f"Plateformes : {', '.join(p.id for p in config.platforms)}")
    typer.echo(f"Enrichissement TMDB : {'oui' if config.tmdb_enabled else 'non (pas de clé)'}")
    typer.echo(f"Enrichissement des catalogues : {'activé' if config.enrich_catalogs else 'désactivé'}")
    typer.echo(f"Services debrid configurés : {', '.join(config.configured_debrid_services) or 'aucun'}")
    typer.echo(f"Logs : {config.log_level} -> {config.log_file or 'console'}")


@app.command()
def version() -> None:
    """Affiche la version installee."""
    typer.echo(f"OttCatalog v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur de l'add-on."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    logger.info("Démarrage de OttCatalog", version=__version__, host=host, port=port)
    uvicorn.run("ottcatalog.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Script console ottcatalog."""
    app()


if __name__ == "__main__":
    main()
