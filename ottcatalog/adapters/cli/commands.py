"""
Commandes CLI de diagnostic.

- diagnose : execute le pipeline de catalogue et affiche un echantillon
- fetch-html : enregistre une page brute pour ajuster les selecteurs
- providers : etat des fournisseurs de streams
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import httpx
import typer
from rich.table import Table

from ottcatalog.adapters.cli.helpers import console, suppress_loguru, with_container
from ottcatalog.container import Container
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import DEFAULT_USER_AGENT, FLIXPATROL_HEADERS


def diagnose(
    catalog: Annotated[
        Optional[str],
        typer.Option("--catalog", "-c", help="Catalogue a tester (tous les types si absent)"),
    ] = None,
    sample: Annotated[
        int,
        typer.Option("--sample", "-n", help="Nombre d'items affiches par catalogue"),
    ] = 5,
    enrich: Annotated[
        bool,
        typer.Option(help="Enrichir via TMDB (si configure)"),
    ] = False,
) -> None:
    """Execute le pipeline de catalogue (films et series) et affiche un echantillon."""
    asyncio.run(_diagnose_async(catalog, sample, enrich))


@with_container
async def _diagnose_async(container, catalog: Optional[str], sample: int, enrich: bool) -> None:
    """Implementation async de la commande diagnose."""
    if not enrich:
        container.config().enrich_catalogs = False
    service = container.catalog_service()

    definitions = [
        c for c in service.catalogs if catalog is None or c.id == catalog
    ]
    if not definitions:
        console.print(f"[red]Catalogue inconnu:[/red] {catalog}")
        raise typer.Exit(code=1)

    for definition in definitions:
        with suppress_loguru():
            items = await service.get_catalog(definition.type, definition.id)

        table = Table(title=f"{definition.name} ({definition.id}) - {len(items)} item(s)")
        table.add_column("ID", style="dim")
        table.add_column("Titre", style="cyan")
        table.add_column("Annee")
        table.add_column("Genres")
        for item in items[:sample]:
            table.add_row(item.id, item.name, item.release_info, ", ".join(item.genres))
        console.print(table)


def fetch_html(
    url: Annotated[str, typer.Argument(help="URL de la page a recuperer")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Fichier de sortie"),
    ] = Path("page.html"),
    timeout: Annotated[float, typer.Option(help="Timeout en secondes")] = 15.0,
) -> None:
    """Enregistre le HTML brut d'une page (ajustement des selecteurs)."""
    headers = {"User-Agent": DEFAULT_USER_AGENT, **FLIXPATROL_HEADERS}
    try:
        response = httpx.get(url, headers=headers, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as e:
        console.print(f"[red]Echec de la recuperation:[/red] {e}")
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(response.text, encoding="utf-8")
    console.print(
        f"[green]✓[/green] {len(response.text)} caracteres enregistres dans [bold]{output}[/bold]"
    )


def providers() -> None:
    """Affiche l'etat des fournisseurs de streams."""
    container = Container()
    status = container.stream_resolver().status()

    table = Table(title="Fournisseurs de streams")
    table.add_column("Service", style="cyan")
    table.add_column("Active")
    table.add_column("Configure")
    for name, state in status.items():
        table.add_row(
            name,
            "[green]oui[/green]" if state["enabled"] else "[dim]non[/dim]",
            "[green]oui[/green]" if state["configured"] else "[dim]non[/dim]",
        )
    console.print(table)

    settings = container.config()
    console.print(
        f"Streams: {'actives' if settings.streams_enabled else 'desactives'} - "
        f"repli torrent: {len(settings.torrent_mirrors)} miroir(s)"
    )
