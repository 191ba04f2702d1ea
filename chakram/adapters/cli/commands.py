"""
Commandes CLI de Chakram: recherche, episodes, metadonnees, lecture.

Chaque commande synchrone (Typer) delegue a une implementation async
decoree par @with_container.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from chakram.adapters.cli.display import (
    render_episodes,
    render_playback,
    render_resume,
    render_titles,
)
from chakram.adapters.cli.helpers import console, run_async, with_container
from chakram.adapters.formatting import title_to_dict
from chakram.core.entities import ContentType


class TitleTypeFilter(str, Enum):
    """Types de titres filtrables dans une recherche."""

    SERIES = "series"
    MOVIE = "movie"

    def to_content_type(self) -> ContentType:
        return ContentType[self.name]


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def search(
    query: Annotated[str, typer.Argument(help="Titre recherche")],
    title_type: Annotated[
        Optional[TitleTypeFilter],
        typer.Option("--type", "-t", help="Ne garder que ce type de titre"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", min=1, help="Nombre maximum de resultats"),
    ] = 10,
    as_json: Annotated[
        bool, typer.Option("--json", help="Sortie JSON")
    ] = False,
) -> None:
    """Recherche un titre et affiche les resultats classes par pertinence."""
    run_async(_search_async(query, title_type, limit, as_json))


@with_container(requires_auth=False)
async def _search_async(
    container,
    query: str,
    title_type: Optional[TitleTypeFilter],
    limit: int,
    as_json: bool,
) -> None:
    """Implementation async de la commande search."""
    resolver = container.title_resolver()
    content_type = title_type.to_content_type() if title_type else None
    titles = (await resolver.find(query, content_type))[:limit]

    if as_json:
        _echo_json([title_to_dict(title) for title in titles])
        return

    render_titles(titles, heading=f"Resultats pour « {query} »")


def episodes(
    season_ids: Annotated[list[str], typer.Argument(help="ID(s) de saison")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Sortie JSON")
    ] = False,
) -> None:
    """Liste les episodes d'une ou plusieurs saisons."""
    run_async(_episodes_async(season_ids, as_json))


@with_container(requires_auth=False)
async def _episodes_async(container, season_ids: list[str], as_json: bool) -> None:
    """Implementation async de la commande episodes."""
    resolver = container.title_resolver()
    listed = await resolver.list_episodes(season_ids)

    if as_json:
        _echo_json([title_to_dict(episode) for episode in listed])
        return

    render_episodes(listed)


def info(
    title_ids: Annotated[list[str], typer.Argument(help="ID(s) de titre")],
) -> None:
    """Affiche les metadonnees d'un ou plusieurs titres (JSON)."""
    run_async(_info_async(title_ids))


@with_container(requires_auth=False)
async def _info_async(container, title_ids: list[str]) -> None:
    """Implementation async de la commande info."""
    client = container.catalog_client()
    titles = await client.get_title_info(title_ids)

    if not titles:
        console.print("[yellow]Aucun titre trouve.[/yellow]")
        return

    _echo_json([title_to_dict(title) for title in titles])


def playback(
    title_id: Annotated[str, typer.Argument(help="ID d'un episode ou d'un film")],
) -> None:
    """Resout les manifestes DASH et l'URL de licence d'un titre."""
    run_async(_playback_async(title_id))


@with_container()
async def _playback_async(container, title_id: str) -> None:
    """Implementation async de la commande playback."""
    client = container.catalog_client()
    playback_info = await client.get_playback_info(title_id)
    render_playback(title_id, playback_info)


def fetch_license(
    license_url: Annotated[str, typer.Argument(help="URL de licence (commande playback)")],
    challenge_file: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="Challenge Widevine binaire"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier de sortie de la licence"),
    ] = None,
) -> None:
    """Demande une licence Widevine pour un challenge."""
    run_async(_fetch_license_async(license_url, challenge_file, output))


@with_container()
async def _fetch_license_async(
    container,
    license_url: str,
    challenge_file: Path,
    output: Optional[Path],
) -> None:
    """Implementation async de la commande license."""
    client = container.catalog_client()
    license_data = await client.fetch_license(license_url, challenge_file.read_bytes())

    if output is None:
        typer.echo(license_data)
        return

    output.write_text(license_data, encoding="ascii")
    console.print(f"[green]Licence ecrite dans {output}[/green]")


def resume(
    title_id: Annotated[str, typer.Argument(help="ID d'un film, d'une serie ou d'un episode")],
) -> None:
    """Devine le titre et la position de reprise."""
    run_async(_resume_async(title_id))


@with_container()
async def _resume_async(container, title_id: str) -> None:
    """Implementation async de la commande resume."""
    client = container.catalog_client()
    resume_info = await client.guess_resume_info(title_id)
    render_resume(resume_info)
