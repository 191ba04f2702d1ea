"""
Affichage Rich des titres, episodes et informations de lecture.
"""

from typing import Sequence

from rich.table import Table

from chakram.adapters.cli.helpers import console
from chakram.core.entities import Episode, Title
from chakram.core.value_objects import PlaybackInfo, ResumeInfo


def render_titles(titles: Sequence[Title], heading: str) -> None:
    """Affiche une liste de titres classes."""
    if not titles:
        console.print("[yellow]Aucun titre trouve.[/yellow]")
        return

    table = Table(title=heading, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="magenta")
    table.add_column("Titre", style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Lecture", style="dim")

    for rank, title in enumerate(titles, start=1):
        table.add_row(
            str(rank),
            title.type.value.lower(),
            title.title,
            title.id,
            title.watch_url,
        )

    console.print(table)


def render_episodes(episodes: Sequence[Episode]) -> None:
    """Affiche une liste d'episodes au format SxxEyy."""
    if not episodes:
        console.print("[yellow]Aucun episode.[/yellow]")
        console.print("[dim]L'ID fourni est peut-etre celui d'une serie.[/dim]")
        return

    table = Table(title=f"{len(episodes)} episode(s)")
    table.add_column("Episode", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("ID", style="dim")

    for episode in episodes:
        season_number = episode.season.number if episode.season else 0
        table.add_row(
            f"S{season_number:02d}E{episode.number:02d}",
            episode.title,
            episode.id,
        )

    console.print(table)


def render_playback(title_id: str, info: PlaybackInfo) -> None:
    """Affiche les manifestes et l'URL de licence d'un titre."""
    console.print(f"[bold cyan]Lecture de {title_id}[/bold cyan]")
    if not info.manifests:
        console.print("[yellow]Aucun manifeste DASH/CENC disponible.[/yellow]")

    for manifest in info.manifests:
        console.print(f"  [green]{manifest.cdn}[/green] {manifest.url}")

    console.print(f"\n[bold]Licence:[/bold] {info.license_url}")


def render_resume(info: ResumeInfo) -> None:
    """Affiche le point de reprise."""
    seconds = info.start_time_millis // 1000
    console.print(
        f"Reprise de [cyan]{info.id}[/cyan] a {seconds // 60:d}:{seconds % 60:02d}"
    )
