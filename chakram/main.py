"""
Point d'entrée CLI de Chakram.

Configure le logging selon la verbosité demandée et monte les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    episodes,
    fetch_license,
    info,
    playback,
    resume,
    search,
)
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="chakram",
    help="Client du catalogue Prime Video",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Chakram - Recherche et lecture dans le catalogue Prime Video."""
    level = None
    if quiet:
        level = "ERROR"
    elif verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"

    configure_logging(Settings(), level=level)


app.command()(search)
app.command()(episodes)
app.command()(info)
app.command()(playback)
app.command()(resume)
app.command(name="license")(fetch_license)


@app.command()
def config() -> None:
    """Affiche la configuration actuelle."""
    settings = Settings()
    logger.info("Configuration Chakram")
    typer.echo(f"Cookies : {'configurés' if settings.auth_enabled else 'absents'}")
    typer.echo(f"Device ID : {settings.device_id or 'généré à chaque lancement'}")
    typer.echo(f"Timeout : {settings.request_timeout}s")
    typer.echo(f"Tentatives max (429) : {settings.max_retry_attempts}")
    typer.echo(f"Niveau de log : {settings.log_level}")
    typer.echo(f"Fichier de log : {settings.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Chakram v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
