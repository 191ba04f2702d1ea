"""
Configuration du logging via loguru, pilotee par Settings.

Deux sorties:
- console (stderr): messages du package chakram uniquement, colores,
  au niveau demande par la ligne de commande ou CHAKRAM_LOG_LEVEL
- fichier: tout en DEBUG, serialise en JSON, avec rotation

La console est filtree sur le nom "chakram", le meme que celui que
suppress_loguru desactive pendant l'affichage Rich.
"""

import sys
from typing import Optional

from loguru import logger

from chakram.config import Settings

LOGGER_NAME = "chakram"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _is_chakram_record(record: dict) -> bool:
    name = record["name"] or ""
    return name == LOGGER_NAME or name.startswith(LOGGER_NAME + ".")


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """
    Installe les handlers console et fichier.

    Args:
        settings: Configuration (niveau, fichier, rotation, retention)
        level: Niveau console impose par -v/-q, sinon settings.log_level

    Les requetes HTTP et les enregistrements ignores sont journalises en
    DEBUG: ils n'apparaissent que dans le fichier, sauf en mode verbeux.
    """
    console_level = (level or settings.log_level).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=console_level,
        format=CONSOLE_FORMAT,
        filter=_is_chakram_record,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        f"Logs console en {console_level}, fichier {settings.log_file} "
        f"(rotation {settings.log_rotation_size}, {settings.log_retention_count} archives)"
    )
