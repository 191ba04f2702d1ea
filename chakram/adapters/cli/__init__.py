"""Sous-package CLI - re-exporte les commandes publiques."""

from chakram.adapters.cli.commands import (
    TitleTypeFilter,
    episodes,
    fetch_license,
    info,
    playback,
    resume,
    search,
)

__all__ = [
    "TitleTypeFilter",
    "episodes",
    "fetch_license",
    "info",
    "playback",
    "resume",
    "search",
]
