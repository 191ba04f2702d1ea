"""
Mise en forme des titres pour l'affichage et l'export JSON.

Produit des dictionnaires simples avec l'URL de lecture, sans exposer
la structure interne des entites.
"""

from typing import Any

from chakram.core.entities import ContentType, Title
from chakram.core.entities.titles import WATCH_URL_TEMPLATE


def format_watch_url(title_id: str) -> str:
    """URL du lecteur web pour un ID de titre."""
    return WATCH_URL_TEMPLATE.format(title_id=title_id)


def _reference_to_dict(reference: Any) -> dict[str, Any]:
    data = {"id": reference.id, "title": reference.title}
    if reference.type == ContentType.SEASON:
        data["number"] = reference.number
    return data


def title_to_dict(title: Title) -> dict[str, Any]:
    """
    Convertit un titre en dictionnaire serialisable.

    Les champs `number`, `season` et `series` ne sont presents que pour les
    variantes qui les portent, et seulement s'ils sont renseignes.
    """
    data: dict[str, Any] = {
        "id": title.id,
        "title": title.title,
        "type": title.type.value,
        "cover": title.cover_image,
        "watch_url": format_watch_url(title.id),
    }

    if title.type in (ContentType.SEASON, ContentType.EPISODE):
        data["number"] = title.number

    if title.type == ContentType.EPISODE and title.season is not None:
        data["season"] = _reference_to_dict(title.season)

    if title.type in (ContentType.SEASON, ContentType.EPISODE) and title.series is not None:
        data["series"] = _reference_to_dict(title.series)

    return data
