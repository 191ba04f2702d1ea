"""
Normaliseur d'enregistrements du catalogue.

Le catalogue renvoie des dictionnaires de forme variable:
- les saisons et series parentes sont embarquees dans `ancestorTitles`
- la couverture est cachee dans `formats[].images[]`
- le type est porte par `contentType` avec plusieurs orthographes

Ce module est la seule frontiere entre ce JSON non type et les entites
du domaine. Les enregistrements inconvertibles levent RecordFormatError,
que normalize_records journalise avant de les ignorer.
"""

from typing import Any, Iterable, Iterator, Optional

from loguru import logger

from chakram.core.entities import (
    ContentType,
    Episode,
    Movie,
    Season,
    Series,
    Title,
)
from chakram.core.exceptions import RecordFormatError
from chakram.services.titles import order_episodes

COVER_IMAGE_TYPES = ("COVER_ART_TV", "COVER_ART_MOVIE")

# Le catalogue melange "EPISODE" et "TVEpisode" selon l'endpoint
_CONTENT_TYPE_ALIASES = {
    "EPISODE": ContentType.EPISODE,
    "TVEPISODE": ContentType.EPISODE,
    "MOVIE": ContentType.MOVIE,
    "SEASON": ContentType.SEASON,
    "TVSEASON": ContentType.SEASON,
    "SERIES": ContentType.SERIES,
    "TVSERIES": ContentType.SERIES,
}


def find_cover(record: dict[str, Any]) -> Optional[str]:
    """
    Retourne l'URI de la couverture d'un enregistrement.

    Privilegie le format HD, sinon le premier format disponible, puis prend
    la premiere image de type COVER_ART_TV ou COVER_ART_MOVIE.
    """
    formats = [f for f in record.get("formats") or [] if isinstance(f, dict)]
    if not formats:
        return None

    chosen = next(
        (f for f in formats if f.get("videoFormatType") == "HD"),
        formats[0],
    )

    for image in chosen.get("images") or []:
        if isinstance(image, dict) and image.get("type") in COVER_IMAGE_TYPES:
            return image.get("uri")

    return None


def _find_ancestor(record: dict[str, Any], content_type: str) -> Optional[dict]:
    for ancestor in record.get("ancestorTitles") or []:
        if isinstance(ancestor, dict) and ancestor.get("contentType") == content_type:
            return ancestor
    return None


def find_season(record: dict[str, Any]) -> Optional[Season]:
    """Saison parente embarquee dans `ancestorTitles`, sans sa serie."""
    ancestor = _find_ancestor(record, "SEASON")
    if ancestor is None or not ancestor.get("titleId"):
        return None

    return Season(
        id=ancestor["titleId"],
        title=ancestor.get("title") or "",
        number=ancestor.get("number") or 0,
    )


def find_series(record: dict[str, Any]) -> Optional[Series]:
    """Serie parente embarquee dans `ancestorTitles`."""
    ancestor = _find_ancestor(record, "SERIES")
    if ancestor is None or not ancestor.get("titleId"):
        return None

    return Series(
        id=ancestor["titleId"],
        title=ancestor.get("title") or "",
    )


def _parse_content_type(record: dict[str, Any]) -> ContentType:
    raw_type = record.get("contentType")
    if not isinstance(raw_type, str):
        raise RecordFormatError(f"contentType absent pour {record.get('titleId')!r}")

    content_type = _CONTENT_TYPE_ALIASES.get(raw_type.upper())
    if content_type is None:
        raise RecordFormatError(
            f"contentType inconnu {raw_type!r} pour {record.get('titleId')!r}"
        )
    return content_type


def normalize_record(record: dict[str, Any]) -> Title:
    """
    Convertit un enregistrement brut en entite du domaine.

    Args:
        record: Dictionnaire JSON tel que renvoye par le catalogue

    Returns:
        Series, Season, Episode ou Movie selon `contentType`

    Raises:
        RecordFormatError: Type inconnu, titleId manquant ou structure
            imbriquee inattendue
    """
    if not isinstance(record, dict):
        raise RecordFormatError(f"Enregistrement inattendu: {type(record).__name__}")

    title_id = record.get("titleId")
    if not title_id:
        raise RecordFormatError("titleId manquant")

    content_type = _parse_content_type(record)
    try:
        return _build_title(record, content_type)
    except (AttributeError, TypeError, KeyError, IndexError) as e:
        raise RecordFormatError(f"Enregistrement {title_id!r} mal forme: {e!r}") from e


def _build_title(record: dict[str, Any], content_type: ContentType) -> Title:
    common = {
        "id": record["titleId"],
        "title": record.get("title") or "",
        "cover_image": find_cover(record),
    }

    if content_type == ContentType.EPISODE:
        return Episode(
            **common,
            number=record.get("number") or 0,
            season=find_season(record),
            series=find_series(record),
        )

    if content_type == ContentType.SEASON:
        return Season(
            **common,
            number=record.get("number") or 0,
            series=find_series(record),
        )

    if content_type == ContentType.SERIES:
        return Series(**common)

    return Movie(**common)


def normalize_records(records: Iterable[dict[str, Any]]) -> Iterator[Title]:
    """Normalise paresseusement une liste d'enregistrements, en ignorant les invalides."""
    for record in records:
        try:
            yield normalize_record(record)
        except RecordFormatError as e:
            logger.debug(f"Enregistrement ignore: {e}")


def records_to_episodes(records: Iterable[dict[str, Any]]) -> list[Episode]:
    """
    Convertit une liste d'enregistrements d'episodes en liste triee.

    Les enregistrements qui ne sont pas des episodes sont ignores,
    ainsi que les episodes fantomes (numero 0).
    """
    episodes = [
        title
        for title in normalize_records(records)
        if title.type == ContentType.EPISODE
    ]
    return order_episodes(episodes)
