"""
Ranking of catalog titles against a free-text query.

TitleQuery combines deduplication, type filtering, UHD-variant suppression
and scoring. When a title exists both as "X" and "X (4K UHD)", only the UHD
record survives, whichever of the two the catalog listed first.
"""

import re
from typing import Iterable, Optional

from loguru import logger

from chakram.core.entities import ContentType, Title
from chakram.services.titles.deduplicator import dedupe
from chakram.services.titles.scorer import TitleScorer

UHD_MARKER = "4K UHD"

_UHD_MARKER_RE = re.compile(r"\s*\(4K UHD\)\s*")


def strip_uhd_marker(title: str) -> str:
    """
    Remove the "(4K UHD)" marker and its surrounding whitespace.

    A bare "4K UHD" without parentheses is part of the title and is kept.
    A marker in the middle of a title collapses to a single space:
    "Foo (4K UHD) Bar" gives "Foo Bar".
    """
    return _UHD_MARKER_RE.sub(" ", title).strip()


class TitleQuery:
    """
    Ranks candidate titles against one query.

    Example:
        query = TitleQuery("planet earth")
        ranked = query.filter(titles, title_type=ContentType.SERIES)
    """

    def __init__(self, query: str) -> None:
        self.query = query
        self._scorer = TitleScorer(query)

    def filter(
        self,
        titles: Iterable[Title],
        title_type: Optional[ContentType] = None,
    ) -> list[Title]:
        """
        Deduplicate, filter, score and rank `titles`.

        Args:
            titles: Candidate titles, consumed once
            title_type: Keep only this variant when given

        Returns:
            Matching titles (score > 0), best first. Equal scores keep
            their input order.
        """
        has_uhd_version: set[str] = set()
        scored: list[tuple[Title, float]] = []

        for title in dedupe(titles):
            try:
                if title_type is not None and title.type != title_type:
                    continue

                display = title.title
                if UHD_MARKER in display:
                    base = strip_uhd_marker(display)
                    # "4K UHD" sans parentheses fait partie du titre
                    if base != display:
                        has_uhd_version.add(base)

                if display in has_uhd_version:
                    # Version SD dont la version UHD est deja connue
                    continue

                title_score = self._scorer.score(display)
            except (AttributeError, TypeError) as e:
                logger.debug(f"Titre ignore pendant le classement: {e!r}")
                continue

            if title_score > 0:
                scored.append((title, title_score))

        # La version SD a pu etre vue avant sa jumelle UHD
        kept = [
            (title, title_score)
            for title, title_score in scored
            if title.title not in has_uhd_version
        ]

        # sort() est stable: les ex aequo gardent l'ordre d'entree
        kept.sort(key=lambda pair: pair[1], reverse=True)

        logger.debug(
            f"Requete '{self.query}': {len(kept)} titre(s) retenu(s) sur {len(scored)} score(s)"
        )
        return [title for title, _ in kept]
