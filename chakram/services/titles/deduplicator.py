"""
Deduplication of catalog listings.

Catalog listings return one record per season, each embedding its parent
series, so iterating them naively yields the same series once per season.
`dedupe` promotes the series out of the season records and keeps the
first occurrence of each id.
"""

from typing import Iterable, Iterator

from loguru import logger

from chakram.core.entities import ContentType, Series, Title


def dedupe(titles: Iterable[Title]) -> Iterator[Title]:
    """
    Yield the distinct series and the movies referenced by `titles`.

    - Season with an unseen series back-reference: yields that series,
      rebuilt as a standalone Series
    - Series with an unseen id: yields it
    - Movie: always yielded, even if its id repeats
    - Episode and unknown variants: never yielded

    The seen-set lives in the generator, so each call starts fresh.
    Records that cannot be inspected are logged and skipped.
    """
    seen: set[str] = set()

    for title in titles:
        try:
            content_type = title.type

            if content_type == ContentType.SEASON:
                series = title.series
                if series is not None and series.id not in seen:
                    seen.add(series.id)
                    yield Series(
                        id=series.id,
                        title=series.title,
                        cover_image=series.cover_image,
                    )

            elif content_type == ContentType.SERIES:
                if title.id not in seen:
                    seen.add(title.id)
                    yield title

            elif content_type == ContentType.MOVIE:
                yield title

        except (AttributeError, TypeError) as e:
            logger.debug(f"Enregistrement ignore pendant la deduplication: {e!r}")
