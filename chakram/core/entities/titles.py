"""
Catalog title entities.

The catalog returns four kinds of records. They are modelled as a closed
tagged union (`Title`) of frozen dataclasses sharing a base shape; consumers
switch on the `type` discriminant, never on the concrete class.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

WATCH_URL_TEMPLATE = "https://www.amazon.com/dp/{title_id}/?autoplay=1"


class ContentType(Enum):
    """Discriminant of the Title union."""

    EPISODE = "EPISODE"
    MOVIE = "MOVIE"
    SEASON = "SEASON"
    SERIES = "SERIES"


@dataclass(frozen=True)
class BaseTitle:
    """
    Fields shared by every catalog title.

    Attributes:
        id: Opaque catalog identifier (ASIN), unique within one fetch
        title: Display title
        cover_image: Cover art URI, if the record carried one
    """

    id: str = ""
    title: str = ""
    cover_image: Optional[str] = None

    @property
    def watch_url(self) -> str:
        """URL opening the title in the web player."""
        return WATCH_URL_TEMPLATE.format(title_id=self.id)


@dataclass(frozen=True)
class Series(BaseTitle):
    """A TV series. No fields beyond the base shape."""

    type: ContentType = field(default=ContentType.SERIES, init=False)


@dataclass(frozen=True)
class Movie(BaseTitle):
    """A feature film."""

    type: ContentType = field(default=ContentType.MOVIE, init=False)


@dataclass(frozen=True)
class Season(BaseTitle):
    """
    One season of a series.

    Attributes:
        number: 1-based ordinal within the series
        series: Parent series, absent for standalone seasons.
            Never followed further than one level.
    """

    number: int = 0
    series: Optional[Series] = None
    type: ContentType = field(default=ContentType.SEASON, init=False)


@dataclass(frozen=True)
class Episode(BaseTitle):
    """
    One episode of a season.

    Attributes:
        number: Ordinal within the season. 0 marks a placeholder record
            that never appears in episode listings.
        season: Parent season, if known
        series: Parent series, if known
    """

    number: int = 0
    season: Optional[Season] = None
    series: Optional[Series] = None
    type: ContentType = field(default=ContentType.EPISODE, init=False)


Title = Union[Series, Season, Episode, Movie]
