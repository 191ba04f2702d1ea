"""
Business entities representing catalog titles.

Exports:
- ContentType: Discriminant of the Title union
- Title: Union of the four title variants
- Series, Season, Episode, Movie: The variants themselves
"""

from chakram.core.entities.titles import (
    BaseTitle,
    ContentType,
    Episode,
    Movie,
    Season,
    Series,
    Title,
)

__all__ = [
    "BaseTitle",
    "ContentType",
    "Episode",
    "Movie",
    "Season",
    "Series",
    "Title",
]
