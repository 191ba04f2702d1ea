"""
Tests pour les entites titres (Series, Season, Episode, Movie).
"""

import dataclasses

import pytest

from chakram.core.entities import ContentType, Episode, Movie, Season, Series


class TestDiscriminant:
    """Chaque variante porte son type."""

    @pytest.mark.parametrize(
        ("cls", "expected"),
        [
            (Series, ContentType.SERIES),
            (Season, ContentType.SEASON),
            (Episode, ContentType.EPISODE),
            (Movie, ContentType.MOVIE),
        ],
    )
    def test_type_is_fixed(self, cls, expected):
        assert cls(id="X", title="T").type == expected

    def test_type_is_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            Movie(id="X", title="T", type=ContentType.SERIES)


class TestTitleFields:
    """Champs et URL derivee."""

    def test_watch_url(self):
        movie = Movie(id="B00MOVIE", title="Heat")
        assert movie.watch_url == "https://www.amazon.com/dp/B00MOVIE/?autoplay=1"

    def test_defaults(self):
        episode = Episode(id="E1")
        assert episode.title == ""
        assert episode.cover_image is None
        assert episode.number == 0
        assert episode.season is None
        assert episode.series is None

    def test_season_back_reference(self, breaking_bad):
        season = Season(id="SE1", title="Season 1", number=1, series=breaking_bad)
        assert season.series.id == "S-BB"

    def test_titles_are_immutable(self):
        movie = Movie(id="M1", title="Heat")
        with pytest.raises(dataclasses.FrozenInstanceError):
            movie.title = "Other"
