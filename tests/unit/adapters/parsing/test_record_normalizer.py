"""
Tests unitaires pour le normaliseur d'enregistrements du catalogue.

Ces tests verifient:
- La selection de la couverture (format HD prioritaire, types d'image)
- L'extraction des saisons et series parentes
- La conversion vers chaque variante de titre
- Le rejet des enregistrements invalides
"""

import pytest

from chakram.adapters.parsing import (
    find_cover,
    find_season,
    find_series,
    normalize_record,
    normalize_records,
    records_to_episodes,
)
from chakram.core.entities import ContentType
from chakram.core.exceptions import RecordFormatError
from tests.fixtures.catalog_responses import (
    MOVIE_RECORD,
    UNKNOWN_TYPE_RECORD,
    episode_record,
    season_record,
)


class TestFindCover:
    """Tests pour find_cover()."""

    def test_prefers_hd_format(self):
        assert find_cover(season_record(1)) == "https://img/hd-1.jpg"

    def test_falls_back_to_first_format(self):
        record = {
            "formats": [
                {"videoFormatType": "SD", "images": [{"type": "COVER_ART_MOVIE", "uri": "sd.jpg"}]}
            ]
        }
        assert find_cover(record) == "sd.jpg"

    def test_ignores_other_image_types(self):
        record = {"formats": [{"videoFormatType": "HD", "images": [{"type": "HERO", "uri": "x"}]}]}
        assert find_cover(record) is None

    def test_hd_format_without_images(self):
        record = {"formats": [{"videoFormatType": "HD"}]}
        assert find_cover(record) is None

    def test_no_formats(self):
        assert find_cover({}) is None
        assert find_cover({"formats": []}) is None

    def test_null_entries_are_ignored(self):
        record = {
            "formats": [
                None,
                {"videoFormatType": "HD", "images": [None, {"type": "COVER_ART_TV", "uri": "hd.jpg"}]},
            ]
        }
        assert find_cover(record) == "hd.jpg"
        assert find_cover({"formats": [None]}) is None


class TestAncestors:
    """Tests pour find_season() et find_series()."""

    def test_find_season(self):
        season = find_season(episode_record(2, 5))
        assert season is not None
        assert season.id == "B00SEASON2"
        assert season.number == 2
        assert season.series is None

    def test_find_series(self):
        series = find_series(episode_record(2, 5))
        assert series is not None
        assert series.id == "B00SERIES"
        assert series.title == "Breaking Bad"

    def test_no_ancestors(self):
        assert find_season(MOVIE_RECORD) is None
        assert find_series(MOVIE_RECORD) is None

    def test_null_ancestor_is_ignored(self):
        record = episode_record(1, 2)
        record["ancestorTitles"] = [None, *record["ancestorTitles"]]

        assert find_season(record).id == "B00SEASON1"
        assert find_series(record).id == "B00SERIES"


class TestNormalizeRecord:
    """Tests pour normalize_record()."""

    def test_season(self):
        season = normalize_record(season_record(3))
        assert season.type == ContentType.SEASON
        assert season.number == 3
        assert season.series.id == "B00SERIES"
        assert season.cover_image == "https://img/hd-3.jpg"

    def test_episode(self):
        episode = normalize_record(episode_record(1, 4, "Cancer Man"))
        assert episode.type == ContentType.EPISODE
        assert episode.title == "Cancer Man"
        assert episode.number == 4
        assert episode.season.number == 1
        assert episode.series.title == "Breaking Bad"

    def test_movie(self):
        movie = normalize_record(MOVIE_RECORD)
        assert movie.type == ContentType.MOVIE
        assert movie.id == "B00MOVIE"
        assert movie.cover_image == "https://img/pe.jpg"

    def test_series(self):
        series = normalize_record({"contentType": "SERIES", "titleId": "S1", "title": "Fargo"})
        assert series.type == ContentType.SERIES

    @pytest.mark.parametrize("raw_type", ["TVEpisode", "episode", "EPISODE"])
    def test_content_type_aliases(self, raw_type: str):
        record = {"contentType": raw_type, "titleId": "E1", "number": 1}
        assert normalize_record(record).type == ContentType.EPISODE

    def test_unknown_type_raises(self):
        with pytest.raises(RecordFormatError):
            normalize_record(UNKNOWN_TYPE_RECORD)

    def test_missing_type_raises(self):
        with pytest.raises(RecordFormatError):
            normalize_record({"titleId": "X"})

    def test_missing_id_raises(self):
        with pytest.raises(RecordFormatError):
            normalize_record({"contentType": "MOVIE", "title": "Heat"})

    def test_not_a_dict_raises(self):
        with pytest.raises(RecordFormatError):
            normalize_record(["MOVIE"])

    def test_malformed_nested_structure_raises(self):
        record = {"contentType": "MOVIE", "titleId": "X", "formats": 5}
        with pytest.raises(RecordFormatError):
            normalize_record(record)


class TestNormalizeRecords:
    """Tests pour normalize_records() et records_to_episodes()."""

    def test_invalid_records_are_skipped(self):
        result = list(normalize_records([UNKNOWN_TYPE_RECORD, MOVIE_RECORD, {}]))
        assert [t.id for t in result] == ["B00MOVIE"]

    @pytest.mark.parametrize(
        "broken",
        [
            {"titleId": "X", "contentType": "MOVIE", "formats": [None]},
            {"titleId": "X", "contentType": "EPISODE", "ancestorTitles": [None]},
            {"titleId": "X", "contentType": "MOVIE", "formats": 5},
        ],
    )
    def test_malformed_nested_records_do_not_stop_iteration(self, broken):
        result = list(normalize_records([broken, MOVIE_RECORD]))
        assert result[-1].id == "B00MOVIE"

    def test_records_to_episodes_sorts_and_drops_placeholders(self):
        records = [
            episode_record(2, 1),
            episode_record(1, 2),
            episode_record(1, 0),
            episode_record(1, 1),
            MOVIE_RECORD,
        ]

        episodes = records_to_episodes(records)

        assert [(e.season.number, e.number) for e in episodes] == [(1, 1), (1, 2), (2, 1)]
