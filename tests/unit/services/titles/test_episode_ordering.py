"""
Tests for order_episodes - season listing order.
"""

from chakram.core.entities import Episode
from chakram.services.titles import order_episodes
from tests.fixtures.titles import make_episode


def _pairs(episodes: list[Episode]) -> list[tuple[int, int]]:
    return [(e.season.number if e.season else 0, e.number) for e in episodes]


class TestOrderEpisodes:
    """Tests for order_episodes()."""

    def test_orders_by_season_then_number(self, season_one, season_two):
        episodes = [
            make_episode(2, season_one),
            make_episode(1, season_two),
            make_episode(1, season_one),
            make_episode(0),
        ]

        result = order_episodes(episodes)

        assert _pairs(result) == [(1, 1), (1, 2), (2, 1)]

    def test_placeholders_are_dropped(self, season_one):
        episodes = [make_episode(0, season_one), make_episode(3, season_one)]
        assert [e.number for e in order_episodes(episodes)] == [3]

    def test_without_seasons_orders_by_number(self):
        episodes = [make_episode(3), make_episode(1), make_episode(2)]
        assert [e.number for e in order_episodes(episodes)] == [1, 2, 3]

    def test_missing_season_falls_back_to_number(self, season_two):
        episodes = [make_episode(5, season_two), make_episode(2)]
        assert [e.number for e in order_episodes(episodes)] == [2, 5]

    def test_input_is_not_modified(self, season_one):
        episodes = [make_episode(2, season_one), make_episode(1, season_one)]
        before = list(episodes)

        order_episodes(episodes)

        assert episodes == before

    def test_empty(self):
        assert order_episodes([]) == []
