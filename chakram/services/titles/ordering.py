"""Ordering of episode listings by (season number, episode number)."""

from functools import cmp_to_key
from typing import Iterable

from chakram.core.entities import Episode


def _compare_episodes(first: Episode, second: Episode) -> int:
    if (
        first.season is not None
        and second.season is not None
        and first.season.number != second.season.number
    ):
        return first.season.number - second.season.number

    return first.number - second.number


def order_episodes(episodes: Iterable[Episode]) -> list[Episode]:
    """
    Sort episodes for a season listing.

    Placeholder episodes (number 0) are dropped. Episodes are ordered by
    season number when both carry a season with different numbers,
    otherwise by their own number.
    """
    listed = [episode for episode in episodes if episode.number != 0]
    listed.sort(key=cmp_to_key(_compare_episodes))
    return listed
