"""
Normalisation des enregistrements bruts du catalogue.

Convertit le JSON heterogene renvoye par les endpoints ATV en entites
typees (Series, Season, Episode, Movie).
"""

from chakram.adapters.parsing.record_normalizer import (
    find_cover,
    find_season,
    find_series,
    normalize_record,
    normalize_records,
    records_to_episodes,
)

__all__ = [
    "find_cover",
    "find_season",
    "find_series",
    "normalize_record",
    "normalize_records",
    "records_to_episodes",
]
