"""
Fixtures pytest partagees pour les tests Chakram.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec fichier de log temporaire
- Titres types (series, saisons, films, episodes)
- Mock de l'interface ICatalogClient
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from chakram.config import Settings
from chakram.core.entities import Movie, Season, Series
from chakram.core.ports.api_clients import ICatalogClient


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec un fichier de log dans tmp_path."""
    return Settings(
        cookies="session-id=123-4567890; ubid-main=131-0000000",
        device_id="test-device-id",
        request_timeout=5.0,
        max_retry_attempts=2,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def breaking_bad() -> Series:
    """Serie type."""
    return Series(id="S-BB", title="Breaking Bad")


@pytest.fixture
def breaking_bad_seasons(breaking_bad: Series) -> list[Season]:
    """Trois saisons referencant la meme serie, comme dans une liste du catalogue."""
    return [
        Season(id=f"SE-BB-{n}", title=f"Breaking Bad Season {n}", number=n, series=breaking_bad)
        for n in (1, 2, 3)
    ]


@pytest.fixture
def planet_earth_pair() -> list[Movie]:
    """Un film et sa variante 4K UHD, avec des IDs differents."""
    return [
        Movie(id="M-PE", title="Planet Earth"),
        Movie(id="M-PE-UHD", title="Planet Earth (4K UHD)"),
    ]


@pytest.fixture
def season_one() -> Season:
    """Saison 1 sans serie."""
    return Season(id="SE-1", title="Season 1", number=1)


@pytest.fixture
def season_two() -> Season:
    """Saison 2 sans serie."""
    return Season(id="SE-2", title="Season 2", number=2)


@pytest.fixture
def mock_catalog_client() -> MagicMock:
    """
    Mock de ICatalogClient pour les tests.

    Toutes les methodes async sont des AsyncMock; les valeurs de retour
    doivent etre configurees dans chaque test.
    """
    client = MagicMock(spec=ICatalogClient)
    client.search = AsyncMock(return_value=[])
    client.get_title_info = AsyncMock(return_value=None)
    client.get_episodes = AsyncMock(return_value=[])
    client.get_playback_info = AsyncMock()
    client.fetch_license = AsyncMock()
    client.guess_resume_info = AsyncMock()
    client.close = AsyncMock()
    return client

