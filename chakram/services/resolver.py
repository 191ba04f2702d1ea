"""
Service de resolution de titres.

Relie le client catalogue (qui renvoie des resultats bruts, non classes)
au moteur de classement TitleQuery, comme le matcher le fait pour les
resultats de recherche.
"""

from typing import Optional, Union

from loguru import logger

from chakram.core.entities import ContentType, Episode, Title
from chakram.core.ports.api_clients import ICatalogClient
from chakram.services.titles import TitleQuery


class TitleResolverService:
    """
    Retrouve un titre precis parmi les resultats du catalogue.

    Example:
        resolver = TitleResolverService(client=catalog_client)
        best = await resolver.find_best("planet earth", ContentType.SERIES)
    """

    def __init__(self, client: ICatalogClient) -> None:
        self._client = client

    async def find(
        self,
        query: str,
        title_type: Optional[ContentType] = None,
    ) -> list[Title]:
        """
        Recherche et classe les titres correspondant a `query`.

        Args:
            query: Texte libre
            title_type: Ne garder que ce type (SERIES ou MOVIE en pratique,
                les saisons et episodes n'etant jamais retenus)

        Returns:
            Titres dedupliques, du plus au moins pertinent
        """
        candidates = await self._client.search(query)
        ranked = TitleQuery(query).filter(candidates, title_type)
        logger.info(
            f"Recherche '{query}': {len(ranked)} titre(s) sur {len(candidates)} resultat(s)"
        )
        return ranked

    async def find_best(
        self,
        query: str,
        title_type: Optional[ContentType] = None,
    ) -> Optional[Title]:
        """Retourne le meilleur titre pour `query`, ou None."""
        ranked = await self.find(query, title_type)
        return ranked[0] if ranked else None

    async def list_episodes(self, season_ids: Union[str, list[str]]) -> list[Episode]:
        """Liste triee des episodes d'une ou plusieurs saisons."""
        episodes = await self._client.get_episodes(season_ids)
        logger.info(f"{len(episodes)} episode(s) trouves")
        return episodes
