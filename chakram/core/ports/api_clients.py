"""
Interfaces ports pour le client du catalogue.

Interface abstraite (port) définissant le contrat du client catalogue.
L'implémentation concrète (adaptateur HTTP) vit dans adapters/api/.
Les services dépendent uniquement de ce contrat.
"""

from abc import ABC, abstractmethod
from typing import Union

from chakram.core.entities import Episode, Title
from chakram.core.value_objects import PlaybackInfo, ResumeInfo


class ICatalogClient(ABC):
    """
    Interface du catalogue de titres.

    Les résultats retournés sont des entités normalisées mais non classées:
    le classement par pertinence est fait par les services de titres.
    """

    @abstractmethod
    async def search(self, query: str) -> list[Title]:
        """
        Recherche des titres par texte libre.

        Args :
            query : Texte de recherche

        Retourne :
            Liste des titres bruts, dans l'ordre du catalogue, non dédupliqués
        """
        ...

    @abstractmethod
    async def get_title_info(
        self, title_ids: Union[str, list[str]]
    ) -> Union[Title, list[Title], None]:
        """
        Récupère les métadonnées d'un ou plusieurs titres.

        Args :
            title_ids : ID unique ou liste d'IDs

        Retourne :
            Le titre (ou None) pour un ID unique, une liste sinon
        """
        ...

    @abstractmethod
    async def get_episodes(self, season_ids: Union[str, list[str]]) -> list[Episode]:
        """
        Liste les épisodes d'une ou plusieurs saisons, triés.

        Retourne une liste vide si l'ID fourni est celui d'une série.
        """
        ...

    @abstractmethod
    async def get_playback_info(self, title_id: str) -> PlaybackInfo:
        """Résout les manifestes DASH et l'URL de licence d'un épisode ou film."""
        ...

    @abstractmethod
    async def fetch_license(
        self, license_url: str, challenge: Union[bytes, str]
    ) -> str:
        """
        Demande une licence Widevine.

        Args :
            license_url : URL retournée dans PlaybackInfo
            challenge : Challenge binaire, ou déjà encodé en base64

        Retourne :
            Licence encodée en base64
        """
        ...

    @abstractmethod
    async def guess_resume_info(self, title_id: str) -> ResumeInfo:
        """Devine le titre et la position de reprise pour un film, une série ou un épisode."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les ressources réseau."""
        ...
