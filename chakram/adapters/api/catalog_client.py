"""
Client du catalogue Prime Video (endpoints ATV).

Implemente ICatalogClient: recherche de titres, metadonnees, listes
d'episodes, resolution des manifestes DASH et demande de licences
Widevine. L'authentification repose sur les cookies d'une session
navigateur, envoyes tels quels a chaque requete.

Note: le catalogue n'utilise pas le protocole Widevine standard pour les
licences. Un lecteur doit passer par fetch_license, pas appeler
directement l'URL de licence.
"""

import asyncio
import base64
import json
import random
import re
from typing import Any, Optional, Union

import httpx
from loguru import logger

from chakram.adapters.api.retry import request_with_retry
from chakram.adapters.parsing import normalize_records, records_to_episodes
from chakram.core.entities import Episode, Title
from chakram.core.exceptions import (
    CatalogError,
    LicenseError,
    NotAuthorizedError,
    ResumeInfoError,
)
from chakram.core.ports.api_clients import ICatalogClient
from chakram.core.value_objects import (
    ManifestInfo,
    PlaybackInfo,
    PlaybackVars,
    ResourceType,
    ResumeInfo,
)
from chakram.utils.constants import (
    ATV_CONTENT_URL,
    ATV_PLAYBACK_URL,
    DEFAULT_DEVICE_TYPE_ID,
    DEFAULT_FIRMWARE,
    HTML_ACCEPT,
    NOTIFIER_RESOURCES_URL,
    PLAYBACK_DEVICE_TYPE_ID,
    PLAYBACK_OS_NAME,
    PLAYBACK_OS_VERSION,
    PLAYER_TOKEN_URL,
    USER_AGENT,
    VIDEO_DETAIL_URL,
)
from chakram.utils.device import generate_device_id

_RESUME_JSON_RE = re.compile(r'type="application/json">(.+?)</script')


def _value_when(check: bool, value: Any) -> Any:
    """Retourne `value` si `check`, sinon None (parametre omis)."""
    return value if check else None


class ChakramClient(ICatalogClient):
    """
    Client HTTP du catalogue.

    Un unique httpx.AsyncClient est partage pour beneficier du connection
    pooling; il est cree a la premiere requete.

    Example:
        client = ChakramClient(cookies="session-id=...; ubid-main=...")
        titles = await client.search("planet earth")
        info = await client.get_playback_info(titles[0].id)
        await client.close()
    """

    def __init__(
        self,
        cookies: Optional[str],
        device_id: Optional[str] = None,
        user_agent: str = USER_AGENT,
        timeout: float = 30.0,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client.

        Args:
            cookies: Header Cookie d'une session navigateur connectee
            device_id: Identifiant d'appareil; genere si absent
            user_agent: User agent annonce (sert aussi de cle au device id)
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives maximum sur reponse 429
        """
        self._cookies = cookies or ""
        self._user_agent = user_agent
        self._device_id = device_id or generate_device_id(user_agent)
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def device_id(self) -> str:
        """Identifiant d'appareil envoye avec les requetes."""
        return self._device_id

    async def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout, connect=10.0),
                follow_redirects=True,
            )
        return self._client

    def _fill_params(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Complete les parametres avec les valeurs par defaut de l'appareil.

        Les valeurs explicites l'emportent sur les defauts; les valeurs None
        sont retirees pour ne pas apparaitre dans la query string.
        """
        filled = {
            "deviceID": self._device_id,
            "deviceTypeID": DEFAULT_DEVICE_TYPE_ID,
            "firmware": DEFAULT_FIRMWARE,
            "format": "json",
            **params,
        }
        return {key: value for key, value in filled.items() if value is not None}

    async def _request(
        self,
        url: str,
        method: str = "GET",
        params: Optional[dict[str, Any]] = None,
        data: Optional[dict[str, Any]] = None,
        fill_params: bool = True,
        html: bool = False,
    ) -> httpx.Response:
        """
        Execute une requete authentifiee par cookies.

        Args:
            url: URL absolue
            method: Methode HTTP
            params: Parametres de query string
            data: Corps de formulaire (POST)
            fill_params: Ajoute les parametres d'appareil par defaut
            html: Annonce un navigateur attendant du HTML
        """
        if fill_params:
            query = self._fill_params(params or {})
        else:
            query = {k: v for k, v in (params or {}).items() if v is not None}

        headers = {
            "Cookie": self._cookies,
            "User-Agent": self._user_agent,
        }
        if html:
            headers["Accept"] = HTML_ACCEPT

        logger.debug(f"{method} {url}")
        client = await self._get_client()
        return await request_with_retry(
            client,
            method,
            url,
            max_attempts=self._max_attempts,
            params=query or None,
            data=data,
            headers=headers,
        )

    async def _load_json(self, url: str, **kwargs) -> Any:
        response = await self._request(url, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise CatalogError(f"Reponse non JSON pour {url}") from e

    async def _get_list(
        self,
        catalog: str = "Browse",
        content_type: Optional[str] = None,
        order_by: str = "MostPopular",
        start: int = 0,
        results_count: Optional[int] = None,
        rollup_season: bool = False,
        season_ids: Optional[list[str]] = None,
        title_ids: Optional[list[str]] = None,
        search_string: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Interroge un endpoint de liste du catalogue.

        Args:
            catalog: Endpoint (Browse, GetASINDetails)
            content_type: "Movie" ou "TVEpisode"
            order_by: Tri, envoye seulement avec un content_type
            start: Index de depart
            results_count: Nombre de resultats demandes
            rollup_season: Regroupe les episodes par saison
            season_ids: Saisons dont lister les episodes
            title_ids: Titres dont lire les details
            search_string: Texte de recherche libre

        Returns:
            Corps du message (contient "titles")

        Raises:
            CatalogError: Erreur explicite ou reponse mal formee
        """
        qs = {
            "ContentType": content_type,
            "IncludeAll": "T",
            "NumberOfResults": results_count,
            "OrderBy": _value_when(content_type is not None, order_by),
            "RollUpToSeason": _value_when(rollup_season, "T"),
            "StartIndex": start,
            "SeasonASIN": ",".join(season_ids) if season_ids else None,
            "asinList": ",".join(title_ids) if title_ids else None,
            "SearchString": search_string,
            "playbackInformationRequired": True,
            "version": 2,
        }

        result = await self._load_json(f"{ATV_CONTENT_URL}catalog/{catalog}", params=qs)
        if not isinstance(result, dict):
            raise CatalogError(f"Reponse catalogue inattendue pour {catalog}")
        if result.get("error"):
            raise CatalogError(str(result["error"]))

        try:
            return result["message"]["body"]
        except (KeyError, TypeError) as e:
            raise CatalogError(f"Reponse catalogue inattendue pour {catalog}") from e

    async def search(self, query: str) -> list[Title]:
        """
        Recherche des titres par texte libre.

        Les resultats sont normalises mais ni dedupliques ni classes:
        TitleQuery s'en charge.
        """
        body = await self._get_list(search_string=query)
        titles = list(normalize_records(body.get("titles") or []))
        logger.debug(f"Recherche '{query}': {len(titles)} enregistrement(s)")
        return titles

    async def get_title_info(
        self, title_ids: Union[str, list[str]]
    ) -> Union[Title, list[Title], None]:
        """
        Recupere les metadonnees d'un ou plusieurs titres.

        Returns:
            Le titre (ou None s'il est inconnu) pour un ID unique,
            la liste des titres pour une liste d'IDs
        """
        single = isinstance(title_ids, str)
        body = await self._get_list(
            catalog="GetASINDetails",
            title_ids=[title_ids] if single else title_ids,
        )
        titles = list(normalize_records(body.get("titles") or []))

        if single:
            return titles[0] if titles else None
        return titles

    async def get_episodes(self, season_ids: Union[str, list[str]]) -> list[Episode]:
        """
        Liste les episodes d'une ou plusieurs saisons.

        Retourne une liste vide si l'ID fourni est celui d'une serie.
        Les episodes fantomes (numero 0) sont retires.
        """
        body = await self._get_list(
            content_type="TVEpisode",
            season_ids=[season_ids] if isinstance(season_ids, str) else season_ids,
        )
        return records_to_episodes(body.get("titles") or [])

    async def _get_playback_vars(self) -> PlaybackVars:
        """
        Recupere le token de lecture et les identifiants client.

        Les deux ressources sont chargees en parallele. Le token est
        renvoye en JSONP: `CALLBACK(<json>);`.

        Raises:
            NotAuthorizedError: Session absente ou expiree
        """
        callback = f"onWebToken_{random.randrange(484)}"

        notifier_resources, token_response = await asyncio.gather(
            self._load_json(NOTIFIER_RESOURCES_URL),
            self._request(
                PLAYER_TOKEN_URL,
                params={"callback": callback},
                fill_params=False,
                html=True,
            ),
        )

        token_raw = token_response.text.strip()
        token_json = token_raw[len(callback) + 1 : len(token_raw) - 2]
        try:
            token = json.loads(token_json).get("token")
        except (ValueError, AttributeError):
            token = None
        if not token:
            raise NotAuthorizedError()

        try:
            customer_data = dict(notifier_resources["resourceData"]["GBCustomerData"])
        except (KeyError, TypeError, ValueError) as e:
            raise NotAuthorizedError("Donnees client absentes de la session") from e

        filled = self._fill_params({"token": token, **customer_data})
        return PlaybackVars(
            customer_id=filled.get("customerId", ""),
            device_id=filled["deviceID"],
            marketplace_id=filled.get("marketplaceId", ""),
            token=filled["token"],
        )

    def _playback_resources_params(
        self,
        playback_vars: PlaybackVars,
        title_id: str,
        resource_type: ResourceType,
    ) -> dict[str, Any]:
        """Parametres de GetPlaybackResources pour une ressource donnee."""
        is_license = resource_type == ResourceType.WIDEVINE2_LICENSE
        return {
            "asin": title_id,
            "audioTrackId": "all",
            "consumptionType": "Streaming",
            "customerID": playback_vars.customer_id,
            "desiredResources": resource_type.value,
            "deviceBitrateAdaptationsOverride": _value_when(not is_license, "CVBR,CBR"),
            "deviceDrmOverride": "CENC",
            "deviceID": playback_vars.device_id,
            "deviceProtocolOverride": _value_when(not is_license, "Http"),
            "deviceStreamingTechnologyOverride": "DASH",
            "deviceTypeID": PLAYBACK_DEVICE_TYPE_ID,
            "firmware": "1",
            "format": _value_when(not is_license, "json"),
            "gascEnabled": False,
            "languageFeature": "MLFv2",
            "marketplaceID": playback_vars.marketplace_id,
            "resourceUsage": "ImmediateConsumption",
            "supportedDRMKeyScheme": _value_when(not is_license, "DUAL_KEY"),
            "titleDecorationScheme": _value_when(not is_license, "primary-content"),
            "token": playback_vars.token,
            "version": "1",
            "videoMaterialType": "Feature",
            "operatingSystemName": PLAYBACK_OS_NAME,
            "operatingSystemVersion": PLAYBACK_OS_VERSION,
        }

    def _playback_resources_url(
        self,
        playback_vars: PlaybackVars,
        title_id: str,
        resource_type: ResourceType,
    ) -> str:
        params = self._playback_resources_params(playback_vars, title_id, resource_type)
        return str(httpx.URL(ATV_PLAYBACK_URL, params=self._fill_params(params)))

    async def get_playback_info(self, title_id: str) -> PlaybackInfo:
        """
        Resout les manifestes DASH (DRM CENC) et l'URL de licence d'un titre.

        Args:
            title_id: ID d'un episode ou d'un film

        Raises:
            NotAuthorizedError: Session absente ou expiree
            CatalogError: Reponse de lecture inattendue
        """
        playback_vars = await self._get_playback_vars()
        license_url = self._playback_resources_url(
            playback_vars, title_id, ResourceType.WIDEVINE2_LICENSE
        )

        playback_data = await self._load_json(
            ATV_PLAYBACK_URL,
            method="POST",
            params=self._playback_resources_params(
                playback_vars, title_id, ResourceType.PLAYBACK_URLS
            ),
        )
        if not isinstance(playback_data, dict):
            raise CatalogError(f"Ressources de lecture inattendues pour {title_id}")
        if playback_data.get("error"):
            raise CatalogError(str(playback_data["error"]))

        try:
            url_sets = playback_data["audioVideoUrls"]["avCdnUrlSets"]
            manifests = tuple(
                ManifestInfo(
                    cdn=url_set["cdn"].lower(),
                    url=url_set["avUrlInfoList"][0]["url"],
                )
                for url_set in url_sets
                if url_set.get("streamingTechnology") == "DASH"
                and url_set.get("drm") == "CENC"
            )
        except (KeyError, IndexError, TypeError) as e:
            raise CatalogError(f"Ressources de lecture inattendues pour {title_id}") from e

        logger.info(f"Lecture de {title_id}: {len(manifests)} manifeste(s) DASH")
        return PlaybackInfo(license_url=license_url, manifests=manifests)

    async def fetch_license(
        self, license_url: str, challenge: Union[bytes, str]
    ) -> str:
        """
        Demande une licence Widevine pour un challenge.

        Args:
            license_url: URL de PlaybackInfo.license_url
            challenge: Challenge binaire, ou deja encode en base64

        Returns:
            Licence encodee en base64

        Raises:
            LicenseError: Refus ou reponse inattendue
        """
        if isinstance(challenge, (bytes, bytearray)):
            encoded = base64.b64encode(challenge).decode("ascii")
        else:
            encoded = challenge

        response = await self._request(
            license_url,
            method="POST",
            data={
                "includeHdcpTestKeyInLicense": "true",
                "widevine2Challenge": encoded,
            },
            fill_params=False,
        )

        try:
            payload = response.json()
        except ValueError:
            raise LicenseError(response.text)

        if isinstance(payload, str):
            # Certaines erreurs arrivent comme une chaine JSON encodee deux fois
            try:
                payload = json.loads(payload)
            except ValueError:
                raise LicenseError(payload)

        if not isinstance(payload, dict):
            raise LicenseError(str(payload))

        if payload.get("error"):
            raise LicenseError(str(payload["error"]))

        errors_by_resource = payload.get("errorsByResource")
        if errors_by_resource:
            raise LicenseError(str(errors_by_resource.get("Widevine2License", errors_by_resource)))

        message = payload.get("message")
        if isinstance(message, dict) and message.get("statusCode") == "ERROR":
            body = message.get("body") or {}
            raise LicenseError(str(body.get("message", "License request failed")))

        try:
            return payload["widevine2License"]["license"]
        except (KeyError, TypeError) as e:
            raise LicenseError(json.dumps(payload)) from e

    async def guess_resume_info(self, title_id: str) -> ResumeInfo:
        """
        Devine le titre et la position de reprise depuis la page de detail.

        L'ID retourne peut etre celui d'un episode si `title_id` designe une
        serie. Repose sur le scraping de la page web: peu fiable.

        Raises:
            ResumeInfoError: Aucune configuration video trouvee
        """
        response = await self._request(
            VIDEO_DETAIL_URL + title_id,
            fill_params=False,
            html=True,
        )

        match = _RESUME_JSON_RE.search(response.text)
        if not match:
            raise ResumeInfoError()

        try:
            video_config = json.loads(match.group(1)).get("videoConfig")
        except (ValueError, AttributeError) as e:
            raise ResumeInfoError() from e

        if not video_config or not video_config.get("asin"):
            raise ResumeInfoError()

        return ResumeInfo(
            id=video_config["asin"],
            start_time_millis=video_config.get("position") or 0,
        )

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
