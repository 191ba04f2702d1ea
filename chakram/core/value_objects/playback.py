"""
Objets valeur pour le workflow de lecture.

Objets immutables decrivant les manifestes DASH disponibles, l'URL de
licence Widevine et les informations de reprise d'un titre.
"""

from dataclasses import dataclass
from enum import Enum


class ResourceType(Enum):
    """Ressources demandees a l'endpoint GetPlaybackResources."""

    WIDEVINE2_LICENSE = "Widevine2License"
    PLAYBACK_URLS = "AudioVideoUrls,SubtitleUrls"


@dataclass(frozen=True)
class ManifestInfo:
    """
    Manifeste DASH (.mpd) servi par un CDN.

    Attributs:
        cdn: Nom du CDN fournissant la ressource (en minuscules)
        url: URL du manifeste
    """

    cdn: str
    url: str


@dataclass(frozen=True)
class PlaybackInfo:
    """
    Informations necessaires pour lire un titre en DASH + Widevine.

    Attention: la licence ne peut pas etre demandee directement a
    `license_url` par un lecteur Widevine standard, il faut passer par
    ICatalogClient.fetch_license.

    Attributs:
        license_url: URL de l'endpoint de licence (deja parametree)
        manifests: Manifestes DASH/CENC disponibles
    """

    license_url: str
    manifests: tuple[ManifestInfo, ...] = ()


@dataclass(frozen=True)
class ResumeInfo:
    """
    Point de reprise devine depuis la page de detail d'un titre.

    Attributs:
        id: ID du titre a lire (un episode si l'ID demande etait une serie)
        start_time_millis: Position de reprise en millisecondes
    """

    id: str
    start_time_millis: int = 0


@dataclass(frozen=True)
class PlaybackVars:
    """Variables client obtenues avant toute requete de lecture."""

    customer_id: str
    device_id: str
    marketplace_id: str
    token: str
