"""
Objets valeur immutables du workflow de lecture.

Exports :
- ResourceType : Ressources demandees a GetPlaybackResources
- ManifestInfo : Manifeste DASH servi par un CDN
- PlaybackInfo : URL de licence + manifestes
- ResumeInfo : Titre et position de reprise
- PlaybackVars : Identifiants client pour la lecture
"""

from chakram.core.value_objects.playback import (
    ManifestInfo,
    PlaybackInfo,
    PlaybackVars,
    ResourceType,
    ResumeInfo,
)

__all__ = [
    "ManifestInfo",
    "PlaybackInfo",
    "PlaybackVars",
    "ResourceType",
    "ResumeInfo",
]
