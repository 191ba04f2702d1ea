"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API : Contrats pour les services externes
- ICatalogClient : Recherche, métadonnées, épisodes, lecture et licences
"""

from chakram.core.ports.api_clients import ICatalogClient

__all__ = [
    "ICatalogClient",
]
