"""
Client HTTP du catalogue Prime Video.

Ce module fournit l'adaptateur implementant ICatalogClient
(core/ports/api_clients.py) sur les endpoints ATV:
- ChakramClient: recherche, metadonnees, episodes, lecture, licences

Infrastructure partagee:
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: relance avec backoff exponentiel
"""

from chakram.adapters.api.catalog_client import ChakramClient
from chakram.adapters.api.retry import RateLimitError, request_with_retry, with_retry

__all__ = [
    "ChakramClient",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
]
