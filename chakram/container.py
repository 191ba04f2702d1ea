"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI:
configuration, client catalogue et service de resolution de titres.
"""

from dependency_injector import containers, providers

from .adapters.api.catalog_client import ChakramClient
from .config import Settings
from .services.resolver import TitleResolverService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.catalog_client()
        resolver = container.title_resolver()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client catalogue - Singleton pour partager le pool de connexions
    catalog_client = providers.Singleton(
        ChakramClient,
        cookies=config.provided.cookies,
        device_id=config.provided.device_id,
        user_agent=config.provided.user_agent,
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.max_retry_attempts,
    )

    # Service de resolution (sans etat propre) - Factory
    title_resolver = providers.Factory(
        TitleResolverService,
        client=catalog_client,
    )
