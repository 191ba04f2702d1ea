"""
Utilitaires partages pour les commandes CLI de Chakram.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant le client
- run_async : execute une coroutine de commande et convertit les erreurs en code retour
"""

import asyncio
from contextlib import contextmanager
from functools import wraps
from typing import Any, Coroutine

import httpx
import typer
from loguru import logger as loguru_logger
from rich.console import Console

from chakram.adapters.api.retry import RateLimitError
from chakram.container import Container
from chakram.core.exceptions import ChakramError, NotAuthorizedError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("chakram")
    try:
        yield
    finally:
        loguru_logger.enable("chakram")


def with_container(requires_auth: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Le client catalogue est ferme a la fin de la commande.

    Args:
        requires_auth: Si True (defaut), exige des cookies de session.

    Usage:
        @with_container()
        async def my_command(container, ...):
            client = container.catalog_client()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_auth and not container.config().auth_enabled:
                raise NotAuthorizedError(
                    "Cookies de session absents (variable CHAKRAM_COOKIES)"
                )
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.catalog_client().close()
        return wrapper
    return decorator


def run_async(coro: Coroutine[Any, Any, Any]) -> None:
    """
    Execute la coroutine d'une commande.

    Les erreurs attendues (catalogue, reseau, limite de debit) sont
    affichees en rouge et terminent la commande avec le code 1.
    """
    try:
        asyncio.run(coro)
    except (ChakramError, RateLimitError, httpx.HTTPError) as e:
        loguru_logger.debug(f"Commande interrompue: {e!r}")
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)
