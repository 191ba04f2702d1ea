"""
Relance des requetes catalogue avec backoff exponentiel.

Les endpoints ATV repondent 429 quand le client enchaine trop de requetes
(listes d'episodes de plusieurs saisons, rafales de licences). Ces reponses
sont converties en RateLimitError et relancees avec un delai croissant et
du jitter.

Usage:
    @with_retry(max_attempts=5, max_wait=60)
    async def load():
        ...

    response = await request_with_retry(client, "GET", url, params=qs)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Le catalogue a repondu 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        f"Limite de debit atteinte, tentative {retry_state.attempt_number} "
        f"echouee, nouvel essai dans {retry_state.next_action.sleep:.1f}s"
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives, en secondes

    Returns:
        Decorateur tenacity; la derniere RateLimitError est relevee telle quelle
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        # Retry-After peut aussi etre une date HTTP
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en relancant automatiquement les 429.

    Les autres erreurs HTTP (4xx, 5xx) sont propagees sans relance.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL absolue ou relative au base_url du client
        max_attempts: Nombre maximum de tentatives
        **kwargs: Transmis a client.request() (params, data, headers...)

    Raises:
        RateLimitError: 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
