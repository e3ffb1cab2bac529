"""
Relance avec backoff exponentiel pour les API de metadonnees.

Seules les reponses 429 (rate limiting) sont relancees, avec un delai
croissant et du jitter. Toute autre erreur HTTP remonte a l'appelant,
qui la transforme en "item d'origine" a la frontiere d'enrichissement.

Usage:
    response = await request_with_retry(client, "GET", "/search/movie", params=params)
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
    Le service a repondu 429 Too Many Requests.

    Attributes:
        retry_after: Delai annonce par l'en-tete Retry-After (secondes), ou None
    """

    def __init__(self, retry_after: Optional[float] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Retry-After en secondes ; les dates HTTP sont ignorees."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _log_retry(state: RetryCallState) -> None:
    logger.debug(
        "Rate limit atteint, nouvelle tentative",
        attempt=state.attempt_number,
        wait=round(state.next_action.sleep, 2) if state.next_action else None,
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur tenacity : relance une coroutine levant RateLimitError.

    Jitter exponentiel (1s minimum, max_wait maximum) ; la derniere
    RateLimitError est relevee telle quelle apres max_attempts essais.
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    **kwargs,
) -> httpx.Response:
    """
    Envoie une requete via le client et relance tant que le service repond 429.

    Args:
        client: Client httpx async (base_url et authentification deja configures)
        method: Verbe HTTP
        url: Chemin ou URL absolue
        max_attempts: Nombre total d'essais
        **kwargs: Transmis a client.request() (params, json, headers...)

    Raises:
        RateLimitError: 429 persistant
        httpx.HTTPStatusError: Toute autre reponse en erreur, sans relance
    """

    @with_retry(max_attempts=max_attempts)
    async def _send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _send()
