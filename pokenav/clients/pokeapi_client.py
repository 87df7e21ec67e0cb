import asyncio
import logging

import httpx

from pokenav import config
from pokenav.decoder import decode_pokemon
from pokenav.exceptions import (
    MalformedPayload,
    PokemonNotFound,
    RequestTimedOut,
    TransportError,
    UnexpectedStatus,
)
from pokenav.models import Pokemon

logger = logging.getLogger(__name__)


class PokeAPIClient:
    BASE_URL = config.DEFAULT_BASE_URL
    TIMEOUT = config.DEFAULT_TIMEOUT  # seconds, upper bound for the whole request

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout if timeout is not None else self.TIMEOUT
        # transport is only injected by tests; None means the real network
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=transport
        )

    async def _get(self, url: str) -> httpx.Response:
        """Issues one GET and maps every transport-level failure."""
        try:
            # httpx timeouts are per phase, wait_for bounds the request as a whole
            return await asyncio.wait_for(self.client.get(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"PokeAPI request {url} timed out after {self.timeout}s")
            raise RequestTimedOut(self.timeout)
        except httpx.RequestError as e:
            logger.error(f"PokeAPI network error for {url}: {str(e)}")
            raise TransportError(e) from e

    async def fetch_pokemon(self, pokemon_id: int) -> Pokemon:
        """
        Fetches and decodes a single Pokemon. One network request per call,
        nothing is cached and nothing is retried.
        """
        url = f"/pokemon/{pokemon_id}"
        logger.info(f"Fetching Pokemon id={pokemon_id}")
        response = await self._get(url)

        if response.status_code == 404:
            # Body is not parsed for a 404
            raise PokemonNotFound(pokemon_id)
        if response.status_code != 200:
            logger.error(f"PokeAPI returned HTTP {response.status_code} for id={pokemon_id}")
            raise UnexpectedStatus(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedPayload("PokeAPI returned a body that is not JSON") from e
        return decode_pokemon(data)

    async def close(self):
        """Release pooled connections (call on app shutdown)."""
        await self.client.aclose()
