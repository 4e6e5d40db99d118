import asyncio
import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from pokedex.mappers import map_details_response, map_list_response
from pokedex.models import (
    Creature,
    CreatureDetails,
    PokemonDetailsResponseDto,
    PokemonListResponseDto,
)
from pokedex.result import Result

logger = logging.getLogger(__name__)

# Raised inside the client only; the public methods turn it into a failed Result
class APIClientError(Exception):
    def __init__(self, detail: str):
        self.detail = f"External API Error: {detail}"
        super().__init__(self.detail)

class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2/pokemon"
    PAGE_SIZE = 20
    TIMEOUT_SECONDS = 15.0  # connect, socket and whole-request

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = self.TIMEOUT_SECONDS if timeout is None else timeout
        self.client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))

    async def fetch_list(self) -> Result[list[Creature]]:
        """Fetches the first PAGE_SIZE creatures of the catalog."""
        try:
            data = await self._fetch_json(self.base_url, params={"limit": self.PAGE_SIZE})
            dto = self._decode(PokemonListResponseDto, data)
            return Result.success(map_list_response(dto))
        except APIClientError as e:
            return Result.failure(e.detail)
        except Exception as e:
            logger.exception("Unexpected error while fetching the Pokemon list.")
            return Result.failure(str(e) or type(e).__name__)

    async def fetch_detail(self, name: str) -> Result[CreatureDetails]:
        """Fetches the details of one creature. The path segment is lowercased."""
        # A blank segment would hit the list endpoint instead
        if not name.strip():
            logger.error("Refusing to fetch Pokemon details for a blank name.")
            return Result.failure("Pokemon name is required.")

        normalized_name = name.strip().lower()
        url = f"{self.base_url}/{quote(normalized_name, safe='')}"

        try:
            data = await self._fetch_json(url, pokemon_name=name)
            dto = self._decode(PokemonDetailsResponseDto, data)
            return Result.success(map_details_response(dto))
        except APIClientError as e:
            return Result.failure(e.detail)
        except Exception as e:
            logger.exception(f"Unexpected error while fetching Pokemon: {normalized_name}")
            return Result.failure(str(e) or type(e).__name__)

    async def _fetch_json(
        self,
        url: str,
        params: Optional[dict] = None,
        pokemon_name: Optional[str] = None,
    ):
        """Performs one GET and returns the decoded JSON body."""
        logger.info(f"Requesting {url} params={params}")

        try:
            response = await asyncio.wait_for(
                self.client.get(url, params=params),
                timeout=self.timeout,
            )
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"PokeAPI error: status {status_code} for {url}")
            if status_code == 404 and pokemon_name is not None:
                raise APIClientError(f"Pokemon '{pokemon_name}' not found.")
            raise APIClientError(f"PokeAPI failed with status {status_code}")

        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.error(f"PokeAPI request timed out: {url}")
            raise APIClientError("PokeAPI request timed out")

        except httpx.RequestError as e:
            # Handle network failures (DNS, refused connections, dropped sockets)
            logger.error(f"PokeAPI network error: {str(e)}")
            raise APIClientError(f"PokeAPI network error: {str(e)}")

        except ValueError:
            logger.error("PokeAPI response parsing error.")
            raise APIClientError("PokeAPI returned an unexpected response format.")

    @staticmethod
    def _decode(model: type[BaseModel], data):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"PokeAPI payload did not match {model.__name__}: {e.error_count()} errors")
            raise APIClientError("PokeAPI returned an unexpected response format.")

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
