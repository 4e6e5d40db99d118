import asyncio

from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.services.base import StateHolder
from pokedex.states import PokemonDetailsUiState, PokemonListUiState, Status


class PokemonListStateHolder(StateHolder[PokemonListUiState]):
    # The client is injected so tests can swap in a mock
    def __init__(self, poke_client: PokeAPIClient):
        super().__init__(PokemonListUiState())
        self._poke_client = poke_client

    def load_list(self) -> asyncio.Task:
        """
        Fetches the first page of Pokemon and publishes LOADING, then SUCCESS or ERROR.

        Returns the scheduled task. Repeated calls are not de-duplicated: each one
        fetches independently and whichever finishes last sets the final state.
        """
        self._publish(status=Status.LOADING)
        return self._launch(self._load_list())

    async def _load_list(self):
        result = await self._poke_client.fetch_list()

        if result.is_success:
            self._publish(pokemon_list=tuple(result.value), status=Status.SUCCESS, error=None)
        else:
            # Keep the previous list on screen
            self._publish(status=Status.ERROR, error=result.error)


class PokemonDetailsStateHolder(StateHolder[PokemonDetailsUiState]):
    def __init__(self, poke_client: PokeAPIClient):
        super().__init__(PokemonDetailsUiState())
        self._poke_client = poke_client

    def load_detail(self, name: str) -> asyncio.Task:
        """Fetches details for `name`, publishing the same LOADING -> SUCCESS/ERROR sequence."""
        self._publish(status=Status.LOADING)
        return self._launch(self._load_detail(name))

    async def _load_detail(self, name: str):
        result = await self._poke_client.fetch_detail(name)

        if result.is_success:
            self._publish(details=result.value, status=Status.SUCCESS, error=None)
        else:
            self._publish(status=Status.ERROR, error=result.error)
