from fastapi import Depends

from pokedex.clients import PokeAPIClient
from pokedex.services import AuthStateHolder, PokemonDetailsStateHolder, PokemonListStateHolder

_poke_client = None
_list_state_holder = None
_details_state_holder = None
_auth_state_holder = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_list_state_holder(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonListStateHolder:
    global _list_state_holder
    if _list_state_holder is None:
        _list_state_holder = PokemonListStateHolder(poke_client=poke_client)
    return _list_state_holder

def get_details_state_holder(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonDetailsStateHolder:
    global _details_state_holder
    if _details_state_holder is None:
        _details_state_holder = PokemonDetailsStateHolder(poke_client=poke_client)
    return _details_state_holder

def get_auth_state_holder() -> AuthStateHolder:
    global _auth_state_holder
    if _auth_state_holder is None:
        _auth_state_holder = AuthStateHolder()
    return _auth_state_holder

async def close_poke_client():
    """Closes the shared client if one was ever created, dropping the holders built on it."""
    global _poke_client, _list_state_holder, _details_state_holder
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
    _list_state_holder = None
    _details_state_holder = None
