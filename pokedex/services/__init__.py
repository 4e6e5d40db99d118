"""State holders that turn async fetches into observable UI state."""
from .auth_service import AuthStateHolder, CREDENTIAL_REQUIRED
from .pokemon_service import PokemonDetailsStateHolder, PokemonListStateHolder

__all__ = [
    'AuthStateHolder',
    'CREDENTIAL_REQUIRED',
    'PokemonDetailsStateHolder',
    'PokemonListStateHolder',
]
