from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, status
from pydantic import BaseModel

from pokedex.core import format_height, format_weight
from pokedex.dependencies import (
    close_poke_client,
    get_auth_state_holder,
    get_details_state_holder,
    get_list_state_holder,
)
from pokedex.services import AuthStateHolder, PokemonDetailsStateHolder, PokemonListStateHolder
from pokedex.states import AuthUiState, PokemonDetailsUiState, PokemonListUiState


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""

# "About" tab of the details screen
class AboutSection(BaseModel):
    height: str
    weight: str
    abilities: str

class PokemonDetailsView(PokemonDetailsUiState):
    about: AboutSection


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_poke_client()

app = FastAPI(
    title="Pokedex",
    description="Login, a first page of Pokemon and per-Pokemon stats, exposed as observable UI state.",
    lifespan=lifespan,
)

# Login screen
@app.post("/auth/login", response_model=AuthUiState, summary="Checks that both credentials were provided")
async def login(
    credentials: LoginRequest,
    holder: AuthStateHolder = Depends(get_auth_state_holder),
):
    await holder.authenticate(credentials.username, credentials.password)
    return holder.state.value


@app.get("/auth", response_model=AuthUiState, summary="Returns the current login state")
async def get_auth_state(holder: AuthStateHolder = Depends(get_auth_state_holder)):
    return holder.state.value


# Home screen
@app.post(
    "/pokemon/load",
    response_model=PokemonListUiState,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Starts fetching the Pokemon list",
)
async def load_pokemon_list(holder: PokemonListStateHolder = Depends(get_list_state_holder)):
    """Returns immediately with the LOADING snapshot; poll GET /pokemon for the outcome."""
    holder.load_list()
    return holder.state.value


@app.get("/pokemon", response_model=PokemonListUiState, summary="Returns the current Pokemon list state")
async def get_pokemon_list(holder: PokemonListStateHolder = Depends(get_list_state_holder)):
    return holder.state.value


# Details screen
@app.get("/pokemon/details", response_model=PokemonDetailsView, summary="Returns the current details state")
async def get_pokemon_details(holder: PokemonDetailsStateHolder = Depends(get_details_state_holder)):
    snapshot = holder.state.value
    details = snapshot.details

    # Mirrors the screen: unloaded details render as zero
    about = AboutSection(
        height=format_height(details.height if details else 0),
        weight=format_weight(details.weight if details else 0),
        abilities=", ".join(details.abilities) if details else "",
    )
    return PokemonDetailsView(
        details=details,
        status=snapshot.status,
        error=snapshot.error,
        about=about,
    )


@app.post(
    "/pokemon/{name}/load",
    response_model=PokemonDetailsUiState,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Starts fetching details for one Pokemon",
)
async def load_pokemon_details(
    name: str,
    holder: PokemonDetailsStateHolder = Depends(get_details_state_holder),
):
    holder.load_detail(name)
    return holder.state.value
