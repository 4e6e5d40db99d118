from pydantic import BaseModel, ConfigDict, Field

# --- Wire models: raw PokeAPI payloads (Internal Contract) ---
# Every field has a zero-value default so a sparse payload still decodes.

class NamedResourceDto(BaseModel):
    name: str = ""

class PokemonListResponseDto(BaseModel):
    results: list[NamedResourceDto] = Field(default_factory=list)

class TypeSlotDto(BaseModel):
    type: NamedResourceDto = Field(default_factory=NamedResourceDto)

class AbilitySlotDto(BaseModel):
    ability: NamedResourceDto = Field(default_factory=NamedResourceDto)

class HomeSpritesDto(BaseModel):
    # PokeAPI sends null here for creatures without artwork
    front_default: str | None = ""

class OtherSpritesDto(BaseModel):
    home: HomeSpritesDto | None = None

class SpritesDto(BaseModel):
    other: OtherSpritesDto | None = None

class PokemonDetailsResponseDto(BaseModel):
    id: int = 0
    name: str = ""
    height: int = 0
    weight: int = 0
    types: list[TypeSlotDto] = Field(default_factory=list)
    abilities: list[AbilitySlotDto] = Field(default_factory=list)
    sprites: SpritesDto | None = None


# --- Domain models: mapped, presentation-ready values ---

class Creature(BaseModel):
    """A list entry. `name` is already capitalized for display."""
    model_config = ConfigDict(frozen=True)

    name: str

class CreatureDetails(BaseModel):
    """
    Detailed stats for one creature.

    `height` is in decimeters and `weight` in hectograms, as served by PokeAPI.
    `name` keeps the casing the API returned; `abilities` are capitalized.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    types: tuple[str, ...] = ()
    height: int = 0
    weight: int = 0
    image_url: str = ""
    abilities: tuple[str, ...] = ()

class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
