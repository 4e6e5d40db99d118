from pokedex.models import (
    Creature,
    CreatureDetails,
    PokemonDetailsResponseDto,
    PokemonListResponseDto,
)


def capitalize_first(text: str) -> str:
    """
    Uppercases the first character only, leaving the rest untouched.

    Unlike str.capitalize() this does not lowercase the tail, and unlike
    str.title() hyphens are not treated as word boundaries.
    """
    return text[:1].upper() + text[1:]


def map_list_response(raw: PokemonListResponseDto | dict) -> list[Creature]:
    """Maps a list payload to domain creatures, keeping order and count."""
    if isinstance(raw, dict):
        raw = PokemonListResponseDto.model_validate(raw)

    return [Creature(name=capitalize_first(entry.name)) for entry in raw.results]


def _home_front_default(raw: PokemonDetailsResponseDto) -> str:
    # sprites.other.home.front_default; any missing level yields ""
    sprites = raw.sprites
    if sprites is None or sprites.other is None or sprites.other.home is None:
        return ""
    return sprites.other.home.front_default or ""


def map_details_response(raw: PokemonDetailsResponseDto | dict) -> CreatureDetails:
    """Maps a detail payload to CreatureDetails. The name keeps its wire casing."""
    if isinstance(raw, dict):
        raw = PokemonDetailsResponseDto.model_validate(raw)

    return CreatureDetails(
        id=raw.id,
        name=raw.name,
        height=raw.height,
        weight=raw.weight,
        types=tuple(slot.type.name for slot in raw.types),
        image_url=_home_front_default(raw),
        abilities=tuple(capitalize_first(slot.ability.name) for slot in raw.abilities),
    )
