from pokenav.clients.pokeapi_client import PokeAPIClient
from pokenav.exceptions import PokemonFetchError, PokemonNotFound
from pokenav.models import Pokemon, PokemonResponse


def display_name(name: str) -> str:
    """Capitalises the first letter; an empty name shows as 'Unknown'."""
    if not name:
        return "Unknown"
    return name[0].upper() + name[1:]


def describe_error(error: PokemonFetchError) -> str:
    """User-facing text for a failed fetch."""
    if isinstance(error, PokemonNotFound):
        return str(error)
    return f"Error: {error}"


def to_response(pokemon: Pokemon) -> PokemonResponse:
    return PokemonResponse(
        id=pokemon.id,
        name=pokemon.name,
        display_name=display_name(pokemon.name),
        height=pokemon.height,
        weight=pokemon.weight,
        sprite_url=pokemon.sprite_url,
    )


class PokemonService:
    # Service receives the client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def get_pokemon(self, pokemon_id: int) -> PokemonResponse:
        """
        Fetches one Pokemon by id and maps it to the public response model.
        Fetch errors propagate unchanged.
        """
        pokemon = await self._poke_client.fetch_pokemon(pokemon_id)
        return to_response(pokemon)
