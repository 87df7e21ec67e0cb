"""Service layer sitting between the HTTP endpoints and the PokeAPI client."""
from .pokemon_service import PokemonService
from .viewer import PokedexViewer

__all__ = [
    'PokemonService',
    'PokedexViewer',
]
