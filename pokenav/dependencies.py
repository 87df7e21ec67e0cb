from pokenav import config
from pokenav.clients import PokeAPIClient
from pokenav.services import PokedexViewer, PokemonService
from fastapi import Depends

_poke_client = None
_viewer = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient(
            base_url=config.pokeapi_base_url(),
            timeout=config.pokeapi_timeout(),
        )
    return _poke_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client)

def get_pokedex_viewer(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokedexViewer:
    # One viewer per process: it owns the navigation state
    global _viewer
    if _viewer is None:
        _viewer = PokedexViewer(poke_client=poke_client)
    return _viewer

async def close_clients():
    global _poke_client, _viewer
    if _poke_client is not None:
        await _poke_client.close()
    _poke_client = None
    _viewer = None
