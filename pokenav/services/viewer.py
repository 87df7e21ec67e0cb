import asyncio
import logging

from pokenav.clients.pokeapi_client import PokeAPIClient
from pokenav.exceptions import PokemonFetchError
from pokenav.models import ViewState, ViewStatus
from pokenav.navigator import MIN_ID, next_id, prev_id, validate_jump_target
from pokenav.services.pokemon_service import describe_error

logger = logging.getLogger(__name__)


class PokedexViewer:
    """
    Holds the navigation state of a single Pokedex view.

    The state is a frozen ViewState that is only ever replaced as a whole.
    Each fetch takes a new generation number before it awaits the network;
    when it completes, its result is applied only if no newer fetch has
    started in the meantime.
    """

    def __init__(self, poke_client: PokeAPIClient, start_id: int = MIN_ID):
        self._poke_client = poke_client
        self._generation = 0
        self._state = ViewState(current_id=start_id)

    @property
    def state(self) -> ViewState:
        return self._state

    async def show_next(self) -> ViewState:
        return await self._show(next_id(self._state.current_id))

    async def show_previous(self) -> ViewState:
        return await self._show(prev_id(self._state.current_id))

    async def refresh(self) -> ViewState:
        """Fetches the current id again (manual retry)."""
        return await self._show(self._state.current_id)

    async def jump_to(self, raw: str) -> ViewState:
        # Validation errors propagate before any state change
        target = validate_jump_target(raw)
        return await self._show(target)

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _show(self, pokemon_id: int) -> ViewState:
        self._generation += 1
        generation = self._generation
        self._state = ViewState(
            current_id=pokemon_id, status=ViewStatus.LOADING, generation=generation
        )

        try:
            pokemon = await self._poke_client.fetch_pokemon(pokemon_id)
        except PokemonFetchError as e:
            if not self._is_current(generation):
                logger.info(f"Discarding stale failure for id={pokemon_id} (generation {generation})")
                return self._state
            logger.warning(f"Failed to load id={pokemon_id}: {e}")
            self._state = ViewState(
                current_id=pokemon_id,
                status=ViewStatus.FAILED,
                generation=generation,
                error=describe_error(e),
                error_kind=type(e).__name__,
            )
            raise
        except asyncio.CancelledError:
            # Leave no dangling loading state behind a cancelled request
            if self._is_current(generation):
                self._state = ViewState(current_id=pokemon_id, generation=generation)
            raise

        if not self._is_current(generation):
            logger.info(f"Discarding stale result for id={pokemon_id} (generation {generation})")
            return self._state

        self._state = ViewState(
            current_id=pokemon_id,
            status=ViewStatus.LOADED,
            generation=generation,
            pokemon=pokemon,
        )
        return self._state
