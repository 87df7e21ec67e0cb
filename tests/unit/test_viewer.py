import asyncio

import pytest
from unittest.mock import AsyncMock
from pokenav.exceptions import NotANumber, OutOfRange, PokemonNotFound, TransportError
from pokenav.models import Pokemon, ViewStatus
from pokenav.services.viewer import PokedexViewer


def make_pokemon(pokemon_id: int) -> Pokemon:
    return Pokemon(id=pokemon_id, name=f"pokemon-{pokemon_id}", height=1, weight=1)

@pytest.fixture
def mock_client():
    poke_client = AsyncMock()
    poke_client.fetch_pokemon.side_effect = make_pokemon
    return poke_client

@pytest.fixture
def viewer(mock_client):
    return PokedexViewer(poke_client=mock_client)


def test_initial_state_is_idle(viewer, mock_client):
    state = viewer.state

    assert state.current_id == 1
    assert state.status is ViewStatus.IDLE
    assert state.loading is False
    assert state.pokemon is None
    mock_client.fetch_pokemon.assert_not_called()


@pytest.mark.asyncio
async def test_next_and_previous_wrap_around(viewer, mock_client):
    state = await viewer.show_previous()
    assert state.current_id == 151
    assert state.pokemon.id == 151

    state = await viewer.show_next()
    assert state.current_id == 1
    assert state.status is ViewStatus.LOADED

    state = await viewer.show_next()
    assert state.current_id == 2
    assert [c.args[0] for c in mock_client.fetch_pokemon.call_args_list] == [151, 1, 2]


@pytest.mark.asyncio
async def test_each_transition_replaces_the_state(viewer):
    before = viewer.state

    after = await viewer.show_next()

    assert after is not before
    assert before.status is ViewStatus.IDLE
    assert after.generation == before.generation + 1


@pytest.mark.asyncio
async def test_state_is_loading_while_fetch_is_outstanding(viewer, mock_client):
    release = asyncio.Event()

    async def slow_fetch(pokemon_id):
        await release.wait()
        return make_pokemon(pokemon_id)

    mock_client.fetch_pokemon.side_effect = slow_fetch

    task = asyncio.create_task(viewer.show_next())
    await asyncio.sleep(0)

    assert viewer.state.loading is True
    assert viewer.state.current_id == 2

    release.set()
    state = await task
    assert state.loading is False
    assert state.pokemon.id == 2


@pytest.mark.asyncio
async def test_jump_to_typed_id(viewer, mock_client):
    state = await viewer.jump_to("  25 ")

    mock_client.fetch_pokemon.assert_called_once_with(25)
    assert state.current_id == 25
    assert state.pokemon.name == "pokemon-25"


@pytest.mark.asyncio
@pytest.mark.parametrize("raw, error", [("abc", NotANumber), ("9999", OutOfRange)])
async def test_invalid_jump_leaves_state_untouched(viewer, mock_client, raw, error):
    await viewer.show_next()
    before = viewer.state

    with pytest.raises(error):
        await viewer.jump_to(raw)

    assert viewer.state is before
    mock_client.fetch_pokemon.assert_called_once_with(2)


@pytest.mark.asyncio
async def test_failure_is_recorded_and_reraised(viewer, mock_client):
    mock_client.fetch_pokemon.side_effect = PokemonNotFound(0)

    with pytest.raises(PokemonNotFound):
        await viewer.jump_to("0")

    state = viewer.state
    assert state.status is ViewStatus.FAILED
    assert state.current_id == 0
    assert state.error == "No Pokémon with id=0"
    assert state.error_kind == "PokemonNotFound"
    assert state.pokemon is None


@pytest.mark.asyncio
async def test_refresh_retries_the_current_id(viewer, mock_client):
    mock_client.fetch_pokemon.side_effect = [TransportError(OSError("connection refused")), make_pokemon(2)]

    with pytest.raises(TransportError):
        await viewer.show_next()
    assert viewer.state.error.startswith("Error: Network error")

    state = await viewer.refresh()

    assert state.status is ViewStatus.LOADED
    assert state.error is None
    assert [c.args[0] for c in mock_client.fetch_pokemon.call_args_list] == [2, 2]


@pytest.mark.asyncio
async def test_stale_success_is_discarded(viewer, mock_client):
    """Only the most recently started fetch may update the state."""
    release_first = asyncio.Event()

    async def fetch(pokemon_id):
        if pokemon_id == 2:
            await release_first.wait()
        return make_pokemon(pokemon_id)

    mock_client.fetch_pokemon.side_effect = fetch

    first = asyncio.create_task(viewer.show_next())
    await asyncio.sleep(0)
    latest = await viewer.jump_to("25")

    release_first.set()
    stale = await first

    assert stale is latest
    assert viewer.state.current_id == 25
    assert viewer.state.pokemon.id == 25


@pytest.mark.asyncio
async def test_stale_failure_is_discarded_and_not_raised(viewer, mock_client):
    release_first = asyncio.Event()

    async def fetch(pokemon_id):
        if pokemon_id == 2:
            await release_first.wait()
            raise TransportError(OSError("connection reset"))
        return make_pokemon(pokemon_id)

    mock_client.fetch_pokemon.side_effect = fetch

    first = asyncio.create_task(viewer.show_next())
    await asyncio.sleep(0)
    await viewer.jump_to("7")

    release_first.set()
    state = await first

    assert state.status is ViewStatus.LOADED
    assert state.pokemon.id == 7
    assert viewer.state.error is None


@pytest.mark.asyncio
async def test_cancelled_fetch_does_not_stay_loading(viewer, mock_client):
    async def never(pokemon_id):
        await asyncio.Event().wait()

    mock_client.fetch_pokemon.side_effect = never

    task = asyncio.create_task(viewer.show_next())
    await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert viewer.state.status is ViewStatus.IDLE
    assert viewer.state.current_id == 2
