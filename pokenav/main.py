import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, status, HTTPException
from pokenav import config
from pokenav.dependencies import close_clients, get_pokedex_viewer, get_pokemon_service
from pokenav.exceptions import (
    JumpValidationError,
    MalformedPayload,
    PokemonFetchError,
    PokemonNotFound,
)
from pokenav.models import JumpRequest, PokemonResponse, ViewResponse, ViewState
from pokenav.services import PokedexViewer, PokemonService
from pokenav.services.pokemon_service import describe_error, to_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=config.log_level())
    yield
    await close_clients()


app = FastAPI(
    title="Pokedex Navigator API",
    description="Fetches one Pokemon at a time from PokeAPI and steps through ids.",
    lifespan=lifespan,
)


def _fetch_error_to_http(pokemon_id: int, error: PokemonFetchError) -> HTTPException:
    """Maps a fetch failure to the status code returned to our own callers."""
    if isinstance(error, PokemonNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=describe_error(error))
    if isinstance(error, MalformedPayload):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        # Timeouts, network errors and unexpected statuses can be retried
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HTTPException(
        status_code=code,
        detail=f"Failed to load id={pokemon_id}: {describe_error(error)}",
    )


def _view_response(state: ViewState) -> ViewResponse:
    return ViewResponse(
        current_id=state.current_id,
        status=state.status,
        loading=state.loading,
        pokemon=to_response(state.pokemon) if state.pokemon else None,
        error=state.error,
    )


# Stateless lookup
@app.get(
    "/pokemon/{pokemon_id}",
    response_model=PokemonResponse,
    summary="Returns a single Pokemon by id",
)
async def get_pokemon(
    pokemon_id: int,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Fetches id, name, height, weight and sprite for a given Pokemon id."""
    try:
        return await service.get_pokemon(pokemon_id)
    except PokemonFetchError as e:
        raise _fetch_error_to_http(pokemon_id, e)


# Navigation endpoints share one PokedexViewer
@app.get("/viewer", response_model=ViewResponse, summary="Returns the current view state")
async def get_view(viewer: PokedexViewer = Depends(get_pokedex_viewer)):
    return _view_response(viewer.state)


@app.post("/viewer/next", response_model=ViewResponse, summary="Shows the next Pokemon")
async def show_next(viewer: PokedexViewer = Depends(get_pokedex_viewer)):
    try:
        return _view_response(await viewer.show_next())
    except PokemonFetchError as e:
        raise _fetch_error_to_http(viewer.state.current_id, e)


@app.post("/viewer/previous", response_model=ViewResponse, summary="Shows the previous Pokemon")
async def show_previous(viewer: PokedexViewer = Depends(get_pokedex_viewer)):
    try:
        return _view_response(await viewer.show_previous())
    except PokemonFetchError as e:
        raise _fetch_error_to_http(viewer.state.current_id, e)


@app.post("/viewer/refresh", response_model=ViewResponse, summary="Fetches the current Pokemon again")
async def refresh(viewer: PokedexViewer = Depends(get_pokedex_viewer)):
    try:
        return _view_response(await viewer.refresh())
    except PokemonFetchError as e:
        raise _fetch_error_to_http(viewer.state.current_id, e)


@app.post("/viewer/jump", response_model=ViewResponse, summary="Jumps to a typed Pokemon id")
async def jump(
    request: JumpRequest,
    viewer: PokedexViewer = Depends(get_pokedex_viewer),
):
    try:
        return _view_response(await viewer.jump_to(request.target))
    except JumpValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PokemonFetchError as e:
        raise _fetch_error_to_http(viewer.state.current_id, e)
