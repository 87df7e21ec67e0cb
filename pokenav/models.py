from enum import Enum

from pydantic import BaseModel, ConfigDict


# The decoded record (Internal Contract). Never mutated, only replaced.
class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    height: int
    weight: int
    sprite_url: str | None = None


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


# Navigation state held by the viewer; each transition builds a new instance
class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_id: int
    status: ViewStatus = ViewStatus.IDLE
    generation: int = 0
    pokemon: Pokemon | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def loading(self) -> bool:
        return self.status is ViewStatus.LOADING


# Model for the public lookup response
class PokemonResponse(BaseModel):
    id: int
    name: str
    display_name: str
    height: int
    weight: int
    sprite_url: str | None


# Model for the viewer endpoints
class ViewResponse(BaseModel):
    current_id: int
    status: ViewStatus
    loading: bool
    pokemon: PokemonResponse | None = None
    error: str | None = None


class JumpRequest(BaseModel):
    target: str
