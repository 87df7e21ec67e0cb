from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from pokenav.exceptions import MalformedPayload
from pokenav.models import Pokemon


# Raw shape of GET /pokemon/{id}. Strict so that true/4.0/"4" are not ints.
class _PokemonPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int
    name: str
    height: int
    weight: int
    sprites: dict[str, Any]


def decode_pokemon(data: Any) -> Pokemon:
    """
    Maps a parsed PokeAPI payload to a Pokemon.

    Only id, name, height, weight and sprites are checked. A missing or
    non-string sprites.front_default yields a Pokemon without a sprite.

    Raises:
        MalformedPayload: if any required field is missing or has the wrong type.
    """
    try:
        payload = _PokemonPayload.model_validate(data)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        detail = "Unexpected JSON shape for Pokemon"
        if fields:
            detail += f" (invalid: {', '.join(fields)})"
        raise MalformedPayload(detail) from e

    sprite = payload.sprites.get("front_default")
    return Pokemon(
        id=payload.id,
        name=payload.name,
        height=payload.height,
        weight=payload.weight,
        sprite_url=sprite if isinstance(sprite, str) else None,
    )
