"""Failure types raised by the decoder, the PokeAPI client and the navigator."""


class PokemonFetchError(Exception):
    """Base class for every way a single Pokemon fetch can fail."""

    # Whether re-issuing the same request may succeed
    retryable = False


class MalformedPayload(PokemonFetchError):
    def __init__(self, detail: str = "Unexpected JSON shape for Pokemon"):
        super().__init__(detail)
        self.detail = detail


class PokemonNotFound(PokemonFetchError):
    def __init__(self, pokemon_id: int):
        super().__init__(f"No Pokémon with id={pokemon_id}")
        self.pokemon_id = pokemon_id


class UnexpectedStatus(PokemonFetchError):
    retryable = True

    def __init__(self, status_code: int):
        super().__init__(f"Failed to load Pokémon (HTTP {status_code})")
        self.status_code = status_code


class RequestTimedOut(PokemonFetchError):
    retryable = True

    def __init__(self, timeout: float | None = None):
        super().__init__("Request timed out")
        self.timeout = timeout


class TransportError(PokemonFetchError):
    retryable = True

    def __init__(self, cause: Exception):
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class JumpValidationError(ValueError):
    """Raised when typed "jump to id" input cannot be used."""


class NotANumber(JumpValidationError):
    def __init__(self, raw: str):
        super().__init__("Enter a valid number")
        self.raw = raw


class OutOfRange(JumpValidationError):
    def __init__(self, value: int | None, max_id: int):
        super().__init__(f"Pokémon IDs go up to {max_id}. Try 1–{max_id}.")
        self.value = value
        self.max_id = max_id
