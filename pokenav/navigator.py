"""Id arithmetic for stepping and jumping between Pokemon. No I/O."""
import re

from pokenav.exceptions import NotANumber, OutOfRange

MIN_ID = 1
MAX_ID = 151

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _clamp(value: int, min_id: int, max_id: int) -> int:
    return max(min_id, min(value, max_id))


def next_id(current: int, min_id: int = MIN_ID, max_id: int = MAX_ID) -> int:
    """Id after `current`, wrapping from max_id back to min_id."""
    candidate = _clamp(current, min_id, max_id) + 1
    return min_id if candidate > max_id else candidate


def prev_id(current: int, min_id: int = MIN_ID, max_id: int = MAX_ID) -> int:
    """Id before `current`, wrapping from min_id round to max_id."""
    candidate = _clamp(current, min_id, max_id) - 1
    return max_id if candidate < min_id else candidate


def validate_jump_target(raw: str, max_id: int = MAX_ID) -> int:
    """
    Parses typed "jump to id" input.

    Only the upper bound is enforced; zero and negative ids are returned
    as-is and left for the remote service to reject.

    Raises:
        NotANumber: if the trimmed input is not an integer.
        OutOfRange: if the parsed id is above max_id.
    """
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        raise NotANumber(raw)

    try:
        value = int(text)
    except ValueError:
        # Too many digits for int(); without a minus sign it is above any max_id
        if text.startswith("-"):
            raise NotANumber(raw)
        raise OutOfRange(None, max_id)
    if value > max_id:
        raise OutOfRange(value, max_id)
    return value
