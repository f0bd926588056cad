"""Parse the user's text buffer into an ordered key/value mapping."""

import json
import logging
from typing import Any

from mixedunits.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


class OversizedInteger:
    """Integer literal with more digits than the interpreter converts to int."""

    def __init__(self, literal: str) -> None:
        self.literal = literal

    def __repr__(self) -> str:
        return f"OversizedInteger(<{len(self.literal)} chars>)"


def _parse_int(literal: str) -> int | OversizedInteger:
    try:
        return int(literal)
    except ValueError:
        return OversizedInteger(literal)


def parse_input(text: str | bytes) -> dict[str, Any]:
    """Parse *text* as a single JSON object.

    Integer literals too long to convert are kept as OversizedInteger
    values so the entry, not the whole buffer, is reported.

    Key order follows the object's insertion order. A repeated key keeps
    its first position and its last value.

    Raises MalformedInputError if the text is not valid JSON or the top
    level is not an object.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_int=_parse_int)
    except (ValueError, RecursionError) as exc:
        logger.debug("Rejected malformed input: %s", exc)
        raise MalformedInputError(str(exc)) from exc

    if not isinstance(data, dict):
        detail = f"Expected a JSON object, got {type(data).__name__}"
        logger.debug("Rejected input: %s", detail)
        raise MalformedInputError(detail)
    return data
