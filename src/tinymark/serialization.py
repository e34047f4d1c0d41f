"""Token serialization — JSON round-trip for lexer token streams.

Useful for inspecting what the lexer produced, storing fixtures, and
diffing token streams between versions. All output is deterministic
(sorted keys).

Example:
    from tinymark import tokenize
    from tinymark.serialization import to_json, from_json

    tokens = tokenize("# Hello **World**")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from tinymark.location import SourceLocation
from tinymark.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The token type is stored by name. ``url`` and ``location`` are only
    included when set.
    """
    result: dict[str, Any] = {"type": token.type.name, "value": token.value}
    if token.url is not None:
        result["url"] = token.url
    if token.breaks_before:
        result["breaks_before"] = token.breaks_before
    loc = token.location
    if loc is not None:
        result["location"] = {
            "lineno": loc.lineno,
            "col_offset": loc.col_offset,
            "offset": loc.offset,
            "end_offset": loc.end_offset,
            "source_file": loc.source_file,
        }
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``data`` is not a dict, ``type`` or ``value`` is
            missing, the type is unknown, or ``location`` is malformed.
    """
    if not isinstance(data, dict):
        msg = f"Expected a token object, got {type(data).__name__}"
        raise ValueError(msg)
    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)
    try:
        token_type = TokenType[type_name]
    except (KeyError, TypeError):
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg) from None
    if "value" not in data:
        msg = f"Missing 'value' field in serialized {type_name} token"
        raise ValueError(msg)

    location = None
    raw_loc = data.get("location")
    if raw_loc is not None:
        location = _location_from_dict(raw_loc, type_name)

    return Token(
        type=token_type,
        value=data["value"],
        url=data.get("url"),
        breaks_before=data.get("breaks_before", 0),
        location=location,
    )


def _location_from_dict(raw_loc: Any, type_name: str) -> SourceLocation:
    if not isinstance(raw_loc, dict):
        msg = f"Expected a location object in serialized {type_name} token"
        raise ValueError(msg)
    missing = [key for key in ("lineno", "col_offset") if key not in raw_loc]
    if missing:
        msg = f"Missing location field(s) {', '.join(missing)} in serialized {type_name} token"
        raise ValueError(msg)
    return SourceLocation(
        lineno=raw_loc["lineno"],
        col_offset=raw_loc["col_offset"],
        offset=raw_loc.get("offset", 0),
        end_offset=raw_loc.get("end_offset", 0),
        source_file=raw_loc.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array string."""
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string to a list of tokens.

    Raises:
        ValueError: If the JSON is not an array of token objects.
    """
    data = json.loads(json_str)
    if not isinstance(data, list):
        msg = f"Expected a JSON array of tokens, got {type(data).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in data]
