"""JSON parsing and schema validation for mod list input."""

from __future__ import annotations

from functools import lru_cache
import json
from typing import Any

from jsonschema import Draft202012Validator

from modlogpack.core.exceptions import InvalidInputError
from modlogpack.core.models import ModItem

_OPTIONAL_STRING: dict[str, Any] = {"type": ["string", "null"]}
_OPTIONAL_SCALAR: dict[str, Any] = {"type": ["string", "number", "boolean", "null"]}

MOD_LIST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Mod list",
    "type": "array",
    "items": {
        "type": "object",
        "additionalProperties": True,
        "properties": {
            "name": _OPTIONAL_STRING,
            "url": _OPTIONAL_SCALAR,
            "version": _OPTIONAL_SCALAR,
        },
    },
}


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    Draft202012Validator.check_schema(MOD_LIST_SCHEMA)
    return Draft202012Validator(MOD_LIST_SCHEMA)


def validate_item_payload(payload: Any, *, label: str = "input") -> None:
    """Raise InvalidInputError when payload is not an array of item objects."""
    errors = sorted(_validator().iter_errors(payload), key=lambda err: list(err.path))
    if not errors:
        return

    first = errors[0]
    location = "/" + "/".join(str(token) for token in first.path)
    raise InvalidInputError(
        f"{label} mod list failed validation at {location}: {first.message}",
        label=label,
    )


def parse_item_collection(raw_text: str, *, label: str = "input") -> list[ModItem]:
    """Decode a JSON mod list into items, preserving input order."""
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise InvalidInputError(
            f"{label} mod list is not valid JSON ({error})",
            label=label,
        ) from error

    validate_item_payload(payload, label=label)
    return [ModItem.from_dict(raw) for raw in payload]
