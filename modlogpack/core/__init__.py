"""Core models, parsing and errors for ModlogKit."""

from modlogpack.core.exceptions import (
    ChangelogError,
    ClipboardUnavailableError,
    InvalidInputError,
)
from modlogpack.core.models import ModItem, Scalar, UpdatedItem
from modlogpack.core.parsing import parse_item_collection, validate_item_payload

__all__ = [
    "ModItem",
    "UpdatedItem",
    "Scalar",
    "ChangelogError",
    "InvalidInputError",
    "ClipboardUnavailableError",
    "parse_item_collection",
    "validate_item_payload",
]
