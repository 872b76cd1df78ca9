"""Stable public API surface for ModlogKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from collections.abc import Iterable
import shutil

from modlogpack.clipboard import CommandRunner, WhichLookup, copy_to_clipboard
from modlogpack.core import (
    ClipboardUnavailableError,
    InvalidInputError,
    ModItem,
    UpdatedItem,
    parse_item_collection,
)
from modlogpack.diff import ChangeSet, diff_items
from modlogpack.markup import render_markup, serialize_change_set
from modlogpack.session import ChangelogResult, generate_changelog

__version__ = "0.1.0"


def parse_items(raw_text: str, *, label: str = "input") -> list[ModItem]:
    """Parse a JSON mod list into items.

    Raises ``InvalidInputError`` when the text is not a JSON array of item
    objects.
    """
    return parse_item_collection(raw_text, label=label)


def diff(old_items: Iterable[ModItem], new_items: Iterable[ModItem]) -> ChangeSet:
    """Classify items of two mod lists as added, updated or removed."""
    return diff_items(old_items, new_items)


def serialize(change_set: ChangeSet) -> str:
    """Render a change set as changelog markup."""
    return serialize_change_set(change_set)


def render(markup_text: str) -> str:
    """Render changelog markup as sanitized HTML."""
    return render_markup(markup_text)


def generate(old_json: str, new_json: str) -> ChangelogResult:
    """Parse, diff, serialize and render two JSON mod lists in one call."""
    return generate_changelog(old_json, new_json)


def copy_markup(
    markup_text: str,
    *,
    runner: CommandRunner | None = None,
    platform: str | None = None,
    which: WhichLookup = shutil.which,
) -> str:
    """Copy markup to the system clipboard and return the command used.

    Raises ``ClipboardUnavailableError`` when no copy command succeeds.
    """
    return copy_to_clipboard(
        markup_text,
        runner=runner,
        platform=platform,
        which=which,
    )


__all__ = [
    "__version__",
    "ModItem",
    "UpdatedItem",
    "ChangeSet",
    "ChangelogResult",
    "InvalidInputError",
    "ClipboardUnavailableError",
    "parse_items",
    "diff",
    "serialize",
    "render",
    "generate",
    "copy_markup",
]
