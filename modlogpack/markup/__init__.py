"""Markup serialization and preview rendering for ModlogKit."""

from modlogpack.markup.models import NO_CHANGES_TEXT, MarkupDocument, MarkupSection
from modlogpack.markup.renderer import (
    LineKind,
    ListState,
    classify_line,
    escape_markup,
    next_list_state,
    render_markup,
)
from modlogpack.markup.serializer import (
    build_markup_document,
    format_name,
    format_scalar,
    format_version,
    serialize_change_set,
)

__all__ = [
    "NO_CHANGES_TEXT",
    "MarkupDocument",
    "MarkupSection",
    "build_markup_document",
    "serialize_change_set",
    "format_name",
    "format_scalar",
    "format_version",
    "LineKind",
    "ListState",
    "classify_line",
    "next_list_state",
    "escape_markup",
    "render_markup",
]
