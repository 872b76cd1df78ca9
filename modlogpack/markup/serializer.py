"""Serialize change sets into changelog markup."""

from __future__ import annotations

from typing import TypeVar

from modlogpack.core.models import ModItem, Scalar, UpdatedItem
from modlogpack.diff.models import ChangeSet
from modlogpack.markup.models import MarkupDocument, MarkupSection

_Item = TypeVar("_Item", ModItem, UpdatedItem)


def format_scalar(value: Scalar) -> str:
    """Render a JSON scalar the way it reads in the source document."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_name(item: ModItem | UpdatedItem) -> str:
    if item.url:
        return f"[{item.name}]({format_scalar(item.url)})"
    return f"**{item.name}**"


def format_version(version: Scalar) -> str:
    if version:
        return f"`{format_scalar(version)}`"
    return ""


def sort_by_name(items: list[_Item]) -> list[_Item]:
    return sorted(items, key=lambda item: item.sort_key)


def _plain_line(item: ModItem) -> str:
    return f"- {format_name(item)} {format_version(item.version)}"


def _updated_line(item: UpdatedItem) -> str:
    return (
        f"- {format_name(item)}: "
        f"{format_version(item.old_version)} → {format_version(item.version)}"
    )


def build_markup_document(change_set: ChangeSet) -> MarkupDocument:
    """Build sections in fixed Added, Updated, Removed order."""
    document = MarkupDocument()

    if change_set.added:
        items = sort_by_name(change_set.added)
        document.sections.append(
            MarkupSection(
                title=f"Added ({len(items)})",
                lines=[_plain_line(item) for item in items],
            )
        )

    if change_set.updated:
        items = sort_by_name(change_set.updated)
        document.sections.append(
            MarkupSection(
                title=f"Updated ({len(items)})",
                lines=[_updated_line(item) for item in items],
            )
        )

    if change_set.removed:
        items = sort_by_name(change_set.removed)
        document.sections.append(
            MarkupSection(
                title=f"Removed ({len(items)})",
                lines=[_plain_line(item) for item in items],
            )
        )

    return document


def serialize_change_set(change_set: ChangeSet) -> str:
    """Render a change set as changelog markup text."""
    return build_markup_document(change_set).to_text()
