"""Data models for mod list change sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from modlogpack.core.models import ModItem, UpdatedItem

ChangeCategory = Literal["added", "updated", "removed"]
CHANGE_CATEGORIES: tuple[ChangeCategory, ...] = ("added", "updated", "removed")


@dataclass(slots=True)
class ChangeSet:
    """Three-way classification of items between two mod lists."""

    added: list[ModItem] = field(default_factory=list)
    updated: list[UpdatedItem] = field(default_factory=list)
    removed: list[ModItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.removed)

    def summary(self) -> dict[str, int]:
        return {category: len(getattr(self, category)) for category in CHANGE_CATEGORIES}

    def to_dict(self) -> dict[str, Any]:
        return {
            "added": [item.to_dict() for item in self.added],
            "updated": [item.to_dict() for item in self.updated],
            "removed": [item.to_dict() for item in self.removed],
            "summary": self.summary(),
        }
