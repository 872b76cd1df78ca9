"""Core data models for mod list items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# JSON scalars allowed for url and version members.
Scalar = str | int | float | bool | None


@dataclass(slots=True)
class ModItem:
    """A named, optionally versioned and linked entry of a mod list."""

    name: str | None
    url: Scalar = None
    version: Scalar = None

    @property
    def sort_key(self) -> str:
        return self.name or ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.url is not None:
            payload["url"] = self.url
        if self.version is not None:
            payload["version"] = self.version
        return payload

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ModItem":
        return cls(
            name=raw.get("name"),
            url=raw.get("url"),
            version=raw.get("version"),
        )


@dataclass(slots=True)
class UpdatedItem:
    """A mod present in both lists whose version changed."""

    name: str | None
    old_version: Scalar
    url: Scalar = None
    version: Scalar = None

    @property
    def sort_key(self) -> str:
        return self.name or ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "old_version": self.old_version,
        }
        if self.url is not None:
            payload["url"] = self.url
        if self.version is not None:
            payload["version"] = self.version
        return payload

    @classmethod
    def from_items(cls, old: ModItem, new: ModItem) -> "UpdatedItem":
        return cls(
            name=new.name,
            old_version=old.version,
            url=new.url,
            version=new.version,
        )
