"""Data models for generated changelog markup."""

from __future__ import annotations

from dataclasses import dataclass, field

NO_CHANGES_TEXT = "No changes detected.\n"


@dataclass(slots=True)
class MarkupSection:
    """A titled block of changelog lines."""

    title: str
    lines: list[str] = field(default_factory=list)

    def to_text(self) -> str:
        body = "".join(f"{line}\n" for line in self.lines)
        return f"## {self.title}\n\n{body}\n"


@dataclass(slots=True)
class MarkupDocument:
    """Ordered sections of a changelog."""

    sections: list[MarkupSection] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def to_text(self) -> str:
        if self.is_empty:
            return NO_CHANGES_TEXT
        return "".join(section.to_text() for section in self.sections)
