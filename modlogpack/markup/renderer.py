"""Minimal, escape-first markup to HTML converter for changelog previews.

Only level 1-6 headings, ``-`` bullet lists, ``**bold**`` and plain
paragraphs are understood. Everything else, links and inline code included,
is shown as escaped literal text.
"""

from __future__ import annotations

from enum import Enum
import re

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_LINE_SPLIT = re.compile(r"\r?\n")
_HEADING = re.compile(r"^#{1,6}\s+")
_BULLET = re.compile(r"^-\s+")
_BOLD = re.compile(r"\*\*(.+?)\*\*")


class LineKind(Enum):
    HEADING = "heading"
    BULLET = "bullet"
    BLANK = "blank"
    TEXT = "text"


class ListState(Enum):
    OUTSIDE_LIST = "outside_list"
    INSIDE_LIST = "inside_list"


def escape_markup(text: str) -> str:
    escaped = text
    # "&" goes first so later entities are not double-escaped.
    for raw, entity in _ESCAPES:
        escaped = escaped.replace(raw, entity)
    return escaped


def classify_line(line: str) -> LineKind:
    if _HEADING.match(line):
        return LineKind.HEADING
    if _BULLET.match(line):
        return LineKind.BULLET
    if line == "":
        return LineKind.BLANK
    return LineKind.TEXT


_TRANSITIONS: dict[tuple[ListState, LineKind], ListState] = {
    (ListState.OUTSIDE_LIST, LineKind.HEADING): ListState.OUTSIDE_LIST,
    (ListState.OUTSIDE_LIST, LineKind.BULLET): ListState.INSIDE_LIST,
    (ListState.OUTSIDE_LIST, LineKind.BLANK): ListState.OUTSIDE_LIST,
    (ListState.OUTSIDE_LIST, LineKind.TEXT): ListState.OUTSIDE_LIST,
    (ListState.INSIDE_LIST, LineKind.HEADING): ListState.OUTSIDE_LIST,
    (ListState.INSIDE_LIST, LineKind.BULLET): ListState.INSIDE_LIST,
    (ListState.INSIDE_LIST, LineKind.BLANK): ListState.OUTSIDE_LIST,
    (ListState.INSIDE_LIST, LineKind.TEXT): ListState.INSIDE_LIST,
}


def next_list_state(state: ListState, kind: LineKind) -> ListState:
    return _TRANSITIONS[(state, kind)]


def _transition_tags(state: ListState, next_state: ListState) -> str:
    if state is ListState.OUTSIDE_LIST and next_state is ListState.INSIDE_LIST:
        return "<ul>"
    if state is ListState.INSIDE_LIST and next_state is ListState.OUTSIDE_LIST:
        return "</ul>"
    return ""


def _render_line(line: str, kind: LineKind) -> str:
    if kind is LineKind.HEADING:
        level = len(line) - len(line.lstrip("#"))
        return f"<h{level}>{_HEADING.sub('', line, count=1)}</h{level}>"
    if kind is LineKind.BULLET:
        return f"<li>{_BULLET.sub('', line, count=1)}</li>"
    if kind is LineKind.BLANK:
        return "<p></p>"
    return f"<p>{line}</p>"


def render_markup(markup_text: str) -> str:
    """Convert changelog markup into sanitized HTML."""
    if not markup_text:
        return ""

    escaped = escape_markup(markup_text)
    parts: list[str] = []
    state = ListState.OUTSIDE_LIST

    for raw_line in _LINE_SPLIT.split(escaped):
        line = raw_line.rstrip()
        kind = classify_line(line)
        next_state = next_list_state(state, kind)
        parts.append(_transition_tags(state, next_state))
        parts.append(_render_line(line, kind))
        state = next_state

    parts.append(_transition_tags(state, ListState.OUTSIDE_LIST))

    # Bold runs once over the whole document, not per line.
    return _BOLD.sub(r"<strong>\1</strong>", "".join(parts))
