"""Generate/copy workflow holding the most recent changelog markup."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import shutil
from typing import Any

from modlogpack.clipboard import CommandRunner, WhichLookup, copy_to_clipboard
from modlogpack.core.exceptions import ClipboardUnavailableError, InvalidInputError
from modlogpack.core.parsing import parse_item_collection
from modlogpack.diff import ChangeSet, diff_items
from modlogpack.markup import render_markup, serialize_change_set

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChangelogResult:
    """Output of one generate action."""

    change_set: ChangeSet
    markup: str
    html: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.change_set.summary(),
            "change_set": self.change_set.to_dict(),
            "markup": self.markup,
            "html": self.html,
        }


def generate_changelog(old_text: str, new_text: str) -> ChangelogResult:
    """Parse two JSON mod lists and build markup plus preview HTML."""
    old_items = parse_item_collection(old_text, label="old")
    new_items = parse_item_collection(new_text, label="new")

    change_set = diff_items(old_items, new_items)
    markup = serialize_change_set(change_set)
    return ChangelogResult(
        change_set=change_set,
        markup=markup,
        html=render_markup(markup),
    )


@dataclass(slots=True)
class ChangelogSession:
    """Keeps the last generated markup for display and copy.

    A failed generate leaves the previous markup in place.
    """

    markup_text: str = ""

    @property
    def preview_html(self) -> str:
        return render_markup(self.markup_text)

    def generate(self, old_text: str, new_text: str) -> ChangelogResult:
        try:
            result = generate_changelog(old_text, new_text)
        except InvalidInputError as error:
            logger.warning("changelog generation rejected input: %s", error)
            raise

        self.markup_text = result.markup
        logger.debug("generated changelog %s", result.change_set.summary())
        return result

    def copy(
        self,
        *,
        runner: CommandRunner | None = None,
        platform: str | None = None,
        which: WhichLookup = shutil.which,
    ) -> str:
        try:
            return copy_to_clipboard(
                self.markup_text,
                runner=runner,
                platform=platform,
                which=which,
            )
        except ClipboardUnavailableError as error:
            logger.warning("clipboard copy failed: %s", error)
            raise
