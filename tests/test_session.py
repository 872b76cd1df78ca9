import json
import subprocess

import pytest

from modlogpack.core import ClipboardUnavailableError, InvalidInputError
from modlogpack.session import ChangelogSession, generate_changelog

OLD = json.dumps([{"name": "Foo", "version": "1.0"}])
NEW = json.dumps([{"name": "Foo", "version": "2.0"}, {"name": "Bar", "version": "1.0"}])


def test_generate_changelog_returns_markup_and_preview() -> None:
    result = generate_changelog(OLD, NEW)

    assert result.change_set.summary() == {"added": 1, "updated": 1, "removed": 0}
    assert result.markup.startswith("## Added (1)\n")
    assert "<h2>Updated (1)</h2>" in result.html
    assert result.to_dict()["summary"] == {"added": 1, "updated": 1, "removed": 0}


def test_generate_changelog_for_empty_lists() -> None:
    result = generate_changelog("[]", "[]")

    assert result.markup == "No changes detected.\n"
    assert result.html == "<p>No changes detected.</p><p></p>"


def test_generate_changelog_accepts_numeric_versions() -> None:
    result = generate_changelog(
        '[{"name": "X", "version": 1}]',
        '[{"name": "X", "version": 2}]',
    )

    assert result.change_set.summary() == {"added": 0, "updated": 1, "removed": 0}
    assert result.markup == "## Updated (1)\n\n- **X**: `1` → `2`\n\n"
    assert result.to_dict()["change_set"]["updated"] == [
        {"name": "X", "old_version": 1, "version": 2}
    ]


def test_session_generate_stores_markup() -> None:
    session = ChangelogSession()

    result = session.generate(OLD, NEW)

    assert session.markup_text == result.markup
    assert session.preview_html == result.html


def test_session_generate_is_idempotent() -> None:
    session = ChangelogSession()

    first = session.generate(OLD, NEW)
    second = session.generate(OLD, NEW)

    assert first.markup == second.markup
    assert first.html == second.html


def test_session_invalid_input_keeps_previous_markup() -> None:
    session = ChangelogSession()
    previous = session.generate(OLD, NEW).markup

    with pytest.raises(InvalidInputError) as error:
        session.generate(OLD, "not json")

    assert error.value.label == "new"
    assert session.markup_text == previous


def test_session_invalid_old_input_produces_no_output() -> None:
    session = ChangelogSession()

    with pytest.raises(InvalidInputError):
        session.generate('{"name": "Foo"}', NEW)

    assert session.markup_text == ""
    assert session.preview_html == ""


def test_session_copy_transfers_current_markup() -> None:
    session = ChangelogSession()
    session.generate(OLD, NEW)
    received: list[str] = []

    def _runner(argv: list[str], text: str) -> subprocess.CompletedProcess[str]:
        received.append(text)
        return subprocess.CompletedProcess(argv, 0, "", "")

    used = session.copy(runner=_runner, platform="darwin", which=lambda _program: "/usr/bin/pbcopy")

    assert used == "pbcopy"
    assert received == [session.markup_text]


def test_session_copy_failure_leaves_state_unchanged() -> None:
    session = ChangelogSession()
    session.generate(OLD, NEW)
    before = session.markup_text

    with pytest.raises(ClipboardUnavailableError):
        session.copy(platform="linux", which=lambda _program: None)

    assert session.markup_text == before
