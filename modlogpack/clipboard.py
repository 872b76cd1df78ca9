"""System clipboard transfer through platform copy commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Any, Callable

from modlogpack.core.exceptions import ClipboardUnavailableError

CommandRunner = Callable[[list[str], str], subprocess.CompletedProcess[str]]
WhichLookup = Callable[[str], str | None]

logger = logging.getLogger(__name__)

_MACOS_COMMANDS: tuple[tuple[str, ...], ...] = (("pbcopy",),)
_WINDOWS_COMMANDS: tuple[tuple[str, ...], ...] = (("clip",),)
_UNIX_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def _default_runner(argv: list[str], text: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        argv,
        input=text,
        capture_output=True,
        text=True,
        check=False,
    )


def clipboard_commands(platform: str | None = None) -> list[tuple[str, ...]]:
    """Return candidate copy commands for a ``sys.platform`` value."""
    resolved = platform or sys.platform
    if resolved == "darwin":
        return list(_MACOS_COMMANDS)
    if resolved.startswith("win") or resolved == "cygwin":
        return list(_WINDOWS_COMMANDS)
    return list(_UNIX_COMMANDS)


def copy_to_clipboard(
    text: str,
    *,
    runner: CommandRunner | None = None,
    platform: str | None = None,
    which: WhichLookup = shutil.which,
) -> str:
    """Copy text verbatim and return the name of the command that took it."""
    execute: CommandRunner = runner or _default_runner
    failures: list[dict[str, Any]] = []

    for command in clipboard_commands(platform):
        program = command[0]
        if which(program) is None:
            failures.append({"command": program, "reason": "not found on PATH"})
            continue

        try:
            completed = execute(list(command), text)
        except OSError as error:
            logger.debug("clipboard command %s failed to start: %s", program, error)
            failures.append({"command": program, "reason": str(error)})
            continue

        if completed.returncode == 0:
            logger.debug("copied %d characters with %s", len(text), program)
            return program

        reason = (completed.stderr or "").strip() or f"exit code {completed.returncode}"
        logger.debug("clipboard command %s failed: %s", program, reason)
        failures.append({"command": program, "reason": reason})

    tried = ", ".join(failure["command"] for failure in failures) or "none"
    raise ClipboardUnavailableError(
        f"no clipboard command succeeded (tried: {tried})",
        failures=failures,
    )
