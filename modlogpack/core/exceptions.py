"""Changelog subsystem exceptions."""

from __future__ import annotations

from typing import Any

INVALID_INPUT_MESSAGE = "Invalid JSON format. Please check your input."
CLIPBOARD_FAILED_MESSAGE = "Failed to copy to clipboard"


class ChangelogError(Exception):
    """Base class for changelog errors."""


class InvalidInputError(ChangelogError):
    """Item list text is not a JSON array of item objects."""

    def __init__(self, message: str, *, label: str | None = None) -> None:
        super().__init__(message)
        self.label = label
        self.user_message = INVALID_INPUT_MESSAGE


class ClipboardUnavailableError(ChangelogError):
    """No clipboard transfer command succeeded."""

    def __init__(self, message: str, *, failures: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.failures = failures or []
        self.user_message = CLIPBOARD_FAILED_MESSAGE
