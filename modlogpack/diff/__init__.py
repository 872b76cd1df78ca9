"""Diff subsystem for ModlogKit."""

from modlogpack.diff.engine import diff_items, versions_differ
from modlogpack.diff.models import CHANGE_CATEGORIES, ChangeCategory, ChangeSet

__all__ = [
    "ChangeCategory",
    "CHANGE_CATEGORIES",
    "ChangeSet",
    "diff_items",
    "versions_differ",
]
