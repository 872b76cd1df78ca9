"""O(n) name-keyed mod list diff engine."""

from __future__ import annotations

from collections.abc import Iterable

from modlogpack.core.models import ModItem, Scalar, UpdatedItem
from modlogpack.diff.models import ChangeSet


def versions_differ(old: Scalar, new: Scalar) -> bool:
    # true and 1 compare equal in Python but are different JSON values.
    if isinstance(old, bool) is not isinstance(new, bool):
        return True
    return old != new


def diff_items(old_items: Iterable[ModItem], new_items: Iterable[ModItem]) -> ChangeSet:
    """Classify items as added, updated or removed.

    Items are matched by name. When a list repeats a name, the later entry
    wins the lookup. Versions are compared as plain JSON values, so ``"1.0"``
    and ``"1.0.0"`` differ, ``"1"`` and ``1`` differ, and two missing versions
    are equal. Items without a name share the ``None`` key.
    """
    old_list = list(old_items)
    new_list = list(new_items)

    old_by_name = {item.name: item for item in old_list}
    new_by_name = {item.name: item for item in new_list}

    result = ChangeSet()

    for new_item in new_list:
        old_item = old_by_name.get(new_item.name)
        if old_item is None:
            result.added.append(new_item)
        elif versions_differ(old_item.version, new_item.version):
            result.updated.append(UpdatedItem.from_items(old_item, new_item))

    for old_item in old_list:
        if old_item.name not in new_by_name:
            result.removed.append(old_item)

    return result
