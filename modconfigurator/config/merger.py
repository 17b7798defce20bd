"""Leaf-level merging of partial configuration documents."""

import copy
from typing import Any


def merge_partial(target: dict[str, Any], partial: dict[str, Any]) -> dict[str, Any]:
    """
    Merge a partial document into a copy of target.

    Nested mappings are merged key by key so that sections and keys the partial
    document does not mention survive. Any other value replaces the target's.

    Args:
        target: Current document
        partial: Keys to set, possibly nested

    Returns:
        New merged document; neither argument is modified
    """
    result = copy.deepcopy(target)
    _merge_into(result, partial)
    return result


def _merge_into(target: dict[str, Any], partial: dict[str, Any]) -> None:
    for key, value in partial.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge_into(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
