"""
Conversions between nested translation mappings and flat mappings keyed by
dot-joined paths.

All functions return new mappings and never modify their input.
"""

from collections.abc import Mapping
from typing import Any

from po_sync.constants import KEY_SEPARATOR
from po_sync.exceptions import KeyConflictError


def flatten(nested: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """
    Flatten a nested mapping into ``{"a.b.c": value}`` form.

    Mappings without any leaves contribute nothing to the result.

    Examples:
        >>> flatten({"user": {"name": "Name", "profile": {"bio": "Bio"}}})
        {'user.name': 'Name', 'user.profile.bio': 'Bio'}
    """
    flat: dict[str, Any] = {}
    for key, value in nested.items():
        path = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat


def _insert(tree: Mapping[str, Any], segments: list[str], value: Any, key: str):
    """Return a copy of ``tree`` with ``value`` stored under ``segments``."""
    head, *rest = segments
    updated = dict(tree)
    existing = tree.get(head)

    if not rest:
        if isinstance(existing, Mapping):
            raise KeyConflictError(key)
        updated[head] = value
        return updated

    if existing is None:
        existing = {}
    elif not isinstance(existing, Mapping):
        raise KeyConflictError(key)

    updated[head] = _insert(existing, rest, value, key)
    return updated


def unflatten(flat: Mapping[str, Any]) -> dict[str, Any]:
    """
    Expand dotted keys into nested mappings.

    Raises:
        KeyConflictError: if a key is used both as a leaf and as a branch.
    """
    tree: dict[str, Any] = {}
    for key, value in flat.items():
        tree = _insert(tree, key.split(KEY_SEPARATOR), value, key)
    return tree


def sort_recursive(nested: Mapping[str, Any]) -> dict[str, Any]:
    """Sort keys ascending at every level; leaf values are left as they are."""
    return {
        key: sort_recursive(value) if isinstance(value, Mapping) else value
        for key, value in sorted(nested.items(), key=lambda item: str(item[0]))
    }


def sort_flat(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Sort a single-level mapping by its full key."""
    return dict(sorted(flat.items(), key=lambda item: str(item[0])))
