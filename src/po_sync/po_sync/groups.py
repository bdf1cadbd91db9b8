"""Partitioning of dotted translation keys into translation groups."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import TypeVar

from po_sync.constants import KEY_SEPARATOR

T = TypeVar("T")
V = TypeVar("V")


def group_name(key: str) -> str:
    """Return the first segment of a dotted key (the whole key if it has no dot)."""
    return key.split(KEY_SEPARATOR, 1)[0]


def remainder_key(key: str) -> str:
    """Return the key after its first segment (the whole key if it has no dot)."""
    head, separator, rest = key.partition(KEY_SEPARATOR)
    return rest if separator else head


def partition(
    entries: Iterable[T], key: Callable[[T], str] = str
) -> dict[str, list[T]]:
    """
    Group entries by the first segment of their dotted key.

    Groups appear in order of first occurrence and entries keep their input
    order within a group.
    """
    groups: dict[str, list[T]] = {}
    for entry in entries:
        groups.setdefault(group_name(key(entry)), []).append(entry)
    return groups


def strip_group_prefix(entries: Mapping[str, V], group: str) -> dict[str, V]:
    """Remove the ``<group>.`` prefix from every key of a group's entries."""
    prefix = f"{group}{KEY_SEPARATOR}"
    return {
        (key[len(prefix) :] if key.startswith(prefix) else key): value
        for key, value in entries.items()
    }


@dataclass(frozen=True)
class KeyPatternFilter:
    """
    Predicate matching dotted keys against glob prefix patterns.

    A key matches a pattern when it matches ``pattern + "*"``, so ``auth``
    matches ``auth.failed`` and ``actions.*`` matches ``actions.save``.
    An empty pattern list matches according to ``match_when_empty``.
    """

    patterns: tuple[str, ...] = ()
    match_when_empty: bool = True

    @classmethod
    def from_patterns(
        cls, patterns: Iterable[str] | None, *, match_when_empty: bool = True
    ) -> "KeyPatternFilter":
        return cls(tuple(patterns or ()), match_when_empty=match_when_empty)

    def __call__(self, key: str) -> bool:
        if not self.patterns:
            return self.match_when_empty
        return any(fnmatchcase(key, f"{pattern}*") for pattern in self.patterns)
