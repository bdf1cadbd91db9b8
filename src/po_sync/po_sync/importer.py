"""Import of PO files back into grouped translation files."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import polib  # type: ignore[import-untyped]
from django.utils.module_loading import import_string

from po_sync.conf import PoSyncConfig
from po_sync.constants import PO_FILE_EXTENSION, PO_FLAG_FUZZY
from po_sync.exceptions import PoSyncError
from po_sync.groups import KeyPatternFilter, partition, strip_group_prefix
from po_sync.key_tree import flatten
from po_sync.placeholders import extract_placeholders, to_internal
from po_sync.signals import translations_imported
from po_sync.store import TranslationStore

logger = logging.getLogger(__name__)


def is_fuzzy(entry: polib.POEntry) -> bool:
    return PO_FLAG_FUZZY in entry.flags


def load_po_file(file_path: Path) -> polib.POFile:
    try:
        return polib.pofile(str(file_path))
    except (OSError, ValueError) as e:
        msg = f"Error parsing PO file {file_path}: {e}"
        raise PoSyncError(msg) from e


def load_documents(import_path: Path) -> dict[str, polib.POFile]:
    """
    Load every PO file in ``import_path`` keyed by its ``Language`` header.

    Files without a ``Language`` header are keyed by their file name. A
    missing directory yields no documents.
    """
    import_path = Path(import_path)
    if not import_path.is_dir():
        return {}

    documents = {}
    for file_path in sorted(import_path.glob(f"*{PO_FILE_EXTENSION}")):
        po = load_po_file(file_path)
        locale = po.metadata.get("Language") or file_path.stem
        documents[locale] = po
    return documents


@dataclass(frozen=True)
class NonMatchingTerm:
    """A source-locale entry whose translation differs from its original text."""

    key: str
    original: str
    translation: str


@dataclass
class ImportResult:
    locale: str
    groups: dict[str, list[str]] = field(default_factory=dict)
    files: dict[str, Path] = field(default_factory=dict)
    non_matching: list[NonMatchingTerm] = field(default_factory=list)

    @property
    def imported_groups(self) -> dict[str, list[str]]:
        """Groups that received at least one key."""
        return {group: keys for group, keys in self.groups.items() if keys}


class ImportEngine:
    """
    Writes the entries of a PO file into the translation files of a locale.

    Each document is processed as parse, filter, group and then, per group,
    transform, merge or replace, and persist. Groups are written one at a
    time and are not rolled back if a later group fails.
    """

    def __init__(self, config: PoSyncConfig, store: TranslationStore | None = None):
        self.config = config
        self.store = store or TranslationStore(config.lang_path, config.structure)

    def select_entries(
        self,
        po: Iterable[polib.POEntry],
        *,
        fuzzy: bool = False,
        only: Iterable[str] | None = None,
    ) -> list[polib.POEntry]:
        """Keep active entries with a context that pass the fuzzy and key filters."""
        matches_pattern = KeyPatternFilter.from_patterns(only)
        return [
            entry
            for entry in po
            if entry.msgctxt
            and not entry.obsolete
            and (fuzzy or not is_fuzzy(entry))
            and matches_pattern(entry.msgctxt)
        ]

    def import_catalog(
        self,
        locale: str,
        po: Iterable[polib.POEntry],
        *,
        fuzzy: bool = False,
        only: Iterable[str] | None = None,
        replace: bool = False,
    ) -> ImportResult:
        entries = self.select_entries(po, fuzzy=fuzzy, only=only)
        result = ImportResult(locale=locale)

        for group, group_entries in partition(
            entries, key=lambda entry: entry.msgctxt
        ).items():
            if locale == self.config.source_locale:
                result.non_matching.extend(
                    NonMatchingTerm(entry.msgctxt, entry.msgid, entry.msgstr)
                    for entry in group_entries
                    if entry.msgid != entry.msgstr
                )
            result.files[group] = self.store.group_path(locale, group)
            result.groups[group] = self._import_group(
                locale, group, group_entries, replace=replace
            )

        imported_groups = result.imported_groups
        if imported_groups:
            translations_imported.send(
                sender=self.__class__, locale=locale, groups=imported_groups
            )
        self._clear_cache(locale)
        return result

    def _import_group(
        self,
        locale: str,
        group: str,
        entries: list[polib.POEntry],
        *,
        replace: bool,
    ) -> list[str]:
        """Persist one group and return the keys taken from the PO file."""
        incoming: dict[str, str] = {}
        for key, entry in strip_group_prefix(
            {entry.msgctxt: entry for entry in entries}, group
        ).items():
            if not entry.msgstr:
                continue
            self._check_placeholders(entry)
            incoming[key] = to_internal(entry.msgstr)

        if replace:
            translations = incoming
        else:
            translations = {**flatten(self.store.read(locale, group)), **incoming}

        self.store.write(locale, group, self.store.to_structure(translations))
        logger.info(
            "Imported %d keys into %s/%s (%d total)",
            len(incoming),
            locale,
            group,
            len(translations),
        )
        return list(incoming)

    def _check_placeholders(self, entry: polib.POEntry) -> None:
        expected = extract_placeholders(entry.msgid)
        found = extract_placeholders(entry.msgstr)
        if expected != found:
            logger.warning(
                "Placeholder mismatch for %s: expected %s, found %s",
                entry.msgctxt,
                sorted(expected),
                sorted(found),
            )

    def _clear_cache(self, locale: str) -> None:
        if self.config.cache_clear_callback:
            import_string(self.config.cache_clear_callback)(locale)
