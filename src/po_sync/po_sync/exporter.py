"""Export of source-language translation files to one PO file per locale."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import polib  # type: ignore[import-untyped]

from po_sync.conf import PoSyncConfig
from po_sync.constants import (
    PO_FILE_EXTENSION,
    PO_HEADER_CONTENT_TRANSFER_ENCODING,
    PO_HEADER_CONTENT_TYPE,
    PO_HEADER_GENERATOR,
    PO_HEADER_MIME_VERSION,
)
from po_sync.exceptions import PoSyncError
from po_sync.groups import KeyPatternFilter
from po_sync.key_tree import flatten
from po_sync.placeholders import to_external
from po_sync.store import TranslationStore

logger = logging.getLogger(__name__)


def create_po_metadata(locale: str) -> dict[str, str]:
    """Create the PO header metadata for a locale."""
    return {
        "MIME-Version": PO_HEADER_MIME_VERSION,
        "Content-Type": PO_HEADER_CONTENT_TYPE,
        "Content-Transfer-Encoding": PO_HEADER_CONTENT_TRANSFER_ENCODING,
        "Language": locale,
        "X-Generator": PO_HEADER_GENERATOR,
    }


class TranslationLookup:
    """Looks up translated strings by dotted key, caching each locale's files."""

    def __init__(self, store: TranslationStore):
        self.store = store
        self._cache: dict[str, dict[str, object]] = {}

    def _translations(self, locale: str) -> dict[str, object]:
        if locale not in self._cache:
            self._cache[locale] = flatten(
                {
                    group: self.store.read(locale, group)
                    for group in self.store.list_groups(locale)
                }
            )
        return self._cache[locale]

    def has(self, key: str, locale: str) -> bool:
        value = self._translations(locale).get(key)
        return isinstance(value, str) and bool(value)

    def get(self, key: str, locale: str) -> str | None:
        return self._translations(locale).get(key) if self.has(key, locale) else None


@dataclass
class ExportResult:
    written: dict[str, Path] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failed


class ExportEngine:
    """Builds a catalog from the source locale and writes a PO file per locale."""

    def __init__(
        self,
        config: PoSyncConfig,
        store: TranslationStore | None = None,
        lookup: TranslationLookup | None = None,
    ):
        self.config = config
        self.store = store or TranslationStore(config.lang_path, config.structure)
        self.lookup = lookup or TranslationLookup(self.store)
        self.is_excluded = KeyPatternFilter.from_patterns(
            config.excluded_groups, match_when_empty=False
        )

    def build_catalog(self, source_locale: str) -> polib.POFile:
        """Collect every non-empty, non-excluded source string as a PO entry."""
        catalog = polib.POFile()
        catalog.metadata = create_po_metadata(source_locale)

        terms = flatten(
            {
                group: self.store.read(source_locale, group)
                for group in self.store.list_groups(source_locale)
            }
        )
        for key, original in terms.items():
            if not original or not isinstance(original, str):
                continue
            if self.is_excluded(key):
                continue
            catalog.append(
                polib.POEntry(msgctxt=key, msgid=to_external(original), msgstr="")
            )

        logger.debug("Built catalog of %d terms for %s", len(catalog), source_locale)
        return catalog

    def materialize_for_locale(
        self, catalog: polib.POFile, locale: str
    ) -> polib.POFile:
        """Return a copy of ``catalog`` carrying the translations for ``locale``."""
        po = polib.POFile()
        po.metadata = {**catalog.metadata, "Language": locale}

        for entry in catalog:
            translation = self.lookup.get(entry.msgctxt, locale)
            po.append(
                polib.POEntry(
                    msgctxt=entry.msgctxt,
                    msgid=entry.msgid,
                    msgstr=to_external(translation) if translation else "",
                    flags=list(entry.flags),
                )
            )
        return po

    def export_path_for(self, locale: str) -> Path:
        return self.config.export_path / f"{locale}{PO_FILE_EXTENSION}"

    def export(
        self, locales: Iterable[str], source_locale: str | None = None
    ) -> ExportResult:
        """Write one PO file per locale into the export directory."""
        source_locale = source_locale or self.config.source_locale
        catalog = self.build_catalog(source_locale)
        self.config.export_path.mkdir(parents=True, exist_ok=True)

        result = ExportResult()
        for locale in locales:
            file_path = self.export_path_for(locale)
            try:
                self.materialize_for_locale(catalog, locale).save(str(file_path))
            except (OSError, PoSyncError) as e:
                logger.exception("Failed to export PO file for %s", locale)
                result.failed[locale] = str(e)
                continue
            logger.info("Exported %s", file_path)
            result.written[locale] = file_path
        return result
