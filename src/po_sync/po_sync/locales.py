"""Resolution of the locales a command operates on."""

import logging
from collections.abc import Callable, Iterable, Sequence

from django.utils.translation import get_language_info

from po_sync.conf import LanguageConfig, PoSyncConfig
from po_sync.store import TranslationStore

logger = logging.getLogger(__name__)


def language_name(locale: str) -> str:
    """
    Return the English name of a locale, or the locale itself if Django does
    not know it.
    """
    try:
        return get_language_info(locale)["name"]
    except KeyError:
        return locale


def _unique(locales: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(locales))


class LocaleResolver:
    """
    Compute the locales to operate on.

    The candidate pool is the enabled subset of the configured languages, or
    the locales found by ``auto_detect`` when no languages are configured.
    """

    def __init__(
        self,
        configured_languages: Sequence[LanguageConfig],
        auto_detect: Callable[[], Iterable[str]],
    ):
        self.configured_languages = configured_languages
        self.auto_detect = auto_detect

    @classmethod
    def from_config(cls, config: PoSyncConfig) -> "LocaleResolver":
        return cls(config.languages, lambda: detect_locales(config))

    def pool(self) -> list[str]:
        if self.configured_languages:
            return _unique(
                language.locale
                for language in self.configured_languages
                if language.enabled
            )
        return _unique(self.auto_detect())

    def resolve(
        self,
        explicit: Sequence[str] | None = None,
        *,
        all_flag: bool = False,
        default: Iterable[str] = (),
        restrict_to_pool: bool = True,
    ) -> list[str]:
        """
        Select locales in order of precedence: explicit arguments, then the
        whole pool when ``all_flag`` is set, then ``default``.

        Explicit arguments are intersected with the pool unless
        ``restrict_to_pool`` is False. Defaults are always intersected with
        the pool. An empty result is returned rather than raised.
        """
        if explicit and not restrict_to_pool:
            return _unique(explicit)

        pool = self.pool()
        if explicit:
            selected = [locale for locale in _unique(explicit) if locale in pool]
            skipped = set(explicit) - set(selected)
            if skipped:
                logger.warning(
                    "Ignoring locales that are not enabled: %s",
                    ", ".join(sorted(skipped)),
                )
            return selected
        if all_flag:
            return pool
        return [locale for locale in _unique(default) if locale in pool]


def detect_locales(config: PoSyncConfig) -> list[str]:
    """List locale directories under the language path, skipping export/import."""
    reserved = {config.export_path.resolve(), config.import_path.resolve()}
    store = TranslationStore(config.lang_path, config.structure)
    return [
        locale
        for locale in store.list_locales()
        if (config.lang_path / locale).resolve() not in reserved
    ]
