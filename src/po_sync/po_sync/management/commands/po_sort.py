"""
Django management command to sort translation files alphabetically.

Usage:
    ./manage.py po_sort
    ./manage.py po_sort fr
"""

from django.core.management.base import BaseCommand, CommandError

from po_sync.conf import PoSyncConfig
from po_sync.locales import LocaleResolver
from po_sync.store import TranslationStore
from po_sync.utils.command_utils import command_errors, describe_locale


class Command(BaseCommand):
    help = "Sort translation files alphabetically"

    def add_arguments(self, parser):
        parser.add_argument(
            "lang",
            nargs="*",
            help="Language codes to sort, or leave blank for all",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        """Handle the command execution."""
        with command_errors():
            config = PoSyncConfig.from_settings()
            store = TranslationStore(config.lang_path, config.structure)

            # Explicit locales are sorted even when they are not enabled
            locales = LocaleResolver.from_config(config).resolve(
                options["lang"], all_flag=True, restrict_to_pool=False
            )
            if not locales:
                msg = "No languages found to sort."
                raise CommandError(msg)

            for locale in locales:
                self._sort_locale(config, store, locale)

    def _sort_locale(
        self, config: PoSyncConfig, store: TranslationStore, locale: str
    ) -> None:
        self.stdout.write(
            self.style.SUCCESS(
                f"Sorting translations for {describe_locale(locale, config)}"
            )
        )
        groups = store.list_groups(locale)
        if not groups:
            self.stdout.write(
                self.style.WARNING(f"No translation files found for {locale}")
            )
            return

        for group in groups:
            translations = store.read(locale, group)
            if not translations:
                continue
            store.write(locale, group, translations)
            self.stdout.write(f"   Sorted {store.group_path(locale, group).name}")
