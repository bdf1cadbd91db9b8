"""
Django management command to load PO files back into the translation files.

Usage:
    ./manage.py po_import
    ./manage.py po_import fr --fuzzy
    ./manage.py po_import --only "actions.*" --only messages --replace
"""

import logging

from django.core.management.base import BaseCommand

from po_sync.conf import PoSyncConfig
from po_sync.importer import ImportEngine, ImportResult, load_documents
from po_sync.locales import LocaleResolver
from po_sync.utils.command_utils import command_errors, describe_locale, format_table

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Load PO files to update translations"

    def add_arguments(self, parser):
        parser.add_argument(
            "lang",
            nargs="*",
            help="Language codes to import, or leave blank for all",
        )
        parser.add_argument(
            "--fuzzy",
            action="store_true",
            help="Include fuzzy translations",
        )
        parser.add_argument(
            "--only",
            action="append",
            default=[],
            metavar="PATTERN",
            help=(
                "Limit keys to those matching a pattern, e.g. 'actions.*'. "
                "Can be given more than once."
            ),
        )
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Replace existing translation files instead of merging",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        """Handle the command execution."""
        with command_errors():
            config = PoSyncConfig.from_settings()
            engine = ImportEngine(config)

            documents = load_documents(config.import_path)
            if not documents:
                self.stdout.write(
                    self.style.WARNING(f"No PO files found in {config.import_path}")
                )
                return

            locales = LocaleResolver.from_config(config).resolve(
                options["lang"], all_flag=True
            )
            skipped = set(documents) - set(locales)
            if skipped:
                logger.info("Skipping PO files for %s", ", ".join(sorted(skipped)))

            locales = [locale for locale in locales if locale in documents]
            if not locales:
                self.stdout.write(self.style.WARNING("No languages to import."))
                return

            for locale in locales:
                self.stdout.write(
                    self.style.SUCCESS(
                        f"Loading translations for {describe_locale(locale, config)}"
                    )
                )
                result = engine.import_catalog(
                    locale,
                    documents[locale],
                    fuzzy=options["fuzzy"],
                    only=options["only"],
                    replace=options["replace"],
                )
                self._report(result)

    def _report(self, result: ImportResult) -> None:
        for group, file_path in result.files.items():
            keys = result.groups.get(group, [])
            if not keys and not file_path.exists():
                self.stdout.write(f"   Deleted empty file: {file_path}")
                continue
            self.stdout.write(f"   Generated file: {file_path} ({len(keys)} keys)")

        if result.non_matching:
            self.stdout.write(
                self.style.WARNING(
                    f"{len(result.non_matching)} non-matching terms "
                    "for default language"
                )
            )
            self.stdout.write(
                format_table(
                    ["Key", "Original", "Translation"],
                    [
                        [term.key, term.original, term.translation]
                        for term in result.non_matching
                    ],
                )
            )
