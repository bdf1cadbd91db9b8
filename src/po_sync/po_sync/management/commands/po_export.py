"""
Django management command to generate PO files from the translation files.

Usage:
    ./manage.py po_export
    ./manage.py po_export fr de
    ./manage.py po_export --all --clear --force
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from po_sync.conf import PoSyncConfig
from po_sync.exporter import ExportEngine
from po_sync.locales import LocaleResolver
from po_sync.utils.command_utils import (
    clear_directory,
    command_errors,
    describe_locale,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Generate PO files for language translation"

    def add_arguments(self, parser):
        parser.add_argument(
            "lang",
            nargs="*",
            help="Language codes to export, or leave blank for the default language",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Export all enabled languages",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Clear the export directory before generating new files",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Clear without asking for confirmation",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        """Handle the command execution."""
        with command_errors():
            config = PoSyncConfig.from_settings()
            engine = ExportEngine(config)

            self.stdout.write(
                self.style.SUCCESS(
                    "Generating translation files using the default language: "
                    f"{describe_locale(config.source_locale, config)}"
                )
            )

            config.export_path.mkdir(parents=True, exist_ok=True)
            if options["clear"] and not clear_directory(
                self, config.export_path, "export", force=options["force"]
            ):
                return

            locales = LocaleResolver.from_config(config).resolve(
                options["lang"],
                all_flag=options["all"],
                default=[config.source_locale],
            )
            if not locales:
                self.stdout.write(self.style.WARNING("No languages to export."))
                return

            result = engine.export(locales)
            logger.info(
                "Exported %d PO files to %s", len(result.written), config.export_path
            )

        for locale, file_path in result.written.items():
            self.stdout.write(
                f"   Created PO file for {describe_locale(locale, config)}: "
                f"{file_path}"
            )
        for locale, error in result.failed.items():
            self.stdout.write(
                self.style.ERROR(
                    f"   Failed to export {describe_locale(locale, config)}: {error}"
                )
            )

        if not result.success:
            msg = f"Export failed for: {', '.join(result.failed)}"
            raise CommandError(msg)
