"""
Django management command to download PO files from POEditor.

Usage:
    ./manage.py po_download fr de
    ./manage.py po_download --all
    ./manage.py po_download --list
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from po_sync.conf import PoSyncConfig
from po_sync.exceptions import RemoteAPIError
from po_sync.locales import LocaleResolver
from po_sync.poeditor import POEditorClient
from po_sync.utils.command_utils import command_errors, format_table

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Download PO files from the POEditor API to the import directory"

    def add_arguments(self, parser):
        parser.add_argument(
            "lang",
            nargs="*",
            help="Language codes to download",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Download all enabled languages",
        )
        parser.add_argument(
            "--list",
            action="store_true",
            dest="list_languages",
            help="List the languages available in the POEditor project and exit",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        """Handle the command execution."""
        with command_errors():
            config = PoSyncConfig.from_settings()
            client = POEditorClient.from_config(config.poeditor)

            if options["list_languages"]:
                self._list_languages(client)
                return

            locales = LocaleResolver.from_config(config).resolve(
                options["lang"], all_flag=options["all"]
            )
            if not locales:
                msg = (
                    "No languages to download. "
                    "Use --all flag or specify language codes."
                )
                raise CommandError(msg)

            config.import_path.mkdir(parents=True, exist_ok=True)
            self.stdout.write(
                self.style.SUCCESS("Downloading translations from POEditor")
            )

            failed = []
            for locale in locales:
                try:
                    file_path = client.download_language(locale, config.import_path)
                except RemoteAPIError as e:
                    logger.warning("Download failed for %s: %s", locale, e)
                    self.stdout.write(self.style.ERROR(f"   {locale}.po: {e!s}"))
                    failed.append(locale)
                else:
                    self.stdout.write(f"   Downloaded {file_path}")

        if failed:
            msg = f"Failed to download: {', '.join(failed)}"
            raise CommandError(msg)

        self.stdout.write(
            self.style.SUCCESS(
                f"All translations downloaded successfully to {config.import_path}/"
            )
        )
        self.stdout.write('Run "manage.py po_import" to import them.')

    def _list_languages(self, client: POEditorClient) -> None:
        languages = client.list_languages()
        if not languages:
            self.stdout.write(self.style.WARNING("The project has no languages."))
            return
        self.stdout.write(
            format_table(
                ["Code", "Name", "Translations", "Progress"],
                [
                    [
                        language.get("code", ""),
                        language.get("name", ""),
                        language.get("translations", ""),
                        f"{language.get('percentage', 0)}%",
                    ]
                    for language in languages
                ],
            )
        )
