"""
Utils for po_sync tests.
"""

import json
import textwrap
from pathlib import Path

from po_sync.conf import LanguageConfig, PoSyncConfig


class TranslationFiles:
    """Creates and reads translation and PO files below a temporary directory."""

    def __init__(self, lang_path: Path):
        self.lang_path = lang_path
        self.export_path = lang_path / "export"
        self.import_path = lang_path / "import"
        for path in (self.lang_path, self.export_path, self.import_path):
            path.mkdir(parents=True, exist_ok=True)

    def create_translation_file(self, locale: str, group: str, translations: dict):
        locale_dir = self.lang_path / locale
        locale_dir.mkdir(parents=True, exist_ok=True)
        (locale_dir / f"{group}.json").write_text(
            json.dumps(translations, ensure_ascii=False), encoding="utf-8"
        )

    def create_po_file(self, locale: str, content: str):
        (self.import_path / f"{locale}.po").write_text(
            textwrap.dedent(content).lstrip(), encoding="utf-8"
        )

    def exported_po_file(self, locale: str) -> str:
        return (self.export_path / f"{locale}.po").read_text(encoding="utf-8")

    def generated_translations(self, locale: str, group: str) -> dict:
        file_path = self.lang_path / locale / f"{group}.json"
        if not file_path.exists():
            return {}
        return json.loads(file_path.read_text(encoding="utf-8"))

    def group_exists(self, locale: str, group: str) -> bool:
        return (self.lang_path / locale / f"{group}.json").exists()


def make_config(lang_path: Path, **overrides) -> PoSyncConfig:
    """Build a PoSyncConfig for tests without going through Django settings."""
    languages = overrides.pop("languages", {})
    values = {
        "lang_path": lang_path,
        "export_path": lang_path / "export",
        "import_path": lang_path / "import",
        "source_locale": "en",
        "languages": tuple(
            LanguageConfig(
                locale, options.get("label", ""), options.get("enabled", True)
            )
            for locale, options in languages.items()
        ),
    }
    values.update(overrides)
    return PoSyncConfig(**values)


def clear_cache(locale: str) -> None:  # noqa: ARG001
    """Cache clear callback used by the import tests."""
    return None
