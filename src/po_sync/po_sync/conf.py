"""
Configuration for po_sync.

Settings are read once from Django settings (falling back to environment
variables of the same name) into a ``PoSyncConfig`` value that is passed to
each component.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from django.conf import settings

from po_sync.constants import DEFAULT_EXCLUDED_GROUPS, STRUCTURE_FLAT, STRUCTURES
from po_sync.exceptions import ConfigurationError, InvalidStructureError

TRUTHY_VALUES = ("1", "true", "yes", "on")


def get_setting(name: str, default: Any = None) -> Any:
    """Get a setting from Django settings, then the environment."""
    if hasattr(settings, name):
        return getattr(settings, name)
    return os.environ.get(name, default)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return bool(value)


def _default_lang_path() -> Path:
    base_dir = getattr(settings, "BASE_DIR", None) or Path.cwd()
    return Path(base_dir) / "lang"


@dataclass(frozen=True)
class LanguageConfig:
    """A configured locale with its display label and enabled flag."""

    locale: str
    label: str = ""
    enabled: bool = True


@dataclass(frozen=True)
class POEditorConfig:
    enabled: bool = False
    api_token: str = ""
    project_id: str = ""

    def validate(self) -> None:
        """Raise ConfigurationError unless the integration can be used."""
        if not self.enabled:
            msg = (
                "POEditor integration is not enabled. "
                "Set POEDITOR_ENABLED=True in your settings or environment."
            )
            raise ConfigurationError(msg)
        if not self.api_token or not self.project_id:
            msg = (
                "POEditor API credentials not configured. Please set "
                "POEDITOR_API_TOKEN and POEDITOR_PROJECT_ID."
            )
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class PoSyncConfig:
    """Resolved configuration shared by the export and import engines."""

    lang_path: Path
    export_path: Path
    import_path: Path
    source_locale: str
    structure: str = STRUCTURE_FLAT
    excluded_groups: tuple[str, ...] = tuple(DEFAULT_EXCLUDED_GROUPS)
    languages: tuple[LanguageConfig, ...] = ()
    cache_clear_callback: str | None = None
    poeditor: POEditorConfig = field(default_factory=POEditorConfig)

    def __post_init__(self):
        if self.structure not in STRUCTURES:
            msg = (
                f"Invalid PO_SYNC_STRUCTURE '{self.structure}'. "
                f"Expected one of: {', '.join(STRUCTURES)}"
            )
            raise InvalidStructureError(msg)

    def label_for(self, locale: str) -> str:
        """Return the configured label of a locale, or an empty string."""
        for language in self.languages:
            if language.locale == locale:
                return language.label
        return ""

    @classmethod
    def from_settings(cls) -> "PoSyncConfig":
        """Build the configuration from Django settings."""
        lang_path = Path(get_setting("PO_SYNC_LANG_PATH") or _default_lang_path())
        export_path = get_setting("PO_SYNC_EXPORT_PATH") or lang_path / "export"
        import_path = get_setting("PO_SYNC_IMPORT_PATH") or lang_path / "import"

        excluded_groups = get_setting(
            "PO_SYNC_EXCLUDED_GROUPS", DEFAULT_EXCLUDED_GROUPS
        )
        if isinstance(excluded_groups, str):
            excluded_groups = [
                group.strip() for group in excluded_groups.split(",") if group.strip()
            ]

        languages = tuple(
            LanguageConfig(
                locale=locale,
                label=(options or {}).get("label", ""),
                enabled=_as_bool((options or {}).get("enabled", True)),
            )
            for locale, options in (get_setting("PO_SYNC_LANGUAGES") or {}).items()
        )

        return cls(
            lang_path=lang_path,
            export_path=Path(export_path),
            import_path=Path(import_path),
            source_locale=(
                get_setting("PO_SYNC_SOURCE_LOCALE")
                or getattr(settings, "LANGUAGE_CODE", "en")
            ),
            structure=get_setting("PO_SYNC_STRUCTURE") or STRUCTURE_FLAT,
            excluded_groups=tuple(excluded_groups or ()),
            languages=languages,
            cache_clear_callback=get_setting("PO_SYNC_CACHE_CLEAR_CALLBACK"),
            poeditor=POEditorConfig(
                enabled=_as_bool(get_setting("POEDITOR_ENABLED", default=False)),
                api_token=get_setting("POEDITOR_API_TOKEN") or "",
                project_id=str(get_setting("POEDITOR_PROJECT_ID") or ""),
            ),
        )
