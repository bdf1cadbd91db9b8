"""Default settings for po_sync."""

import os
from pathlib import Path

from po_sync.constants import DEFAULT_EXCLUDED_GROUPS, STRUCTURE_FLAT


def apply_common_settings(settings):
    """
    Apply po_sync defaults to a Django settings object.

    Values already present on ``settings`` are kept.
    """
    lang_path = Path(
        getattr(settings, "PO_SYNC_LANG_PATH", None)
        or Path(getattr(settings, "BASE_DIR", Path.cwd())) / "lang"
    )
    defaults = {
        # .. setting_name: PO_SYNC_LANG_PATH
        # .. setting_description: Root directory holding <locale>/<group>.json
        "PO_SYNC_LANG_PATH": lang_path,
        # .. setting_name: PO_SYNC_EXPORT_PATH
        # .. setting_description: Directory where po_export writes PO files
        "PO_SYNC_EXPORT_PATH": lang_path / "export",
        # .. setting_name: PO_SYNC_IMPORT_PATH
        # .. setting_description: Directory po_import reads and po_download fills
        "PO_SYNC_IMPORT_PATH": lang_path / "import",
        # .. setting_name: PO_SYNC_EXCLUDED_GROUPS
        # .. setting_description: Key prefixes left out of exported PO files
        "PO_SYNC_EXCLUDED_GROUPS": list(DEFAULT_EXCLUDED_GROUPS),
        # .. setting_name: PO_SYNC_LANGUAGES
        # .. setting_description: {"fr": {"label": "French", "enabled": True}};
        # leave empty to detect locales from the directories in PO_SYNC_LANG_PATH
        "PO_SYNC_LANGUAGES": {},
        # .. setting_name: PO_SYNC_STRUCTURE
        # .. setting_description: "flat" (dotted keys) or "nested" files
        "PO_SYNC_STRUCTURE": STRUCTURE_FLAT,
        # .. setting_name: PO_SYNC_CACHE_CLEAR_CALLBACK
        # .. setting_description: Dotted path of a callable(locale) run after
        # each imported locale
        "PO_SYNC_CACHE_CLEAR_CALLBACK": None,
        "POEDITOR_ENABLED": os.environ.get("POEDITOR_ENABLED", "false"),
        "POEDITOR_API_TOKEN": os.environ.get("POEDITOR_API_TOKEN", ""),
        "POEDITOR_PROJECT_ID": os.environ.get("POEDITOR_PROJECT_ID", ""),
    }
    for name, value in defaults.items():
        if not hasattr(settings, name):
            setattr(settings, name, value)
