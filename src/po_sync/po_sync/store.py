"""Persistence of translation groups as JSON files, one per locale and group."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from po_sync.constants import (
    DEFAULT_JSON_INDENT,
    STRUCTURE_NESTED,
    TRANSLATION_FILE_EXTENSION,
)
from po_sync.exceptions import PoSyncError
from po_sync.key_tree import sort_flat, sort_recursive, unflatten

logger = logging.getLogger(__name__)


def load_json_file(file_path: Path) -> dict:
    """Load a JSON translation file, returning an empty mapping if it is missing."""
    if not file_path.exists():
        return {}
    try:
        with file_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        msg = f"Error parsing JSON file {file_path}: {e}"
        raise PoSyncError(msg) from e
    if not isinstance(data, dict):
        msg = f"Translation file {file_path} must contain a JSON object"
        raise PoSyncError(msg)
    return data


def save_json_file(file_path: Path, data: dict, indent: int = DEFAULT_JSON_INDENT):
    """Save a JSON translation file with proper formatting."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)
        f.write("\n")


class TranslationStore:
    """
    Reads and writes ``<lang_path>/<locale>/<group>.json`` files.

    ``write`` is the only method that changes files on disk. Data is sorted
    according to the structural convention before it is written, and a group
    without translations is deleted instead of being written empty.
    """

    def __init__(self, lang_path: Path, structure: str):
        self.lang_path = Path(lang_path)
        self.structure = structure

    def group_path(self, locale: str, group: str) -> Path:
        return self.lang_path / locale / f"{group}{TRANSLATION_FILE_EXTENSION}"

    def read(self, locale: str, group: str) -> dict[str, Any]:
        return load_json_file(self.group_path(locale, group))

    def write(self, locale: str, group: str, data: Mapping[str, Any]) -> Path:
        file_path = self.group_path(locale, group)

        if not data:
            if file_path.exists():
                file_path.unlink()
                logger.info("Deleted empty translation file %s", file_path)
            return file_path

        save_json_file(file_path, self.sort(data))
        logger.debug("Wrote %d top-level keys to %s", len(data), file_path)
        return file_path

    def sort(self, data: Mapping[str, Any]) -> dict[str, Any]:
        if self.structure == STRUCTURE_NESTED:
            return sort_recursive(data)
        return sort_flat(data)

    def to_structure(self, flat: Mapping[str, Any]) -> dict[str, Any]:
        """Convert a flat dotted mapping to the configured structural convention."""
        if self.structure == STRUCTURE_NESTED:
            return sort_recursive(unflatten(flat))
        return sort_flat(flat)

    def list_groups(self, locale: str) -> list[str]:
        locale_dir = self.lang_path / locale
        if not locale_dir.is_dir():
            return []
        return sorted(
            path.stem
            for path in locale_dir.iterdir()
            if path.is_file() and path.suffix == TRANSLATION_FILE_EXTENSION
        )

    def list_locales(self) -> list[str]:
        """Return the locale directories found under the language path."""
        if not self.lang_path.is_dir():
            return []
        return sorted(path.name for path in self.lang_path.iterdir() if path.is_dir())
