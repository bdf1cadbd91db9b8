"""
Utility functions for the po_sync management commands.

This module provides reusable helpers for confirmation prompts, directory
clearing, locale output and error conversion.
"""

from collections.abc import Callable, Iterable
from contextlib import contextmanager
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from po_sync.conf import PoSyncConfig
from po_sync.exceptions import PoSyncError
from po_sync.locales import language_name

# ============================================================================
# Error Handling Utilities
# ============================================================================


@contextmanager
def command_errors():
    """Re-raise po_sync errors as CommandError so manage.py exits non-zero."""
    try:
        yield
    except PoSyncError as e:
        raise CommandError(str(e)) from e


# ============================================================================
# Output Utilities
# ============================================================================


def describe_locale(locale: str, config: PoSyncConfig | None = None) -> str:
    """
    Format a locale for output, e.g. ``French [fr]``.

    A label configured in ``PO_SYNC_LANGUAGES`` takes precedence over the
    Django language name.
    """
    label = config.label_for(locale) if config else ""
    return f"{label or language_name(locale)} [{locale}]"


def format_table(headers: Iterable[str], rows: Iterable[Iterable[str]]) -> str:
    """Render rows as a compact, left-aligned text table."""
    table = [list(headers), *[[str(cell) for cell in row] for row in rows]]
    widths = [max(len(row[index]) for row in table) for index in range(len(table[0]))]
    lines = []
    for row in table:
        cells = [cell.ljust(width) for cell, width in zip(row, widths, strict=True)]
        lines.append(("  " + "  ".join(cells)).rstrip())
    return "\n".join(lines)


# ============================================================================
# Directory Utilities
# ============================================================================


def clear_directory(
    command: BaseCommand,
    path: Path,
    label: str,
    *,
    force: bool = False,
    prompt: Callable[[str], str] | None = None,
) -> bool:
    """
    Delete the files directly inside ``path`` after asking for confirmation.

    Returns False if the user declined, True otherwise.
    """
    files = []
    if path.is_dir():
        files = sorted(item for item in path.iterdir() if item.is_file())
    if not files:
        command.stdout.write(f"The {label} directory is already empty.")
        return True

    command.stdout.write(
        command.style.WARNING(f"The following files will be deleted from {path}:")
    )
    command.stdout.write("  " + ", ".join(item.name for item in files))

    if not force:
        answer = (prompt or input)(
            "Do you want to continue? Type 'yes' to continue, or 'no' to cancel: "
        )
        if answer.strip().lower() not in ("y", "yes"):
            command.stdout.write("Operation cancelled.")
            return False

    for item in files:
        item.unlink()

    command.stdout.write(command.style.SUCCESS(f"Cleared {label} directory."))
    return True
