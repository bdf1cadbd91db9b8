"""
Conversion between colon placeholders (``:name``) used in translation files
and brace placeholders (``{name}``) used in exported PO files.
"""

import re

COLON_PLACEHOLDER_PATTERN = re.compile(r":(\w+)")
BRACE_PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def to_external(text: str) -> str:
    """Rewrite every ``:name`` placeholder as ``{name}``."""
    return COLON_PLACEHOLDER_PATTERN.sub(r"{\1}", text)


def to_internal(text: str) -> str:
    """Rewrite every ``{name}`` placeholder as ``:name``."""
    return BRACE_PLACEHOLDER_PATTERN.sub(r":\1", text)


def extract_placeholders(text: str) -> set[str]:
    """Return the placeholder names used in either syntax."""
    return set(COLON_PLACEHOLDER_PATTERN.findall(text)) | set(
        BRACE_PLACEHOLDER_PATTERN.findall(text)
    )
