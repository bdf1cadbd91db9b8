"""Constants for PO export and import."""

# Structural conventions for persisted translation files
STRUCTURE_FLAT = "flat"
STRUCTURE_NESTED = "nested"
STRUCTURES = (STRUCTURE_FLAT, STRUCTURE_NESTED)

# Framework translation groups that are usually managed elsewhere
DEFAULT_EXCLUDED_GROUPS = [
    "auth",
    "pagination",
    "passwords",
    "validation",
]

# Translation file layout
TRANSLATION_FILE_EXTENSION = ".json"
PO_FILE_EXTENSION = ".po"
DEFAULT_JSON_INDENT = 4
KEY_SEPARATOR = "."

# PO header values
PO_HEADER_MIME_VERSION = "1.0"
PO_HEADER_CONTENT_TYPE = "text/plain; charset=UTF-8"
PO_HEADER_CONTENT_TRANSFER_ENCODING = "8bit"
PO_HEADER_GENERATOR = "django-po-sync"
PO_FLAG_FUZZY = "fuzzy"

# POEditor API
POEDITOR_API_BASE_URL = "https://api.poeditor.com/v2"
POEDITOR_EXPORT_TYPE = "po"
POEDITOR_STATUS_SUCCESS = "success"
POEDITOR_REQUEST_TIMEOUT = 30
