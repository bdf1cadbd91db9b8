"""Exceptions raised by po_sync."""


class PoSyncError(Exception):
    """Base class for all po_sync errors."""


class ConfigurationError(PoSyncError):
    """Raised when a required setting is missing or invalid."""


class InvalidStructureError(ConfigurationError):
    """Raised when the structural convention is neither flat nor nested."""


class KeyConflictError(PoSyncError):
    """
    Raised when a dotted key is used both as a leaf and as a branch,
    e.g. ``profile`` and ``profile.bio`` in the same mapping.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' is used both as a value and as a group of keys")


class RemoteAPIError(PoSyncError):
    """Raised when the remote translation service returns an unusable response."""

    def __init__(self, message: str, locale: str | None = None):
        self.locale = locale
        super().__init__(message)
