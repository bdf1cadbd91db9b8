"""
po_sync Django application initialization.
"""

from django.apps import AppConfig


class PoSyncAppConfig(AppConfig):
    """
    Configuration for the po_sync Django application.
    """

    name = "po_sync"
    verbose_name = "PO Sync"
    default_auto_field = "django.db.models.BigAutoField"
