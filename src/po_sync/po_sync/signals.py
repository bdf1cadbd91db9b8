"""
Signals sent by po_sync.

``translations_imported`` is sent once per locale after a PO file has been
imported, when at least one group received keys. Receivers get:

    locale: the imported locale
    groups: mapping of group name to the list of keys written for it
"""

from django.dispatch import Signal

translations_imported = Signal()
