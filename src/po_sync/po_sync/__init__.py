"""
Django application that converts grouped JSON translation files to and from
gettext PO files.
"""

__version__ = "0.1.0"
