"""Pytest config"""

import logging

import pytest
import responses

from tests.utils import TranslationFiles


def pytest_addoption(parser):
    """Pytest hook that adds command line options"""
    parser.addoption(
        "--disable-logging",
        action="store_true",
        default=False,
        help="Disable all logging during test run",
    )


def pytest_configure(config):
    """Pytest hook that runs after command line options have been parsed"""
    if config.getoption("--disable-logging"):
        logging.disable(logging.CRITICAL)


@pytest.fixture
def translation_files(tmp_path, settings):
    """Point po_sync at temporary lang, export and import directories"""
    files = TranslationFiles(tmp_path / "lang")
    settings.PO_SYNC_LANG_PATH = files.lang_path
    settings.PO_SYNC_EXPORT_PATH = files.export_path
    settings.PO_SYNC_IMPORT_PATH = files.import_path
    settings.PO_SYNC_LANGUAGES = {}
    settings.PO_SYNC_STRUCTURE = "flat"
    settings.PO_SYNC_CACHE_CLEAR_CALLBACK = None
    settings.LANGUAGE_CODE = "en"
    return files


@pytest.fixture
def mocked_responses():
    """Mock requests responses"""
    with responses.RequestsMock() as rsps:
        yield rsps
