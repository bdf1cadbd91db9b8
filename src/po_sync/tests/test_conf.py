"""
Tests for reading configuration from Django settings
"""

from pathlib import Path

import pytest

from po_sync.conf import POEditorConfig, PoSyncConfig
from po_sync.constants import DEFAULT_EXCLUDED_GROUPS
from po_sync.exceptions import ConfigurationError, InvalidStructureError
from tests.utils import make_config


def test_from_settings(settings, tmp_path):
    """Settings are read into the configuration value"""
    settings.PO_SYNC_LANG_PATH = tmp_path
    settings.PO_SYNC_EXPORT_PATH = str(tmp_path / "out")
    settings.PO_SYNC_STRUCTURE = "nested"
    settings.PO_SYNC_EXCLUDED_GROUPS = "auth, validation"
    settings.PO_SYNC_LANGUAGES = {
        "en": {"label": "English", "enabled": True},
        "fr": {"label": "French", "enabled": False},
    }
    settings.LANGUAGE_CODE = "en"
    settings.POEDITOR_ENABLED = "true"
    settings.POEDITOR_API_TOKEN = "token"  # noqa: S105  # pragma: allowlist secret
    settings.POEDITOR_PROJECT_ID = 12345

    config = PoSyncConfig.from_settings()

    assert config.lang_path == tmp_path
    assert config.export_path == tmp_path / "out"
    assert config.structure == "nested"
    assert config.excluded_groups == ("auth", "validation")
    assert [language.locale for language in config.languages] == ["en", "fr"]
    assert config.languages[1].enabled is False
    assert config.label_for("fr") == "French"
    assert config.label_for("de") == ""
    assert config.source_locale == "en"
    assert config.poeditor == POEditorConfig(
        enabled=True, api_token="token", project_id="12345"
    )


def test_common_settings_defaults(settings):
    """The defaults applied by the test settings are picked up"""
    config = PoSyncConfig.from_settings()

    assert config.lang_path == Path(settings.BASE_DIR) / "lang"
    assert config.import_path == config.lang_path / "import"
    assert config.excluded_groups == tuple(DEFAULT_EXCLUDED_GROUPS)
    assert config.languages == ()
    assert config.poeditor.enabled is False


def test_invalid_structure(tmp_path):
    """Only flat and nested are accepted"""
    with pytest.raises(InvalidStructureError):
        make_config(tmp_path, structure="tree")


@pytest.mark.parametrize(
    ("poeditor", "message"),
    [
        (POEditorConfig(), "not enabled"),
        (POEditorConfig(enabled=True, api_token="token"), "credentials"),
        (POEditorConfig(enabled=True, project_id="1"), "credentials"),
    ],
)
def test_poeditor_validation(poeditor, message):
    """The POEditor integration needs to be enabled and configured"""
    with pytest.raises(ConfigurationError, match=message):
        poeditor.validate()
