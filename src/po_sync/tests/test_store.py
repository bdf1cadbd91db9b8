"""
Tests for the JSON translation store
"""

import json

import pytest

from po_sync.exceptions import KeyConflictError, PoSyncError
from po_sync.store import TranslationStore


@pytest.fixture
def flat_store(tmp_path):
    return TranslationStore(tmp_path, "flat")


@pytest.fixture
def nested_store(tmp_path):
    return TranslationStore(tmp_path, "nested")


def test_read_missing_group_is_empty(flat_store):
    """A missing file reads as an empty mapping"""
    assert flat_store.read("fr", "actions") == {}


def test_write_and_read(flat_store, tmp_path):
    """Written data is sorted and can be read back"""
    flat_store.write("fr", "actions", {"save": "Enregistrer", "cancel": "Annuler"})

    file_path = tmp_path / "fr" / "actions.json"
    assert file_path.exists()
    assert list(json.loads(file_path.read_text(encoding="utf-8"))) == [
        "cancel",
        "save",
    ]
    assert flat_store.read("fr", "actions") == {
        "cancel": "Annuler",
        "save": "Enregistrer",
    }


def test_write_keeps_unicode(flat_store, tmp_path):
    """Non-ASCII text is written as-is"""
    flat_store.write("fr", "animals", {"zebra": "Zèbre"})
    assert "Zèbre" in (tmp_path / "fr" / "animals.json").read_text(encoding="utf-8")


def test_write_empty_deletes_existing_file(flat_store, tmp_path):
    """Writing an empty mapping removes the group file"""
    flat_store.write("fr", "actions", {"save": "Enregistrer"})
    flat_store.write("fr", "actions", {})
    assert not (tmp_path / "fr" / "actions.json").exists()


def test_write_empty_without_file(flat_store, tmp_path):
    """Writing an empty mapping for a missing group creates nothing"""
    flat_store.write("de", "actions", {})
    assert not (tmp_path / "de").exists()


def test_nested_write_sorts_every_level(nested_store):
    """Nested data is sorted recursively"""
    nested_store.write(
        "fr", "user", {"zebra": "Z", "middle": {"zoo": "Zoo", "ant": "A"}}
    )
    data = nested_store.read("fr", "user")
    assert list(data) == ["middle", "zebra"]
    assert list(data["middle"]) == ["ant", "zoo"]


def test_to_structure(flat_store, nested_store):
    """Flat data is kept flat or expanded depending on the structure"""
    flat = {"profile.bio": "Bio", "name": "Name"}
    assert flat_store.to_structure(flat) == {"name": "Name", "profile.bio": "Bio"}
    assert nested_store.to_structure(flat) == {
        "name": "Name",
        "profile": {"bio": "Bio"},
    }
    with pytest.raises(KeyConflictError):
        nested_store.to_structure({"profile": "P", "profile.bio": "Bio"})


def test_list_groups_and_locales(flat_store, tmp_path):
    """Groups are JSON files; locales are directories"""
    flat_store.write("en", "messages", {"welcome": "Welcome"})
    flat_store.write("en", "actions", {"save": "Save"})
    (tmp_path / "en" / "notes.txt").write_text("ignored")
    (tmp_path / "fr").mkdir()

    assert flat_store.list_groups("en") == ["actions", "messages"]
    assert flat_store.list_groups("fr") == []
    assert flat_store.list_groups("xx") == []
    assert flat_store.list_locales() == ["en", "fr"]


def test_read_invalid_json(flat_store, tmp_path):
    """Broken files raise a PoSyncError naming the file"""
    (tmp_path / "fr").mkdir()
    (tmp_path / "fr" / "broken.json").write_text("{not json")
    with pytest.raises(PoSyncError, match="broken.json"):
        flat_store.read("fr", "broken")
