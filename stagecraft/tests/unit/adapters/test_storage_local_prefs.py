import json

from stagecraft.adapters.storage_local import StorageLocal


def test_user_prefs_missing_file_returns_empty(tmp_path):
    assert StorageLocal(root_dir=str(tmp_path)).load_user_prefs() == {}


def test_user_prefs_written_as_json(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path / "nested"))
    storage.save_user_prefs({"headless": True, "retries": 4})

    raw = json.loads((tmp_path / "nested" / "user_prefs.json").read_text(encoding="utf-8"))
    assert raw == {"headless": True, "retries": 4}
    assert storage.load_user_prefs() == {"headless": True, "retries": 4}


def test_user_prefs_non_object_file_is_ignored(tmp_path):
    (tmp_path / "user_prefs.json").write_text("[1, 2]", encoding="utf-8")
    assert StorageLocal(root_dir=str(tmp_path)).load_user_prefs() == {}
