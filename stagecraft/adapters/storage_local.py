from __future__ import annotations
import json, os
from typing import Dict
from stagecraft.domain.ports import SettingsStoragePort


class StorageLocal(SettingsStoragePort):
    """Local filesystem storage for user prefs (JSON)."""

    FILENAME = "user_prefs.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILENAME)

    def save_user_prefs(self, prefs: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(prefs, f, ensure_ascii=False, indent=2, sort_keys=True)

    def load_user_prefs(self) -> Dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        # a hand-edited file may hold a list or scalar
        return data if isinstance(data, dict) else {}
