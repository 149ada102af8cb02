from __future__ import annotations
import json, os
from typing import Dict
from medialink.domain.ports import StoragePort


class StorageLocal(StoragePort):
    """Local filesystem storage for user prefs (JSON)."""

    PREFS_FILE = "user_prefs.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def prefs_path(self) -> str:
        return os.path.join(self.root, self.PREFS_FILE)

    def load_user_prefs(self) -> Dict:
        path = self.prefs_path
        if not os.path.exists(path):
            return {}
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
