"""JSON-backed store for user shopping preferences."""

import json
from pathlib import Path
from typing import Optional

from engine_app.errors import StoreUnavailableError
from models.preferences import PreferenceProfile


class PreferenceStore:
    """One JSON file per user under ``base_dir``."""

    def __init__(self, base_dir: str = "data/preferences") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _profile_path(self, user_id: str) -> Path:
        return self.base_dir / f"{user_id}.json"

    def get(self, user_id: str) -> Optional[PreferenceProfile]:
        path = self._profile_path(user_id)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreUnavailableError(f"Could not read preferences for {user_id}: {exc}") from exc
        return PreferenceProfile.from_raw(data.get("preferences", {}))

    def save(self, user_id: str, profile: PreferenceProfile) -> PreferenceProfile:
        path = self._profile_path(user_id)
        try:
            path.write_text(json.dumps({"user_id": user_id, "preferences": profile.to_dict()}, indent=2))
        except OSError as exc:
            raise StoreUnavailableError(f"Could not save preferences for {user_id}: {exc}") from exc
        return profile
