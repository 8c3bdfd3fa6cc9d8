from __future__ import annotations

import json
import logging
import mimetypes
from datetime import datetime, timezone
from pathlib import Path

from nextstep import config
from nextstep.cleaner import normalize_profile
from nextstep.models import Profile

logger = logging.getLogger(__name__)


class AvatarRejected(ValueError):
    pass


class LocalProfileStore:
    """Profile rows and avatar files kept on local disk, keyed by user id."""

    def __init__(
        self,
        storage_path: Path | str | None = None,
        avatar_dir: Path | str | None = None,
    ):
        self.storage_path = Path(storage_path or config.PROFILE_STORE_PATH)
        self.avatar_dir = Path(avatar_dir or config.AVATAR_DIR)

    def _read_all(self) -> dict:
        if not self.storage_path.exists():
            return {}
        data = json.loads(self.storage_path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}

    def _write_all(self, rows: dict) -> None:
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(json.dumps(rows, indent=2), encoding="utf-8")

    def fetch(self, user_id: str) -> dict | None:
        """The stored record, or None when the user has never saved."""
        row = self._read_all().get(user_id)
        logger.debug("Fetched profile for %s: %s", user_id, "found" if row else "not found")
        return row

    def upsert(self, user_id: str, profile: Profile | dict) -> dict:
        record = profile.to_dict() if isinstance(profile, Profile) else dict(profile)
        rows = self._read_all()
        row = {**rows.get(user_id, {}), **record}
        row["id"] = user_id
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        rows[user_id] = row
        self._write_all(rows)
        logger.info("Saved profile for %s", user_id)
        return row

    def delete(self, user_id: str) -> bool:
        rows = self._read_all()
        if rows.pop(user_id, None) is None:
            return False
        self._write_all(rows)
        return True

    def save_avatar(self, user_id: str, filename: str, data: bytes, content_type: str = "") -> str:
        content_type = content_type or mimetypes.guess_type(filename)[0] or ""
        if not content_type.startswith("image/"):
            raise AvatarRejected("Please select an image file")
        if len(data) > config.AVATAR_MAX_BYTES:
            raise AvatarRejected("Image must be less than 2MB")

        ext = Path(filename).suffix.lstrip(".").lower() or content_type.split("/", 1)[1]
        target = self.avatar_dir / user_id / f"avatar.{ext}"
        target.parent.mkdir(parents=True, exist_ok=True)
        for old in target.parent.glob("avatar.*"):
            old.unlink()
        target.write_bytes(data)

        url = target.resolve().as_uri()
        self.upsert(user_id, {"avatar_url": url})
        return url


def load_profile(store: LocalProfileStore, user_id: str) -> Profile | None:
    """Fetch and normalise in one step; None means not found."""
    return normalize_profile(store.fetch(user_id), user_id=user_id)
