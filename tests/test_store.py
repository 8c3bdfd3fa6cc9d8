import json

import pytest

from nextstep.models import Profile
from nextstep.store import AvatarRejected, LocalProfileStore, load_profile

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def tmp_store(tmp_path):
    return LocalProfileStore(storage_path=tmp_path / "profiles.json", avatar_dir=tmp_path / "avatars")


def test_fetch_missing(tmp_store):
    assert tmp_store.fetch("nobody") is None
    assert load_profile(tmp_store, "nobody") is None


def test_upsert_and_load(tmp_store):
    tmp_store.upsert("u1", Profile(full_name="Ada", skills=("Python",)))
    profile = load_profile(tmp_store, "u1")
    assert profile.full_name == "Ada"
    assert profile.skills == ("Python",)
    assert profile.user_id == "u1"


def test_upsert_merges_and_stamps(tmp_store):
    tmp_store.upsert("u1", {"full_name": "Ada"})
    row = tmp_store.upsert("u1", {"headline": "Analyst"})
    assert row["full_name"] == "Ada"
    assert row["headline"] == "Analyst"
    assert row["id"] == "u1"
    assert row["updated_at"].endswith("+00:00")
    stored = json.loads(tmp_store.storage_path.read_text(encoding="utf-8"))
    assert set(stored) == {"u1"}


def test_delete(tmp_store):
    tmp_store.upsert("u1", {"full_name": "Ada"})
    assert tmp_store.delete("u1")
    assert not tmp_store.delete("u1")
    assert tmp_store.fetch("u1") is None


def test_save_avatar(tmp_store):
    url = tmp_store.save_avatar("u1", "me.PNG", PNG, "image/png")
    assert url.startswith("file://")
    assert url.endswith("/u1/avatar.png")
    assert (tmp_store.avatar_dir / "u1" / "avatar.png").read_bytes() == PNG
    assert load_profile(tmp_store, "u1").avatar_url == url


def test_save_avatar_replaces_previous(tmp_store):
    tmp_store.save_avatar("u1", "a.png", PNG, "image/png")
    tmp_store.save_avatar("u1", "b.jpg", b"jpeg", "image/jpeg")
    assert [p.name for p in (tmp_store.avatar_dir / "u1").iterdir()] == ["avatar.jpg"]


def test_avatar_type_guessed_from_name(tmp_store):
    assert tmp_store.save_avatar("u1", "me.gif", b"GIF89a").endswith("avatar.gif")


def test_avatar_rejects_non_image(tmp_store):
    with pytest.raises(AvatarRejected, match="Please select an image file"):
        tmp_store.save_avatar("u1", "cv.pdf", b"%PDF", "application/pdf")
    assert tmp_store.fetch("u1") is None


def test_avatar_rejects_large_files(tmp_store):
    with pytest.raises(AvatarRejected, match="less than 2MB"):
        tmp_store.save_avatar("u1", "big.png", b"\x00" * (2 * 1024 * 1024 + 1), "image/png")
