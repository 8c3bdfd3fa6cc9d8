from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from nextstep import config

GUI = Path(__file__).resolve().parents[1] / "nextstep" / "gui.py"


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "PROFILE_STORE_PATH", tmp_path / "profiles.json")
    monkeypatch.setattr(config, "AVATAR_DIR", tmp_path / "avatars")
    monkeypatch.setattr(config, "LOCAL_USER_ID", "gui-user")
    at = AppTest.from_file(str(GUI), default_timeout=30)
    at.run()
    return at


def test_visiting_profile_page_keeps_missing_profile(app):
    app.sidebar.radio[0].set_value("Profile").run()
    assert not app.exception
    assert app.session_state["profile"] is None


def test_typing_a_name_creates_profile(app):
    app.sidebar.radio[0].set_value("Profile").run()
    app.text_input(key="personal-full_name").set_value("Ada").run()
    assert app.session_state["profile"].full_name == "Ada"
