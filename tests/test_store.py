"""
Tests for the file-backed profile store.
"""

import json

import pytest

from cosmic.bazi import compute_four_pillars
from cosmic.profile import compose_cosmic_profile
from cosmic.store import (
    DEFAULT_PROFILE_KEY,
    PROFILE_DIR_ENV,
    delete_profile,
    load_profile,
    profile_path,
    save_profile,
)
from cosmic.western import compute_zodiac


@pytest.fixture
def profile():
    return compose_cosmic_profile(compute_four_pillars(1995, 8, 8, 20), compute_zodiac(8, 8))


class TestSaveAndLoad:

    def test_round_trip(self, profile, tmp_path):
        path = save_profile(profile, directory=tmp_path)
        assert path == tmp_path / f"{DEFAULT_PROFILE_KEY}.json"
        assert load_profile(directory=tmp_path) == profile

    def test_named_profile(self, profile, tmp_path):
        path = save_profile(profile, "Alex Chen", directory=tmp_path)
        assert path.name == "alex_chen.json"
        assert load_profile("Alex Chen", directory=tmp_path) == profile

    def test_file_is_plain_json(self, profile, tmp_path):
        path = save_profile(profile, directory=tmp_path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["title"] == profile.title
        assert data["zodiac"]["name"] == "Leo"

    def test_save_overwrites(self, profile, tmp_path):
        save_profile(profile, directory=tmp_path)
        other = compose_cosmic_profile(compute_four_pillars(1970, 3, 1, 4), compute_zodiac(3, 1))
        save_profile(other, directory=tmp_path)
        assert load_profile(directory=tmp_path) == other

    def test_creates_missing_directory(self, profile, tmp_path):
        target = tmp_path / "nested" / "store"
        save_profile(profile, directory=target)
        assert (target / f"{DEFAULT_PROFILE_KEY}.json").exists()


class TestErrors:

    def test_missing_profile(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="No profile stored"):
            load_profile("nobody", directory=tmp_path)

    def test_corrupt_file(self, tmp_path):
        profile_path(directory=tmp_path).write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="not valid JSON"):
            load_profile(directory=tmp_path)

    def test_incomplete_file(self, tmp_path):
        profile_path(directory=tmp_path).write_text('{"title": "x"}', encoding="utf-8")
        with pytest.raises(ValueError, match="missing field"):
            load_profile(directory=tmp_path)

    @pytest.mark.parametrize("name", ["../escape", "nested/name", "..", ""])
    def test_rejects_names_outside_the_store(self, name, tmp_path):
        with pytest.raises(ValueError, match="Invalid profile name"):
            profile_path(name, directory=tmp_path)


class TestDirectoryResolution:

    def test_environment_override(self, profile, tmp_path, monkeypatch):
        monkeypatch.setenv(PROFILE_DIR_ENV, str(tmp_path))
        path = save_profile(profile)
        assert path.parent == tmp_path
        assert load_profile() == profile

    def test_default_directory(self, monkeypatch):
        monkeypatch.delenv(PROFILE_DIR_ENV, raising=False)
        assert profile_path().parent.name == "profile_data"


class TestDelete:

    def test_delete(self, profile, tmp_path):
        save_profile(profile, directory=tmp_path)
        assert delete_profile(directory=tmp_path) is True
        assert delete_profile(directory=tmp_path) is False
        with pytest.raises(FileNotFoundError):
            load_profile(directory=tmp_path)
