"""
Tests for the command-line entry point.
"""

import json

import pytest

from cosmic.run import main


def _run(capsys, argv):
    assert main(argv) == 0
    return json.loads(capsys.readouterr().out)


class TestProfileCommand:

    def test_profile(self, capsys):
        result = _run(capsys, ["profile", "--year", "1990", "--month", "1", "--day", "1", "--hour", "12"])
        assert result["title"] == "Cosmic Fire Capricorn"
        assert result["four_pillars"]["day"]["combined"] == "丙戌"
        assert result["nft"]["metadata"]["attributes"][0] == {"trait_type": "Element", "value": "Fire"}
        assert result["nft"]["token_uri"].startswith("data:application/json;base64,")
        assert "saved_to" not in result

    def test_profile_save(self, capsys, tmp_path):
        result = _run(capsys, [
            "--profile-dir", str(tmp_path),
            "profile", "--year", "1990", "--month", "1", "--day", "1", "--hour", "12",
            "--save", "alex",
        ])
        assert result["saved_to"] == str(tmp_path / "alex.json")
        assert (tmp_path / "alex.json").exists()

    @pytest.mark.parametrize("flag,value", [("--month", "13"), ("--day", "0"), ("--hour", "24")])
    def test_rejects_out_of_range_birth_data(self, flag, value):
        argv = {"--year": "1990", "--month": "1", "--day": "1", "--hour": "12"}
        argv[flag] = value
        args = ["profile"]
        for k, v in argv.items():
            args += [k, v]
        with pytest.raises(SystemExit) as exc:
            main(args)
        assert exc.value.code == 2


class TestCompatCommand:

    def test_compat(self, capsys):
        result = _run(capsys, [
            "compat", "--element1", "Fire", "--zodiac1", "Aries",
            "--element2", "Fire", "--zodiac2", "Leo",
        ])
        assert (result["element_score"], result["zodiac_score"], result["score"]) == (60, 85, 73)


class TestDailyCommand:

    def test_daily_for_date(self, capsys):
        result = _run(capsys, ["daily", "--element", "Water", "--zodiac", "Pisces", "--date", "2024-01-01"])
        assert result["date"] == "2024-01-01"
        assert result["lucky_number"] == 8
        assert result["lucky_color"] == "Blue"

    def test_daily_from_stored_profile(self, capsys, tmp_path):
        _run(capsys, [
            "--profile-dir", str(tmp_path),
            "profile", "--year", "1990", "--month", "1", "--day", "1", "--hour", "12", "--save",
        ])
        result = _run(capsys, [
            "--profile-dir", str(tmp_path), "daily", "--profile", "--date", "2024-01-03",
        ])
        assert result["zodiac_message"] == "Career advances possible."

    def test_daily_needs_a_subject(self):
        with pytest.raises(SystemExit) as exc:
            main(["daily", "--date", "2024-01-01"])
        assert exc.value.code == 2

    def test_daily_missing_profile(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--profile-dir", str(tmp_path), "daily", "--profile", "ghost"])
        assert exc.value.code == 2
